"""
Transaction Processing Module

Defines the immutable Transaction record and the processors that hand a
transaction off to a payment channel. Processors only announce the
transaction; they never touch account state.
"""

from datetime import datetime
from dataclasses import dataclass
from typing import Optional
from enum import Enum

from .currency import Money
from .output import OutputSink, ConsoleOutput
from .logging_config import get_logger


DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Transaction:
    """
    Immutable record of a monetary movement.
    No validation is applied: zero and negative amounts are accepted as given.
    """
    id: int
    date: datetime
    amount: Money
    category: str

    def describe(self) -> str:
        """Summary line used when listing recorded transactions"""
        return (
            f"- ID:{self.id} {self.category} {self.amount.to_string()} "
            f"on {self.date.strftime(DATE_FORMAT)}"
        )


class ProcessorKind(Enum):
    """Payment channels a transaction can be processed through"""
    BANK_TRANSFER = ("bank_transfer", "Bank Transfer", "Processed")
    MOBILE_MONEY = ("mobile_money", "Mobile Money", "Processed")
    CRYPTO_WALLET = ("crypto_wallet", "Crypto Wallet", "Sent")

    def __init__(self, key: str, label: str, verb: str):
        self.key = key
        self.label = label
        self.verb = verb


class TransactionProcessor:
    """
    Processes a transaction through one payment channel.

    All channels behave identically apart from the label they report.
    """

    def __init__(self, kind: ProcessorKind, output: Optional[OutputSink] = None):
        self.kind = kind
        self.output = output or ConsoleOutput()
        self.logger = get_logger("finance_app.transactions")

    def format_message(self, transaction: Transaction) -> str:
        return (
            f"[{self.kind.label}] {self.kind.verb} "
            f"{transaction.amount.to_string()} for {transaction.category}"
        )

    def process(self, transaction: Transaction) -> None:
        """Announce the transaction on this processor's channel"""
        self.logger.debug(
            f"Processing transaction {transaction.id} via {self.kind.key}"
        )
        self.output.write(self.format_message(transaction))

    def __repr__(self) -> str:
        return f"TransactionProcessor({self.kind.name})"
