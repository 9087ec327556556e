"""
Finance App Coordinator

Wires one savings account, three transactions and three processors
together: each transaction is processed, applied to the account and
recorded in the ledger, then a summary and the final balance are printed.
"""

from datetime import datetime, timezone
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable, List, Optional, Sequence, Tuple

from .accounts import Account, ApplyResult, SavingsAccount
from .config import FinanceAppConfig, get_config
from .currency import Currency, Money, decimal_from_string
from .ledger import LedgerPolicy, TransactionLedger
from .logging_config import get_logger, log_action
from .output import OutputSink, ConsoleOutput
from .transactions import ProcessorKind, Transaction, TransactionProcessor


# Processor used for each demo transaction, in order
DEMO_ROUTING: Tuple[ProcessorKind, ...] = (
    ProcessorKind.MOBILE_MONEY,
    ProcessorKind.BANK_TRANSFER,
    ProcessorKind.CRYPTO_WALLET,
)


def build_demo_transactions(currency: Currency, now: datetime) -> List[Transaction]:
    """The three fixed transactions of the demo run"""
    return [
        Transaction(1, now, Money(Decimal('200.00'), currency), "Groceries"),
        Transaction(2, now, Money(Decimal('150.00'), currency), "Utilities"),
        Transaction(3, now, Money(Decimal('50.00'), currency), "Entertainment"),
    ]


@dataclass
class RunSummary:
    """What a run left behind"""
    account_number: str
    final_balance: Money
    transactions: Tuple[Transaction, ...]
    results: List[ApplyResult] = field(default_factory=list)

    @property
    def rejected_count(self) -> int:
        return sum(1 for result in self.results if not result.accepted)


class FinanceApp:
    """
    Coordinates processors, the account and the ledger for one run.

    The ledger belongs to this object; neither processors nor the account
    hold a reference back to it.
    """

    def __init__(
        self,
        output: Optional[OutputSink] = None,
        config: Optional[FinanceAppConfig] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.output = output or ConsoleOutput()
        self.config = config or get_config()
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        self.logger = get_logger("finance_app.app")

        # Resolve configuration up front so bad values fail before any output
        self.currency = Currency.from_code(self.config.currency)
        self.opening_balance = Money(
            decimal_from_string(self.config.opening_balance), self.currency
        )
        self.ledger_policy = LedgerPolicy.from_name(self.config.ledger_policy)

        self.ledger = TransactionLedger()

    def create_account(self) -> SavingsAccount:
        return SavingsAccount(self.config.account_number, self.opening_balance, self.output)

    def create_processors(self) -> List[TransactionProcessor]:
        return [TransactionProcessor(kind, self.output) for kind in DEMO_ROUTING]

    def handle(self, processor: TransactionProcessor, account: Account,
               transaction: Transaction) -> ApplyResult:
        """Process, apply and record a single transaction"""
        processor.process(transaction)
        result = account.apply_transaction(transaction)

        if self.ledger_policy.should_record(result):
            self.ledger.record(transaction)
        else:
            self.logger.info(
                f"Transaction {transaction.id} not recorded "
                f"(policy {self.ledger_policy.value})"
            )

        self.output.write()
        return result

    def run(
        self,
        account: Optional[Account] = None,
        transactions: Optional[Sequence[Transaction]] = None
    ) -> RunSummary:
        """
        Run the demo sequence

        Args:
            account: Account to use (a new SavingsAccount if not provided)
            transactions: Transactions to handle (the demo set if not provided);
                processors are assigned round-robin from DEMO_ROUTING

        Returns:
            RunSummary with the final balance and recorded transactions
        """
        self.ledger = TransactionLedger()
        if account is None:
            account = self.create_account()
        if transactions is None:
            transactions = build_demo_transactions(account.currency, self.clock())

        self.output.write(
            f"Created {type(account).__name__} {account.account_number} "
            f"with balance {account.balance.to_string()}"
        )
        self.output.write()

        processors = self.create_processors()
        results = []
        for index, transaction in enumerate(transactions):
            processor = processors[index % len(processors)]
            results.append(self.handle(processor, account, transaction))

        self.output.write("Transactions recorded:")
        for line in self.ledger.summary_lines():
            self.output.write(line)

        self.output.write()
        self.output.write(f"Final account balance: {account.balance.to_string()}")

        summary = RunSummary(
            account_number=account.account_number,
            final_balance=account.balance,
            transactions=self.ledger.entries,
            results=results
        )

        log_action(
            self.logger, "info", "Run completed",
            action="run", resource=f"account:{account.account_number}",
            extra={
                "final_balance": summary.final_balance.to_string(),
                "recorded": len(summary.transactions),
                "rejected": summary.rejected_count,
            }
        )
        return summary
