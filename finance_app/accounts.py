"""
Account Management Module

Balance-holding accounts whose state changes only through
apply_transaction. The base Account debits unconditionally and may go
negative; SavingsAccount refuses any debit larger than its balance.
"""

from dataclasses import dataclass
from typing import Optional, final
from enum import Enum

from .currency import Money
from .output import OutputSink, ConsoleOutput
from .transactions import Transaction
from .logging_config import get_logger, log_action


class ApplyStatus(Enum):
    """Outcome of applying a transaction to an account"""
    APPLIED = "applied"
    INSUFFICIENT_FUNDS = "insufficient_funds"


@dataclass(frozen=True)
class ApplyResult:
    """Result of apply_transaction, including the balance afterwards"""
    status: ApplyStatus
    balance: Money
    message: str

    @property
    def accepted(self) -> bool:
        return self.status == ApplyStatus.APPLIED


class AccountKind(Enum):
    """Account variants"""
    BASE = "base"
    SAVINGS = "savings"


class Account:
    """
    Base account: deducts every transaction with no validation
    """

    kind = AccountKind.BASE

    def __init__(self, account_number: str, initial_balance: Money,
                 output: Optional[OutputSink] = None):
        self._account_number = account_number
        self._balance = initial_balance
        self.output = output or ConsoleOutput()
        self.logger = get_logger("finance_app.accounts")

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def balance(self) -> Money:
        return self._balance

    @property
    def currency(self):
        return self._balance.currency

    def _debit(self, transaction: Transaction) -> None:
        # Money subtraction raises CurrencyMismatchError on mixed currencies
        self._balance = self._balance - transaction.amount

    def _report(self, status: ApplyStatus, message: str,
                transaction: Transaction) -> ApplyResult:
        self.output.write(message)
        log_action(
            self.logger,
            "info" if status == ApplyStatus.APPLIED else "warning",
            f"Transaction {transaction.id} {status.value} on {self.account_number}",
            action="apply_transaction",
            resource=f"account:{self.account_number}",
            extra={
                "transaction_id": transaction.id,
                "amount": transaction.amount.to_string(),
                "category": transaction.category,
                "balance": self._balance.to_string(),
                "status": status.value,
            }
        )
        return ApplyResult(status=status, balance=self._balance, message=message)

    def apply_transaction(self, transaction: Transaction) -> ApplyResult:
        """Deduct the transaction amount; always succeeds"""
        self._debit(transaction)
        return self._report(
            ApplyStatus.APPLIED,
            f"Applied transaction (base). Balance is now: {self._balance.to_string()}",
            transaction
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(account_number={self._account_number!r}, "
            f"balance={self._balance.to_string()!r})"
        )


@final
class SavingsAccount(Account):
    """
    Savings account: rejects debits that exceed the current balance.

    A rejected debit leaves the balance untouched and is reported in the
    returned ApplyResult rather than raised. This class cannot be subclassed.
    """

    kind = AccountKind.SAVINGS

    def __init_subclass__(cls, **kwargs):
        raise TypeError("SavingsAccount cannot be subclassed")

    def apply_transaction(self, transaction: Transaction) -> ApplyResult:
        if transaction.amount > self._balance:
            return self._report(
                ApplyStatus.INSUFFICIENT_FUNDS, "Insufficient funds", transaction
            )

        self._debit(transaction)
        return self._report(
            ApplyStatus.APPLIED,
            f"Transaction applied. New balance: {self._balance.to_string()}",
            transaction
        )


_ACCOUNT_CLASSES = {
    AccountKind.BASE: Account,
    AccountKind.SAVINGS: SavingsAccount,
}


def open_account(kind: AccountKind, account_number: str, initial_balance: Money,
                 output: Optional[OutputSink] = None) -> Account:
    """Create an account of the given variant"""
    return _ACCOUNT_CLASSES[kind](account_number, initial_balance, output)
