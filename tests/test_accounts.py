"""
Test suite for accounts module

Tests balance mutation for the base and savings account variants,
insufficient-funds rejection, and the sealed savings class.
"""

import logging
import pytest
from decimal import Decimal
from datetime import datetime, timezone

from finance_app.currency import Money, Currency
from finance_app.exceptions import CurrencyMismatchError
from finance_app.output import MemoryOutput
from finance_app.transactions import Transaction
from finance_app.accounts import (
    Account, SavingsAccount, AccountKind, ApplyStatus, ApplyResult, open_account
)


NOW = datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc)


def usd(amount):
    return Money(Decimal(amount), Currency.USD)


def debit(amount, transaction_id=1, currency=Currency.USD):
    return Transaction(transaction_id, NOW, Money(Decimal(amount), currency), "Groceries")


class RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def account_log():
    logger = logging.getLogger("finance_app.accounts")
    handler = RecordingHandler()
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    yield handler
    logger.removeHandler(handler)
    logger.setLevel(previous_level)


class TestSavingsAccount:
    """Test the validating account variant"""

    def test_sufficient_funds(self):
        """Test that a covered debit reduces the balance"""
        output = MemoryOutput()
        account = SavingsAccount("SA-1001", usd('1000.00'), output)

        result = account.apply_transaction(debit('200.00'))

        assert result.accepted
        assert result.status == ApplyStatus.APPLIED
        assert account.balance == usd('800.00')
        assert result.balance == usd('800.00')
        assert output.lines == ["Transaction applied. New balance: $800.00"]

    def test_exact_balance(self):
        """Test that debiting the whole balance is allowed"""
        account = SavingsAccount("SA-1001", usd('100.00'), MemoryOutput())
        assert account.apply_transaction(debit('100.00')).accepted
        assert account.balance.is_zero()

    def test_insufficient_funds(self):
        """Test that an uncovered debit is rejected without changing state"""
        output = MemoryOutput()
        account = SavingsAccount("SA-1001", usd('100.00'), output)

        result = account.apply_transaction(debit('200.00'))

        assert not result.accepted
        assert result.status == ApplyStatus.INSUFFICIENT_FUNDS
        assert account.balance == usd('100.00')
        assert result.balance == usd('100.00')
        assert output.lines == ["Insufficient funds"]

    def test_balance_never_negative(self):
        account = SavingsAccount("SA-1001", usd('50.00'), MemoryOutput())
        for amount in ('30.00', '30.00', '20.01', '20.00'):
            account.apply_transaction(debit(amount))
            assert not account.balance.is_negative()
        assert account.balance.is_zero()

    def test_cannot_be_subclassed(self):
        with pytest.raises(TypeError, match="cannot be subclassed"):
            class PremiumSavings(SavingsAccount):
                pass

    def test_currency_mismatch_raises(self):
        account = SavingsAccount("SA-1001", usd('100.00'), MemoryOutput())
        with pytest.raises(CurrencyMismatchError):
            account.apply_transaction(debit('10.00', currency=Currency.EUR))
        assert account.balance == usd('100.00')

    def test_rejection_is_logged_as_warning(self, account_log):
        account = SavingsAccount("SA-1001", usd('10.00'), MemoryOutput())
        account.apply_transaction(debit('20.00', transaction_id=7))

        record = account_log.records[-1]
        assert record.levelno == logging.WARNING
        assert record.action == "apply_transaction"
        assert record.resource == "account:SA-1001"
        assert record.extra["transaction_id"] == 7
        assert record.extra["status"] == "insufficient_funds"


class TestBaseAccount:
    """Test the unvalidated account variant"""

    def test_unconditional_debit(self):
        output = MemoryOutput()
        account = Account("AC-1", usd('100.00'), output)

        result = account.apply_transaction(debit('250.00'))

        assert result.accepted
        assert account.balance == usd('-150.00')
        assert output.lines == ["Applied transaction (base). Balance is now: -$150.00"]

    @pytest.mark.parametrize("amount", ['0', '0.01', '99.99', '1000000', '-40.00'])
    def test_balance_is_prior_minus_amount(self, amount):
        account = Account("AC-1", usd('100.00'), MemoryOutput())
        account.apply_transaction(debit(amount))
        assert account.balance == usd('100.00') - usd(amount)

    def test_applied_is_logged_as_info(self, account_log):
        Account("AC-1", usd('100.00'), MemoryOutput()).apply_transaction(debit('1.00'))
        record = account_log.records[-1]
        assert record.levelno == logging.INFO
        assert record.extra["balance"] == "$99.00"


class TestAccountAttributes:
    """Test account identity and factory"""

    def test_account_number_is_read_only(self):
        account = SavingsAccount("SA-1001", usd('1.00'), MemoryOutput())
        with pytest.raises(AttributeError):
            account.account_number = "SA-9999"
        with pytest.raises(AttributeError):
            account.balance = usd('1000000.00')

    def test_currency(self):
        account = Account("AC-1", Money(Decimal('5'), Currency.JPY), MemoryOutput())
        assert account.currency == Currency.JPY

    def test_open_account(self):
        base = open_account(AccountKind.BASE, "AC-1", usd('10.00'), MemoryOutput())
        savings = open_account(AccountKind.SAVINGS, "SA-1", usd('10.00'), MemoryOutput())

        assert type(base) is Account
        assert base.kind == AccountKind.BASE
        assert isinstance(savings, SavingsAccount)
        assert savings.kind == AccountKind.SAVINGS

    def test_apply_result(self):
        result = ApplyResult(ApplyStatus.INSUFFICIENT_FUNDS, usd('1.00'), "Insufficient funds")
        assert not result.accepted
