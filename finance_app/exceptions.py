"""
Exception types raised by the finance app.

Insufficient funds is deliberately absent: a rejected debit is reported
through ApplyResult, not raised.
"""


class FinanceAppError(Exception):
    """Base class for all finance app errors"""


class CurrencyMismatchError(FinanceAppError, ValueError):
    """Raised when money in two different currencies is combined"""


class ConfigurationError(FinanceAppError, ValueError):
    """Raised when a configuration value cannot be resolved"""
