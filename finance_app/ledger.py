"""
Transaction Ledger Module

Ordered, append-only, in-memory history of the transactions handled
during a single run.
"""

from typing import Iterator, List, Tuple
from enum import Enum

from .accounts import ApplyResult
from .exceptions import ConfigurationError
from .transactions import Transaction


class LedgerPolicy(Enum):
    """Which transactions are recorded after being applied to an account"""
    RECORD_ALL = "record_all"        # Record even when the account rejects
    ACCEPTED_ONLY = "accepted_only"  # Record only applied transactions

    @classmethod
    def from_name(cls, name: str) -> 'LedgerPolicy':
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ConfigurationError(f"Unknown ledger policy: {name!r}") from None

    def should_record(self, result: ApplyResult) -> bool:
        if self == LedgerPolicy.RECORD_ALL:
            return True
        return result.accepted


class TransactionLedger:
    """Append-only list of transactions in insertion order"""

    def __init__(self):
        self._entries: List[Transaction] = []

    def record(self, transaction: Transaction) -> None:
        """Append a transaction; duplicates are kept"""
        self._entries.append(transaction)

    @property
    def entries(self) -> Tuple[Transaction, ...]:
        return tuple(self._entries)

    def summary_lines(self) -> List[str]:
        return [transaction.describe() for transaction in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(tuple(self._entries))
