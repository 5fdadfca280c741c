"""
Transaction Records

Immutable records of completed deposits and withdrawals. A Transaction is
built by an Account after the operation has been validated and applied;
it performs no validation of its own.
"""

from datetime import datetime, timezone
from dataclasses import dataclass
from typing import Any, Dict
from enum import Enum

from .currency import Money


class TransactionType(Enum):
    """Types of account operations"""
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"


def format_timestamp(at: datetime) -> str:
    """
    Render a timestamp as ISO-8601 UTC with second precision and a 'Z' suffix.

    Naive datetimes are taken to already be in UTC.
    """
    if at.tzinfo is None:
        at = at.replace(tzinfo=timezone.utc)
    return at.astimezone(timezone.utc).replace(microsecond=0, tzinfo=None).isoformat() + "Z"


@dataclass(frozen=True)
class Transaction:
    """
    One completed account operation.

    ``balance_after`` is the account balance immediately after the
    operation was applied.
    """
    kind: TransactionType
    amount: Money
    balance_after: Money
    at: datetime

    @classmethod
    def deposit(cls, amount: Money, balance_after: Money, at: datetime) -> 'Transaction':
        return cls(kind=TransactionType.DEPOSIT, amount=amount, balance_after=balance_after, at=at)

    @classmethod
    def withdraw(cls, amount: Money, balance_after: Money, at: datetime) -> 'Transaction':
        return cls(kind=TransactionType.WITHDRAW, amount=amount, balance_after=balance_after, at=at)

    @property
    def is_deposit(self) -> bool:
        return self.kind == TransactionType.DEPOSIT

    @property
    def is_withdrawal(self) -> bool:
        return self.kind == TransactionType.WITHDRAW

    def statement_line(self) -> str:
        """Format as a statement line: "<timestamp> <KIND> <amount> -> <balance after>" """
        return (
            f"{format_timestamp(self.at)} {self.kind.name} "
            f"{self.amount.to_string()} -> {self.balance_after.to_string()}"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'kind': self.kind.value,
            'amount': self.amount.minor_units,
            'balance_after': self.balance_after.minor_units,
            'at': format_timestamp(self.at)
        }
