"""
Bank Account

A single in-memory account with exact integer money arithmetic,
an append-only transaction history and injectable clocks.
"""

__version__ = "1.0.0"

from .accounts import Account
from .clock import Clock, FixedClock, SequentialClock, SystemClock
from .currency import Money, Ordering
from .errors import (
    BankingError, InsufficientFundsError, InvalidMoneyError, NegativeInitialBalanceError
)
from .transactions import Transaction, TransactionType

__all__ = [
    "Account",
    "Clock", "FixedClock", "SequentialClock", "SystemClock",
    "Money", "Ordering",
    "BankingError", "InsufficientFundsError", "InvalidMoneyError", "NegativeInitialBalanceError",
    "Transaction", "TransactionType",
]
