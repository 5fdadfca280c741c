"""
Typed Exception Hierarchy

Every failure an account can report has its own exception class with a
machine-readable ``code`` and the offending values as attributes, so callers
catch by type and read structured data instead of parsing messages.

    BankingError (base)
    |
    +-- InvalidMoneyError            INVALID_MONEY
    +-- NegativeInitialBalanceError  NEGATIVE_INITIAL_BALANCE
    +-- InsufficientFundsError       INSUFFICIENT_FUNDS

All of them are local validation failures. None is retriable and none is
caught inside the package.
"""

from typing import Any, Optional


class BankingError(Exception):
    """Base exception for all account errors"""

    code: str = "BANKING_ERROR"


class InvalidMoneyError(BankingError):
    """
    Amount is not a usable money value.

    Raised for non-integer minor units, for operands that are not Money,
    and for zero or negative amounts passed to deposit/withdraw.
    """

    code: str = "INVALID_MONEY"

    def __init__(self, value: Any, message: Optional[str] = None):
        self.value = value
        super().__init__(message or f"Amount must be positive. Got: {value!r}")

    @property
    def amount(self) -> Any:
        """The offending amount (alias of ``value``)"""
        return self.value


class NegativeInitialBalanceError(BankingError):
    """Account opened with a balance below zero"""

    code: str = "NEGATIVE_INITIAL_BALANCE"

    def __init__(self, initial_balance: Any, message: Optional[str] = None):
        self.initial_balance = initial_balance
        super().__init__(
            message or f"Initial balance cannot be negative. Got: {initial_balance}"
        )


class InsufficientFundsError(BankingError):
    """Withdrawal larger than the current balance"""

    code: str = "INSUFFICIENT_FUNDS"

    def __init__(self, amount: Any, balance: Any, message: Optional[str] = None):
        self.amount = amount
        self.balance = balance
        super().__init__(
            message or f"Insufficient funds: tried to withdraw {amount}, balance is {balance}"
        )
