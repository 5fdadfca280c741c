"""
Test suite for errors module

Tests error codes, structured attributes and default messages.
"""

from bank_account.currency import Money
from bank_account.errors import (
    BankingError, InsufficientFundsError, InvalidMoneyError, NegativeInitialBalanceError
)


class TestErrors:

    def test_hierarchy_and_codes(self):
        """Test every error is a BankingError with its own code"""
        errors = [
            InvalidMoneyError(0),
            NegativeInitialBalanceError(Money(-1)),
            InsufficientFundsError(Money(2), Money(1)),
        ]
        assert [e.code for e in errors] == [
            "INVALID_MONEY", "NEGATIVE_INITIAL_BALANCE", "INSUFFICIENT_FUNDS"
        ]
        assert all(isinstance(e, BankingError) for e in errors)

    def test_invalid_money_carries_value(self):
        error = InvalidMoneyError(-1)
        assert error.value == -1
        assert error.amount == -1
        assert str(error) == "Amount must be positive. Got: -1"

        custom = InvalidMoneyError(1.5, "Money must be an integer count of minor units")
        assert str(custom) == "Money must be an integer count of minor units"

    def test_negative_initial_balance_message(self):
        error = NegativeInitialBalanceError(Money(-5))
        assert error.initial_balance == Money(-5)
        assert str(error) == "Initial balance cannot be negative. Got: -0.05"

    def test_insufficient_funds_message(self):
        error = InsufficientFundsError(Money(9900), Money(1000))
        assert error.amount == Money(9900)
        assert error.balance == Money(1000)
        assert str(error) == "Insufficient funds: tried to withdraw 99.00, balance is 10.00"
