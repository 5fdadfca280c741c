"""
Account Module

A single in-memory account: current balance, an append-only history of
Transactions and an injected Clock for timestamps.

Invariants:
    - balance is never negative
    - balance equals the balance_after of the last Transaction, or the
      initial balance while history is empty
    - history is only ever appended to; callers get immutable snapshots

Validation always runs before mutation, so a failed deposit or withdraw
leaves both balance and history untouched. Accounts are not thread-safe;
callers sharing one across threads must guard it with a single lock.
"""

from typing import Any, List, Optional, Tuple
import uuid

from .clock import Clock, SystemClock
from .config import get_config
from .currency import Money, Ordering
from .errors import InsufficientFundsError, InvalidMoneyError, NegativeInitialBalanceError
from .logging_config import get_logger, log_action
from .transactions import Transaction, TransactionType


class Account:
    """
    Bank account with a balance and an immutable transaction history
    """

    def __init__(
        self,
        initial_balance: Optional[Money] = None,
        clock: Optional[Clock] = None,
        account_id: Optional[str] = None
    ):
        """
        Open an account

        Args:
            initial_balance: Opening balance (zero if not provided)
            clock: Source of transaction timestamps (system UTC clock if not provided)
            account_id: Identifier used to label log records (generated if not provided)

        Raises:
            InvalidMoneyError: If initial_balance is not a Money
            NegativeInitialBalanceError: If initial_balance is below zero
        """
        if initial_balance is None:
            initial_balance = Money.zero()
        if not isinstance(initial_balance, Money):
            raise InvalidMoneyError(
                initial_balance, f"Initial balance must be Money, got: {type(initial_balance).__name__}"
            )
        if initial_balance.is_negative():
            raise NegativeInitialBalanceError(initial_balance)

        self.account_id = account_id or str(uuid.uuid4())
        self._balance = initial_balance
        self._transactions: List[Transaction] = []
        self._clock = clock or SystemClock()
        self.logger = get_logger("bank_account.accounts")

    @property
    def balance(self) -> Money:
        """Current balance"""
        return self._balance

    @property
    def history(self) -> Tuple[Transaction, ...]:
        """Snapshot of all transactions, oldest first"""
        return tuple(self._transactions)

    @property
    def transaction_count(self) -> int:
        return len(self._transactions)

    @property
    def last_transaction(self) -> Optional[Transaction]:
        """Most recent transaction, or None if there are none"""
        return self._transactions[-1] if self._transactions else None

    def statement_lines(self) -> List[str]:
        """One formatted line per transaction, oldest first"""
        return [transaction.statement_line() for transaction in self.history]

    def deposit(self, amount: Money) -> Transaction:
        """
        Add funds to the account

        Args:
            amount: Positive amount to deposit

        Returns:
            The recorded Transaction

        Raises:
            InvalidMoneyError: If amount is not a positive Money
        """
        self._validate_amount(amount, TransactionType.DEPOSIT)

        transaction = Transaction.deposit(
            amount=amount, balance_after=self._balance.add(amount), at=self._clock.now()
        )
        self._commit(transaction)
        return transaction

    def withdraw(self, amount: Money) -> Transaction:
        """
        Take funds out of the account

        Withdrawing the full balance is allowed; there is no overdraft.

        Args:
            amount: Positive amount to withdraw

        Returns:
            The recorded Transaction

        Raises:
            InvalidMoneyError: If amount is not a positive Money
            InsufficientFundsError: If amount exceeds the current balance
        """
        self._validate_amount(amount, TransactionType.WITHDRAW)
        if amount.compare(self._balance) is Ordering.GREATER:
            self._log_rejection(TransactionType.WITHDRAW, amount, "insufficient_funds")
            raise InsufficientFundsError(amount, self._balance)

        transaction = Transaction.withdraw(
            amount=amount, balance_after=self._balance.subtract(amount), at=self._clock.now()
        )
        self._commit(transaction)
        return transaction

    def _validate_amount(self, amount: Any, kind: TransactionType) -> None:
        if not isinstance(amount, Money):
            self._log_rejection(kind, amount, "not_money")
            raise InvalidMoneyError(amount, f"Amount must be Money, got: {type(amount).__name__}")
        if not amount.is_positive():
            self._log_rejection(kind, amount, "non_positive")
            raise InvalidMoneyError(amount)

    def _commit(self, transaction: Transaction) -> None:
        # Nothing below the state update may raise
        payload = {"account_id": self.account_id, **transaction.to_dict()}

        self._balance = transaction.balance_after
        self._transactions.append(transaction)

        if get_config().enable_transaction_logging:
            log_action(
                self.logger, "info", f"Transaction recorded: {transaction.kind.value}",
                action=transaction.kind.value, resource=f"account:{self.account_id}",
                extra=payload
            )

    def _log_rejection(self, kind: TransactionType, amount: Any, reason: str) -> None:
        if not get_config().enable_transaction_logging:
            return
        log_action(
            self.logger, "warning", f"Transaction rejected: {kind.value} ({reason})",
            action=kind.value, resource=f"account:{self.account_id}",
            extra={
                "account_id": self.account_id,
                "amount": str(amount),
                "balance": self._balance.to_string(),
                "reason": reason
            }
        )

    def __repr__(self) -> str:
        return f"Account(account_id={self.account_id!r}, balance={self._balance.to_string()})"
