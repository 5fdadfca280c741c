"""
Money Value Type

Exact currency amounts held as an integer count of minor units (cents).
NEVER uses float for monetary values: every arithmetic path is integer
arithmetic, so there is no rounding and no drift.
"""

from decimal import Decimal
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import InvalidMoneyError


MINOR_UNITS_PER_MAJOR = 100


class Ordering(Enum):
    """Result of comparing two Money values"""
    LESS = -1
    EQUAL = 0
    GREATER = 1


def _to_minor_units(value: Any) -> int:
    """Validate and normalise a raw minor-unit count"""
    # bool is an int subclass but never an amount
    if isinstance(value, bool):
        raise InvalidMoneyError(value, "Money must be an integer count of minor units")
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal) and value.is_finite() and value == value.to_integral_value():
        return int(value)
    raise InvalidMoneyError(
        value, f"Money must be an integer count of minor units, got: {type(value).__name__}"
    )


@dataclass(frozen=True)
class Money:
    """
    Immutable money amount in integer minor units.

    All Money values share one currency unit by convention. Equality and
    ordering are by ``minor_units``.
    """
    minor_units: int

    def __post_init__(self):
        object.__setattr__(self, 'minor_units', _to_minor_units(self.minor_units))

    @classmethod
    def zero(cls) -> 'Money':
        """Additive identity"""
        return cls(0)

    def _coerce(self, other: Any) -> 'Money':
        if isinstance(other, Money):
            return other
        raise InvalidMoneyError(other, f"Expected Money, got: {type(other).__name__}")

    def add(self, other: 'Money') -> 'Money':
        other = self._coerce(other)
        return Money(self.minor_units + other.minor_units)

    def subtract(self, other: 'Money') -> 'Money':
        other = self._coerce(other)
        return Money(self.minor_units - other.minor_units)

    def negate(self) -> 'Money':
        return Money(-self.minor_units)

    def compare(self, other: 'Money') -> Ordering:
        """Total order by minor units"""
        other = self._coerce(other)
        if self.minor_units < other.minor_units:
            return Ordering.LESS
        if self.minor_units > other.minor_units:
            return Ordering.GREATER
        return Ordering.EQUAL

    def __add__(self, other: 'Money') -> 'Money':
        return self.add(other)

    def __sub__(self, other: 'Money') -> 'Money':
        return self.subtract(other)

    def __neg__(self) -> 'Money':
        return self.negate()

    def __abs__(self) -> 'Money':
        return Money(abs(self.minor_units))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Money):
            return False
        return self.minor_units == other.minor_units

    def __lt__(self, other: 'Money') -> bool:
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: 'Money') -> bool:
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other: 'Money') -> bool:
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: 'Money') -> bool:
        return self.compare(other) is not Ordering.LESS

    def is_zero(self) -> bool:
        """Check if amount is exactly zero"""
        return self.minor_units == 0

    def is_positive(self) -> bool:
        """Check if amount is positive"""
        return self.minor_units > 0

    def is_negative(self) -> bool:
        """Check if amount is negative"""
        return self.minor_units < 0

    def to_decimal(self) -> Decimal:
        """Amount in major units, for reporting only"""
        return Decimal(self.minor_units) / MINOR_UNITS_PER_MAJOR

    def to_string(self) -> str:
        """Format for display: 12345 -> "123.45", -5 -> "-0.05" """
        sign = "-" if self.minor_units < 0 else ""
        whole, fraction = divmod(abs(self.minor_units), MINOR_UNITS_PER_MAJOR)
        return f"{sign}{whole}.{fraction:02d}"

    def __str__(self) -> str:
        return self.to_string()
