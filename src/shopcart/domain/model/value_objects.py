"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from shopcart.domain.exceptions import ValidationError


def _to_decimal(value: str | float | int | Decimal, what: str) -> Decimal:
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {what}: {value!r}") from exc


@dataclass(frozen=True)
class Money:
    """Monetary amount.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  No rounding is ever applied
    to the stored amount; ``str()`` rounds for display only.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __sub__(self, other: Money) -> Money:
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(_to_decimal(amount, "money amount"))

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot buy zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __add__(self, other: Quantity) -> Quantity:
        return Quantity(self.value + other.value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Weight:
    """A non-negative mass in kilograms."""

    kilograms: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.kilograms, Decimal):
            raise ValidationError(
                f"Weight must be a Decimal, got {type(self.kilograms).__name__}"
            )
        if not self.kilograms.is_finite():
            raise ValidationError(f"Weight must be finite, got {self.kilograms}")
        if self.kilograms < Decimal("0"):
            raise ValidationError(f"Weight cannot be negative, got {self.kilograms}")

    @property
    def grams(self) -> Decimal:
        return self.kilograms * 1000

    @property
    def is_zero(self) -> bool:
        return self.kilograms == 0

    def __add__(self, other: Weight) -> Weight:
        return Weight(self.kilograms + other.kilograms)

    def __mul__(self, factor: int) -> Weight:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Weight by int, got {type(factor).__name__}")
        return Weight(self.kilograms * factor)

    def __lt__(self, other: Weight) -> bool:
        return self.kilograms < other.kilograms

    def __gt__(self, other: Weight) -> bool:
        return self.kilograms > other.kilograms

    def __str__(self) -> str:
        shown = self.kilograms.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        return f"{shown}kg"

    @staticmethod
    def of(kilograms: str | float | int | Decimal) -> Weight:
        return Weight(_to_decimal(kilograms, "weight"))

    @staticmethod
    def zero() -> Weight:
        return Weight(Decimal("0"))
