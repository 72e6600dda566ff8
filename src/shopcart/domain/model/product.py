"""Product aggregate.

Products live independently of carts.  A product may carry optional
capabilities: it can expire, it can be shipped, or both.  Capabilities
are plain optional data on a single entity rather than a class
hierarchy, so a new capability is a new optional field, not a new
combination of subclasses.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from shopcart.domain.exceptions import InsufficientStock, ValidationError
from shopcart.domain.model.value_objects import Money, Weight


class Capability(Enum):
    EXPIRABLE = "EXPIRABLE"
    SHIPPABLE = "SHIPPABLE"


# Process-wide arena of product handles.  Carts key their lines by
# handle, never by name.
_handles = itertools.count(1)


def _next_handle() -> int:
    return next(_handles)


@dataclass(eq=False)
class Product:
    """A product in the catalog.

    This is an aggregate root.  ``stock`` is only ever changed through
    ``reduce_stock()``; every other stock check in the system is a read.

    Invariants:
    - ``stock`` is never negative
    - the capability set is fixed at construction
    """

    name: str
    price: Money
    stock: int
    expires_at: datetime | None = None
    weight: Weight | None = None
    id: int = field(default_factory=_next_handle, init=False)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        self.name = self.name.strip()
        if not isinstance(self.price, Money):
            raise ValidationError(
                f"Product price must be Money, got {type(self.price).__name__}"
            )
        if isinstance(self.stock, bool) or not isinstance(self.stock, int):
            raise ValidationError(
                f"Stock must be an integer, got {type(self.stock).__name__}"
            )
        if self.stock < 0:
            raise ValidationError(f"Stock cannot be negative, got {self.stock}")
        if self.weight is not None and not isinstance(self.weight, Weight):
            raise ValidationError(
                f"Product weight must be Weight, got {type(self.weight).__name__}"
            )
        if self.expires_at is not None and self.expires_at.tzinfo is None:
            self.expires_at = self.expires_at.replace(tzinfo=timezone.utc)

    # --- Capabilities ---------------------------------------------------------

    @property
    def capabilities(self) -> frozenset[Capability]:
        caps = set()
        if self.expires_at is not None:
            caps.add(Capability.EXPIRABLE)
        if self.weight is not None:
            caps.add(Capability.SHIPPABLE)
        return frozenset(caps)

    def has_capability(self, capability: Capability) -> bool:
        return capability in self.capabilities

    @property
    def is_expirable(self) -> bool:
        return self.expires_at is not None

    @property
    def is_shippable(self) -> bool:
        return self.weight is not None

    def is_expired(self, now: datetime | None = None) -> bool:
        """True once *now* has reached the expiration instant.

        Evaluated against the current clock on every call.  A product
        without an expiration never expires.
        """
        if self.expires_at is None:
            return False
        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return now >= self.expires_at

    # --- Stock ----------------------------------------------------------------

    def reduce_stock(self, qty: int) -> None:
        """Remove *qty* units from stock.

        Raises InsufficientStock if fewer than *qty* units are available;
        the stock is never clamped.
        """
        if qty <= 0:
            raise ValidationError("Stock reduction must be positive")
        if qty > self.stock:
            raise InsufficientStock(self.name, requested=qty, available=self.stock)
        self.stock -= qty
