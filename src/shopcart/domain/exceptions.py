"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
StockInvariantError signals a bug rather than a user mistake and does not
derive from DomainException.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shopcart.domain.model.value_objects import Money


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InsufficientStock(DomainException):
    """More units were requested than the product has in stock."""

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot take {requested} units of {product_name}, "
            f"only {available} in stock"
        )


class ExpiredProduct(DomainException):
    """The product's expiration instant has passed."""

    def __init__(self, product_name: str) -> None:
        self.product_name = product_name
        super().__init__(f"Product {product_name} is expired")


class EmptyCart(DomainException):
    """Checkout was attempted on a cart with no lines."""

    def __init__(self) -> None:
        super().__init__("Cart is empty")


class InsufficientBalance(DomainException):
    """The customer cannot afford the requested amount."""

    def __init__(self, customer_name: str, amount: Money, balance: Money) -> None:
        self.customer_name = customer_name
        self.amount = amount
        self.balance = balance
        super().__init__(
            f"Insufficient balance for {customer_name} "
            f"(need {amount}, have {balance})"
        )


class StockInvariantError(RuntimeError):
    """Stock could not be decremented after payment was taken.

    Checkout validates stock for every line before charging the customer,
    so this can only be raised when that ordering is broken.
    """
