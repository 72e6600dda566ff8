"""Customer aggregate: a named wallet that checkout charges."""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.exceptions import InsufficientBalance, ValidationError
from shopcart.domain.model.value_objects import Money


@dataclass(eq=False)
class Customer:
    """Invariant: ``balance`` can reach zero but never go below it."""

    name: str
    balance: Money

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Customer name is required")
        self.name = self.name.strip()
        if not isinstance(self.balance, Money):
            raise ValidationError(
                f"Customer balance must be Money, got {type(self.balance).__name__}"
            )

    def pay(self, amount: Money) -> None:
        """Debit *amount* from the balance.

        Raises InsufficientBalance and leaves the balance untouched if the
        customer cannot afford it.
        """
        if amount > self.balance:
            raise InsufficientBalance(self.name, amount=amount, balance=self.balance)
        self.balance = self.balance - amount
