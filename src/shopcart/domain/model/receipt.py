"""Structured transcript produced by a successful checkout.

The receipt records *what* happened in the order it is reported:
the shipment notice (if anything ships), then each purchased line,
then the totals.  Rendering is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from shopcart.domain.model.value_objects import Money, Weight


@dataclass(frozen=True)
class ShipmentLine:
    product_name: str
    quantity: int
    weight: Weight  # unit weight * quantity

    @property
    def grams(self) -> Decimal:
        return self.weight.grams


@dataclass(frozen=True)
class ShipmentNotice:
    lines: tuple[ShipmentLine, ...]
    total_weight: Weight


@dataclass(frozen=True)
class ReceiptLine:
    product_name: str
    quantity: int
    line_total: Money


@dataclass(frozen=True)
class Receipt:
    customer_name: str
    shipment: ShipmentNotice | None
    lines: tuple[ReceiptLine, ...]
    subtotal: Money
    shipping_fee: Money
    total: Money
    balance_left: Money
