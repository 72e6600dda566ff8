"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer asked for (product name + quantity)."""

    product_name: str
    quantity: int


@dataclass(frozen=True)
class CatalogLineDTO:
    """Output: a single catalog entry as displayed to the user."""

    id: int
    name: str
    price: str  # formatted, e.g. "$30.00"
    stock: int
    expires_at: str | None
    weight: str | None  # formatted, e.g. "0.4kg"


@dataclass(frozen=True)
class ShipmentLineDTO:
    product_name: str
    quantity: int
    grams: str


@dataclass(frozen=True)
class ReceiptLineDTO:
    product_name: str
    quantity: int
    line_total: str


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: the checkout transcript, in the order it is reported."""

    customer_name: str
    shipment_lines: list[ShipmentLineDTO]
    package_weight: str | None  # None when nothing ships
    lines: list[ReceiptLineDTO]
    subtotal: str
    shipping_fee: str
    total: str
    balance_left: str

    @property
    def has_shipment(self) -> bool:
        return self.package_weight is not None
