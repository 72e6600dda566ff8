"""Cart aggregate and the checkout transaction.

The cart holds non-owning references to products and groups them into
lines keyed by product handle.  Checkout runs in a fixed order so that a
failure at any step before payment leaves every product and the customer
exactly as they were:

  1. reject an empty cart
  2. validate every line (expiry, stock) without mutating anything
  3. price the cart and decide the shipping fee
  4. charge the customer
  5. build the receipt
  6. decrement stock for every line
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

import structlog

from shopcart.domain.exceptions import (
    EmptyCart,
    ExpiredProduct,
    InsufficientStock,
    StockInvariantError,
)
from shopcart.domain.model.customer import Customer
from shopcart.domain.model.product import Product
from shopcart.domain.model.receipt import (
    Receipt,
    ReceiptLine,
    ShipmentLine,
    ShipmentNotice,
)
from shopcart.domain.model.value_objects import Money, Quantity, Weight

logger = structlog.get_logger(__name__)

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
SHIPPING_FEE = Money(Decimal("25"))  # flat, whatever the package weighs


@dataclass
class CartLine:
    """A product together with the quantity accumulated for it."""

    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value

    @property
    def shipping_weight(self) -> Weight | None:
        if self.product.weight is None:
            return None
        return self.product.weight * self.quantity.value


class Cart:

    def __init__(self) -> None:
        self._lines: dict[int, CartLine] = {}

    # --- Line management ------------------------------------------------------

    def add(self, product: Product, qty: int) -> None:
        """Add *qty* units of *product*, merging with an existing line.

        Only the requested quantity is checked against stock here; the
        accumulated quantity is checked again at checkout.
        """
        quantity = Quantity(qty)

        if product.is_expired():
            raise ExpiredProduct(product.name)
        if quantity.value > product.stock:
            raise InsufficientStock(
                product.name, requested=quantity.value, available=product.stock
            )

        line = self._lines.get(product.id)
        if line is None:
            self._lines[product.id] = CartLine(product=product, quantity=quantity)
        else:
            line.quantity = line.quantity + quantity

        logger.debug(
            "Product added to cart",
            product=product.name,
            product_id=product.id,
            quantity=quantity.value,
        )

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines.values())

    def quantity_of(self, product: Product) -> int:
        line = self._lines.get(product.id)
        return line.quantity.value if line is not None else 0

    def is_empty(self) -> bool:
        return not self._lines

    # --- Computed totals ------------------------------------------------------

    def get_subtotal(self) -> Money:
        result = Money.zero()
        for line in self._lines.values():
            result = result + line.line_total
        return result

    def get_shipping_weight(self) -> Weight:
        result = Weight.zero()
        for line in self._lines.values():
            if line.shipping_weight is not None:
                result = result + line.shipping_weight
        return result

    # --- Checkout -------------------------------------------------------------

    def checkout(self, customer: Customer, now: datetime | None = None) -> Receipt:
        """Charge *customer* for the whole cart and take the goods from stock.

        Raises EmptyCart, ExpiredProduct, InsufficientStock or
        InsufficientBalance before anything is mutated.
        """
        if self.is_empty():
            raise EmptyCart()

        if now is None:
            now = datetime.now(timezone.utc)

        # Phase 1: validate every line, no side effects
        for line in self._lines.values():
            product = line.product
            if product.is_expired(now):
                raise ExpiredProduct(product.name)
            if line.quantity.value > product.stock:
                raise InsufficientStock(
                    product.name,
                    requested=line.quantity.value,
                    available=product.stock,
                )

        # Phase 2: price and charge
        subtotal = self.get_subtotal()
        shipping_weight = self.get_shipping_weight()
        shipping_fee = SHIPPING_FEE if not shipping_weight.is_zero else Money.zero()
        total = subtotal + shipping_fee

        customer.pay(total)

        receipt = self._build_receipt(
            customer, subtotal, shipping_weight, shipping_fee, total
        )

        # Phase 3: take the goods from stock
        for line in self._lines.values():
            try:
                line.product.reduce_stock(line.quantity.value)
            except InsufficientStock as exc:
                raise StockInvariantError(
                    f"Stock for {line.product.name} changed after validation"
                ) from exc
            logger.debug(
                "Stock decremented",
                product=line.product.name,
                quantity=line.quantity.value,
                stock_left=line.product.stock,
            )

        return receipt

    # --- Internal helpers -----------------------------------------------------

    def _build_receipt(
        self,
        customer: Customer,
        subtotal: Money,
        shipping_weight: Weight,
        shipping_fee: Money,
        total: Money,
    ) -> Receipt:
        shipment = None
        if shipping_fee > Money.zero():
            shipment = ShipmentNotice(
                lines=tuple(
                    ShipmentLine(
                        product_name=line.product.name,
                        quantity=line.quantity.value,
                        weight=line.shipping_weight,
                    )
                    for line in self._lines.values()
                    if line.shipping_weight is not None
                ),
                total_weight=shipping_weight,
            )

        return Receipt(
            customer_name=customer.name,
            shipment=shipment,
            lines=tuple(
                ReceiptLine(
                    product_name=line.product.name,
                    quantity=line.quantity.value,
                    line_total=line.line_total,
                )
                for line in self._lines.values()
            ),
            subtotal=subtotal,
            shipping_fee=shipping_fee,
            total=total,
            balance_left=customer.balance,
        )
