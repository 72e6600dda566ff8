"""Application service: Checkout use case.

Orchestrates the flow between the catalog and the domain model.  This
is the only place that coordinates several aggregates (catalog lookup,
Cart, Customer) for a single purchase.
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from shopcart.application.dto import (
    CartItemSpec,
    ReceiptDTO,
    ReceiptLineDTO,
    ShipmentLineDTO,
)
from shopcart.domain.exceptions import DomainException, EntityNotFoundError
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.customer import Customer
from shopcart.domain.model.receipt import Receipt
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.product_catalog import ProductCatalog

logger = structlog.get_logger(__name__)


class CheckoutHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(
        self,
        customer_name: str,
        balance: str | int | Decimal,
        item_specs: list[CartItemSpec],
    ) -> ReceiptDTO:
        """Buy the requested items for a customer holding *balance*.

        Steps:
        1. Resolve each product name to a Product (fail if not found).
        2. Add each item to a fresh Cart (expiry and stock checked per item).
        3. Let the Cart run the checkout transaction.
        4. Return a DTO of the receipt.
        """
        cart = Cart()

        try:
            customer = Customer(name=customer_name, balance=Money.of(balance))
            for spec in item_specs:
                product = self._catalog.get_by_name(spec.product_name)
                if product is None:
                    raise EntityNotFoundError(
                        f"Product not found: '{spec.product_name}'"
                    )
                cart.add(product, spec.quantity)

            receipt = cart.checkout(customer)
        except DomainException as exc:
            logger.warning(
                "Checkout rejected",
                customer=customer_name,
                reason=type(exc).__name__,
                detail=str(exc),
            )
            raise

        logger.info(
            "Checkout completed",
            customer=customer.name,
            lines=len(receipt.lines),
            total=str(receipt.total.amount),
            shipping_fee=str(receipt.shipping_fee.amount),
            balance_left=str(receipt.balance_left.amount),
        )
        return self._to_dto(receipt)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(receipt: Receipt) -> ReceiptDTO:
        shipment = receipt.shipment
        return ReceiptDTO(
            customer_name=receipt.customer_name,
            shipment_lines=[
                ShipmentLineDTO(
                    product_name=line.product_name,
                    quantity=line.quantity,
                    grams=f"{line.grams.normalize():f}g",
                )
                for line in (shipment.lines if shipment is not None else ())
            ],
            package_weight=str(shipment.total_weight) if shipment is not None else None,
            lines=[
                ReceiptLineDTO(
                    product_name=line.product_name,
                    quantity=line.quantity,
                    line_total=str(line.line_total),
                )
                for line in receipt.lines
            ],
            subtotal=str(receipt.subtotal),
            shipping_fee=str(receipt.shipping_fee),
            total=str(receipt.total),
            balance_left=str(receipt.balance_left),
        )
