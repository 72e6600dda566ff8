"""Application service: Add Product use case."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money, Weight
from shopcart.domain.repository.product_catalog import ProductCatalog


class AddProductHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(
        self,
        name: str,
        price: str | int | Decimal,
        stock: int,
        expires_at: datetime | None = None,
        weight: str | int | Decimal | None = None,
    ) -> Product:
        """Add a new product to the catalog.

        Passing *expires_at* makes the product expirable; passing *weight*
        (in kilograms) makes it shippable.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._catalog.get_by_name(name)
        if existing is not None:
            raise ValidationError(f"Product '{name.strip()}' already exists")

        product = Product(
            name=name,
            price=Money.of(price),
            stock=stock,
            expires_at=expires_at,
            weight=Weight.of(weight) if weight is not None else None,
        )
        self._catalog.save(product)
        return product
