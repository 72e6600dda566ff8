"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from shopcart.application.add_product import AddProductHandler
from shopcart.infrastructure.persistence.in_memory_product_catalog import (
    InMemoryProductCatalog,
)

# name, price, stock, days until expiry, weight in kg
SAMPLE_PRODUCTS = [
    ("Cheese", "30", 5, 30, "0.4"),
    ("Biscuits", "10", 2, 60, "0.7"),
    ("TV", "7000", 1, None, "8.0"),
    ("Scratch Card", "75", 3, None, None),
]


def product_catalog(now: datetime | None = None) -> InMemoryProductCatalog:
    """Return a fresh catalog seeded with the sample products.

    Expiry dates are relative to *now* so the sample never goes stale.
    """
    now = now or datetime.now(timezone.utc)
    catalog = InMemoryProductCatalog()
    handler = AddProductHandler(catalog)
    for name, price, stock, shelf_days, weight in SAMPLE_PRODUCTS:
        handler.handle(
            name=name,
            price=price,
            stock=stock,
            expires_at=now + timedelta(days=shelf_days) if shelf_days is not None else None,
            weight=weight,
        )
    return catalog
