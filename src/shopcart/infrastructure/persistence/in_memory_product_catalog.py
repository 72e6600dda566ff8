"""Dict-backed implementation of ProductCatalog.

Products are stored by reference, so stock taken at checkout is visible
to every later lookup.
"""

from __future__ import annotations

from shopcart.domain.model.product import Product
from shopcart.domain.repository.product_catalog import ProductCatalog


class InMemoryProductCatalog(ProductCatalog):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.strip().lower():
                return p
        return None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product
