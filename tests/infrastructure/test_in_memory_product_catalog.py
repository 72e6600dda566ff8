"""Tests for the in-memory ProductCatalog implementation."""

from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.infrastructure.persistence.in_memory_product_catalog import (
    InMemoryProductCatalog,
)


def _make_product(name: str) -> Product:
    return Product(name=name, price=Money.of("1"), stock=1)


class TestInMemoryProductCatalog:

    def test_lookup_by_id_and_name(self):
        tv = _make_product("TV")
        catalog = InMemoryProductCatalog([tv])
        assert catalog.get_by_id(tv.id) is tv
        assert catalog.get_by_name(" tv ") is tv

    def test_missing_returns_none(self):
        catalog = InMemoryProductCatalog()
        assert catalog.get_by_id(12345) is None
        assert catalog.get_by_name("TV") is None

    def test_save_and_list(self):
        catalog = InMemoryProductCatalog()
        a, b = _make_product("A"), _make_product("B")
        catalog.save(a)
        catalog.save(b)
        assert catalog.list_all() == [a, b]
