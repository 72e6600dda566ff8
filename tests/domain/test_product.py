"""Unit tests for the Product aggregate and its capabilities."""

from datetime import datetime, timedelta, timezone

import pytest

from shopcart.domain.exceptions import InsufficientStock, ValidationError
from shopcart.domain.model.product import Capability, Product
from shopcart.domain.model.value_objects import Money, Weight

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def _make_product(**overrides) -> Product:
    fields = {"name": "Widget", "price": Money.of("10"), "stock": 5}
    fields.update(overrides)
    return Product(**fields)


class TestProductConstruction:

    def test_accessors(self):
        p = _make_product()
        assert p.name == "Widget"
        assert p.price == Money.of("10")
        assert p.stock == 5

    def test_zero_price_and_stock_allowed(self):
        p = _make_product(price=Money.zero(), stock=0)
        assert p.stock == 0

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            _make_product(name="  ")

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _make_product(stock=-1)

    def test_non_money_price_rejected(self):
        with pytest.raises(ValidationError, match="must be Money"):
            _make_product(price=10)

    def test_each_instance_gets_its_own_handle(self):
        a = _make_product()
        b = _make_product()
        assert a.id != b.id
        assert a != b

    def test_naive_expiry_treated_as_utc(self):
        p = _make_product(expires_at=datetime(2030, 1, 1))
        assert p.expires_at.tzinfo is timezone.utc


class TestCapabilities:

    def test_plain_product_has_none(self):
        p = _make_product()
        assert p.capabilities == frozenset()
        assert not p.is_expirable
        assert not p.is_shippable
        assert p.weight is None

    def test_expirable(self):
        p = _make_product(expires_at=NOW + timedelta(days=1))
        assert p.capabilities == {Capability.EXPIRABLE}

    def test_shippable(self):
        p = _make_product(weight=Weight.of("0.4"))
        assert p.capabilities == {Capability.SHIPPABLE}
        assert p.weight == Weight.of("0.4")

    def test_expirable_and_shippable(self):
        p = _make_product(expires_at=NOW, weight=Weight.of("0.4"))
        assert p.has_capability(Capability.EXPIRABLE)
        assert p.has_capability(Capability.SHIPPABLE)


class TestIsExpired:

    def test_not_expired_before_instant(self):
        p = _make_product(expires_at=NOW)
        assert not p.is_expired(NOW - timedelta(seconds=1))

    def test_expired_at_exact_instant(self):
        p = _make_product(expires_at=NOW)
        assert p.is_expired(NOW)

    def test_expired_after_instant(self):
        p = _make_product(expires_at=NOW)
        assert p.is_expired(NOW + timedelta(days=1))

    def test_uses_live_clock_by_default(self):
        now = datetime.now(timezone.utc)
        assert _make_product(expires_at=now - timedelta(days=1)).is_expired()
        assert not _make_product(expires_at=now + timedelta(days=1)).is_expired()

    def test_plain_product_never_expires(self):
        assert not _make_product().is_expired(datetime.max.replace(tzinfo=timezone.utc))


class TestReduceStock:

    def test_reduces_stock(self):
        p = _make_product(stock=5)
        p.reduce_stock(3)
        assert p.stock == 2

    def test_reduce_to_zero(self):
        p = _make_product(stock=5)
        p.reduce_stock(5)
        assert p.stock == 0

    def test_more_than_stock_rejected_not_clamped(self):
        p = _make_product(stock=5)
        with pytest.raises(InsufficientStock) as excinfo:
            p.reduce_stock(6)
        assert p.stock == 5
        assert excinfo.value.product_name == "Widget"
        assert excinfo.value.requested == 6
        assert excinfo.value.available == 5

    def test_zero_rejected(self):
        p = _make_product()
        with pytest.raises(ValidationError, match="must be positive"):
            p.reduce_stock(0)
