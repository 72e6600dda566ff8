"""Unit tests for the Customer aggregate."""

import pytest

from shopcart.domain.exceptions import InsufficientBalance, ValidationError
from shopcart.domain.model.customer import Customer
from shopcart.domain.model.value_objects import Money


class TestCustomerPay:

    def test_pay_debits_balance(self):
        c = Customer(name="Alice", balance=Money.of("100"))
        c.pay(Money.of("30.50"))
        assert c.balance == Money.of("69.50")

    def test_pay_entire_balance(self):
        c = Customer(name="Alice", balance=Money.of("100"))
        c.pay(Money.of("100"))
        assert c.balance == Money.zero()

    def test_pay_zero(self):
        c = Customer(name="Alice", balance=Money.of("100"))
        c.pay(Money.zero())
        assert c.balance == Money.of("100")

    def test_overdraft_rejected_and_balance_unchanged(self):
        c = Customer(name="Alice", balance=Money.of("50"))
        with pytest.raises(InsufficientBalance, match="Insufficient balance for Alice") as excinfo:
            c.pay(Money.of("65"))
        assert c.balance == Money.of("50")
        assert excinfo.value.amount == Money.of("65")
        assert excinfo.value.balance == Money.of("50")


class TestCustomerValidation:

    def test_name_required(self):
        with pytest.raises(ValidationError, match="name is required"):
            Customer(name="", balance=Money.of("1"))

    def test_name_is_stripped(self):
        assert Customer(name="  Bob ", balance=Money.zero()).name == "Bob"
