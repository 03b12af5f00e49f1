"""Shared BDD fixtures and Given steps for order placement."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers

from myecom.catalogue.product.product import Product
from myecom.exceptions import BusinessError
from myecom.ordering.validation import register_validator
from myecom.ordering.validation.validator import OrderValidator


class RefusingRule(OrderValidator):
    def __init__(self, message, **kwargs):
        super().__init__(**kwargs)
        self.message = message

    def validate(self, user_id, lines):
        raise BusinessError(self.message)


class CrashingRule(OrderValidator):
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.invoked = False

    def validate(self, user_id, lines):
        self.invoked = True
        raise RuntimeError("this rule must never run")


@pytest.fixture()
def products():
    """Products created by the scenario, keyed by their name."""
    return {}


@pytest.fixture()
def rules():
    return {}


@given("a registered shopper", target_fixture="shopper")
def _(make_user, fake_transport):
    return make_user()


@given(parsers.cfparse('a product "{name}" priced {price} with stock {stock:d}'))
def _(products, make_product, name, price, stock):
    products[name] = make_product(name=name, price=price, stock=stock)


@given(parsers.cfparse('the cart contains {quantity:d} of "{name}"'))
def _(shopper, products, fill_cart, quantity, name):
    fill_cart(shopper, (products[name], quantity))


@given(parsers.cfparse('the product "{name}" is withdrawn from sale'))
def _(products, name):
    repo = current_domain.repository_for(Product)
    product = repo.get(products[name].id)
    product.deactivate()
    repo.add(product)


@given(parsers.cfparse('the shopper already placed {count:d} orders of "{name}" today'))
def _(shopper, products, fill_cart, place_order, count, name):
    for _ in range(count):
        fill_cart(shopper, (products[name], 1))
        place_order(shopper)


@given(parsers.cfparse('a rule at position {position:d} that always refuses with "{message}"'))
def _(rules, position, message):
    rules["refusing"] = register_validator(RefusingRule(message, name="AlwaysRefuses", order=position))


@given(parsers.cfparse("a rule at position {position:d} that crashes"))
def _(rules, position):
    rules["crashing"] = register_validator(CrashingRule(name="Crashes", order=position))
