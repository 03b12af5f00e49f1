import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Initialize the domain and push its context. The activated domain can then be referred to elsewhere as `current_domain`
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env

    from myecom.domain import init_domain

    init_domain().domain_context().push()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Fixture to automatically cleanup infrastructure after every test"""
    yield

    from protean import current_domain

    from myecom.notifications.channel import reset_transport
    from myecom.notifications.notification.dispatcher import reset_dispatcher
    from myecom.ordering.validation import reset_validators
    from myecom.settings import reset_settings

    reset_dispatcher()
    reset_transport()
    reset_validators()
    reset_settings()

    # Clear all databases
    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    # Drain event stores
    current_domain.event_store.store._data_reset()


# ---------------------------------------------------------------------------
# Shared builders
# ---------------------------------------------------------------------------
@pytest.fixture()
def make_user():
    from protean import current_domain

    from myecom.identity.user.user import User

    def _make(email="mario.rossi@example.com", first_name="Mario", last_name="Rossi", **overrides):
        user = User.register(
            email=email,
            password_hash=overrides.pop("password_hash", "not-a-real-hash"),
            first_name=first_name,
            last_name=last_name,
            **overrides,
        )
        current_domain.repository_for(User).add(user)
        return user

    return _make


@pytest.fixture()
def make_category():
    from protean import current_domain

    from myecom.catalogue.category.category import Category

    def _make(name="Elettronica", active=True):
        category = Category.create(name=name, description=f"{name} products", active=active)
        current_domain.repository_for(Category).add(category)
        return category

    return _make


@pytest.fixture()
def make_product(make_category):
    from protean import current_domain

    from myecom.catalogue.product.product import Product

    state = {"category": None}

    def _make(name="Product A", price="100.00", stock=10, active=True, description=None):
        if state["category"] is None:
            state["category"] = make_category()
        product = Product.create(
            name=name,
            price=price,
            stock=stock,
            category_id=state["category"].id,
            description=description,
            active=active,
        )
        current_domain.repository_for(Product).add(product)
        return product

    return _make


@pytest.fixture()
def fill_cart():
    """Put ``(product, quantity)`` pairs straight into the user's cart, bypassing stock checks."""
    from protean import current_domain

    from myecom.ordering.cart.cart import Cart

    def _fill(user, *lines):
        repo = current_domain.repository_for(Cart)
        cart = repo.find_by_user(user.id) or Cart.create(user_id=user.id)
        for product, quantity in lines:
            cart.add_item(product_id=product.id, quantity=quantity)
        repo.add(cart)
        return cart

    return _fill


@pytest.fixture()
def fake_transport():
    """Record notifications instead of posting them, with a notification URL configured."""
    from myecom.notifications.channel import set_transport
    from myecom.notifications.channel.fake import FakeTransport
    from myecom.settings import configure

    transport = FakeTransport()
    set_transport(transport)
    configure(notification_url="https://notifications.example.com/hook")
    return transport


@pytest.fixture()
def drain_notifications():
    from myecom.notifications.notification.dispatcher import get_dispatcher

    def _drain():
        get_dispatcher().join()

    return _drain


@pytest.fixture()
def place_order():
    """Run the create-order command for a user and return the resulting view."""
    from types import SimpleNamespace

    from myecom.ordering.order.command import CreateOrderCommand

    def _place(user, shipping_address="Via Roma 1, Milano", notes=None):
        request = SimpleNamespace(shipping_address=shipping_address, notes=notes)
        return CreateOrderCommand().init(user.id, request).execute()

    return _place


@pytest.fixture()
def order_notifications(fake_transport, drain_notifications):
    """Return a callable listing the ORDER_CREATED payloads delivered so far."""

    def _sent():
        drain_notifications()
        return fake_transport.payloads("ORDER_CREATED")

    return _sent


@pytest.fixture()
def client():
    from fastapi.testclient import TestClient

    from myecom.app import create_app

    return TestClient(create_app())
