"""MyEcom domain — users, catalogue, carts and orders.

A single Protean domain hosts every bounded context so that order placement
can decrement product stock, clear the cart and persist the order inside one
Unit of Work.
"""

import importlib

import structlog
from protean.domain import Domain

from myecom.utils.logging import configure_logging

configure_logging()

shop = Domain(name="myecom")

logger = structlog.get_logger(__name__)

# Elements live two packages below this module, out of reach of Protean's
# folder traversal, so they are registered explicitly.
ELEMENT_MODULES = (
    "myecom.identity.user.events",
    "myecom.identity.user.user",
    "myecom.identity.user.repository",
    "myecom.identity.user.registration",
    "myecom.catalogue.category.category",
    "myecom.catalogue.category.repository",
    "myecom.catalogue.category.management",
    "myecom.catalogue.product.product",
    "myecom.catalogue.product.repository",
    "myecom.catalogue.product.creation",
    "myecom.ordering.cart.cart",
    "myecom.ordering.cart.repository",
    "myecom.ordering.cart.items",
    "myecom.ordering.order.events",
    "myecom.ordering.order.order",
    "myecom.ordering.order.repository",
    "myecom.ordering.order.placement",
    "myecom.notifications.notification.handlers",
)

_initialized = False


def register_elements() -> None:
    for module in ELEMENT_MODULES:
        importlib.import_module(module)


def init_domain():
    """Register every element and initialize the domain once per process."""
    global _initialized
    if not _initialized:
        register_elements()
        shop.init(traverse=False)
        _initialized = True
        logger.debug("Domain initialized", domain=shop.name, modules=len(ELEMENT_MODULES))
    return shop
