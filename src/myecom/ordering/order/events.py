"""Domain events for the Order aggregate."""

from protean.fields import Identifier, String

from myecom.domain import shop


@shop.event(part_of="Order")
class OrderCreated:
    """An order was placed from the user's cart.

    Carries what downstream notifications need and nothing more.
    """

    __version__ = 1

    order_id: Identifier(required=True)
    user_email: String(required=True)
    order_number: String(required=True)
