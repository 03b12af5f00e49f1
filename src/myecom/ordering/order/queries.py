"""Read-side order lookups."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from myecom.exceptions import InvalidRequestError
from myecom.identity.user.user import User
from myecom.ordering.order.mapper import OrderMapper, OrderView
from myecom.ordering.order.order import Order


def find_order(order_id) -> OrderView | None:
    try:
        order = current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        return None
    return OrderMapper.to_view(order)


def get_user_orders(user_id) -> list[OrderView]:
    """All orders of a user, newest first."""
    try:
        current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        raise InvalidRequestError("Utente non trovato")

    orders = current_domain.repository_for(Order).find_by_user(user_id)
    return [OrderMapper.to_view(order) for order in orders]
