"""Event handlers that turn domain events into outbound notifications.

They run after the originating Unit of Work has committed and only queue
work on the dispatcher, so a slow or failing endpoint never affects the
request that produced the event.
"""

import structlog
from protean.utils.mixins import handle

from myecom.domain import shop
from myecom.identity.user.events import UserRegistered
from myecom.identity.user.user import User
from myecom.notifications.notification.dispatcher import get_dispatcher
from myecom.notifications.notification.payloads import order_created_payload, welcome_payload
from myecom.ordering.order.events import OrderCreated
from myecom.ordering.order.order import Order

logger = structlog.get_logger(__name__)


@shop.event_handler(part_of=Order)
class OrderNotificationHandler:
    """Sends the order confirmation notification."""

    @handle(OrderCreated)
    def on_order_created(self, event: OrderCreated) -> None:
        try:
            get_dispatcher().dispatch(order_created_payload(event.user_email, event.order_number))
        except Exception as exc:
            logger.error(
                "Failed to queue order notification",
                order_number=event.order_number,
                error=str(exc),
            )


@shop.event_handler(part_of=User)
class WelcomeNotificationHandler:
    """Sends the welcome notification after registration."""

    @handle(UserRegistered)
    def on_user_registered(self, event: UserRegistered) -> None:
        try:
            get_dispatcher().dispatch(welcome_payload(event.email, event.first_name))
        except Exception as exc:
            logger.error(
                "Failed to queue welcome notification",
                user_id=str(event.user_id),
                error=str(exc),
            )
