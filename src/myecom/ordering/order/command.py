"""Application commands with an explicit compensation hook.

``CreateOrderCommand`` is what the API invokes to place an order: it prepares
a ``PlaceOrder`` domain command, processes it synchronously and returns the
resulting ``OrderView``. Should the surrounding store be unable to discard a
failed placement, ``rollback`` removes the order that was recorded.
"""

import threading
from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from uuid import uuid4

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from myecom.ordering.order.mapper import OrderMapper, OrderView
from myecom.ordering.order.order import Order
from myecom.ordering.order.placement import PlaceOrder

T = TypeVar("T")

logger = structlog.get_logger(__name__)

# Serializes placements in this process so stock reads and decrements of
# concurrent submissions cannot interleave.
_placement_lock = threading.Lock()


class Command(ABC, Generic[T]):
    @abstractmethod
    def execute(self) -> T: ...

    def rollback(self) -> None:
        """Undo the effects of a failed ``execute``. No-op by default."""


class CreateOrderCommand(Command[OrderView]):
    def __init__(self):
        self.user_id = None
        self.request = None
        self.created_order_id: str | None = None

    def init(self, user_id, request) -> "CreateOrderCommand":
        """Bind the command to a user and a request carrying ``shipping_address`` and ``notes``."""
        self.user_id = user_id
        self.request = request
        self.created_order_id = None
        return self

    def execute(self) -> OrderView:
        if self.user_id is None or self.request is None:
            raise RuntimeError("CreateOrderCommand.init() must be called before execute()")

        order_id = str(uuid4())
        self.created_order_id = order_id
        command = PlaceOrder(
            order_id=order_id,
            user_id=self.user_id,
            shipping_address=self.request.shipping_address,
            notes=getattr(self.request, "notes", None),
        )

        with _placement_lock:
            try:
                current_domain.process(command, asynchronous=False)
            except Exception:
                self.rollback()
                raise

        order = current_domain.repository_for(Order).get(order_id)
        return OrderMapper.to_view(order)

    def rollback(self) -> None:
        """Delete the recorded order if it was persisted. Never raises."""
        if self.created_order_id is None:
            return

        try:
            repo = current_domain.repository_for(Order)
            order = repo.get(self.created_order_id)
        except ObjectNotFoundError:
            return
        except Exception as exc:
            logger.error("Failed to roll back order", order_id=self.created_order_id, error=str(exc))
            return

        try:
            repo.remove(order)
            logger.warning("Order rolled back", order_id=self.created_order_id)
        except Exception as exc:
            logger.error("Failed to roll back order", order_id=self.created_order_id, error=str(exc))
