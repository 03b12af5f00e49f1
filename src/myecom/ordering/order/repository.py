from myecom.domain import shop
from myecom.ordering.order.order import Order

FETCH_BATCH_SIZE = 500


@shop.repository(part_of=Order)
class OrderRepository:
    def find_by_user(self, user_id) -> list[Order]:
        """All of the user's orders, most recent first."""
        query = self._dao.query.filter(user_id=str(user_id)).order_by("-created_at")
        orders: list[Order] = []
        while True:
            batch = query.offset(len(orders)).limit(FETCH_BATCH_SIZE).all().items
            orders.extend(batch)
            if len(batch) < FETCH_BATCH_SIZE:
                return orders

    def count_created_between(self, user_id, start, end) -> int:
        """Number of orders the user placed with ``start <= created_at <= end``."""
        return self._dao.query.filter(user_id=str(user_id), created_at__gte=start, created_at__lte=end).all().total

    def find_by_order_number(self, order_number: str) -> Order | None:
        orders = self._dao.query.filter(order_number=order_number).all().items
        return orders[0] if orders else None

    def remove(self, order: Order) -> None:
        """Delete an order and its lines outright."""
        self._dao.delete(order)
