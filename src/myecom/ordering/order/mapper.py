"""Maps Order aggregates to the read models returned by the API."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class OrderItemView:
    id: str
    product_id: str
    product_name: str
    quantity: int
    unit_price: Decimal
    total_price: Decimal


@dataclass(frozen=True)
class OrderView:
    id: str
    order_number: str
    status: str
    total_amount: Decimal
    shipping_address: str
    notes: str | None
    created_at: str | None
    items: list[OrderItemView] = field(default_factory=list)


class OrderMapper:
    @staticmethod
    def to_item_view(item) -> OrderItemView:
        return OrderItemView(
            id=str(item.id),
            product_id=str(item.product_id),
            product_name=item.product_name,
            quantity=item.quantity,
            unit_price=item.unit_price,
            total_price=item.total_price,
        )

    @classmethod
    def to_view(cls, order) -> OrderView:
        return OrderView(
            id=str(order.id),
            order_number=order.order_number,
            status=order.status,
            total_amount=order.total_amount,
            shipping_address=order.shipping_address,
            notes=order.notes,
            created_at=order.created_at.isoformat() if order.created_at else None,
            items=[cls.to_item_view(item) for item in order.items],
        )
