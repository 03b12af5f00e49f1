"""Order aggregate — a placed purchase with one line per product.

Orders are only ever created in the PENDING state by order placement; later
status changes belong to fulfilment tooling outside this service.
"""

import time
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum
from uuid import uuid4

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String, Text

from myecom.domain import shop
from myecom.ordering.order.events import OrderCreated
from myecom.shared.money import from_cents


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


def generate_order_number() -> str:
    """``ORD-<epoch millis>-<8 upper-case hex chars>``."""
    return f"ORD-{time.time_ns() // 1_000_000}-{uuid4().hex[:8].upper()}"


@shop.entity(part_of="Order")
class OrderItem:
    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=200)
    quantity = Integer(required=True, min_value=1)
    unit_price_cents = Integer(required=True, min_value=0)
    total_price_cents = Integer(required=True, min_value=0)

    @invariant.post
    def total_price_matches_quantity(self):
        if self.total_price_cents != self.unit_price_cents * self.quantity:
            raise ValidationError({"total_price": ["Line total must equal unit price times quantity"]})

    @property
    def unit_price(self) -> Decimal:
        return from_cents(self.unit_price_cents)

    @property
    def total_price(self) -> Decimal:
        return from_cents(self.total_price_cents)


@shop.aggregate
class Order:
    order_number = String(required=True, max_length=50, unique=True)
    user_id = Identifier(required=True)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    total_amount_cents = Integer(required=True, min_value=0, default=0)
    shipping_address = String(required=True, max_length=500)
    notes = Text()
    items = HasMany(OrderItem)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def total_matches_items(self):
        if self.total_amount_cents != sum(item.total_price_cents for item in self.items):
            raise ValidationError({"total_amount": ["Order total must equal the sum of its lines"]})

    @classmethod
    def place(cls, order_id, user_id, user_email, shipping_address, lines, notes=None):
        """Build a PENDING order from ``(product, quantity)`` pairs.

        Each line snapshots the product's current name and price.
        """
        if not shipping_address or not shipping_address.strip():
            raise ValidationError({"shipping_address": ["Shipping address is required"]})

        now = datetime.now(UTC)
        order = cls(
            id=order_id,
            order_number=generate_order_number(),
            user_id=user_id,
            status=OrderStatus.PENDING.value,
            total_amount_cents=0,
            shipping_address=shipping_address.strip(),
            notes=notes,
            created_at=now,
            updated_at=now,
        )

        with atomic_change(order):
            for product, quantity in lines:
                order.add_items(
                    OrderItem(
                        product_id=product.id,
                        product_name=product.name,
                        quantity=quantity,
                        unit_price_cents=product.price_cents,
                        total_price_cents=product.price_cents * quantity,
                    )
                )
            order.total_amount_cents = sum(item.total_price_cents for item in order.items)

        order.raise_(
            OrderCreated(
                order_id=str(order.id),
                user_email=user_email,
                order_number=order.order_number,
            )
        )
        return order

    @property
    def total_amount(self) -> Decimal:
        return from_cents(self.total_amount_cents)
