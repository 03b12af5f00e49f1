"""Product aggregate — sellable items and their stock level.

Prices are stored in integer cents. Stock never drops below zero: the
decrement itself refuses to oversell, whatever an earlier availability
check concluded.
"""

from datetime import UTC, datetime
from decimal import Decimal

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text

from myecom.domain import shop
from myecom.shared.money import from_cents, to_cents


@shop.aggregate
class Product:
    name = String(required=True, max_length=200)
    description = Text()
    price_cents = Integer(required=True, min_value=1)
    stock = Integer(required=True, min_value=0, default=0)
    image_url = String(max_length=500)
    brand = String(max_length=100)
    category_id = Identifier(required=True)
    active = Boolean(default=True)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def stock_cannot_be_negative(self):
        if self.stock is not None and self.stock < 0:
            raise ValidationError({"stock": ["Stock cannot be negative"]})

    @classmethod
    def create(
        cls,
        name,
        price,
        stock,
        category_id,
        description=None,
        image_url=None,
        brand=None,
        active=True,
    ):
        now = datetime.now(UTC)
        return cls(
            name=name,
            description=description,
            price_cents=to_cents(price),
            stock=stock,
            image_url=image_url,
            brand=brand,
            category_id=category_id,
            active=active,
            created_at=now,
            updated_at=now,
        )

    @property
    def price(self) -> Decimal:
        return from_cents(self.price_cents)

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    def decrease_stock(self, quantity: int):
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        if self.stock < quantity:
            raise ValidationError(
                {"stock": [f"Insufficient stock for '{self.name}': requested {quantity}, available {self.stock}"]}
            )
        self.stock -= quantity
        self.updated_at = datetime.now(UTC)

    def increase_stock(self, quantity: int):
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        self.stock += quantity
        self.updated_at = datetime.now(UTC)

    def deactivate(self):
        self.active = False
        self.updated_at = datetime.now(UTC)
