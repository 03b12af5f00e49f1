"""Cart aggregate — one mutable staging area per user.

The cart is created lazily on the first add. Checking out removes its items
but keeps the cart itself.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from myecom.domain import shop


@shop.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    created_at = DateTime()
    updated_at = DateTime()


@shop.aggregate
class Cart:
    user_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_line_per_product(self):
        product_ids = [str(item.product_id) for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product can appear only once in a cart"]})

    @classmethod
    def create(cls, user_id):
        now = datetime.now(UTC)
        return cls(user_id=user_id, created_at=now, updated_at=now)

    def item_for(self, product_id) -> CartItem | None:
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def add_item(self, product_id, quantity):
        """Add a product, or increase its quantity if it is already in the cart."""
        now = datetime.now(UTC)
        existing = self.item_for(product_id)
        if existing:
            existing.quantity += quantity
            existing.updated_at = now
        else:
            self.add_items(
                CartItem(
                    product_id=product_id,
                    quantity=quantity,
                    created_at=now,
                    updated_at=now,
                )
            )
        self.updated_at = now

    def remove_item(self, product_id):
        item = self.item_for(product_id)
        if item is None:
            raise ValidationError({"product_id": ["Product is not in the cart"]})
        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

    def clear(self):
        for item in list(self.items):
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)
