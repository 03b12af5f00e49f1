"""Read-side lookups for carts, joined with current product data."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from myecom.catalogue.product.product import Product
from myecom.exceptions import InvalidRequestError
from myecom.identity.user.user import User
from myecom.ordering.cart.cart import Cart
from myecom.shared.money import to_amount


@dataclass(frozen=True)
class CartItemView:
    id: str
    product_id: str
    product_name: str
    unit_price: Decimal
    product_image_url: str | None
    quantity: int
    total_price: Decimal
    product_in_stock: bool


@dataclass(frozen=True)
class CartView:
    id: str
    items: list[CartItemView] = field(default_factory=list)
    total_amount: Decimal = Decimal("0.00")
    total_items: int = 0
    updated_at: datetime | None = None


def cart_view(cart: Cart) -> CartView:
    products = current_domain.repository_for(Product)
    items = []
    for item in cart.items:
        product = products.get(item.product_id)
        items.append(
            CartItemView(
                id=str(item.id),
                product_id=str(item.product_id),
                product_name=product.name,
                unit_price=product.price,
                product_image_url=product.image_url,
                quantity=item.quantity,
                total_price=to_amount(product.price * item.quantity),
                product_in_stock=product.in_stock,
            )
        )

    return CartView(
        id=str(cart.id),
        items=items,
        total_amount=to_amount(sum((i.total_price for i in items), Decimal("0"))),
        total_items=sum(i.quantity for i in items),
        updated_at=cart.updated_at,
    )


def get_cart(user_id) -> CartView:
    try:
        current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        raise InvalidRequestError("Utente non trovato")

    cart = current_domain.repository_for(Cart).find_by_user(user_id)
    if cart is None:
        raise InvalidRequestError("Carrello non trovato")
    return cart_view(cart)
