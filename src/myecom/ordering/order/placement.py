"""Order placement — turns a user's cart into a PENDING order.

Everything happens inside the handler's Unit of Work: the order and its
lines, the stock decrements and the emptied cart are committed together or
not at all. ``OrderCreated`` is dispatched to handlers only after commit.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from myecom.catalogue.product.product import Product
from myecom.domain import shop
from myecom.exceptions import InvalidRequestError
from myecom.identity.user.user import User
from myecom.ordering.cart.cart import Cart
from myecom.ordering.order.order import Order
from myecom.ordering.validation import CartLine, build_chain

logger = structlog.get_logger(__name__)


@shop.command(part_of="Order")
class PlaceOrder:
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    shipping_address = String(required=True, max_length=500)
    notes = Text()


@shop.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        try:
            user = current_domain.repository_for(User).get(command.user_id)
        except ObjectNotFoundError:
            raise InvalidRequestError("Utente non trovato")

        carts = current_domain.repository_for(Cart)
        cart = carts.find_by_user(user.id)
        if cart is None:
            raise InvalidRequestError("Carrello vuoto")

        products = current_domain.repository_for(Product)
        lines = [CartLine(product=products.get(item.product_id), quantity=item.quantity) for item in cart.items]

        build_chain().run(user.id, lines)

        order = Order.place(
            order_id=command.order_id,
            user_id=user.id,
            user_email=user.email,
            shipping_address=command.shipping_address,
            notes=command.notes,
            lines=[(line.product, line.quantity) for line in lines],
        )

        # All decrements must succeed before anything is written
        for line in lines:
            line.product.decrease_stock(line.quantity)

        current_domain.repository_for(Order).add(order)
        for line in lines:
            products.add(line.product)

        cart.clear()
        carts.add(cart)

        logger.info(
            "Order created",
            order_id=str(order.id),
            order_number=order.order_number,
            user_id=str(user.id),
            total_amount=str(order.total_amount),
            items=len(order.items),
        )
        return str(order.id)
