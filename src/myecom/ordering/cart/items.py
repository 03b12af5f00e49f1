"""Cart item management — commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from myecom.catalogue.product.product import Product
from myecom.domain import shop
from myecom.exceptions import InvalidRequestError
from myecom.identity.user.user import User
from myecom.ordering.cart.cart import Cart


@shop.command(part_of="Cart")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@shop.command(part_of="Cart")
class RemoveFromCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@shop.command(part_of="Cart")
class ClearCart:
    user_id = Identifier(required=True)


def _ensure_user(user_id):
    try:
        return current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        raise InvalidRequestError("Utente non trovato")


def _ensure_product(product_id):
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise InvalidRequestError("Prodotto non trovato")


def _existing_cart(user_id) -> Cart:
    cart = current_domain.repository_for(Cart).find_by_user(user_id)
    if cart is None:
        raise InvalidRequestError("Carrello non trovato")
    return cart


@shop.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        _ensure_user(command.user_id)
        product = _ensure_product(command.product_id)
        if product.stock < command.quantity:
            raise InvalidRequestError("Quantità non disponibile")

        repo = current_domain.repository_for(Cart)
        cart = repo.find_by_user(command.user_id) or Cart.create(user_id=command.user_id)
        cart.add_item(product_id=command.product_id, quantity=command.quantity)
        repo.add(cart)
        return str(cart.id)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        _ensure_user(command.user_id)
        _ensure_product(command.product_id)
        cart = _existing_cart(command.user_id)
        if cart.item_for(command.product_id) is None:
            raise InvalidRequestError("Prodotto non nel carrello")

        cart.remove_item(command.product_id)
        current_domain.repository_for(Cart).add(cart)
        return str(cart.id)

    @handle(ClearCart)
    def clear_cart(self, command):
        _ensure_user(command.user_id)
        cart = _existing_cart(command.user_id)
        cart.clear()
        current_domain.repository_for(Cart).add(cart)
        return str(cart.id)
