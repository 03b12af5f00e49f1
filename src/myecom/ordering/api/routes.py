"""FastAPI routes for carts and orders."""

from fastapi import APIRouter, Response
from protean.utils.globals import current_domain

from myecom.ordering.api.schemas import CartItemRequest, CartResponse, CreateOrderRequest, OrderResponse
from myecom.ordering.cart.items import AddToCart, ClearCart, RemoveFromCart
from myecom.ordering.cart.queries import get_cart
from myecom.ordering.order.command import CreateOrderCommand
from myecom.ordering.order.queries import find_order, get_user_orders

# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/api/cart", tags=["cart"])


@cart_router.get("/{user_id}", response_model=CartResponse)
async def read_cart(user_id: str) -> CartResponse:
    return CartResponse.model_validate(get_cart(user_id))


@cart_router.post("/{user_id}/add", response_model=CartResponse)
async def add_to_cart(user_id: str, body: CartItemRequest) -> CartResponse:
    command = AddToCart(user_id=user_id, product_id=body.product_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return CartResponse.model_validate(get_cart(user_id))


@cart_router.delete("/{user_id}/product/{product_id}", response_model=CartResponse)
async def remove_from_cart(user_id: str, product_id: str) -> CartResponse:
    current_domain.process(RemoveFromCart(user_id=user_id, product_id=product_id), asynchronous=False)
    return CartResponse.model_validate(get_cart(user_id))


@cart_router.delete("/{user_id}/clear")
async def clear_cart(user_id: str) -> Response:
    current_domain.process(ClearCart(user_id=user_id), asynchronous=False)
    return Response(status_code=200)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/api/orders", tags=["orders"])


@order_router.post("/{user_id}", response_model=OrderResponse)
async def create_order(user_id: str, body: CreateOrderRequest) -> OrderResponse:
    view = CreateOrderCommand().init(user_id, body).execute()
    return OrderResponse.model_validate(view)


@order_router.get("/user/{user_id}", response_model=list[OrderResponse])
async def list_user_orders(user_id: str) -> list[OrderResponse]:
    return [OrderResponse.model_validate(view) for view in get_user_orders(user_id)]


@order_router.get("/{order_id}", response_model=OrderResponse | None)
async def read_order(order_id: str) -> OrderResponse | None:
    view = find_order(order_id)
    return OrderResponse.model_validate(view) if view else None
