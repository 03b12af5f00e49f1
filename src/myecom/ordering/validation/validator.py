"""Order validator contract.

A validator inspects a candidate order (the user's cart lines) and raises
``BusinessError`` to refuse it. Validators never mutate state.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from myecom.shared.money import to_amount


@dataclass(frozen=True)
class CartLine:
    """A cart item joined with the product it refers to."""

    product: object
    quantity: int

    @property
    def total_price(self) -> Decimal:
        return to_amount(self.product.price * self.quantity)


class OrderValidator(ABC):
    """Base class for the rules run before an order is persisted.

    ``order`` sets the position in the chain (lower runs first) and
    ``enabled`` lets a rule be switched off without unregistering it.
    """

    name: str = ""
    order: int = 100
    enabled: bool = True

    def __init__(self, name: str | None = None, order: int | None = None, enabled: bool | None = None):
        self.name = name or self.name or type(self).__name__
        if order is not None:
            self.order = order
        if enabled is not None:
            self.enabled = enabled

    @abstractmethod
    def validate(self, user_id, lines: list[CartLine]) -> None:
        """Raise ``BusinessError`` when the order must not be placed."""
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r} order={self.order} enabled={self.enabled}>"
