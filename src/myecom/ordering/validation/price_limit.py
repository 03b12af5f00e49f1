from decimal import Decimal

from myecom.exceptions import BusinessError
from myecom.ordering.validation.validator import OrderValidator
from myecom.settings import get_settings
from myecom.shared.money import format_amount, to_amount


class PriceLimitValidator(OrderValidator):
    """Refuses orders whose total exceeds the configured maximum amount.

    The limit is read from settings on every call unless one is passed in.
    """

    name = "PriceLimitValidator"
    order = 10

    def __init__(self, max_amount: Decimal | None = None, **kwargs):
        super().__init__(**kwargs)
        self._max_amount = max_amount

    @property
    def max_amount(self) -> Decimal:
        if self._max_amount is not None:
            return to_amount(self._max_amount)
        return to_amount(get_settings().order_max_amount)

    def validate(self, user_id, lines):
        total = to_amount(sum((line.total_price for line in lines), Decimal("0")))
        limit = self.max_amount
        if total > limit:
            raise BusinessError(
                f"Ordine troppo grande (€{format_amount(total)}). "
                f"Il limite massimo è €{format_amount(limit)}. "
                "Per ordini superiori contatta il supporto clienti."
            )
