from myecom.exceptions import BusinessError
from myecom.ordering.validation.validator import OrderValidator


class EmptyCartValidator(OrderValidator):
    """Refuses orders without any cart line."""

    name = "EmptyCartValidator"
    order = 1

    def validate(self, user_id, lines):
        if not lines:
            raise BusinessError("Impossibile creare ordine: il carrello è vuoto")
