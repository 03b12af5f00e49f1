from myecom.exceptions import BusinessError
from myecom.ordering.validation.validator import OrderValidator

MAX_QUANTITY_PER_PRODUCT = 99


class StockValidator(OrderValidator):
    """Checks availability and per-product quantity caps.

    This is an early, advisory check. The stock decrement performed while
    placing the order remains the authoritative guard.
    """

    name = "StockValidator"
    order = 20

    def validate(self, user_id, lines):
        for line in lines:
            product = line.product
            if not product.active:
                raise BusinessError(f"Il prodotto '{product.name}' non è più disponibile")

            if product.stock < line.quantity:
                raise BusinessError(
                    f"Prodotto '{product.name}': richiesti {line.quantity} pezzi "
                    f"ma disponibili solo {product.stock}"
                )

            if line.quantity > MAX_QUANTITY_PER_PRODUCT:
                raise BusinessError(
                    f"Quantità troppo alta per '{product.name}'. "
                    f"Massimo {MAX_QUANTITY_PER_PRODUCT} pezzi per prodotto"
                )
