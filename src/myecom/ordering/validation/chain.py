"""Runs the registered order validators as a single policy."""

import structlog

from myecom.exceptions import BusinessError
from myecom.ordering.validation.validator import CartLine, OrderValidator

logger = structlog.get_logger(__name__)


class ValidatorChain:
    """Execute enabled validators by ascending ``order``, stopping at the first refusal.

    Ordering and enablement are read on every run, so validators can be
    toggled after registration. The chain keeps no state between runs.
    """

    def __init__(self, validators: list[OrderValidator]):
        self.validators = list(validators)

    def active_validators(self) -> list[OrderValidator]:
        # sorted() is stable, so equal orders keep registration order
        return sorted((v for v in self.validators if v.enabled), key=lambda v: v.order)

    def run(self, user_id, lines: list[CartLine]) -> None:
        validators = self.active_validators()
        logger.debug(
            "Running order validators",
            user_id=str(user_id),
            validators=[v.name for v in validators],
        )

        for validator in validators:
            try:
                validator.validate(user_id, lines)
            except BusinessError as exc:
                logger.info(
                    "Order refused by validator",
                    user_id=str(user_id),
                    validator=validator.name,
                    reason=exc.message,
                )
                raise
            except Exception as exc:
                logger.error(
                    "Order validator raised an unexpected error",
                    user_id=str(user_id),
                    validator=validator.name,
                    error=str(exc),
                    exc_info=True,
                )
                raise BusinessError(
                    f"Errore interno durante la validazione dell'ordine: {validator.name}"
                ) from exc
