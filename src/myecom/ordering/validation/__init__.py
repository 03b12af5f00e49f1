"""Order validator registry.

Holds the validator instances that make up the order placement policy. The
built-in rules are registered on first access; extra rules can be added with
``register_validator``. The chain decides ordering and enablement at run time.
"""

from myecom.ordering.validation.chain import ValidatorChain
from myecom.ordering.validation.validator import CartLine, OrderValidator

_validators: list[OrderValidator] | None = None


def _default_validators() -> list[OrderValidator]:
    from myecom.ordering.validation.daily_limit import DailyLimitValidator
    from myecom.ordering.validation.empty_cart import EmptyCartValidator
    from myecom.ordering.validation.price_limit import PriceLimitValidator
    from myecom.ordering.validation.stock import StockValidator

    return [
        EmptyCartValidator(),
        PriceLimitValidator(),
        StockValidator(),
        DailyLimitValidator(),
    ]


def get_validators() -> list[OrderValidator]:
    """Return the registered validators (the built-in set on first use)."""
    global _validators
    if _validators is None:
        _validators = _default_validators()
    return _validators


def register_validator(validator: OrderValidator) -> OrderValidator:
    get_validators().append(validator)
    return validator


def unregister_validator(name: str) -> None:
    global _validators
    _validators = [v for v in get_validators() if v.name != name]


def find_validator(name: str) -> OrderValidator | None:
    return next((v for v in get_validators() if v.name == name), None)


def build_chain() -> ValidatorChain:
    return ValidatorChain(get_validators())


def reset_validators() -> None:
    """Restore the built-in validator set (useful for testing)."""
    global _validators
    _validators = None


__all__ = [
    "CartLine",
    "OrderValidator",
    "ValidatorChain",
    "build_chain",
    "find_validator",
    "get_validators",
    "register_validator",
    "reset_validators",
    "unregister_validator",
]
