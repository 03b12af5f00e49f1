"""Application settings loaded from the environment.

Protean infrastructure (databases, brokers, processing mode) is configured in
``domain.toml``; this module holds the business and integration options.
"""

import os
from dataclasses import dataclass, replace
from decimal import Decimal

DEFAULT_JWT_SECRET = "mySecretKey123456789012345678901234567890"


@dataclass(frozen=True)
class Settings:
    order_max_amount: Decimal = Decimal("5000.00")
    order_daily_limit: int = 10
    order_timezone: str = "UTC"
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_expiration_ms: int = 86_400_000
    notification_url: str = ""
    notification_timeout: float = 10.0
    notification_workers: int = 2
    notification_queue_size: int = 100

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            order_max_amount=Decimal(os.getenv("ORDER_MAX_AMOUNT", "5000.00")),
            order_daily_limit=int(os.getenv("ORDER_DAILY_LIMIT", "10")),
            order_timezone=os.getenv("ORDER_TIMEZONE", "UTC"),
            jwt_secret=os.getenv("JWT_SECRET", DEFAULT_JWT_SECRET),
            jwt_expiration_ms=int(os.getenv("JWT_EXPIRATION", "86400000")),
            notification_url=os.getenv("AWS_LAMBDA_NOTIFICATION_URL", "").strip(),
            notification_timeout=float(os.getenv("NOTIFICATION_TIMEOUT", "10")),
            notification_workers=int(os.getenv("NOTIFICATION_WORKERS", "2")),
            notification_queue_size=int(os.getenv("NOTIFICATION_QUEUE_SIZE", "100")),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def configure(**overrides) -> Settings:
    """Replace selected settings, e.g. ``configure(order_daily_limit=3)``."""
    global _settings
    _settings = replace(get_settings(), **overrides)
    return _settings


def reset_settings() -> None:
    """Drop overrides so the next access re-reads the environment."""
    global _settings
    _settings = None
