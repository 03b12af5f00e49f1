from decimal import Decimal

import pytest

from myecom.settings import DEFAULT_JWT_SECRET, Settings, configure, get_settings, reset_settings

ENV_VARS = (
    "ORDER_MAX_AMOUNT",
    "ORDER_DAILY_LIMIT",
    "ORDER_TIMEZONE",
    "JWT_SECRET",
    "JWT_EXPIRATION",
    "AWS_LAMBDA_NOTIFICATION_URL",
    "NOTIFICATION_TIMEOUT",
    "NOTIFICATION_WORKERS",
    "NOTIFICATION_QUEUE_SIZE",
)


@pytest.fixture()
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()


class TestSettings:
    def test_defaults(self, clean_env):
        settings = get_settings()

        assert settings.order_max_amount == Decimal("5000.00")
        assert settings.order_daily_limit == 10
        assert settings.order_timezone == "UTC"
        assert settings.jwt_secret == DEFAULT_JWT_SECRET
        assert settings.jwt_expiration_ms == 86_400_000
        assert settings.notification_url == ""

    def test_from_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("ORDER_MAX_AMOUNT", "250.50")
        monkeypatch.setenv("ORDER_DAILY_LIMIT", "3")
        monkeypatch.setenv("AWS_LAMBDA_NOTIFICATION_URL", " https://lambda.example.com/notify ")
        monkeypatch.setenv("NOTIFICATION_WORKERS", "4")

        settings = Settings.from_env()

        assert settings.order_max_amount == Decimal("250.50")
        assert settings.order_daily_limit == 3
        assert settings.notification_url == "https://lambda.example.com/notify"
        assert settings.notification_workers == 4

    def test_configure_overrides_until_reset(self, clean_env):
        configure(order_daily_limit=1)
        assert get_settings().order_daily_limit == 1

        reset_settings()
        assert get_settings().order_daily_limit == 10
