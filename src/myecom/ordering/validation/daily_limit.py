from datetime import UTC, datetime, time
from zoneinfo import ZoneInfo

import structlog
from protean.utils.globals import current_domain

from myecom.exceptions import BusinessError
from myecom.ordering.order.order import Order
from myecom.ordering.validation.validator import OrderValidator
from myecom.settings import get_settings

logger = structlog.get_logger(__name__)


def _zone(name: str):
    return UTC if name.upper() == "UTC" else ZoneInfo(name)


def day_bounds(now: datetime, zone_name: str) -> tuple[datetime, datetime]:
    """Start and end of ``now``'s calendar day in the given zone, both inclusive, as UTC."""
    zone = _zone(zone_name)
    local_day = now.astimezone(zone).date()
    start = datetime.combine(local_day, time.min, tzinfo=zone)
    end = datetime.combine(local_day, time.max, tzinfo=zone)
    return start.astimezone(UTC), end.astimezone(UTC)


class DailyLimitValidator(OrderValidator):
    """Caps how many orders a user may place per calendar day.

    The day is taken in ``order_timezone``. Counting is best effort: if the
    order store cannot be queried the check passes.
    """

    name = "DailyLimitValidator"
    order = 30

    def __init__(self, limit: int | None = None, **kwargs):
        super().__init__(**kwargs)
        self._limit = limit

    @property
    def limit(self) -> int:
        return self._limit if self._limit is not None else get_settings().order_daily_limit

    def validate(self, user_id, lines):
        limit = self.limit
        try:
            start, end = day_bounds(datetime.now(UTC), get_settings().order_timezone)
            placed_today = current_domain.repository_for(Order).count_created_between(user_id, start, end)
        except Exception as exc:
            logger.warning(
                "Could not count daily orders, skipping daily limit check",
                user_id=str(user_id),
                error=str(exc),
            )
            return

        if placed_today >= limit:
            raise BusinessError(
                f"Raggiunto il limite massimo di {limit} ordini al giorno. "
                "Se hai necessità particolari, contatta il supporto clienti."
            )
