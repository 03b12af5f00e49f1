"""Category aggregate — groups products in the storefront."""

from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, String, Text

from myecom.domain import shop


@shop.aggregate
class Category:
    name = String(required=True, max_length=100, unique=True)
    description = Text()
    active = Boolean(default=True)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, name, description=None, active=True):
        now = datetime.now(UTC)
        return cls(
            name=name.strip(),
            description=description,
            active=active,
            created_at=now,
            updated_at=now,
        )
