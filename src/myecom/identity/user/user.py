"""User aggregate — registered shoppers and administrators."""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import Boolean, DateTime, String

from myecom.domain import shop
from myecom.identity.user.events import UserRegistered


class Role(Enum):
    USER = "USER"
    ADMIN = "ADMIN"


@shop.aggregate
class User:
    email = String(required=True, max_length=254, unique=True)
    password_hash = String(required=True, max_length=255)
    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    phone = String(max_length=30)
    address = String(max_length=255)
    city = String(max_length=100)
    zip_code = String(max_length=20)
    role = String(choices=Role, default=Role.USER.value)
    enabled = Boolean(default=True)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def register(
        cls,
        email,
        password_hash,
        first_name,
        last_name,
        phone=None,
        address=None,
        city=None,
        zip_code=None,
    ):
        now = datetime.now(UTC)
        user = cls(
            email=email.strip().lower(),
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
            address=address,
            city=city,
            zip_code=zip_code,
            role=Role.USER.value,
            enabled=True,
            created_at=now,
            updated_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                email=user.email,
                first_name=first_name,
                registered_at=now,
            )
        )
        return user

    def disable(self):
        self.enabled = False
        self.updated_at = datetime.now(UTC)
