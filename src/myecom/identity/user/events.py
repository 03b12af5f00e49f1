"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String

from myecom.domain import shop


@shop.event(part_of="User")
class UserRegistered:
    """A new user account was created through registration."""

    __version__ = 1

    user_id: Identifier(required=True)
    email: String(required=True)
    first_name: String()
    registered_at: DateTime(required=True)
