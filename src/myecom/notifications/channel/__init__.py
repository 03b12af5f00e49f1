"""Notification transport registry.

Provides singleton access to the transport used by the dispatcher. The HTTP
transport is used unless another one has been installed with
``set_transport`` (tests install ``FakeTransport``).
"""

from myecom.notifications.channel.port import NotificationTransport
from myecom.settings import get_settings

_transport: NotificationTransport | None = None


def get_transport() -> NotificationTransport:
    """Return the configured transport (singleton)."""
    global _transport
    if _transport is None:
        from myecom.notifications.channel.http import HttpTransport

        _transport = HttpTransport(timeout=get_settings().notification_timeout)
    return _transport


def set_transport(transport: NotificationTransport) -> None:
    global _transport
    _transport = transport


def reset_transport() -> None:
    """Reset the transport singleton (useful for testing)."""
    global _transport
    _transport = None
