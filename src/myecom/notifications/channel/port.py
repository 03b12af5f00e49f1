"""Notification transport port — abstract interface for outbound delivery."""

from abc import ABC, abstractmethod


class NotificationTransport(ABC):
    """Abstract interface for delivering a JSON payload to an endpoint."""

    @abstractmethod
    def post(self, url: str, payload: dict) -> dict:
        """Deliver ``payload`` to ``url``.

        Returns:
            dict with keys: status ("sent" or "failed"), status_code (optional), error (optional)
        """
        ...
