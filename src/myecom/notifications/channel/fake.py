"""Fake transport — records payloads in memory for test assertions."""

import threading

from myecom.notifications.channel.port import NotificationTransport


class FakeTransport(NotificationTransport):
    def __init__(self):
        self.sent: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Notification delivery failed"
        self._lock = threading.Lock()

    def configure(self, should_succeed: bool = True, failure_reason: str = "Notification delivery failed"):
        """Configure the fake transport behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def post(self, url: str, payload: dict) -> dict:
        if not self.should_succeed:
            return {"status": "failed", "error": self.failure_reason}

        with self._lock:
            self.sent.append({"url": url, "payload": payload})
        return {"status": "sent", "status_code": 200}

    def payloads(self, type_: str | None = None) -> list[dict]:
        with self._lock:
            return [r["payload"] for r in self.sent if type_ is None or r["payload"].get("type") == type_]

    def reset(self):
        """Clear recorded payloads (useful between tests)."""
        with self._lock:
            self.sent.clear()
        self.should_succeed = True
        self.failure_reason = "Notification delivery failed"
