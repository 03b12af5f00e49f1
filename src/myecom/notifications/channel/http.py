"""HTTP transport — POSTs payloads as JSON with requests."""

import requests

from myecom.notifications.channel.port import NotificationTransport


class HttpTransport(NotificationTransport):
    def __init__(self, timeout: float = 10.0, session: requests.Session | None = None):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def post(self, url: str, payload: dict) -> dict:
        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            return {"status": "failed", "error": str(exc)}

        if not response.ok:
            return {
                "status": "failed",
                "status_code": response.status_code,
                "error": response.text[:500],
            }
        return {"status": "sent", "status_code": response.status_code, "body": response.text[:500]}

    def close(self):
        self.session.close()
