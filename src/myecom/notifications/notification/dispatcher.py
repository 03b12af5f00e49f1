"""Fire-and-forget delivery of notification payloads.

Payloads are put on a bounded in-memory queue and posted by a small pool of
daemon worker threads, so callers return immediately. Delivery is best
effort: failures are logged and dropped, and a full queue drops the new
payload.
"""

import queue
import threading

import structlog

from myecom.notifications.channel import get_transport
from myecom.settings import get_settings

logger = structlog.get_logger(__name__)

_STOP = object()


class NotificationDispatcher:
    def __init__(self, url: str | None = None, workers: int | None = None, queue_size: int | None = None):
        settings = get_settings()
        self._url = url
        self.workers = workers or settings.notification_workers
        self._queue: queue.Queue = queue.Queue(maxsize=queue_size or settings.notification_queue_size)
        self._threads: list[threading.Thread] = []
        self._lock = threading.Lock()

    @property
    def url(self) -> str:
        return self._url if self._url is not None else get_settings().notification_url

    def _ensure_workers(self):
        with self._lock:
            self._threads = [t for t in self._threads if t.is_alive()]
            while len(self._threads) < self.workers:
                thread = threading.Thread(
                    target=self._work,
                    name=f"notification-worker-{len(self._threads) + 1}",
                    daemon=True,
                )
                thread.start()
                self._threads.append(thread)

    def dispatch(self, payload: dict) -> bool:
        """Queue ``payload`` for delivery. Returns False when it was skipped or dropped."""
        url = self.url
        if not url:
            logger.warning(
                "Notification URL not configured, skipping notification",
                type=payload.get("type"),
                order_number=payload.get("orderNumber"),
            )
            return False

        self._ensure_workers()
        try:
            self._queue.put_nowait((url, payload))
        except queue.Full:
            logger.warning("Notification queue full, dropping notification", type=payload.get("type"))
            return False
        return True

    def _work(self):
        while True:
            item = self._queue.get()
            try:
                if item is _STOP:
                    return
                url, payload = item
                self._deliver(url, payload)
            finally:
                self._queue.task_done()

    def _deliver(self, url: str, payload: dict):
        try:
            result = get_transport().post(url, payload)
        except Exception as exc:
            logger.error("Notification delivery failed", type=payload.get("type"), error=str(exc))
            return

        if result.get("status") == "sent":
            logger.info(
                "Notification sent",
                type=payload.get("type"),
                order_number=payload.get("orderNumber"),
                status_code=result.get("status_code"),
            )
        else:
            logger.error(
                "Notification delivery failed",
                type=payload.get("type"),
                status_code=result.get("status_code"),
                error=result.get("error"),
            )

    def join(self):
        """Block until every queued payload has been processed."""
        self._queue.join()

    def shutdown(self):
        with self._lock:
            threads, self._threads = self._threads, []
        for _ in threads:
            self._queue.put(_STOP)
        for thread in threads:
            thread.join(timeout=5)


_dispatcher: NotificationDispatcher | None = None


def get_dispatcher() -> NotificationDispatcher:
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = NotificationDispatcher()
    return _dispatcher


def reset_dispatcher() -> None:
    """Stop the workers and drop the singleton (useful for testing)."""
    global _dispatcher
    if _dispatcher is not None:
        _dispatcher.shutdown()
    _dispatcher = None
