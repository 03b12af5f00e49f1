"""Tests for the asynchronous notification dispatcher."""

import threading

from myecom.notifications.channel import set_transport
from myecom.notifications.channel.port import NotificationTransport
from myecom.notifications.notification.dispatcher import NotificationDispatcher
from myecom.notifications.notification.payloads import order_created_payload

URL = "https://lambda.example.com/notify"


class BlockingTransport(NotificationTransport):
    """Holds every delivery until released."""

    def __init__(self):
        self.started = threading.Event()
        self.release = threading.Event()
        self.delivered = []

    def post(self, url, payload):
        self.started.set()
        self.release.wait(timeout=5)
        self.delivered.append(payload)
        return {"status": "sent", "status_code": 200}


class ExplodingTransport(NotificationTransport):
    def post(self, url, payload):
        raise RuntimeError("transport exploded")


class TestDispatch:
    def test_delivers_to_configured_url(self, fake_transport):
        dispatcher = NotificationDispatcher(workers=1)
        payload = order_created_payload("mario.rossi@example.com", "ORD-1-ABCDEF12")

        assert dispatcher.dispatch(payload) is True
        dispatcher.join()
        dispatcher.shutdown()

        assert fake_transport.sent == [{"url": "https://notifications.example.com/hook", "payload": payload}]

    def test_skipped_without_url(self):
        dispatcher = NotificationDispatcher()

        assert dispatcher.dispatch(order_created_payload("a@b.com", "ORD-1-ABCDEF12")) is False
        assert dispatcher._threads == []

    def test_failed_delivery_does_not_stop_workers(self, fake_transport):
        fake_transport.configure(should_succeed=False)
        dispatcher = NotificationDispatcher(url=URL, workers=1)

        dispatcher.dispatch(order_created_payload("a@b.com", "ORD-1-AAAAAAAA"))
        dispatcher.join()
        fake_transport.configure(should_succeed=True)
        dispatcher.dispatch(order_created_payload("a@b.com", "ORD-1-BBBBBBBB"))
        dispatcher.join()
        dispatcher.shutdown()

        assert [p["orderNumber"] for p in fake_transport.payloads()] == ["ORD-1-BBBBBBBB"]

    def test_transport_exception_is_contained(self):
        set_transport(ExplodingTransport())
        dispatcher = NotificationDispatcher(url=URL, workers=1)

        assert dispatcher.dispatch(order_created_payload("a@b.com", "ORD-1-ABCDEF12")) is True
        dispatcher.join()
        assert all(t.is_alive() for t in dispatcher._threads)
        dispatcher.shutdown()

    def test_full_queue_drops_new_payloads(self):
        transport = BlockingTransport()
        set_transport(transport)
        dispatcher = NotificationDispatcher(url=URL, workers=1, queue_size=1)

        assert dispatcher.dispatch({"type": "ORDER_CREATED", "orderNumber": "first"}) is True
        assert transport.started.wait(timeout=5)
        assert dispatcher.dispatch({"type": "ORDER_CREATED", "orderNumber": "queued"}) is True
        assert dispatcher.dispatch({"type": "ORDER_CREATED", "orderNumber": "dropped"}) is False

        transport.release.set()
        dispatcher.join()
        dispatcher.shutdown()

        assert [p["orderNumber"] for p in transport.delivered] == ["first", "queued"]

    def test_dispatch_returns_before_delivery(self):
        transport = BlockingTransport()
        set_transport(transport)
        dispatcher = NotificationDispatcher(url=URL, workers=1)

        assert dispatcher.dispatch({"type": "WELCOME"}) is True
        assert transport.delivered == []

        transport.release.set()
        dispatcher.join()
        dispatcher.shutdown()
        assert transport.delivered == [{"type": "WELCOME"}]
