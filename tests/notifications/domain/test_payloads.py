"""Tests for notification payload builders."""

import pytest

from myecom.notifications.notification.payloads import (
    first_name_from_email,
    order_created_payload,
    welcome_payload,
)


class TestFirstNameFromEmail:
    @pytest.mark.parametrize(
        "email, expected",
        [
            ("mario.rossi@example.com", "Mario"),
            ("GIULIA@example.com", "Giulia"),
            ("luca_bianchi@example.com", "Luca_bianchi"),
            ("a@example.com", "A"),
        ],
    )
    def test_derives_name_from_local_part(self, email, expected):
        assert first_name_from_email(email) == expected

    @pytest.mark.parametrize("email", [None, "", "@example.com", ".hidden@example.com"])
    def test_falls_back_to_cliente(self, email):
        assert first_name_from_email(email) == "Cliente"

    def test_never_raises_on_unexpected_input(self):
        assert first_name_from_email(12345) == "Cliente"


class TestPayloads:
    def test_order_created_payload(self):
        assert order_created_payload("mario.rossi@example.com", "ORD-1-ABCDEF12") == {
            "email": "mario.rossi@example.com",
            "firstName": "Mario",
            "orderNumber": "ORD-1-ABCDEF12",
            "type": "ORDER_CREATED",
        }

    def test_welcome_payload_prefers_registered_name(self):
        assert welcome_payload("m.rossi@example.com", "Mario") == {
            "email": "m.rossi@example.com",
            "firstName": "Mario",
            "type": "WELCOME",
        }

    def test_welcome_payload_derives_name_when_missing(self):
        assert welcome_payload("anna.verdi@example.com")["firstName"] == "Anna"
