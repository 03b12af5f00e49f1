"""JSON payloads sent to the external notification endpoint."""

import structlog

ORDER_CREATED = "ORDER_CREATED"
WELCOME = "WELCOME"
DEFAULT_FIRST_NAME = "Cliente"

logger = structlog.get_logger(__name__)


def first_name_from_email(email: str | None) -> str:
    """Guess a display name from an address: ``mario.rossi@x.it`` gives ``Mario``.

    Falls back to ``Cliente`` whenever no usable name can be derived.
    """
    try:
        if not email:
            return DEFAULT_FIRST_NAME
        local_part = email.split("@")[0].split(".")[0]
        if not local_part:
            return DEFAULT_FIRST_NAME
        return local_part[0].upper() + local_part[1:].lower()
    except Exception as exc:
        logger.debug("Could not derive first name from email", error=str(exc))
        return DEFAULT_FIRST_NAME


def order_created_payload(email: str, order_number: str) -> dict:
    return {
        "email": email,
        "firstName": first_name_from_email(email),
        "orderNumber": order_number,
        "type": ORDER_CREATED,
    }


def welcome_payload(email: str, first_name: str | None = None) -> dict:
    return {
        "email": email,
        "firstName": first_name or first_name_from_email(email),
        "type": WELCOME,
    }
