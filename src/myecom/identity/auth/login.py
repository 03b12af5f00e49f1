"""Credential checks for the login endpoint."""

import structlog
from protean.utils.globals import current_domain

from myecom.exceptions import InvalidRequestError
from myecom.identity.auth.passwords import verify_password
from myecom.identity.user.user import User

logger = structlog.get_logger(__name__)


def authenticate(email: str, password: str) -> User:
    """Return the user owning these credentials.

    Unknown emails and wrong passwords produce the same message so callers
    cannot probe for registered addresses.
    """
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Login failed, bad credentials")
        raise InvalidRequestError("Email o password non corretti")

    if not user.enabled:
        logger.info("Login failed, account disabled", user_id=str(user.id))
        raise InvalidRequestError("Account disabilitato")

    return user
