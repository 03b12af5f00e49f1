"""JWT issuance and verification.

Tokens are HS256-signed, carry the user's email as subject and expire after
the configured ``jwt_expiration_ms``.
"""

from datetime import UTC, datetime, timedelta

import structlog
from jose import JWTError, jwt

from myecom.settings import get_settings

ALGORITHM = "HS256"
MIN_SECRET_BYTES = 32

logger = structlog.get_logger(__name__)


def _secret() -> str:
    secret = get_settings().jwt_secret
    if len(secret.encode("utf-8")) < MIN_SECRET_BYTES:
        raise ValueError(f"JWT secret must be at least {MIN_SECRET_BYTES} bytes long")
    return secret


def generate_token(email: str, extra_claims: dict | None = None) -> str:
    now = datetime.now(UTC)
    claims = dict(extra_claims or {})
    claims.update(
        {
            "sub": email,
            "iat": now,
            "exp": now + timedelta(milliseconds=get_settings().jwt_expiration_ms),
        }
    )
    return jwt.encode(claims, _secret(), algorithm=ALGORITHM)


def decode_token(token: str) -> dict:
    """Return the token claims. Raises ``JWTError`` for bad signatures or expired tokens."""
    return jwt.decode(token, _secret(), algorithms=[ALGORITHM])


def extract_email(token: str) -> str | None:
    """Return the subject of a valid token, or None."""
    try:
        return decode_token(token).get("sub")
    except JWTError as exc:
        logger.debug("Rejected JWT", error=str(exc))
        return None
    except ValueError as exc:
        logger.warning("Cannot verify JWT, secret misconfigured", error=str(exc))
        return None


def is_token_valid(token: str, email: str) -> bool:
    subject = extract_email(token)
    return subject is not None and subject == email
