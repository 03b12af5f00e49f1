"""Bearer token authentication.

Invalid or missing tokens never reject a request: it simply proceeds without
a principal and each route decides what that means.
"""

from fastapi import Request

from myecom.identity.auth.tokens import extract_email

BEARER_PREFIX = "Bearer "


def principal_from_request(request: Request) -> str | None:
    """Return the email carried by a valid bearer token, if any."""
    header = request.headers.get("Authorization", "")
    if not header.startswith(BEARER_PREFIX):
        return None
    token = header[len(BEARER_PREFIX) :].strip()
    if not token:
        return None
    return extract_email(token)


async def authentication_middleware(request: Request, call_next):
    request.state.user_email = principal_from_request(request)
    return await call_next(request)
