"""Identity API package."""

from myecom.identity.api.routes import router

__all__ = ["router"]
