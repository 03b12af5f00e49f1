"""Application error hierarchy.

Field-level validation is reported through pydantic at the API boundary and
through ``protean.exceptions.ValidationError`` inside the domain.
"""


class ShopError(Exception):
    """Base class for errors raised deliberately by MyEcom."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class BusinessError(ShopError):
    """A business rule refused the operation. The message is shown to the user."""


class InvalidRequestError(ShopError):
    """The request references missing data or carries an unusable value."""


class NotFoundError(ShopError):
    """The referenced entity does not exist."""
