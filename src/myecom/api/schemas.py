"""Shared building blocks for the JSON API contracts.

Payloads use camelCase on the wire and snake_case in Python. Money is kept as
``Decimal`` internally and rendered as a JSON number.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer, StringConstraints
from pydantic.alias_generators import to_camel

Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(ApiModel):
    success: bool = False
    message: str
    errors: list[str] | None = None
