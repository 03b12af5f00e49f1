"""Pydantic request/response schemas for the authentication API."""

from datetime import datetime

from pydantic import EmailStr, Field

from myecom.api.schemas import ApiModel, NonBlankStr


class RegisterRequest(ApiModel):
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)
    first_name: NonBlankStr
    last_name: NonBlankStr
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    zip_code: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "mario.rossi@example.com",
                    "password": "password123",
                    "firstName": "Mario",
                    "lastName": "Rossi",
                    "city": "Milano",
                }
            ]
        }
    }


class LoginRequest(ApiModel):
    email: EmailStr
    password: str = Field(min_length=1)


class UserResponse(ApiModel):
    id: str
    email: str
    first_name: str
    last_name: str
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    zip_code: str | None = None
    role: str
    enabled: bool
    created_at: datetime | None = None


class AuthResponse(ApiModel):
    token: str
    type: str = "Bearer"
    user: UserResponse
