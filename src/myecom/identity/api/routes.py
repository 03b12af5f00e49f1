"""FastAPI routes for registration and login."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from myecom.identity.api.schemas import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from myecom.identity.auth.login import authenticate
from myecom.identity.auth.tokens import generate_token
from myecom.identity.user.registration import RegisterUser
from myecom.identity.user.user import User

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(
        token=generate_token(user.email),
        user=UserResponse.model_validate(user),
    )


@router.post("/register", response_model=AuthResponse)
async def register(body: RegisterRequest) -> AuthResponse:
    command = RegisterUser(
        email=body.email,
        password=body.password,
        first_name=body.first_name,
        last_name=body.last_name,
        phone=body.phone,
        address=body.address,
        city=body.city,
        zip_code=body.zip_code,
    )
    user_id = current_domain.process(command, asynchronous=False)
    user = current_domain.repository_for(User).get(user_id)
    return _auth_response(user)


@router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest) -> AuthResponse:
    user = authenticate(body.email, body.password)
    return _auth_response(user)
