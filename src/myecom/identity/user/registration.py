"""User registration — command and handler."""

import structlog
from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from myecom.domain import shop
from myecom.exceptions import InvalidRequestError
from myecom.identity.auth.passwords import hash_password
from myecom.identity.user.user import User

logger = structlog.get_logger(__name__)


@shop.command(part_of="User")
class RegisterUser:
    """Create a user account from the registration form."""

    email: String(required=True, max_length=254)
    password: String(required=True, min_length=8, max_length=128)
    first_name: String(required=True, max_length=100)
    last_name: String(required=True, max_length=100)
    phone: String(max_length=30)
    address: String(max_length=255)
    city: String(max_length=100)
    zip_code: String(max_length=20)


@shop.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            logger.info("Registration rejected, email already registered")
            raise InvalidRequestError("Email già registrata")

        user = User.register(
            email=command.email,
            password_hash=hash_password(command.password),
            first_name=command.first_name,
            last_name=command.last_name,
            phone=command.phone,
            address=command.address,
            city=command.city,
            zip_code=command.zip_code,
        )
        repo.add(user)
        logger.info("User registered", user_id=str(user.id))
        return str(user.id)
