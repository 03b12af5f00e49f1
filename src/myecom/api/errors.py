"""Maps application errors to JSON responses shaped ``{success, message, errors?}``."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ValidationError

from myecom.api.schemas import ErrorResponse
from myecom.exceptions import BusinessError, InvalidRequestError, NotFoundError

logger = structlog.get_logger(__name__)


def error_response(status_code: int, message: str, errors: list[str] | None = None) -> JSONResponse:
    body = ErrorResponse(message=message, errors=errors)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _request_validation_errors(exc: RequestValidationError) -> list[str]:
    messages = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(location)
        messages.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))
    return messages


def _domain_validation_errors(exc: ValidationError) -> list[str]:
    messages = getattr(exc, "messages", None) or {}
    return [f"{field}: {message}" for field, field_messages in messages.items() for message in field_messages]


async def handle_business_error(request: Request, exc: BusinessError) -> JSONResponse:
    return error_response(400, exc.message)


async def handle_invalid_request(request: Request, exc: InvalidRequestError) -> JSONResponse:
    return error_response(400, f"Richiesta non valida: {exc.message}")


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(404, exc.message)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(400, "Errori di validazione", _request_validation_errors(exc))


async def handle_domain_validation(request: Request, exc: ValidationError) -> JSONResponse:
    return error_response(400, "Errori di validazione", _domain_validation_errors(exc))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error while processing request",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=exc,
    )
    return error_response(500, "Errore interno del server")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BusinessError, handle_business_error)
    app.add_exception_handler(InvalidRequestError, handle_invalid_request)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(ValidationError, handle_domain_validation)
    app.add_exception_handler(Exception, handle_unexpected)
