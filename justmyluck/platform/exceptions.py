from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from justmyluck.platform.logger import get_logger
from justmyluck.platform.response import api_response

logger = get_logger("exceptions")


class SignupError(Exception):
    """Base class for errors raised while handling a signup."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    public_message = "Internal server error"


class ValidationError(SignupError):
    """The submitted email is not `local@domain.tld` shaped."""

    status_code = status.HTTP_400_BAD_REQUEST
    public_message = "Invalid email"


class StorageError(SignupError):
    """The subscriber store is unreachable or rejected the write."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    public_message = "Database error"


class NotificationError(SignupError):
    """Sending the operator notification failed. Never reaches a client."""


def add_exception_handlers(app):
    @app.exception_handler(SignupError)
    async def signup_exception_handler(request: Request, exc: SignupError):
        return api_response(message=exc.public_message, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return api_response(message=str(exc.detail) or "Error", status_code=exc.status_code)

    # The only request body is the signup payload, so a body that cannot be
    # read as an object is reported the same way as a bad address.
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return api_response(
            message=ValidationError.public_message,
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return api_response(
            message="Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
