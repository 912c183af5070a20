"""Translation of domain and interface errors into HTTP responses.

Error bodies always have the shape ``{"errors": [<message>]}``. Not-found
responses carry no body at all.
"""

import logfire
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from ballot.domain.error import (
    BusinessRuleViolationError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
)
from ballot.interface.error import UnsupportedMediaTypeError


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a response with a single error message."""
    return JSONResponse(status_code=status_code, content={"errors": [message]})


async def handle_not_authenticated(
    request: Request, exc: NotAuthenticatedError
) -> JSONResponse:
    return error_response(status.HTTP_401_UNAUTHORIZED, str(exc))


async def handle_not_found(request: Request, exc: NotFoundError) -> Response:
    logfire.info(
        "Responding not found", resource=exc.resource, identifier=exc.identifier
    )
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def handle_business_rule(
    request: Request, exc: BusinessRuleViolationError
) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_not_authorized(
    request: Request, exc: NotAuthorizedError
) -> JSONResponse:
    return error_response(status.HTTP_403_FORBIDDEN, str(exc))


async def handle_unsupported_media_type(
    request: Request, exc: UnsupportedMediaTypeError
) -> JSONResponse:
    return error_response(status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, str(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers on ``app``."""
    app.add_exception_handler(NotAuthenticatedError, handle_not_authenticated)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(BusinessRuleViolationError, handle_business_rule)
    app.add_exception_handler(NotAuthorizedError, handle_not_authorized)
    app.add_exception_handler(UnsupportedMediaTypeError, handle_unsupported_media_type)
