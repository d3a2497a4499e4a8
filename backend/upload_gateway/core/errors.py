import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    """Base class for failures reported to the caller as ``{success: false, error}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ClientInputError(GatewayError):
    """A required field or the file payload is missing."""

    status_code = status.HTTP_400_BAD_REQUEST


class BackendError(GatewayError):
    """The store or the local filesystem failed while serving the request."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(message: str) -> dict[str, object]:
    return {"success": False, "error": message}


def _is_absent(error: dict) -> bool:
    if error.get("type") in {"missing", "string_too_short"}:
        return True
    # an explicit null counts as a missing value
    return error.get("type") == "string_type" and error.get("input") is None


def describe_validation_errors(errors: list[dict]) -> str:
    messages = []
    for error in errors:
        loc = [part for part in error.get("loc", ()) if isinstance(part, str) and part != "body"]
        field = loc[-1] if loc else None
        if field and _is_absent(error):
            messages.append(f"{field[:1].upper()}{field[1:]} is required")
        elif field:
            messages.append(f"{field}: {error.get('msg')}")
        else:
            messages.append(str(error.get("msg", "Invalid request body")))
    return "; ".join(messages) or "Invalid request body"


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(describe_validation_errors(list(exc.errors()))),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s failed", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(str(exc) or "Internal server error"),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GatewayError, gateway_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
