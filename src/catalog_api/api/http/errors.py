"""Plain-text error responses."""

from collections.abc import Sequence
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import PlainTextResponse

MISSING_FIELDS_MESSAGE = "Missing required fields"
INVALID_JSON_MESSAGE = "Invalid JSON body"

# Pydantic error types that mean "the client did not supply a value"
_ABSENT_ERROR_TYPES = {"missing", "string_too_short"}


def describe_validation_errors(errors: Sequence[dict[str, Any]]) -> str:
    """Collapse pydantic validation errors into one client-facing sentence.

    An absent, null or empty required field wins over type errors, so a
    payload that is both incomplete and mistyped reports the missing fields.
    """
    missing = False
    invalid_fields: list[str] = []

    for error in errors:
        if error["type"] == "json_invalid":
            return INVALID_JSON_MESSAGE

        loc = error.get("loc", ())
        field = str(loc[-1]) if len(loc) > 1 else "body"

        if error["type"] in _ABSENT_ERROR_TYPES or error.get("input") is None:
            missing = True
        else:
            invalid_fields.append(field)

    if missing:
        return MISSING_FIELDS_MESSAGE
    return f"Invalid value for field(s): {', '.join(dict.fromkeys(invalid_fields))}"


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    message = describe_validation_errors(exc.errors())
    logger.info("Rejected {} {}: {}", request.method, request.url.path, message)
    return PlainTextResponse(message, status_code=400)
