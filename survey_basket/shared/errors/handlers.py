"""
Centralized error handlers for FastAPI.

Translates failed results and framework errors into problem responses.
Every error body uses the ProblemPayload shape; no stack traces or
internal details are exposed to clients.

Programmer faults (ResultStateError and other unexpected exceptions) are
not handled here and propagate to the server.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from survey_basket.shared.errors.problems import (
    ProblemPayload,
    build_problem,
    to_problem,
)
from survey_basket.shared.result import Error, Result

logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"
HTTP_400 = 400
HTTP_429 = 429

REQUEST_FIELD = "request"
# Location prefixes added by FastAPI that are not part of the field path.
_LOCATION_ROOTS = {"body", "query", "path", "header", "cookie"}


def _problem_json(payload: ProblemPayload, headers: dict[str, str] | None = None) -> JSONResponse:
    """Render a problem payload with the problem+json media type."""
    return JSONResponse(
        status_code=payload.status,
        content=payload.model_dump(mode="json"),
        media_type=PROBLEM_MEDIA_TYPE,
        headers=headers,
    )


def problem_response(result: Result, status_code: int) -> JSONResponse:
    """Turn a failed result into an HTTP problem response.

    Args:
        result: A failed Result returned by a use case.
        status_code: Status code for the response.

    Returns:
        JSON response carrying the problem payload.
    """
    return _problem_json(to_problem(result, status_code))


def _field_path(location: tuple) -> str:
    """Join a pydantic error location into a dotted field path."""
    parts = [str(part) for part in location]
    if parts and parts[0] in _LOCATION_ROOTS:
        parts = parts[1:]
    return ".".join(parts) or REQUEST_FIELD


def validation_errors(exc: RequestValidationError) -> list[Error]:
    """Flatten request validation failures into one Error per rule."""
    return [
        Error(code=_field_path(tuple(item.get("loc", ()))), description=item["msg"])
        for item in exc.errors()
    ]


def register_error_handlers(app: FastAPI) -> None:
    """Register framework error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report every violated field rule in the errors array."""
        errors = validation_errors(exc)
        logger.warning("Request validation failed: %s", [e.code for e in errors])
        return _problem_json(build_problem(HTTP_400, errors))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Render routing and framework HTTP errors as problems."""
        payload = build_problem(
            exc.status_code,
            [Error(code=f"Http.{exc.status_code}", description=str(exc.detail))],
        )
        return _problem_json(payload, headers=getattr(exc, "headers", None))

    @app.exception_handler(RateLimitExceeded)
    async def handle_rate_limit(
        _request: Request, exc: RateLimitExceeded
    ) -> JSONResponse:
        """Reject throttled requests with a 429 problem."""
        logger.warning("Rate limit exceeded: %s", exc.detail)
        payload = build_problem(
            HTTP_429,
            [
                Error(
                    code="Request.RateLimited",
                    description=f"Rate limit exceeded: {exc.detail}",
                )
            ],
        )
        return _problem_json(payload)
