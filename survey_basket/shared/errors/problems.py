"""
Problem payloads for failed results.

Builds RFC 7807 style problem bodies (type, title, status, errors) from a
failed Result or from a list of field-level Errors. Both sources produce
the same shape so that clients can branch on ``errors[].code`` regardless
of where a failure came from.

Pure functions. No framework or IO imports beyond pydantic models.
"""

from collections.abc import Iterable
from http import HTTPStatus

from pydantic import BaseModel, ConfigDict

from survey_basket.shared.result import Error, Result, ResultStateError

RFC9110 = "https://tools.ietf.org/html/rfc9110"

# Status code -> (type reference, title). Titles are fixed per status so
# that different domain errors of the same HTTP class share a title.
PROBLEM_TYPES: dict[int, tuple[str, str]] = {
    400: (f"{RFC9110}#section-15.5.1", "Bad Request"),
    401: (f"{RFC9110}#section-15.5.2", "Unauthorized"),
    403: (f"{RFC9110}#section-15.5.4", "Forbidden"),
    404: (f"{RFC9110}#section-15.5.5", "Not Found"),
    405: (f"{RFC9110}#section-15.5.6", "Method Not Allowed"),
    406: (f"{RFC9110}#section-15.5.7", "Not Acceptable"),
    408: (f"{RFC9110}#section-15.5.9", "Request Timeout"),
    409: (f"{RFC9110}#section-15.5.10", "Conflict"),
    412: (f"{RFC9110}#section-15.5.13", "Precondition Failed"),
    415: (f"{RFC9110}#section-15.5.16", "Unsupported Media Type"),
    422: (f"{RFC9110}#section-15.5.21", "Unprocessable Entity"),
    426: (f"{RFC9110}#section-15.5.22", "Upgrade Required"),
    429: ("https://tools.ietf.org/html/rfc6585#section-4", "Too Many Requests"),
    500: (f"{RFC9110}#section-15.6.1", "Internal Server Error"),
    502: (f"{RFC9110}#section-15.6.3", "Bad Gateway"),
    503: (f"{RFC9110}#section-15.6.4", "Service Unavailable"),
    504: (f"{RFC9110}#section-15.6.5", "Gateway Timeout"),
}

CLIENT_ERROR_TYPE = f"{RFC9110}#section-15.5"
SERVER_ERROR_TYPE = f"{RFC9110}#section-15.6"


class ProblemError(BaseModel):
    """A single entry of the ``errors`` array."""

    model_config = ConfigDict(frozen=True)

    code: str
    description: str


class ProblemPayload(BaseModel):
    """Uniform failure body returned by every endpoint.

    Attributes:
        type: URI reference to the RFC section defining the status code.
        title: Fixed label for the status code.
        status: HTTP status code.
        errors: One entry per domain error or violated validation rule.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    title: str
    status: int
    errors: tuple[ProblemError, ...]


def problem_details_for(status_code: int) -> tuple[str, str]:
    """Return the (type, title) pair for an error status code.

    Args:
        status_code: A 4xx or 5xx HTTP status code.

    Returns:
        The reference URI and fixed title for the code.

    Raises:
        ValueError: If the code is not an error status.
    """
    if status_code in PROBLEM_TYPES:
        return PROBLEM_TYPES[status_code]
    if not 400 <= status_code <= 599:
        raise ValueError(f"{status_code} is not an error status code")
    try:
        title = HTTPStatus(status_code).phrase
    except ValueError:
        title = "Client Error" if status_code < 500 else "Server Error"
    return (CLIENT_ERROR_TYPE if status_code < 500 else SERVER_ERROR_TYPE), title


def build_problem(status_code: int, errors: Iterable[Error]) -> ProblemPayload:
    """Build a problem payload from any number of errors.

    Args:
        status_code: HTTP status code of the response.
        errors: Errors to report, in order.

    Returns:
        The problem payload.
    """
    problem_type, title = problem_details_for(status_code)
    return ProblemPayload(
        type=problem_type,
        title=title,
        status=status_code,
        errors=tuple(
            ProblemError(code=error.code, description=error.description)
            for error in errors
        ),
    )


def to_problem(result: Result, status_code: int) -> ProblemPayload:
    """Map a failed result to a problem payload.

    Args:
        result: A failed Result.
        status_code: HTTP status code chosen by the caller.

    Returns:
        Problem payload with a single entry for the result's error.

    Raises:
        ResultStateError: If the result is a success.
    """
    if result.is_success:
        raise ResultStateError("Cannot build a problem from a successful result")
    return build_problem(status_code, [result.error])
