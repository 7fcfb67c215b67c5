"""
Domain errors for the auth bounded context.

These are values returned inside failed results, never raised.
"""

from survey_basket.shared.result import Error


class UserErrors:
    """Catalog of user and credential errors."""

    INVALID_CREDENTIALS = Error(
        code="User.InvalidCredentials",
        description="Invalid email or password",
    )
    DUPLICATED_EMAIL = Error(
        code="User.DuplicatedEmail",
        description="Another user with the same email already exists",
    )
