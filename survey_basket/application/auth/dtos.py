"""
Data Transfer Objects for the auth application layer.
"""

from dataclasses import dataclass

from survey_basket.domain.auth.entities import AccessToken, User


@dataclass(frozen=True)
class GetTokenCommand:
    """Input DTO for exchanging credentials for a token."""

    email: str
    password: str


@dataclass(frozen=True)
class RegisterCommand:
    """Input DTO for creating a user account."""

    email: str
    password: str
    first_name: str
    last_name: str


@dataclass(frozen=True)
class AuthResult:
    """Output DTO describing an authenticated user and their token.

    Attributes:
        id: User identifier.
        email: User email.
        first_name: Given name.
        last_name: Family name.
        token: Bearer token.
        expires_in: Token lifetime in seconds.
    """

    id: int
    email: str
    first_name: str
    last_name: str
    token: str
    expires_in: int

    @classmethod
    def issued(cls, user: User, access_token: AccessToken) -> "AuthResult":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            token=access_token.token,
            expires_in=access_token.expires_in,
        )
