"""
Domain entities for the auth bounded context.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class User:
    """A registered API user.

    Attributes:
        id: Storage identifier. Zero for users that are not persisted yet.
        email: Login email, stored lower-cased.
        first_name: Given name.
        last_name: Family name.
        password_hash: Encoded password hash, never the password itself.
    """

    id: int
    email: str
    first_name: str
    last_name: str
    password_hash: str


@dataclass(frozen=True)
class AccessToken:
    """A bearer token issued to a user."""

    token: str
    expires_at: datetime
    expires_in: int
