"""
Port interfaces (ABCs) for the auth bounded context.
"""

from abc import ABC, abstractmethod
from typing import Optional

from survey_basket.domain.auth.entities import AccessToken, User


class UserRepository(ABC):
    """Port for persisting and retrieving users."""

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Return the user with the given email (case-insensitive), or None."""
        raise NotImplementedError

    @abstractmethod
    def add(self, user: User) -> Optional[User]:
        """Persist a new user and return it with its assigned id.

        Returns None if another user already holds the email.
        """
        raise NotImplementedError


class PasswordHasher(ABC):
    """Port for one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return an encoded hash of the password."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if the password matches the encoded hash."""
        raise NotImplementedError


class TokenProvider(ABC):
    """Port for issuing bearer tokens."""

    @abstractmethod
    def issue(self, user: User) -> AccessToken:
        """Issue a new token for the user."""
        raise NotImplementedError
