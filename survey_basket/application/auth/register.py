"""
Use case: Register a user account.

Input: RegisterCommand
Output: Result[AuthResult]
Side effects: Persists a new user with a hashed password.
Failure cases: User.DuplicatedEmail.
"""

import logging

from survey_basket.application.auth.dtos import AuthResult, RegisterCommand
from survey_basket.domain.auth.entities import User
from survey_basket.domain.auth.errors import UserErrors
from survey_basket.domain.auth.ports import (
    PasswordHasher,
    TokenProvider,
    UserRepository,
)
from survey_basket.shared.result import Failure, Result, Success

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """Creates a user and signs them in."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_provider: TokenProvider,
    ) -> None:
        self._users = user_repository
        self._hasher = password_hasher
        self._tokens = token_provider

    def execute(self, command: RegisterCommand) -> Result[AuthResult]:
        email = command.email.strip().lower()
        if self._users.get_by_email(email) is not None:
            logger.warning("Registration rejected: email already in use")
            return Failure(UserErrors.DUPLICATED_EMAIL)

        user = self._users.add(
            User(
                id=0,
                email=email,
                first_name=command.first_name,
                last_name=command.last_name,
                password_hash=self._hasher.hash(command.password),
            )
        )
        if user is None:
            logger.warning("Registration rejected: email taken concurrently")
            return Failure(UserErrors.DUPLICATED_EMAIL)

        logger.info("Registered user id=%d", user.id)
        return Success(AuthResult.issued(user, self._tokens.issue(user)))
