"""
Use case: Exchange credentials for a bearer token.

Input: GetTokenCommand
Output: Result[AuthResult]
Side effects: None besides token issuance.
Failure cases: User.InvalidCredentials (unknown email or wrong password).
"""

import logging

from survey_basket.application.auth.dtos import AuthResult, GetTokenCommand
from survey_basket.domain.auth.errors import UserErrors
from survey_basket.domain.auth.ports import (
    PasswordHasher,
    TokenProvider,
    UserRepository,
)
from survey_basket.shared.result import Failure, Result, Success

logger = logging.getLogger(__name__)


class GetTokenUseCase:
    """Validates credentials and issues a token.

    Unknown emails and wrong passwords produce the same error so that
    callers cannot probe which accounts exist.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_provider: TokenProvider,
    ) -> None:
        self._users = user_repository
        self._hasher = password_hasher
        self._tokens = token_provider

    def execute(self, command: GetTokenCommand) -> Result[AuthResult]:
        user = self._users.get_by_email(command.email)
        if user is None or not self._hasher.verify(command.password, user.password_hash):
            logger.warning("Rejected credentials for a login attempt")
            return Failure(UserErrors.INVALID_CREDENTIALS)

        logger.info("Issued token for user id=%d", user.id)
        return Success(AuthResult.issued(user, self._tokens.issue(user)))
