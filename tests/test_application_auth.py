"""
Tests for the auth application layer (use cases).

Use cases run against in-memory ports with a reversible hasher.
"""

import pytest

from survey_basket.application.auth.dtos import (
    AuthResult,
    GetTokenCommand,
    RegisterCommand,
)
from survey_basket.application.auth.get_token import GetTokenUseCase
from survey_basket.application.auth.register import RegisterUseCase
from survey_basket.domain.auth.entities import User
from survey_basket.domain.auth.errors import UserErrors


@pytest.fixture
def registered_user(user_repository, password_hasher) -> User:
    return user_repository.add(
        User(
            id=0,
            email="ada@example.com",
            first_name="Ada",
            last_name="Lovelace",
            password_hash=password_hasher.hash("correct-horse"),
        )
    )


@pytest.fixture
def get_token(user_repository, password_hasher, token_provider) -> GetTokenUseCase:
    return GetTokenUseCase(user_repository, password_hasher, token_provider)


@pytest.fixture
def register(user_repository, password_hasher, token_provider) -> RegisterUseCase:
    return RegisterUseCase(user_repository, password_hasher, token_provider)


class TestGetTokenUseCase:
    """Tests for GetTokenUseCase."""

    def test_valid_credentials_issue_token(self, get_token, registered_user) -> None:
        result = get_token.execute(GetTokenCommand("ada@example.com", "correct-horse"))

        assert result.is_success
        assert result.value == AuthResult(
            id=registered_user.id,
            email="ada@example.com",
            first_name="Ada",
            last_name="Lovelace",
            token=f"token-{registered_user.id}",
            expires_in=1800,
        )

    def test_email_lookup_ignores_case(self, get_token, registered_user) -> None:
        result = get_token.execute(GetTokenCommand("ADA@Example.com", "correct-horse"))

        assert result.is_success

    def test_wrong_password_fails(self, get_token, registered_user) -> None:
        result = get_token.execute(GetTokenCommand("ada@example.com", "wrong"))

        assert result.is_failure
        assert result.error == UserErrors.INVALID_CREDENTIALS

    def test_unknown_email_fails_with_same_error(self, get_token, registered_user) -> None:
        result = get_token.execute(GetTokenCommand("bob@example.com", "correct-horse"))

        assert result.error == UserErrors.INVALID_CREDENTIALS


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    def test_register_stores_hashed_password(self, register, user_repository) -> None:
        result = register.execute(
            RegisterCommand("Grace@Example.com", "s3cret-pass", "Grace", "Hopper")
        )

        assert result.is_success
        assert result.value.email == "grace@example.com"
        stored = user_repository.get_by_email("grace@example.com")
        assert stored.password_hash == "plain$s3cret-pass"

    def test_registered_user_can_log_in(self, register, get_token) -> None:
        register.execute(RegisterCommand("grace@example.com", "s3cret-pass", "Grace", "Hopper"))

        result = get_token.execute(GetTokenCommand("grace@example.com", "s3cret-pass"))

        assert result.is_success

    def test_duplicated_email_fails(self, register, registered_user, user_repository) -> None:
        result = register.execute(
            RegisterCommand("ADA@example.com", "another-pass", "Ada", "Byron")
        )

        assert result.error == UserErrors.DUPLICATED_EMAIL
        assert len(user_repository.users) == 1
