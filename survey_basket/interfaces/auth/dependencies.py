"""
Dependency injection for the auth bounded context.
"""

from fastapi import Depends
from sqlalchemy.engine import Engine

from survey_basket.application.auth.get_token import GetTokenUseCase
from survey_basket.application.auth.register import RegisterUseCase
from survey_basket.core.config import settings
from survey_basket.infrastructure.auth.password_hasher import Pbkdf2PasswordHasher
from survey_basket.infrastructure.auth.token_provider import OpaqueTokenProvider
from survey_basket.infrastructure.auth.user_repository import UserRepositoryAdapter
from survey_basket.interfaces.dependencies import get_engine


def get_token_use_case(engine: Engine = Depends(get_engine)) -> GetTokenUseCase:
    """Build GetTokenUseCase with its infrastructure dependencies."""
    return GetTokenUseCase(
        user_repository=UserRepositoryAdapter(engine=engine),
        password_hasher=Pbkdf2PasswordHasher(),
        token_provider=OpaqueTokenProvider(settings.token_lifetime_minutes),
    )


def get_register_use_case(engine: Engine = Depends(get_engine)) -> RegisterUseCase:
    """Build RegisterUseCase with its infrastructure dependencies."""
    return RegisterUseCase(
        user_repository=UserRepositoryAdapter(engine=engine),
        password_hasher=Pbkdf2PasswordHasher(),
        token_provider=OpaqueTokenProvider(settings.token_lifetime_minutes),
    )
