"""
FastAPI router for the auth bounded context.

Credential endpoints are rate limited. Invalid credentials are reported
as a 400 problem; a taken email as a 409 problem.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Request, status

from survey_basket.application.auth.dtos import GetTokenCommand, RegisterCommand
from survey_basket.application.auth.get_token import GetTokenUseCase
from survey_basket.application.auth.register import RegisterUseCase
from survey_basket.core.config import settings
from survey_basket.interfaces.auth.dependencies import (
    get_register_use_case,
    get_token_use_case,
)
from survey_basket.interfaces.auth.schemas import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
)
from survey_basket.interfaces.schemas import PROBLEM_RESPONSE
from survey_basket.shared.errors.handlers import problem_response
from survey_basket.shared.security.rate_limiting import limiter

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "",
    response_model=AuthResponse,
    responses={400: PROBLEM_RESPONSE, 429: PROBLEM_RESPONSE},
    summary="Get a bearer token",
)
@limiter.limit(settings.rate_limit_auth)
def get_token(
    request: Request,
    body: LoginRequest,
    use_case: GetTokenUseCase = Depends(get_token_use_case),
):
    """Exchange email and password for a token."""
    result = use_case.execute(GetTokenCommand(email=body.email, password=body.password))
    if result.is_failure:
        return problem_response(result, status.HTTP_400_BAD_REQUEST)
    return AuthResponse(**asdict(result.value))


@router.post(
    "/register",
    response_model=AuthResponse,
    responses={409: PROBLEM_RESPONSE, 429: PROBLEM_RESPONSE},
    summary="Register a user",
)
@limiter.limit(settings.rate_limit_auth)
def register(
    request: Request,
    body: RegisterRequest,
    use_case: RegisterUseCase = Depends(get_register_use_case),
):
    """Create an account and return a token for it."""
    result = use_case.execute(
        RegisterCommand(
            email=body.email,
            password=body.password,
            first_name=body.first_name,
            last_name=body.last_name,
        )
    )
    if result.is_failure:
        return problem_response(result, status.HTTP_409_CONFLICT)
    return AuthResponse(**asdict(result.value))
