"""
Pydantic schemas for auth API request/response validation.
"""

from pydantic import BaseModel, Field

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
PASSWORD_MIN_LEN = 8


class LoginRequest(BaseModel):
    """Request schema for the token endpoint."""

    email: str = Field(..., max_length=256, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    """Request schema for the registration endpoint."""

    email: str = Field(..., max_length=256, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=128)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)


class AuthResponse(BaseModel):
    """Response schema for an authenticated user."""

    id: int
    email: str
    first_name: str
    last_name: str
    token: str
    expires_in: int
