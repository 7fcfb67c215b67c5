"""
Rate limiting setup.

Uses slowapi to throttle the credential endpoints. Rejections are
rendered as 429 problems by the centralized error handlers.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from survey_basket.core.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.rate_limit_enabled,
)
