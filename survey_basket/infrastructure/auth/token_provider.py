"""
Adapter: Opaque bearer token issuance.

Tokens are random URL-safe strings with a fixed lifetime.
"""

import secrets
from datetime import datetime, timedelta, timezone

from survey_basket.domain.auth.entities import AccessToken, User
from survey_basket.domain.auth.ports import TokenProvider

TOKEN_BYTES = 32


class OpaqueTokenProvider(TokenProvider):
    """Issues random bearer tokens valid for ``lifetime_minutes``."""

    def __init__(self, lifetime_minutes: int) -> None:
        self._lifetime = timedelta(minutes=lifetime_minutes)

    def issue(self, user: User) -> AccessToken:
        return AccessToken(
            token=secrets.token_urlsafe(TOKEN_BYTES),
            expires_at=datetime.now(timezone.utc) + self._lifetime,
            expires_in=int(self._lifetime.total_seconds()),
        )
