"""
Adapter: PBKDF2 password hashing.

Hashes are encoded as ``pbkdf2_sha256$<iterations>$<salt>$<digest>``.
"""

import hashlib
import hmac
import secrets

from survey_basket.domain.auth.ports import PasswordHasher

ALGORITHM = "pbkdf2_sha256"
ITERATIONS = 260_000
SALT_BYTES = 16


class Pbkdf2PasswordHasher(PasswordHasher):
    """PasswordHasher backed by hashlib.pbkdf2_hmac."""

    def __init__(self, iterations: int = ITERATIONS) -> None:
        self._iterations = iterations

    def hash(self, password: str) -> str:
        salt = secrets.token_hex(SALT_BYTES)
        digest = self._digest(password, salt, self._iterations)
        return f"{ALGORITHM}${self._iterations}${salt}${digest}"

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            algorithm, iterations, salt, digest = password_hash.split("$")
            rounds = int(iterations)
        except ValueError:
            return False
        if algorithm != ALGORITHM or rounds < 1:
            return False
        candidate = self._digest(password, salt, rounds)
        return hmac.compare_digest(candidate, digest)

    @staticmethod
    def _digest(password: str, salt: str, iterations: int) -> str:
        return hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations
        ).hex()
