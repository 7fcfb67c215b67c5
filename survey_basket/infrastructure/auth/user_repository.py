"""
Adapter: User persistence.

Implements the UserRepository port on top of the users table.
"""

from dataclasses import replace
from typing import Optional

from sqlalchemy import func, insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from survey_basket.domain.auth.entities import User
from survey_basket.domain.auth.ports import UserRepository
from survey_basket.infrastructure.database import users


class UserRepositoryAdapter(UserRepository):
    """SQLAlchemy Core implementation of the user repository."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_by_email(self, email: str) -> Optional[User]:
        query = select(users).where(func.lower(users.c.email) == email.strip().lower())
        with self._engine.connect() as conn:
            row = conn.execute(query).first()
        if row is None:
            return None
        return User(
            id=row.id,
            email=row.email,
            first_name=row.first_name,
            last_name=row.last_name,
            password_hash=row.password_hash,
        )

    def add(self, user: User) -> Optional[User]:
        try:
            with self._engine.begin() as conn:
                result = conn.execute(
                    insert(users).values(
                        email=user.email,
                        first_name=user.first_name,
                        last_name=user.last_name,
                        password_hash=user.password_hash,
                    )
                )
        except IntegrityError:
            return None
        return replace(user, id=result.inserted_primary_key[0])
