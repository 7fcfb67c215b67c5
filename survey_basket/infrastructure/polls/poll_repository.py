"""
Adapter: Poll persistence.

Implements the PollRepository port on top of the polls table.
Title uniqueness is enforced by the ``uix_polls_title`` constraint; a
violation is reported to the caller instead of raised.
"""

import logging
from dataclasses import replace
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from survey_basket.domain.polls.entities import Poll
from survey_basket.domain.polls.ports import PollRepository
from survey_basket.infrastructure.database import polls

logger = logging.getLogger(__name__)


def _to_entity(row) -> Poll:
    return Poll(
        id=row.id,
        title=row.title,
        summary=row.summary,
        is_published=row.is_published,
        starts_at=row.starts_at,
        ends_at=row.ends_at,
    )


class PollRepositoryAdapter(PollRepository):
    """SQLAlchemy Core implementation of the poll repository."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def list_all(self) -> list[Poll]:
        with self._engine.connect() as conn:
            rows = conn.execute(select(polls).order_by(polls.c.id)).fetchall()
        return [_to_entity(row) for row in rows]

    def get_by_id(self, poll_id: int) -> Optional[Poll]:
        with self._engine.connect() as conn:
            row = conn.execute(select(polls).where(polls.c.id == poll_id)).first()
        return _to_entity(row) if row is not None else None

    def get_by_title(self, title: str) -> Optional[Poll]:
        with self._engine.connect() as conn:
            row = conn.execute(select(polls).where(polls.c.title == title)).first()
        return _to_entity(row) if row is not None else None

    def add(self, poll: Poll) -> Optional[Poll]:
        try:
            with self._engine.begin() as conn:
                result = conn.execute(
                    insert(polls).values(
                        title=poll.title,
                        summary=poll.summary,
                        is_published=poll.is_published,
                        starts_at=poll.starts_at,
                        ends_at=poll.ends_at,
                    )
                )
        except IntegrityError:
            logger.warning("Poll insert rejected by unique title: %r", poll.title)
            return None
        poll_id = result.inserted_primary_key[0]
        logger.info("Inserted poll id=%d", poll_id)
        return replace(poll, id=poll_id)

    def update(self, poll: Poll) -> bool:
        try:
            with self._engine.begin() as conn:
                conn.execute(
                    update(polls)
                    .where(polls.c.id == poll.id)
                    .values(
                        title=poll.title,
                        summary=poll.summary,
                        is_published=poll.is_published,
                        starts_at=poll.starts_at,
                        ends_at=poll.ends_at,
                    )
                )
        except IntegrityError:
            logger.warning("Poll update rejected by unique title: %r", poll.title)
            return False
        return True

    def delete(self, poll_id: int) -> None:
        with self._engine.begin() as conn:
            conn.execute(delete(polls).where(polls.c.id == poll_id))
