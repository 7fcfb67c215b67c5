"""
Data Transfer Objects for the polls application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import date

from survey_basket.domain.polls.entities import Poll


@dataclass(frozen=True)
class PollCommand:
    """Input DTO for creating or updating a poll.

    Attributes:
        title: Unique poll title.
        summary: Short description.
        starts_at: First day of the poll.
        ends_at: Last day of the poll.
    """

    title: str
    summary: str
    starts_at: date
    ends_at: date


@dataclass(frozen=True)
class PollResult:
    """Output DTO for a single poll."""

    id: int
    title: str
    summary: str
    is_published: bool
    starts_at: date
    ends_at: date

    @classmethod
    def from_entity(cls, poll: Poll) -> "PollResult":
        return cls(
            id=poll.id,
            title=poll.title,
            summary=poll.summary,
            is_published=poll.is_published,
            starts_at=poll.starts_at,
            ends_at=poll.ends_at,
        )
