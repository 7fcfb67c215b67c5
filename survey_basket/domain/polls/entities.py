"""
Domain entities for the polls bounded context.

Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, replace
from datetime import date


@dataclass(frozen=True)
class Poll:
    """A poll that can be published for a date range.

    Attributes:
        id: Storage identifier. Zero for polls that are not persisted yet.
        title: Unique title.
        summary: Short description shown to voters.
        is_published: Whether the poll is visible to voters.
        starts_at: First day the poll accepts answers.
        ends_at: Last day the poll accepts answers.
    """

    id: int
    title: str
    summary: str
    is_published: bool
    starts_at: date
    ends_at: date

    def toggled(self) -> "Poll":
        """Return a copy with the publish flag flipped."""
        return replace(self, is_published=not self.is_published)
