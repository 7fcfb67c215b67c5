"""
Port interfaces (ABCs) for the polls bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from survey_basket.domain.polls.entities import Poll


class PollRepository(ABC):
    """Port for persisting and retrieving polls."""

    @abstractmethod
    def list_all(self) -> list[Poll]:
        """Return every poll ordered by id."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, poll_id: int) -> Optional[Poll]:
        """Return the poll with the given id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def get_by_title(self, title: str) -> Optional[Poll]:
        """Return the poll with the given title, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def add(self, poll: Poll) -> Optional[Poll]:
        """Persist a new poll.

        Args:
            poll: Poll to store. Its id is ignored.

        Returns:
            The stored poll with its assigned id, or None if another poll
            already holds the title.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, poll: Poll) -> bool:
        """Overwrite the stored poll that has the same id.

        Returns:
            False if another poll already holds the title, True otherwise.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, poll_id: int) -> None:
        """Remove the poll with the given id."""
        raise NotImplementedError
