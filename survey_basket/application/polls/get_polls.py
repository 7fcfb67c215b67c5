"""
Use cases: Read polls.

GetAllPollsUseCase
    Output: list[PollResult]. Never fails.
GetPollUseCase
    Input: poll id
    Output: Result[PollResult]
    Failure cases: Poll.NotFound.
"""

import logging

from survey_basket.application.polls.dtos import PollResult
from survey_basket.domain.polls.errors import PollErrors
from survey_basket.domain.polls.ports import PollRepository
from survey_basket.shared.result import Failure, Result, Success

logger = logging.getLogger(__name__)


class GetAllPollsUseCase:
    """Lists every stored poll."""

    def __init__(self, poll_repository: PollRepository) -> None:
        self._polls = poll_repository

    def execute(self) -> list[PollResult]:
        return [PollResult.from_entity(poll) for poll in self._polls.list_all()]


class GetPollUseCase:
    """Looks up a single poll by id."""

    def __init__(self, poll_repository: PollRepository) -> None:
        self._polls = poll_repository

    def execute(self, poll_id: int) -> Result[PollResult]:
        """Run the lookup.

        Args:
            poll_id: Identifier of the poll.

        Returns:
            Success with the poll, or Failure with Poll.NotFound.
        """
        poll = self._polls.get_by_id(poll_id)
        if poll is None:
            logger.warning("Poll not found: id=%d", poll_id)
            return Failure(PollErrors.NOT_FOUND)
        return Success(PollResult.from_entity(poll))
