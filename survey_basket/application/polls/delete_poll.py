"""
Use case: Delete a poll.

Input: poll id
Output: Result (no payload)
Failure cases: Poll.NotFound.
"""

import logging

from survey_basket.domain.polls.errors import PollErrors
from survey_basket.domain.polls.ports import PollRepository
from survey_basket.shared.result import Failure, Result, Success

logger = logging.getLogger(__name__)


class DeletePollUseCase:
    """Removes a poll by id."""

    def __init__(self, poll_repository: PollRepository) -> None:
        self._polls = poll_repository

    def execute(self, poll_id: int) -> Result:
        if self._polls.get_by_id(poll_id) is None:
            logger.warning("Poll not found: id=%d", poll_id)
            return Failure(PollErrors.NOT_FOUND)

        self._polls.delete(poll_id)
        logger.info("Deleted poll id=%d", poll_id)
        return Success()
