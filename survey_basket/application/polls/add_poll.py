"""
Use case: Create a poll.

Input: PollCommand
Output: Result[PollResult]
Side effects: Persists a new, unpublished poll.
Failure cases: Poll.DuplicatedTitle.
"""

import logging

from survey_basket.application.polls.dtos import PollCommand, PollResult
from survey_basket.domain.polls.entities import Poll
from survey_basket.domain.polls.errors import PollErrors
from survey_basket.domain.polls.ports import PollRepository
from survey_basket.shared.result import Failure, Result, Success

logger = logging.getLogger(__name__)


class AddPollUseCase:
    """Creates a poll when its title is not already taken."""

    def __init__(self, poll_repository: PollRepository) -> None:
        self._polls = poll_repository

    def execute(self, command: PollCommand) -> Result[PollResult]:
        logger.info("Creating poll title=%r", command.title)

        if self._polls.get_by_title(command.title) is not None:
            logger.warning("Duplicated poll title: %r", command.title)
            return Failure(PollErrors.DUPLICATED_TITLE)

        poll = self._polls.add(
            Poll(
                id=0,
                title=command.title,
                summary=command.summary,
                is_published=False,
                starts_at=command.starts_at,
                ends_at=command.ends_at,
            )
        )
        if poll is None:
            logger.warning("Duplicated poll title on insert: %r", command.title)
            return Failure(PollErrors.DUPLICATED_TITLE)
        return Success(PollResult.from_entity(poll))
