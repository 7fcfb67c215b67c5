"""
Use cases: Change an existing poll.

UpdatePollUseCase
    Input: poll id, PollCommand
    Output: Result (no payload)
    Failure cases: Poll.NotFound, Poll.DuplicatedTitle.
TogglePublishStatusUseCase
    Input: poll id
    Output: Result (no payload)
    Failure cases: Poll.NotFound.
"""

import logging
from dataclasses import replace

from survey_basket.application.polls.dtos import PollCommand
from survey_basket.domain.polls.errors import PollErrors
from survey_basket.domain.polls.ports import PollRepository
from survey_basket.shared.result import Failure, Result, Success

logger = logging.getLogger(__name__)


class UpdatePollUseCase:
    """Overwrites the editable fields of a poll."""

    def __init__(self, poll_repository: PollRepository) -> None:
        self._polls = poll_repository

    def execute(self, poll_id: int, command: PollCommand) -> Result:
        """Run the update.

        The title may stay the same; it may not collide with another poll.

        Args:
            poll_id: Identifier of the poll to update.
            command: New field values.

        Returns:
            Success, or Failure with Poll.NotFound / Poll.DuplicatedTitle.
        """
        current = self._polls.get_by_id(poll_id)
        if current is None:
            logger.warning("Poll not found: id=%d", poll_id)
            return Failure(PollErrors.NOT_FOUND)

        same_title = self._polls.get_by_title(command.title)
        if same_title is not None and same_title.id != poll_id:
            logger.warning("Duplicated poll title: %r", command.title)
            return Failure(PollErrors.DUPLICATED_TITLE)

        stored = self._polls.update(
            replace(
                current,
                title=command.title,
                summary=command.summary,
                starts_at=command.starts_at,
                ends_at=command.ends_at,
            )
        )
        if not stored:
            logger.warning("Duplicated poll title on update: %r", command.title)
            return Failure(PollErrors.DUPLICATED_TITLE)

        logger.info("Updated poll id=%d", poll_id)
        return Success()


class TogglePublishStatusUseCase:
    """Publishes an unpublished poll, or unpublishes a published one."""

    def __init__(self, poll_repository: PollRepository) -> None:
        self._polls = poll_repository

    def execute(self, poll_id: int) -> Result:
        current = self._polls.get_by_id(poll_id)
        if current is None:
            logger.warning("Poll not found: id=%d", poll_id)
            return Failure(PollErrors.NOT_FOUND)

        toggled = current.toggled()
        self._polls.update(toggled)
        logger.info("Poll id=%d published=%s", poll_id, toggled.is_published)
        return Success()
