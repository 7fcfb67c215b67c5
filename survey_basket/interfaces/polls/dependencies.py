"""
Dependency injection for the polls bounded context.

Wires the SQLAlchemy adapter into use cases via constructor injection.
"""

from fastapi import Depends
from sqlalchemy.engine import Engine

from survey_basket.application.polls.add_poll import AddPollUseCase
from survey_basket.application.polls.delete_poll import DeletePollUseCase
from survey_basket.application.polls.get_polls import (
    GetAllPollsUseCase,
    GetPollUseCase,
)
from survey_basket.application.polls.update_poll import (
    TogglePublishStatusUseCase,
    UpdatePollUseCase,
)
from survey_basket.domain.polls.ports import PollRepository
from survey_basket.infrastructure.polls.poll_repository import PollRepositoryAdapter
from survey_basket.interfaces.dependencies import get_engine


def get_poll_repository(engine: Engine = Depends(get_engine)) -> PollRepository:
    return PollRepositoryAdapter(engine=engine)


def get_all_polls_use_case(
    polls: PollRepository = Depends(get_poll_repository),
) -> GetAllPollsUseCase:
    return GetAllPollsUseCase(poll_repository=polls)


def get_poll_use_case(
    polls: PollRepository = Depends(get_poll_repository),
) -> GetPollUseCase:
    return GetPollUseCase(poll_repository=polls)


def get_add_poll_use_case(
    polls: PollRepository = Depends(get_poll_repository),
) -> AddPollUseCase:
    return AddPollUseCase(poll_repository=polls)


def get_update_poll_use_case(
    polls: PollRepository = Depends(get_poll_repository),
) -> UpdatePollUseCase:
    return UpdatePollUseCase(poll_repository=polls)


def get_delete_poll_use_case(
    polls: PollRepository = Depends(get_poll_repository),
) -> DeletePollUseCase:
    return DeletePollUseCase(poll_repository=polls)


def get_toggle_publish_use_case(
    polls: PollRepository = Depends(get_poll_repository),
) -> TogglePublishStatusUseCase:
    return TogglePublishStatusUseCase(poll_repository=polls)
