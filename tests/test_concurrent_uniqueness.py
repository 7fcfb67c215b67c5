"""
Tests for uniqueness races between the lookup and the write.

A request can pass the title/email check while another request commits
the same value. The unique constraint then rejects the write and the use
case must still return a Failure instead of raising.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from datetime import date

import pytest

from survey_basket.application.auth.dtos import RegisterCommand
from survey_basket.application.auth.register import RegisterUseCase
from survey_basket.application.polls.add_poll import AddPollUseCase
from survey_basket.application.polls.dtos import PollCommand
from survey_basket.application.polls.update_poll import UpdatePollUseCase
from survey_basket.domain.auth.errors import UserErrors
from survey_basket.domain.polls.errors import PollErrors
from survey_basket.infrastructure.auth.user_repository import UserRepositoryAdapter
from survey_basket.infrastructure.database import build_engine, init_db
from survey_basket.infrastructure.polls.poll_repository import PollRepositoryAdapter


def _command(title: str) -> PollCommand:
    return PollCommand(
        title=title,
        summary="Pick the language you use the most",
        starts_at=date(2030, 1, 1),
        ends_at=date(2030, 1, 31),
    )


class BarrierPollRepository(PollRepositoryAdapter):
    """Holds every caller after the title check until all have checked."""

    def __init__(self, engine, barrier: threading.Barrier) -> None:
        super().__init__(engine)
        self._barrier = barrier

    def get_by_title(self, title):
        found = super().get_by_title(title)
        self._barrier.wait(timeout=5)
        return found


class StaleTitleCheckRepository(PollRepositoryAdapter):
    """Title check that misses a poll committed by another request."""

    def get_by_title(self, title):
        return None


class StaleEmailCheckRepository(UserRepositoryAdapter):
    """Email check that misses a user committed by another request."""

    def get_by_email(self, email):
        return None


@pytest.fixture
def file_engine(tmp_path):
    """SQLite file database shared by several threads."""
    engine = build_engine(f"sqlite:///{tmp_path / 'survey_basket.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


class TestAddPollRace:
    """Two concurrent creations with the same title."""

    def test_second_insert_returns_duplicated_title(self, file_engine) -> None:
        repository = BarrierPollRepository(file_engine, threading.Barrier(2))
        use_case = AddPollUseCase(repository)

        with ThreadPoolExecutor(max_workers=2) as pool:
            futures = [pool.submit(use_case.execute, _command("Same")) for _ in range(2)]
            results = [future.result(timeout=30) for future in futures]

        assert sorted(r.is_success for r in results) == [False, True]
        failure = next(r for r in results if r.is_failure)
        assert failure.error == PollErrors.DUPLICATED_TITLE
        assert len(PollRepositoryAdapter(file_engine).list_all()) == 1

    def test_stale_check_returns_duplicated_title(self, engine) -> None:
        AddPollUseCase(PollRepositoryAdapter(engine)).execute(_command("Same"))

        result = AddPollUseCase(StaleTitleCheckRepository(engine)).execute(_command("Same"))

        assert result.is_failure
        assert result.error == PollErrors.DUPLICATED_TITLE


class TestUpdatePollRace:
    """A rename racing with a creation of the same title."""

    def test_stale_check_returns_duplicated_title(self, engine, sample_poll) -> None:
        repository = PollRepositoryAdapter(engine)
        repository.add(replace(sample_poll, title="Taken"))
        other = repository.add(replace(sample_poll, title="Other"))

        result = UpdatePollUseCase(StaleTitleCheckRepository(engine)).execute(
            other.id, _command("Taken")
        )

        assert result.error == PollErrors.DUPLICATED_TITLE
        assert repository.get_by_id(other.id).title == "Other"


class TestRegisterRace:
    """A registration racing with another one for the same email."""

    def test_stale_check_returns_duplicated_email(
        self, engine, password_hasher, token_provider
    ) -> None:
        command = RegisterCommand("ada@example.com", "correct-horse", "Ada", "Lovelace")
        RegisterUseCase(
            UserRepositoryAdapter(engine), password_hasher, token_provider
        ).execute(command)

        result = RegisterUseCase(
            StaleEmailCheckRepository(engine), password_hasher, token_provider
        ).execute(command)

        assert result.is_failure
        assert result.error == UserErrors.DUPLICATED_EMAIL

