"""
FastAPI router for the polls bounded context.

All routes delegate to use cases. Successful results are returned as the
bare payload; failed results become problem responses.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Request, Response, status

from survey_basket.application.polls.add_poll import AddPollUseCase
from survey_basket.application.polls.delete_poll import DeletePollUseCase
from survey_basket.application.polls.dtos import PollCommand, PollResult
from survey_basket.application.polls.get_polls import (
    GetAllPollsUseCase,
    GetPollUseCase,
)
from survey_basket.application.polls.update_poll import (
    TogglePublishStatusUseCase,
    UpdatePollUseCase,
)
from survey_basket.domain.polls.errors import PollErrors
from survey_basket.interfaces.polls.dependencies import (
    get_add_poll_use_case,
    get_all_polls_use_case,
    get_delete_poll_use_case,
    get_poll_use_case,
    get_toggle_publish_use_case,
    get_update_poll_use_case,
)
from survey_basket.interfaces.polls.schemas import PollRequest, PollResponse
from survey_basket.interfaces.schemas import PROBLEM_RESPONSE
from survey_basket.shared.errors.handlers import problem_response
from survey_basket.shared.result import Result

router = APIRouter(prefix="/polls", tags=["polls"])

POLL_ERROR_STATUS = {
    PollErrors.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    PollErrors.DUPLICATED_TITLE: status.HTTP_409_CONFLICT,
}


def _failure(result: Result) -> Response:
    return problem_response(result, POLL_ERROR_STATUS[result.error])


def _to_response(poll: PollResult) -> PollResponse:
    return PollResponse(**asdict(poll))


def _to_command(body: PollRequest) -> PollCommand:
    return PollCommand(
        title=body.title,
        summary=body.summary,
        starts_at=body.starts_at,
        ends_at=body.ends_at,
    )


@router.get(
    "",
    response_model=list[PollResponse],
    summary="List polls",
)
def list_polls(
    use_case: GetAllPollsUseCase = Depends(get_all_polls_use_case),
) -> list[PollResponse]:
    """Return every poll."""
    return [_to_response(poll) for poll in use_case.execute()]


@router.get(
    "/{poll_id}",
    response_model=PollResponse,
    responses={404: PROBLEM_RESPONSE},
    summary="Get a poll",
)
def get_poll(
    poll_id: int,
    use_case: GetPollUseCase = Depends(get_poll_use_case),
):
    """Return a single poll by id."""
    result = use_case.execute(poll_id)
    if result.is_failure:
        return _failure(result)
    return _to_response(result.value)


@router.post(
    "",
    response_model=PollResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: PROBLEM_RESPONSE},
    summary="Create a poll",
)
def add_poll(
    request: Request,
    body: PollRequest,
    response: Response,
    use_case: AddPollUseCase = Depends(get_add_poll_use_case),
):
    """Create an unpublished poll."""
    result = use_case.execute(_to_command(body))
    if result.is_failure:
        return _failure(result)
    response.headers["Location"] = str(
        request.url_for("get_poll", poll_id=result.value.id)
    )
    return _to_response(result.value)


@router.put(
    "/{poll_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: PROBLEM_RESPONSE, 409: PROBLEM_RESPONSE},
    summary="Update a poll",
)
def update_poll(
    poll_id: int,
    body: PollRequest,
    use_case: UpdatePollUseCase = Depends(get_update_poll_use_case),
) -> Response:
    """Replace the editable fields of a poll."""
    result = use_case.execute(poll_id, _to_command(body))
    if result.is_failure:
        return _failure(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{poll_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: PROBLEM_RESPONSE},
    summary="Delete a poll",
)
def delete_poll(
    poll_id: int,
    use_case: DeletePollUseCase = Depends(get_delete_poll_use_case),
) -> Response:
    """Delete a poll."""
    result = use_case.execute(poll_id)
    if result.is_failure:
        return _failure(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{poll_id}/toggle-publish",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: PROBLEM_RESPONSE},
    summary="Publish or unpublish a poll",
)
def toggle_publish(
    poll_id: int,
    use_case: TogglePublishStatusUseCase = Depends(get_toggle_publish_use_case),
) -> Response:
    """Flip the publish flag of a poll."""
    result = use_case.execute(poll_id)
    if result.is_failure:
        return _failure(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
