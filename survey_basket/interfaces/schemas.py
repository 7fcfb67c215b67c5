"""
Schemas shared by every router.
"""

from pydantic import BaseModel

from survey_basket.shared.errors.problems import ProblemPayload


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str


PROBLEM_RESPONSE = {
    "model": ProblemPayload,
    "content": {"application/problem+json": {}},
}
