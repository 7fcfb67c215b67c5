"""
Pydantic schemas for poll API request/response validation.

Violations are reported by the centralized validation handler, one
problem entry per field rule.
"""

from datetime import date

from pydantic import BaseModel, Field, ValidationInfo, field_validator

TITLE_MAX_LEN = 100
SUMMARY_MAX_LEN = 1500


class PollRequest(BaseModel):
    """Request schema for creating or updating a poll.

    Attributes:
        title: Poll title (1-100 chars).
        summary: Poll summary (1-1500 chars).
        starts_at: First day of the poll, today or later.
        ends_at: Last day of the poll, not before starts_at.
    """

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LEN)
    summary: str = Field(..., min_length=1, max_length=SUMMARY_MAX_LEN)
    starts_at: date
    ends_at: date

    @field_validator("starts_at")
    @classmethod
    def starts_today_or_later(cls, starts_at: date) -> date:
        if starts_at < date.today():
            raise ValueError("must be today or later")
        return starts_at

    @field_validator("ends_at")
    @classmethod
    def ends_on_or_after_start(cls, ends_at: date, info: ValidationInfo) -> date:
        starts_at = info.data.get("starts_at")
        if starts_at is not None and ends_at < starts_at:
            raise ValueError("must be on or after starts_at")
        return ends_at


class PollResponse(BaseModel):
    """Response schema for a single poll."""

    id: int
    title: str
    summary: str
    is_published: bool
    starts_at: date
    ends_at: date
