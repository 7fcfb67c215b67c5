"""
Domain errors for the polls bounded context.

These are values returned inside failed results, never raised.
They are mapped to HTTP problems at the interface layer.
"""

from survey_basket.shared.result import Error


class PollErrors:
    """Catalog of poll errors."""

    NOT_FOUND = Error(
        code="Poll.NotFound",
        description="No Poll Was Found With The Given Id",
    )
    DUPLICATED_TITLE = Error(
        code="Poll.DuplicatedTitle",
        description="Another poll with the same title already exists",
    )
