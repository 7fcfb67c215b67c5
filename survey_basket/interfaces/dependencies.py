"""
Shared dependency providers.

The engine is built once per process from settings. Tests replace it
through ``app.dependency_overrides[get_engine]``.
"""

from functools import lru_cache

from sqlalchemy.engine import Engine

from survey_basket.core.config import settings
from survey_basket.infrastructure.database import build_engine


@lru_cache
def get_engine() -> Engine:
    """Return the process-wide SQLAlchemy engine."""
    return build_engine(settings.database_url)
