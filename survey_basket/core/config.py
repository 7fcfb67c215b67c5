"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        database_url: SQLAlchemy URL of the polls/users database.
        token_lifetime_minutes: Lifetime of issued bearer tokens.
        rate_limit_auth: Rate limit for the credential endpoints.
        rate_limit_enabled: Turn rate limiting on or off.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "SurveyBasket"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    database_url: str = "sqlite:///./survey_basket.db"
    token_lifetime_minutes: int = 30
    rate_limit_auth: str = "10/minute"
    rate_limit_enabled: bool = True


settings = Settings()
