import os
from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_database_url() -> str:
    """Get database URL, using absolute path for SQLite to avoid path resolution issues.

    ⚠️ WARNING: SQLite is for local development only. Point DATABASE_URL at the
    hosted PostgreSQL instance in any deployed environment.
    """
    db_url = os.getenv("DATABASE_URL", "")
    if db_url:
        logger.info("Using DATABASE_URL from environment")
        return db_url

    db_path = Path(__file__).parent.parent.parent / "summit.db"
    abs_path = db_path.resolve()
    db_url = f"sqlite:///{abs_path}"
    logger.warning(f"⚠️ Using SQLite database (LOCAL DEV ONLY): {db_url}")
    return db_url


class Settings(BaseSettings):
    database_url: str = Field(
        default_factory=get_database_url,
        validation_alias="DATABASE_URL",
    )
    # Shared secret of the hosted identity provider that signs access tokens
    auth_secret_key: str = Field(default="", validation_alias="AUTH_SECRET_KEY")
    auth_algorithm: str = Field(default="HS256", validation_alias="AUTH_ALGORITHM")
    auth_audience: str = Field(default="authenticated", validation_alias="AUTH_AUDIENCE")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="LOG_FILE")
    log_json: bool = Field(default=False, validation_alias="LOG_JSON")
    streak_window_days: int = Field(
        default=90,
        ge=1,
        validation_alias="STREAK_WINDOW_DAYS",
        description="Trailing history window used for streak calculation",
    )
    metrics_default_days: int = Field(
        default=30,
        ge=1,
        validation_alias="METRICS_DEFAULT_DAYS",
        description="Default look-back for GET /metrics without a date range",
    )
    metrics_trend_days: int = Field(
        default=7,
        ge=1,
        validation_alias="METRICS_TREND_DAYS",
        description="Look-back for the metrics trend attached to GET /today",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("auth_secret_key")
    @classmethod
    def validate_auth_secret_key(cls, value: str) -> str:
        """Warn when token verification is not configured.

        Empty values are allowed for local development and tests; every
        authenticated request will be rejected until the key is set.
        """
        if not value:
            logger.warning(
                "⚠️ AUTH_SECRET_KEY is not set. Access tokens cannot be verified and "
                "authenticated endpoints will return 401."
            )
        return value


settings = Settings()
