import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # nba.com endpoints
    category_url: str = Field(
        "https://www.nba.com/news/category/power-rankings",
        description="Power rankings category page listing the latest articles.",
    )
    article_url_template: str = Field(
        "https://www.nba.com/news/{slug}",
        description="Article URL, formatted with the article slug.",
    )
    schedule_url: str = Field(
        "https://cdn.nba.com/static/json/staticData/scheduleLeagueV2.json",
        description="Static league schedule JSON feed.",
    )

    # HTTP Configuration
    user_agent: str = Field(
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/126.0.0.0 Safari/537.36",
        description="Browser User-Agent sent with every request.",
    )
    accept_language: str = Field("en-US,en;q=0.9")
    request_timeout: float = Field(
        30.0, gt=0, description="Per-request timeout in seconds."
    )

    # Report Configuration
    top_teams: int = Field(4, ge=1, description="Number of ranked teams to report.")
    days_ahead: int = Field(
        7, ge=1, description="Length of the upcoming games window in days."
    )

    # Logging Configuration
    log_level: str = Field(
        "WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_prefix="POWER_REPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


def load_settings() -> AppSettings:
    """Loads and validates application settings."""
    try:
        settings = AppSettings()
    except Exception as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")

    log_level_upper = settings.log_level.upper()
    # Validate log_level even if loaded from .env
    if log_level_upper not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
        logging.warning(
            f"Invalid LOG_LEVEL '{settings.log_level}' found in .env or default. Using INFO."
        )
        settings.log_level = "INFO"
    else:
        settings.log_level = log_level_upper
    return settings


settings: AppSettings = load_settings()
