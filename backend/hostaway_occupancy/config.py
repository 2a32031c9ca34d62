"""Application configuration using pydantic-settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hostaway_occupancy.schemas.listing import normalize_listing_id


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Hostaway Occupancy Sync"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # Hostaway API
    hostaway_account_id: str = ""
    hostaway_api_secret: str = ""
    hostaway_base_url: str = "https://api.hostaway.com/v1"
    hostaway_listing_ids: str = ""  # comma-separated
    hostaway_reservations_limit: int = Field(300, ge=1)
    hostaway_timeout_seconds: float = Field(30.0, gt=0)

    # Reporting horizon: current month + this many future months
    months_to_report: int = Field(6, ge=0)

    # Notion (publishing sink, not wired up yet)
    notion_api_key: str = ""
    notion_database_id: str = ""

    @field_validator("hostaway_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def listing_ids(self) -> list[str]:
        """Configured listing ids, trimmed and with empty entries dropped."""
        ids = []
        for raw in self.hostaway_listing_ids.split(","):
            listing_id = normalize_listing_id(raw)
            if listing_id is not None:
                ids.append(listing_id)
        return ids


settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the process-wide settings."""
    return settings
