from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PKG_DIR = Path(__file__).resolve().parent
ENV_PATH = PKG_DIR / ".env"

FALLBACK_IMAGE_URL = (
    "https://images.unsplash.com/photo-1493225457124-a3eb161ffa5f"
    "?w=400&h=300&fit=crop"
)


class Settings(BaseSettings):
    # App
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    # Discovery
    discovery_url: str = Field(
        "https://app.ticketmaster.com/discovery/v2/events.json",
        validation_alias="DISCOVERY_URL",
    )
    default_city: str = Field("New York", validation_alias="DEFAULT_CITY")
    state_code: str | None = Field(default=None, validation_alias="STATE_CODE")
    browse_size: int = 50
    search_size: int = 20
    strict_music_filter: bool = Field(
        False, validation_alias="STRICT_MUSIC_FILTER"
    )
    fallback_image_url: str = FALLBACK_IMAGE_URL

    # Credential (seeds the local store when it is still empty)
    ticketmaster_api_key: str | None = Field(
        default=None, validation_alias="TICKETMASTER_API_KEY"
    )
    credential_db_path: Path = Field(
        PKG_DIR / "concert_finder.db", validation_alias="CREDENTIAL_DB_PATH"
    )

    # HTTP client
    http_timeout_seconds: float = Field(
        15.0, validation_alias="HTTP_TIMEOUT_SECONDS"
    )
    http_max_retries: int = Field(
        0, validation_alias="HTTP_MAX_RETRIES"
    )

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
