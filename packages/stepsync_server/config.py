"""Centralized configuration using Pydantic Settings

All environment variables (prefixed STEPSYNC_) are managed here.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from stepsync_core.constants.tracks import BASE_TRACK_IDS, EXTENDED_TRACK_IDS


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="STEPSYNC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 4567
    debug: bool = False

    # Built client app (index.html + assets/)
    static_dir: Path = Path("./public")

    # Sequencer Configuration
    extended_tracks: bool = False
    strict_params: bool = False

    # Session limits
    outbound_queue_size: int = Field(default=256, gt=0)
    max_frame_bytes: int = Field(default=64 * 1024, gt=0)

    # CORS
    cors_origins: list[str] = ["*"]

    @property
    def track_ids(self) -> tuple[str, ...]:
        """Tracks of the shared sequencer"""
        return EXTENDED_TRACK_IDS if self.extended_tracks else BASE_TRACK_IDS


# Global settings instance
settings = Settings()
