# services/api/settings.py
from pydantic_settings import BaseSettings
from pydantic import ConfigDict, Field
from typing import List
from pathlib import Path

class Settings(BaseSettings):
    # ---- Box drawing ----
    # A finished drag no larger than this (in surface pixels) on both axes is
    # treated as a click.
    cancel_threshold_px: float = Field(default=2.0, ge=0)

    # Side (in surface pixels) of the default box a click snaps to.
    click_snap_side_px: float = Field(default=100.0, gt=0)

    # ---- Session store ----
    # Gestures and shapes live in memory per process; idle entries expire.
    session_max_items: int = Field(default=1000, ge=1)
    session_ttl_seconds: int = Field(default=3600, ge=1)

    # Logging
    log_level: str = "INFO"

    # CORS settings
    allowed_origins: str = "http://localhost:3000,http://localhost:3001,http://localhost:8000"

    model_config = ConfigDict(
        # Always load .env from the same folder as this settings.py
        env_file=str(Path(__file__).resolve().parent / ".env"),
        extra="ignore",
    )

    def get_origins_list(self) -> List[str]:
        """Parse comma-separated origins into a list."""
        if not self.allowed_origins:
            return ["*"]
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


_settings_instance = None

def get_settings() -> Settings:
    """Singleton pattern for settings."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
