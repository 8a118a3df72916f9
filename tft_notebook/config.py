"""
Application configuration settings.
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings


APP_HOME = Path.home() / ".tft_notebook"


class Settings(BaseSettings):
    """Notebook settings.

    Built once at startup and handed to the client, image cache,
    state file and service that need it.
    """

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Game data
    GAME_DATA_URL: str = "https://raw.communitydragon.org/latest/cdragon/tft/en_us.json"
    ASSET_BASE_URL: str = "https://raw.communitydragon.org/latest/game/"
    SET_DATA_INDEX: int = 18  # set 8 stage 2
    REQUEST_TIMEOUT: float = 30.0

    # Local storage
    DATA_DIR: Path = APP_HOME / "data"
    CACHE_DIR: Path = APP_HOME / "cache"
    STATE_FILE_NAME: str = "champ_info.json"

    # Icons
    ICON_MAX_SIZE: int = 128
    PREFETCH_ICONS: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    class Config:
        env_file = ".env"
        env_prefix = "TFT_NOTEBOOK_"

    @property
    def state_path(self) -> Path:
        """Location of the persisted build state."""
        return self.DATA_DIR / self.STATE_FILE_NAME

    def ensure_dirs(self) -> None:
        """Create the data and cache directories if missing."""
        self.DATA_DIR.mkdir(parents=True, exist_ok=True)
        self.CACHE_DIR.mkdir(parents=True, exist_ok=True)


@lru_cache()
def get_settings() -> Settings:
    """Get the Settings instance for this process."""
    return Settings()
