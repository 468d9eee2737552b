import logging
from functools import lru_cache
from os import environ
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_API_URL = "https://api.spotify.com/v1"
DEFAULT_TIMEOUT = 15.0

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _load_dotenv_once(dotenv_path: str | Path | None) -> bool:
    loaded = load_dotenv(dotenv_path)
    if loaded:
        logger.debug("Loaded environment from .env file: path=%s", dotenv_path or ".env")
    return loaded


class Settings(BaseModel):
    api_url: str = Field(DEFAULT_API_URL, description="Base URL of the Spotify Web API")
    timeout: float = Field(
        DEFAULT_TIMEOUT,
        gt=0,
        description="Seconds before a request made with the client's own connection gives up",
    )

    model_config = ConfigDict(title="Settings", extra="forbid", frozen=True)

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_env(cls, dotenv_path: str | Path | None = None) -> "Settings":
        """Build settings from SPOTIFY_API_URL and SPOTIFY_TIMEOUT.

        The .env file is read the first time it is asked for; later calls only
        look at ``os.environ``.
        """
        _load_dotenv_once(dotenv_path)
        settings = cls(
            api_url=environ.get("SPOTIFY_API_URL", DEFAULT_API_URL),
            timeout=float(environ.get("SPOTIFY_TIMEOUT", DEFAULT_TIMEOUT)),
        )
        logger.debug(
            "Settings configured: api_url=%s timeout=%ss", settings.api_url, settings.timeout
        )
        return settings
