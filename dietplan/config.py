# dietplan/config.py
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MODEL = "gpt-4o"
DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:3000"


def get_env(key: str, fallback: str = "") -> str:
    """Read an environment variable, treating an empty value as missing."""
    return os.getenv(key) or fallback


def get_diet_api_key() -> str:
    return get_env("DIET_API_KEY", get_env("OPENAI_API_KEY"))


def is_diet_api_configured() -> bool:
    return bool(get_diet_api_key())


@dataclass
class DietApiSettings:
    """Settings for the diet plan text-generation API.

    The credential is read when the settings are built, so callers that
    construct settings per request always see the current environment.
    """
    api_key: str = ""
    model: str = DEFAULT_MODEL
    base_url: Optional[str] = None
    temperature: float = 0.7
    max_tokens: int = 4000
    mock_delay_seconds: float = 1.0

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls) -> "DietApiSettings":
        return cls(
            api_key=get_diet_api_key(),
            model=get_env("DIET_API_MODEL", DEFAULT_MODEL),
            base_url=get_env("DIET_API_BASE_URL") or None,
            temperature=float(get_env("DIET_API_TEMPERATURE", "0.7")),
            max_tokens=int(get_env("DIET_API_MAX_TOKENS", "4000")),
            mock_delay_seconds=float(get_env("DIET_MOCK_DELAY_SECONDS", "1.0")),
        )


@dataclass
class RedisSettings:
    host: str = field(default_factory=lambda: get_env("REDIS_HOST", "localhost"))
    port: int = field(default_factory=lambda: int(get_env("REDIS_PORT", "6379")))
    db: int = field(default_factory=lambda: int(get_env("REDIS_DB", "0")))


def get_settings() -> DietApiSettings:
    return DietApiSettings.from_env()


def get_cors_origins() -> List[str]:
    raw = get_env("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [o.strip() for o in raw.split(",") if o.strip()]
