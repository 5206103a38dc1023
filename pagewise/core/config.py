from dataclasses import dataclass
from functools import lru_cache
from typing import Any, List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MIN_SIZE = 10
DEFAULT_MAX_SIZE = 50


def effective_max_size(max_size: int) -> int:
    """Configured maximum page size; 0 or less means DEFAULT_MAX_SIZE."""
    return max_size if max_size > 0 else DEFAULT_MAX_SIZE


_DEFAULT_CORS = ["http://localhost:3000", "http://localhost:5173"]


def _parse_cors_origins(v: Any) -> List[str]:
    if v is None or v == "":
        return _DEFAULT_CORS.copy()
    if isinstance(v, list):
        return [x for x in v if isinstance(x, str) and x.strip()]
    s = str(v).strip()
    if not s:
        return _DEFAULT_CORS.copy()
    if s.startswith("["):
        import json
        try:
            out = json.loads(s)
        except ValueError:
            return _DEFAULT_CORS.copy()
        return [x for x in out if isinstance(x, str) and x.strip()] or _DEFAULT_CORS.copy()
    return [x.strip() for x in s.split(",") if x.strip()] or _DEFAULT_CORS.copy()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    env: str = Field(default="development", description="ENV")
    debug: bool = Field(default=False, description="DEBUG")

    # Pagination (max 0 = fall back to DEFAULT_MAX_SIZE)
    pagination_min_size: int = Field(default=DEFAULT_MIN_SIZE, alias="PAGINATION_MIN_SIZE")
    pagination_max_size: int = Field(default=DEFAULT_MAX_SIZE, alias="PAGINATION_MAX_SIZE")

    # Sentry
    sentry_dsn: str | None = Field(default=None, alias="SENTRY_DSN")

    # CORS: env as string, exposed as list
    cors_origins_raw: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        alias="CORS_ORIGINS",
        description="Comma-separated or JSON list",
    )

    @property
    def cors_origins(self) -> List[str]:
        return _parse_cors_origins(getattr(self, "cors_origins_raw", None))


@lru_cache
def get_settings() -> Settings:
    return Settings()


@dataclass(frozen=True)
class PaginationConfig:
    """Page size bounds handed to the normalizer and the paginator."""

    min_size: int = DEFAULT_MIN_SIZE
    max_size: int = DEFAULT_MAX_SIZE

    @property
    def effective_max_size(self) -> int:
        return effective_max_size(self.max_size)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "PaginationConfig":
        settings = settings or get_settings()
        return cls(
            min_size=settings.pagination_min_size,
            max_size=settings.pagination_max_size,
        )
