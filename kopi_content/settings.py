"""Application settings via Pydantic Settings."""

from functools import lru_cache
import json
from typing import Literal
from urllib.parse import urlparse

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _asyncpg_connect_args_from_url(database_url: str) -> dict[str, object]:
    """
    Compute asyncpg connect_args based on DATABASE_URL.

    Railway Postgres uses an internal hostname (e.g. postgres.railway.internal)
    that rejects SSL negotiation. In that case we must explicitly disable SSL.
    """
    host = urlparse(database_url).hostname or ""
    if host.endswith(".railway.internal"):
        return {"ssl": False, "timeout": 20}
    return {}


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Sehati Kopi Content API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Content store
    content_store: Literal["postgres", "memory", "none"] = Field(
        default="postgres",
        description="Document store backend. 'none' runs without a store (reads degrade).",
    )
    # Empty means the store is not configured (StoreUnavailable on every call).
    database_url: str = ""

    @property
    def async_database_url(self) -> str:
        """Get database URL with asyncpg driver.

        Railway provides postgresql:// but we need postgresql+asyncpg:// for async.
        """
        url = self.database_url
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url

    @property
    def asyncpg_connect_args(self) -> dict[str, object]:
        """Extra connect args for asyncpg (e.g. Railway SSL quirks)."""
        return _asyncpg_connect_args_from_url(self.async_database_url)

    @property
    def store_configured(self) -> bool:
        if self.content_store == "memory":
            return True
        if self.content_store == "postgres":
            return bool(self.database_url.strip())
        return False

    # Read cache
    cache_backend: Literal["memory", "redis"] = "memory"
    redis_url: str = "redis://localhost:6379/0"
    collection_cache_ttl_seconds: float = Field(
        default=1.0,
        ge=0.0,
        description="TTL for cached collection reads; short so editors see their own changes",
    )
    singleton_cache_ttl_seconds: float = Field(default=300.0, ge=0.0)

    store_timeout_seconds: float = Field(
        default=10.0,
        gt=0.0,
        description="Upper bound for a single store call before it fails with TransportError",
    )

    # Derived fields
    excerpt_length: int = Field(default=150, ge=10, le=2000)
    unique_slugs: bool = Field(
        default=False,
        description="Append -2, -3, ... to colliding slugs instead of accepting duplicates",
    )

    seed_on_startup: bool = False

    # CORS
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        validation_alias=AliasChoices("CORS_ORIGINS", "ALLOWED_ORIGINS"),
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v: object) -> list[str]:
        """
        Accept either:
        - JSON array string: '["https://a.com","http://localhost:3000"]'
        - Comma-separated string: "https://a.com,http://localhost:3000"
        - Already-parsed list[str]
        """
        if v is None:
            return []
        if isinstance(v, list):
            return [str(x).strip() for x in v if str(x).strip()]
        if isinstance(v, str):
            s = v.strip()
            if not s:
                return []
            if s.startswith("["):
                try:
                    parsed = json.loads(s)
                except json.JSONDecodeError:
                    # Fall back to comma split if env var isn't valid JSON.
                    parsed = s.split(",")
                if isinstance(parsed, list):
                    return [str(x).strip() for x in parsed if str(x).strip()]
                return [str(parsed).strip()]
            return [part.strip() for part in s.split(",") if part.strip()]
        return [str(v).strip()] if str(v).strip() else []


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
