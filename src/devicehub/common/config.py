"""DeviceHub configuration via pydantic-settings."""

import warnings
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class DeviceHubSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DEVICEHUB_", env_file=".env", extra="ignore"
    )

    environment: str = "development"
    log_level: str = "INFO"

    # Database: db_url wins over the discrete fields when set,
    # e.g. "sqlite+aiosqlite:///./data/devicehub.db" for local runs.
    db_url: str = ""
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = ""
    db_name: str = "devicehub"

    # Connection pool
    db_pool_max: int = 10
    db_pool_min: int = 0
    db_pool_idle_ms: int = 10000
    db_pool_acquire_ms: int = 30000
    db_pool_evict_ms: int = 1000

    # API
    api_title: str = "DeviceHub"
    api_version: str = "0.1.0"
    host: str = "0.0.0.0"
    port: int = 3000
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def database_url(self) -> str:
        """Return the SQLAlchemy URL, built from discrete fields unless db_url is set."""
        if self.db_url:
            return self.db_url
        url = URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)

    def validate_for_production(self) -> None:
        """Raise on unusable production settings, warn on risky ones."""
        if self.is_production and not self.db_url and not self.db_password:
            raise RuntimeError(
                "No database password configured for the 'production' environment. "
                "Set DEVICEHUB_DB_PASSWORD or provide a full DEVICEHUB_DB_URL."
            )

        if self.db_pool_min > self.db_pool_max:
            raise RuntimeError(
                f"DEVICEHUB_DB_POOL_MIN ({self.db_pool_min}) exceeds "
                f"DEVICEHUB_DB_POOL_MAX ({self.db_pool_max})"
            )

        if self.is_production and "*" in self.cors_origins:
            warnings.warn(
                "CORS allows any origin; set DEVICEHUB_CORS_ORIGINS for production",
                UserWarning,
                stacklevel=2,
            )


@lru_cache
def get_settings() -> DeviceHubSettings:
    settings = DeviceHubSettings()
    settings.validate_for_production()
    return settings
