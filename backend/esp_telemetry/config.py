"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default and an APP_-prefixed environment variable
    - Environment variables override command-line flags, which override defaults
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Flags enter as init kwargs; settings_customise_sources puts env ahead of them
    - database_url, when set, wins over the discrete db_* parts
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import (
    BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict,
)
from sqlalchemy.engine import URL, make_url

DEFAULT_INDEX_HTML = Path(__file__).parent / "static" / "index.html"
APPLICATION_NAME = "esp8266-web"


class Settings(BaseSettings):
    """Application settings from flags and environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="APP_", env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Server
    host: str = "127.0.0.1"
    port: int = 8080

    # Database
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "user"
    db_pass: str = ""
    db_name: str = "dbname"
    database_url: str | None = None

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Plain postgresql:// URLs are rewritten to the asyncpg driver."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v or None

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Auth
    secret_key: str = ""

    # Static assets
    index_html_path: Path = DEFAULT_INDEX_HTML

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, dotenv_settings, init_settings, file_secret_settings

    @property
    def sqlalchemy_url(self) -> URL:
        if self.database_url:
            return make_url(self.database_url)
        return URL.create(
            drivername="postgresql+asyncpg",
            username=self.db_user,
            password=self.db_pass,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    @property
    def engine_connect_args(self) -> dict:
        """Driver connect args; tags asyncpg connections with the application name."""
        if self.sqlalchemy_url.drivername == "postgresql+asyncpg":
            return {"server_settings": {"application_name": APPLICATION_NAME}}
        return {}


@lru_cache
def get_settings() -> Settings:
    return Settings()
