from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Session and logging configuration sourced from env or .env file."""

    database_url: str = Field(
        default="sqlite+pysqlite:///:memory:",
        validation_alias="CRUDREPO_DATABASE_URL",
    )
    database_echo: bool = Field(default=False, validation_alias="CRUDREPO_DATABASE_ECHO")
    # Deferred flush by default; callers flush explicitly when they need it.
    session_autoflush: bool = Field(
        default=False, validation_alias="CRUDREPO_SESSION_AUTOFLUSH"
    )
    session_expire_on_commit: bool = Field(
        default=False, validation_alias="CRUDREPO_SESSION_EXPIRE_ON_COMMIT"
    )

    log_level: str = Field(default="INFO", validation_alias="CRUDREPO_LOG_LEVEL")
    log_directory: str = Field(default="logs", validation_alias="CRUDREPO_LOG_DIRECTORY")
    log_to_file: bool = Field(default=False, validation_alias="CRUDREPO_LOG_TO_FILE")
    log_max_bytes: int = Field(
        default=2 * 1024 * 1024, validation_alias="CRUDREPO_LOG_MAX_BYTES"
    )
    log_backup_count: int = Field(
        default=5, validation_alias="CRUDREPO_LOG_BACKUP_COUNT"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
