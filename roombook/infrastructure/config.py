from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raise when the credentials file is missing or malformed. Fatal at startup."""


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ROOMBOOK_")

    config_path: Path = Path("config.json")
    database_url: str | None = None
    db_driver: str = "mysql+pymysql"
    db_host: str = "localhost"
    log_level: str = "WARNING"
    create_schema: bool = True

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}, expected one of {', '.join(LOG_LEVELS)}")
        return level


class DatabaseConfig(BaseModel):
    """
    Credentials read from the config file:

        {"dbUser": "...", "dbPassword": "...", "dbName": "..."}
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    db_user: str = Field(alias="dbUser")
    db_password: str = Field(alias="dbPassword")
    db_name: str = Field(alias="dbName")

    def url(self, *, driver: str, host: str) -> URL:
        return URL.create(
            driver,
            username=self.db_user,
            password=self.db_password,
            host=host,
            database=self.db_name,
        )


def load_config(path: str | Path) -> DatabaseConfig:
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Malformed config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Malformed config file {path}: expected an object")

    try:
        return DatabaseConfig.model_validate(data, strict=True)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e


def resolve_database_url(settings: Settings) -> str | URL:
    """An explicit database_url wins; otherwise build one from the credentials file."""
    if settings.database_url:
        return settings.database_url
    return load_config(settings.config_path).url(driver=settings.db_driver, host=settings.db_host)
