"""
Process settings loaded from the local .env file
"""

from __future__ import annotations
from pathlib import Path
from typing import Literal, Union

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from config_paths import ENV_FILE

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class ConfigurationError(Exception):
    """Raised when the .env file or one of its values is unusable."""


class Settings(BaseSettings):
    """Server settings read from the environment and the .env file"""

    model_config = SettingsConfigDict(env_file=None, extra="ignore", frozen=True)

    SERVER_PORT: int = Field(gt=0, lt=65536)
    LOG_LEVEL: LogLevel = "INFO"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalise_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def host(self) -> str:
        return f"localhost:{self.SERVER_PORT}"


def load_settings(env_file: Union[str, Path] = ENV_FILE) -> Settings:
    env_file = Path(env_file)
    if not env_file.is_file():
        raise ConfigurationError(f"Error loading {env_file}: file not found")

    try:
        return Settings(_env_file=env_file)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigurationError(f"Error loading {env_file}: {problems}") from None
