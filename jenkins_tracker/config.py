from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevelType = Literal["ERROR", "WARNING", "INFO", "DEBUG", "CRITICAL"]


class JenkinsSettings(BaseSettings):
    """
    Connection settings, read from JENKINS_* environment variables or a .env file.

    The user and API token are bound to every request the client sends.
    """

    model_config = SettingsConfigDict(
        env_prefix="JENKINS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str
    user: str
    token: str
    client_timeout: float = 60
    log_level: LogLevelType = "INFO"

    @field_validator("host")
    @classmethod
    def strip_trailing_slashes(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value
