"""Settings for the GROQ query builder."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import InvalidConfigError

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class GroqBuilderSettings(BaseSettings):
    """groqbuilder configuration settings."""

    LOG_LEVEL: str = "INFO"

    # Query defaults
    GROQ_BASE_QUERY: str = "*"
    GROQ_INCLUDE_DRAFTS: bool = False
    GROQ_DRAFTS_PATH: str = "drafts.**"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("LOG_LEVEL")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        # Empty is allowed and treated as INFO by the logger
        if value and value.upper() not in _LOG_LEVELS:
            raise InvalidConfigError("Unknown log level", config_key="LOG_LEVEL", value=value)
        return value

    @field_validator("GROQ_DRAFTS_PATH")
    @classmethod
    def check_drafts_path(cls, value: str) -> str:
        if not value.strip():
            raise InvalidConfigError("Drafts path must not be empty", config_key="GROQ_DRAFTS_PATH")
        return value


settings = GroqBuilderSettings()
