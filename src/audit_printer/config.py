"""Runtime configuration for audit-printer.

Settings are read from AUDIT_PRINTER_* environment variables (and NO_COLOR)
through pydantic-settings; keyword arguments override the environment.
"""

from typing import Optional

from loguru import logger
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Delay before writing to stdout so output lands after pending log lines.
DEFAULT_STDOUT_DELAY = 0.05
DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "WARNING"


class PrinterConfig(BaseSettings):
    """Settings shared by the CLI and the writer."""

    model_config = SettingsConfigDict(env_prefix="AUDIT_PRINTER_", extra="ignore")

    stdout_delay: float = Field(default=DEFAULT_STDOUT_DELAY, ge=0)
    color: bool = True
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    log_level: str = DEFAULT_LOG_LEVEL
    # https://no-color.org: any non-empty value disables color
    no_color: Optional[str] = Field(default=None, validation_alias="NO_COLOR")

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        value = value.upper()
        logger.level(value)  # ValueError for levels loguru does not know
        return value

    @model_validator(mode="after")
    def apply_no_color(self) -> "PrinterConfig":
        if self.no_color:
            self.color = False
        return self

    @classmethod
    def from_env(cls) -> "PrinterConfig":
        """Build a config from the environment only."""
        return cls()
