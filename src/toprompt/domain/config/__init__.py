"""Configuration models with Pydantic validation."""

from toprompt.domain.config.app import AppConfig
from toprompt.domain.config.limits import DEFAULT_MAX_FILE_SIZE, LimitsConfig
from toprompt.domain.config.output import OutputConfig

__all__ = [
    "AppConfig",
    "DEFAULT_MAX_FILE_SIZE",
    "LimitsConfig",
    "OutputConfig",
]
