"""Main application configuration model."""

from pydantic import BaseModel, ConfigDict, Field

from toprompt.domain.config.limits import LimitsConfig
from toprompt.domain.config.output import OutputConfig


class AppConfig(BaseModel):
    """Main application configuration.

    Validation is performed at load time to fail fast on configuration errors.

    Attributes:
        limits: Processing limits configuration
        output: Output configuration
    """

    limits: LimitsConfig = Field(default_factory=LimitsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "limits": {"max_file_size": 1048576},
                "output": {"copy_to_clipboard": True, "summary": False},
            }
        },
    )
