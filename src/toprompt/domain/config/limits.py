"""Processing limits configuration model."""

from pydantic import BaseModel, Field

DEFAULT_MAX_FILE_SIZE = 5 * 1024 * 1024  # 5 MiB


class LimitsConfig(BaseModel):
    """Configuration for processing limits.

    Attributes:
        max_file_size: Files larger than this many bytes are skipped
    """

    max_file_size: int = Field(DEFAULT_MAX_FILE_SIZE, ge=0)
