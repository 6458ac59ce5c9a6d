"""Output configuration model."""

from pydantic import BaseModel


class OutputConfig(BaseModel):
    """Configuration for where the prompt goes and what is reported.

    Attributes:
        copy_to_clipboard: Copy the prompt to the clipboard instead of printing it
        summary: Report collected and skipped file counts on stderr
    """

    copy_to_clipboard: bool = False
    summary: bool = True
