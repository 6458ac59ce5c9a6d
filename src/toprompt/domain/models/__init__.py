"""Domain models for prompt collection."""

from toprompt.domain.models.collection_result import CollectionResult, IgnoredPath
from toprompt.domain.models.entry import FileSystemEntry
from toprompt.domain.models.outcome import (
    Accepted,
    CollectedEntry,
    FileOutcome,
    SkippedBinary,
    SkippedError,
    SkippedTooLarge,
)

__all__ = [
    "Accepted",
    "CollectedEntry",
    "CollectionResult",
    "FileOutcome",
    "FileSystemEntry",
    "IgnoredPath",
    "SkippedBinary",
    "SkippedError",
    "SkippedTooLarge",
]
