"""Per-file outcomes of a collection run"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class CollectedEntry:
    """Rendered text for one accepted file"""

    path: str  # Path as reported by the host
    extension: str  # Fence tag, "" when the path has no extension
    content: str  # Decoded file content
    block: str  # Fully formatted block for the prompt


@dataclass(frozen=True)
class Accepted:
    """File passed every gate and was rendered"""

    entry: CollectedEntry

    @property
    def reason(self) -> str:
        return "accepted"


@dataclass(frozen=True)
class SkippedTooLarge:
    """File is larger than the size limit"""

    size: int
    limit: int

    @property
    def reason(self) -> str:
        return f"too large ({self.size} > {self.limit} bytes)"


@dataclass(frozen=True)
class SkippedBinary:
    """File content is classified as binary"""

    @property
    def reason(self) -> str:
        return "binary file"


@dataclass(frozen=True)
class SkippedError:
    """File could not be read or decoded"""

    error: str

    @property
    def reason(self) -> str:
        return f"read error: {self.error}"


FileOutcome = Union[Accepted, SkippedTooLarge, SkippedBinary, SkippedError]
