"""CollectionResult model - represents the result of collecting a selection"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from toprompt.domain.models.outcome import (
    Accepted,
    CollectedEntry,
    FileOutcome,
    SkippedBinary,
    SkippedError,
    SkippedTooLarge,
)

BLOCK_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class IgnoredPath:
    """Entry excluded (with its whole subtree) by an ignore pattern"""

    path: str
    pattern: str


@dataclass
class CollectionResult:
    """Result of collecting a selection of entries"""

    outcomes: List[Tuple[str, FileOutcome]] = field(default_factory=list)  # (path, outcome) in traversal order
    ignored: List[IgnoredPath] = field(default_factory=list)

    @property
    def entries(self) -> List[CollectedEntry]:
        """Accepted entries in collection order"""
        return [outcome.entry for _, outcome in self.outcomes if isinstance(outcome, Accepted)]

    @property
    def skipped(self) -> List[Tuple[str, FileOutcome]]:
        """Files that reached the file gates but were not accepted"""
        return [(path, outcome) for path, outcome in self.outcomes if not isinstance(outcome, Accepted)]

    def render(self) -> str:
        """Join the formatted blocks of all accepted entries"""
        return BLOCK_SEPARATOR.join(entry.block for entry in self.entries)

    def counts(self) -> Dict[str, int]:
        """Count outcomes by kind

        Returns:
            Dictionary with accepted, too_large, binary, error and ignored counts
        """
        counts = {"accepted": 0, "too_large": 0, "binary": 0, "error": 0, "ignored": len(self.ignored)}
        for _, outcome in self.outcomes:
            if isinstance(outcome, Accepted):
                counts["accepted"] += 1
            elif isinstance(outcome, SkippedTooLarge):
                counts["too_large"] += 1
            elif isinstance(outcome, SkippedBinary):
                counts["binary"] += 1
            elif isinstance(outcome, SkippedError):
                counts["error"] += 1
        return counts

    def summary(self) -> str:
        """Human-readable summary of what was collected and skipped"""
        counts = self.counts()
        lines = [
            f"Files collected: {counts['accepted']}",
            f"Skipped (too large): {counts['too_large']}",
            f"Skipped (binary): {counts['binary']}",
            f"Skipped (read error): {counts['error']}",
            f"Ignored by pattern: {counts['ignored']}",
        ]
        for path, outcome in self.skipped:
            lines.append(f"  - {path}: {outcome.reason}")
        for ignored in self.ignored:
            lines.append(f"  - {ignored.path}: matches pattern: {ignored.pattern}")
        return "\n".join(lines)
