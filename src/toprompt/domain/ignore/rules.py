"""Ignore rules compiled from .topromptignore lines"""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Pattern

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


class InvalidIgnorePatternError(ValueError):
    """Ignore line that does not compile to a valid matcher."""

    def __init__(self, line: str, line_number: Optional[int], error: re.error):
        location = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"Invalid ignore pattern ({location}{line!r}): {error}")
        self.line = line
        self.line_number = line_number


def glob_to_regex(glob: str) -> str:
    """Translate an ignore glob into an anchored regular expression

    Dots are literal, ``*`` matches any run of characters (including ``/``)
    and ``?`` matches exactly one character. Any other character is passed
    to the regex engine unchanged.

    Args:
        glob: Trimmed pattern text

    Returns:
        Regular expression source anchored at both ends
    """
    translated = glob.replace(".", "\\.").replace("*", ".*").replace("?", ".")
    return f"^{translated}$"


@dataclass(frozen=True)
class IgnorePattern:
    """Compiled matcher for one line of the ignore file"""

    source: str  # Trimmed pattern text as written
    regex: Pattern[str] = field(repr=False, compare=False)

    @classmethod
    def compile(cls, line: str, line_number: Optional[int] = None) -> "IgnorePattern":
        """Compile a trimmed, non-comment ignore line

        Raises:
            InvalidIgnorePatternError: If the translated regex is invalid
        """
        try:
            regex = re.compile(glob_to_regex(line))
        except re.error as e:
            raise InvalidIgnorePatternError(line, line_number, e) from e
        return cls(source=line, regex=regex)

    def matches(self, normalized_path: str) -> bool:
        """Check whether the whole path matches this pattern"""
        return self.regex.fullmatch(normalized_path) is not None


class IgnoreRuleSet:
    """Ordered collection of ignore patterns

    A path is ignored when any pattern matches it.
    """

    def __init__(self, patterns: Optional[Iterable[IgnorePattern]] = None):
        self._patterns: List[IgnorePattern] = list(patterns or [])

    @classmethod
    def empty(cls) -> "IgnoreRuleSet":
        return cls()

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "IgnoreRuleSet":
        """Build a rule set from ignore file lines

        Blank lines and lines starting with ``#`` (after trimming) are skipped.

        Args:
            lines: Raw lines of the ignore file

        Returns:
            Compiled rule set

        Raises:
            InvalidIgnorePatternError: If a line does not compile
        """
        patterns = []
        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.strip()
            if not line or line.startswith(COMMENT_PREFIX):
                continue
            patterns.append(IgnorePattern.compile(line, line_number))
        logger.debug(f"Compiled {len(patterns)} ignore patterns")
        return cls(patterns)

    @classmethod
    def from_text(cls, text: str) -> "IgnoreRuleSet":
        return cls.from_lines(text.splitlines())

    def first_match(self, path: str) -> Optional[IgnorePattern]:
        """Find the first pattern matching a path

        Args:
            path: Path to test; backslashes are normalized to forward slashes

        Returns:
            Matching pattern or None
        """
        normalized = path.replace("\\", "/")
        for pattern in self._patterns:
            if pattern.matches(normalized):
                return pattern
        return None

    def is_ignored(self, path: str) -> bool:
        return self.first_match(path) is not None

    def __iter__(self) -> Iterator[IgnorePattern]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __bool__(self) -> bool:
        return bool(self._patterns)

    def __repr__(self) -> str:
        return f"IgnoreRuleSet({[p.source for p in self._patterns]!r})"
