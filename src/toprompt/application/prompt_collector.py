"""Service for collecting selected files into a single prompt"""

import logging
from typing import Callable, Iterable, Optional, Union

from toprompt.domain.config.limits import DEFAULT_MAX_FILE_SIZE
from toprompt.domain.ignore.rules import IgnorePattern, IgnoreRuleSet
from toprompt.domain.models.collection_result import CollectionResult, IgnoredPath
from toprompt.domain.models.entry import FileSystemEntry
from toprompt.domain.models.outcome import (
    Accepted,
    FileOutcome,
    SkippedBinary,
    SkippedError,
    SkippedTooLarge,
)
from toprompt.domain.prompts.file_block import build_collected_entry

logger = logging.getLogger(__name__)

# Receives (path, outcome) for every file that is not accepted, and
# (path, IgnoredPath) for every entry excluded by a pattern
DiagnosticsSink = Callable[[str, Union[FileOutcome, IgnoredPath]], None]


class PromptCollector:
    """Collects eligible file contents from a selection into one prompt

    Entries are walked depth-first in pre-order. An entry matching an
    ignore pattern is skipped together with its subtree. Files must then
    be within the size limit, non-binary and readable as UTF-8 to be
    rendered. A file that fails to read is skipped without aborting the
    rest of the selection.
    """

    def __init__(self, diagnostics: Optional[DiagnosticsSink] = None):
        """Initialize collector

        Args:
            diagnostics: Optional callback notified about skipped and ignored entries
        """
        self.diagnostics = diagnostics

    def collect(
        self,
        roots: Optional[Iterable[FileSystemEntry]],
        rules: Optional[IgnoreRuleSet] = None,
        max_file_size: int = DEFAULT_MAX_FILE_SIZE,
    ) -> str:
        """Collect a selection into a prompt string

        Args:
            roots: Selected entries in the order the user picked them
            rules: Ignore rules (nothing is ignored if None)
            max_file_size: Largest accepted file size in bytes

        Returns:
            Formatted file blocks joined by blank lines ("" if nothing was collected)
        """
        return self.collect_result(roots, rules, max_file_size).render()

    def collect_result(
        self,
        roots: Optional[Iterable[FileSystemEntry]],
        rules: Optional[IgnoreRuleSet] = None,
        max_file_size: int = DEFAULT_MAX_FILE_SIZE,
    ) -> CollectionResult:
        """Collect a selection and keep the outcome of every file

        Args:
            roots: Selected entries in the order the user picked them
            rules: Ignore rules (nothing is ignored if None)
            max_file_size: Largest accepted file size in bytes

        Returns:
            CollectionResult with accepted entries, skipped files and ignored paths

        Raises:
            ValueError: If max_file_size is negative
        """
        if max_file_size < 0:
            raise ValueError(f"max_file_size must be >= 0, got {max_file_size}")
        if rules is None:
            rules = IgnoreRuleSet.empty()

        result = CollectionResult()
        if not roots:
            logger.debug("No entries selected, nothing to collect")
            return result

        for root in roots:
            self._visit(root, rules, max_file_size, result)

        counts = result.counts()
        logger.info(
            f"Collected {counts['accepted']} files "
            f"({counts['too_large']} too large, {counts['binary']} binary, "
            f"{counts['error']} unreadable, {counts['ignored']} ignored)"
        )
        return result

    def _visit(
        self,
        entry: FileSystemEntry,
        rules: IgnoreRuleSet,
        max_file_size: int,
        result: CollectionResult,
    ) -> None:
        """Visit one entry and, for directories, its children"""
        pattern = rules.first_match(entry.normalized_path)
        if pattern is not None:
            self._record_ignored(entry, pattern, result)
            return

        try:
            is_directory = entry.is_directory
            children = entry.children if is_directory else []
        except OSError as e:
            logger.warning(f"Could not inspect {entry.path}: {e}")
            self._record_outcome(entry, SkippedError(error=str(e)), result)
            return

        if is_directory:
            for child in children:
                self._visit(child, rules, max_file_size, result)
            return

        self._record_outcome(entry, self._process_file(entry, max_file_size), result)

    def _record_outcome(self, entry: FileSystemEntry, outcome: FileOutcome, result: CollectionResult) -> None:
        result.outcomes.append((entry.path, outcome))
        if not isinstance(outcome, Accepted):
            logger.debug(f"Skipping {entry.path}: {outcome.reason}")
            self._notify(entry.path, outcome)

    def _process_file(self, entry: FileSystemEntry, max_file_size: int) -> FileOutcome:
        """Apply the size and binary gates and render the file

        Args:
            entry: File entry
            max_file_size: Largest accepted file size in bytes

        Returns:
            Outcome for the file
        """
        try:
            size = entry.length
            if size > max_file_size:
                return SkippedTooLarge(size=size, limit=max_file_size)
            if entry.is_binary:
                return SkippedBinary()
            content = entry.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {entry.path}: {e}")
            return SkippedError(error=str(e))

        return Accepted(build_collected_entry(entry.path, content))

    def _record_ignored(self, entry: FileSystemEntry, pattern: IgnorePattern, result: CollectionResult) -> None:
        ignored = IgnoredPath(path=entry.path, pattern=pattern.source)
        result.ignored.append(ignored)
        logger.debug(f"Ignoring {entry.path}: matches pattern: {pattern.source}")
        self._notify(entry.path, ignored)

    def _notify(self, path: str, event: Union[FileOutcome, IgnoredPath]) -> None:
        if self.diagnostics is not None:
            self.diagnostics(path, event)


def collect(
    roots: Optional[Iterable[FileSystemEntry]],
    rules: Optional[IgnoreRuleSet] = None,
    max_file_size: int = DEFAULT_MAX_FILE_SIZE,
) -> str:
    """Collect a selection into a prompt string with a default collector"""
    return PromptCollector().collect(roots, rules, max_file_size)
