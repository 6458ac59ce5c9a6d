"""Loading of the project-local .topromptignore file"""

import logging
from pathlib import Path
from typing import Optional, Union

from toprompt.domain.ignore.rules import IgnoreRuleSet

logger = logging.getLogger(__name__)

IGNORE_FILE_NAME = ".topromptignore"


class ConfigReadError(Exception):
    """Ignore file exists but cannot be read."""

    def __init__(self, path: Path, error: Exception):
        super().__init__(f"Could not read ignore file '{path}': {error}")
        self.path = path
        self.error = error


def find_ignore_file(base_path: Optional[Union[str, Path]]) -> Optional[Path]:
    """Locate the ignore file directly under the project base directory

    Only ``.topromptignore`` is consulted; a ``.gitignore`` next to it is
    never read.

    Args:
        base_path: Project base directory (None when there is no project)

    Returns:
        Path to the ignore file, or None if there is none
    """
    if base_path is None:
        return None
    candidate = Path(base_path) / IGNORE_FILE_NAME
    if candidate.exists():
        return candidate
    return None


def load_ignore_rules(base_path: Optional[Union[str, Path]]) -> IgnoreRuleSet:
    """Load and compile the ignore rules of a project

    Args:
        base_path: Project base directory

    Returns:
        Compiled rule set (empty if the ignore file does not exist)

    Raises:
        ConfigReadError: If the ignore file exists but cannot be read
        InvalidIgnorePatternError: If a line does not compile
    """
    ignore_file = find_ignore_file(base_path)
    if ignore_file is None:
        logger.debug(f"No {IGNORE_FILE_NAME} under {base_path}, nothing is ignored")
        return IgnoreRuleSet.empty()

    try:
        text = ignore_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(ignore_file, e) from e

    rules = IgnoreRuleSet.from_text(text)
    logger.info(f"Loaded {len(rules)} ignore patterns from {ignore_file}")
    return rules
