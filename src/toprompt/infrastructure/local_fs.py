"""Local filesystem adapter for FileSystemEntry"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from toprompt.domain.models.entry import FileSystemEntry

logger = logging.getLogger(__name__)

BINARY_SNIFF_SIZE = 8192


def looks_binary(sample: bytes) -> bool:
    """Classify a leading sample of file content

    A sample is binary when it contains a NUL byte or is not valid UTF-8.
    A multibyte sequence cut off at the end of the sample is tolerated.

    Args:
        sample: Leading bytes of a file

    Returns:
        True if the content looks binary
    """
    if b"\x00" in sample:
        return True
    try:
        sample.decode("utf-8")
    except UnicodeDecodeError as e:
        # Truncated sequence at the sniff boundary is still text
        return not (e.reason == "unexpected end of data" and e.end == len(sample))
    return False


class LocalFileEntry(FileSystemEntry):
    """FileSystemEntry backed by a path on the local disk

    Children are listed sorted by name so that repeated runs over an
    unchanged tree render identically. Symlinks are followed.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path).absolute()
        self._is_binary: Optional[bool] = None

    @property
    def path(self) -> str:
        return str(self._path)

    @property
    def is_directory(self) -> bool:
        try:
            return self._path.is_dir()
        except OSError as e:
            # Unsearchable parent; length/read_bytes report the failure
            logger.debug(f"Could not stat {self._path}: {e}")
            return False

    @property
    def children(self) -> List["LocalFileEntry"]:
        if not self.is_directory:
            return []
        try:
            names = sorted(child.name for child in self._path.iterdir())
        except OSError as e:
            logger.warning(f"Could not list directory {self._path}: {e}")
            return []
        return [LocalFileEntry(self._path / name) for name in names]

    @property
    def length(self) -> int:
        return self._path.stat().st_size

    @property
    def is_binary(self) -> bool:
        if self._is_binary is None:
            try:
                with open(self._path, "rb") as f:
                    sample = f.read(BINARY_SNIFF_SIZE)
            except OSError as e:
                # Leave it to read_bytes() to report the failure
                logger.debug(f"Could not sniff {self._path}: {e}")
                return False
            self._is_binary = looks_binary(sample)
        return self._is_binary

    def read_bytes(self) -> bytes:
        return self._path.read_bytes()
