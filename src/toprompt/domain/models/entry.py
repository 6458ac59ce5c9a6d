"""FileSystemEntry - capability interface over a host file or directory"""

from abc import ABC, abstractmethod
from typing import Sequence


class FileSystemEntry(ABC):
    """Abstract base class for entries supplied by a host

    The collector depends only on this interface. Hosts provide adapters
    (local disk, an IDE virtual file system, an in-memory tree for tests).
    """

    @property
    @abstractmethod
    def path(self) -> str:
        """Path of the entry as reported by the host"""

    @property
    @abstractmethod
    def is_directory(self) -> bool:
        """Whether the entry is a directory"""

    @property
    @abstractmethod
    def children(self) -> Sequence["FileSystemEntry"]:
        """Child entries in host order (empty for files)"""

    @property
    @abstractmethod
    def length(self) -> int:
        """Size of the file content in bytes"""

    @property
    @abstractmethod
    def is_binary(self) -> bool:
        """Whether the host classifies the content as binary"""

    @abstractmethod
    def read_bytes(self) -> bytes:
        """Read the whole file content

        Raises:
            OSError: If the content cannot be read
        """

    @property
    def normalized_path(self) -> str:
        """Path with backslashes converted to forward slashes"""
        return self.path.replace("\\", "/")

    def __repr__(self) -> str:
        kind = "dir" if self.is_directory else "file"
        return f"{type(self).__name__}({self.path!r}, {kind})"
