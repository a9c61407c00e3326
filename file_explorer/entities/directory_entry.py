"""
Directory entry domain entity.
"""

import os
import stat
from enum import Enum
from typing import Any

from file_explorer.entities.permission_set import PermissionSet
from file_explorer.exceptions import FileRepositoryError


class EntryKind(Enum):
    """Kind of a filesystem entry, as seen without following symlinks."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"

    @classmethod
    def from_mode(cls, st_mode: int) -> "EntryKind":
        # symlink first so a link to a directory stays a symlink
        if stat.S_ISLNK(st_mode):
            return cls.SYMLINK
        if stat.S_ISDIR(st_mode):
            return cls.DIRECTORY
        if stat.S_ISREG(st_mode):
            return cls.FILE
        return cls.OTHER

    @property
    def label(self) -> str:
        """Short label used in directory listings."""
        if self is EntryKind.DIRECTORY:
            return "dir"
        if self is EntryKind.SYMLINK:
            return "symlink"
        return "file"


class DirectoryEntry:
    """
    Transient view of one filesystem entry produced while listing or searching.
    """

    def __init__(
        self,
        path: str,
        kind: EntryKind,
        size: int,
        permissions: PermissionSet,
    ):
        """
        Initialize the entry.

        Args:
            path: Path of the entry
            kind: Entry kind
            size: Size in bytes; forced to 0 for anything but regular files
            permissions: Permission bits of the entry itself
        """
        if not path or not isinstance(path, str):
            raise FileRepositoryError("Path must be a non-empty string")

        self.path = path
        self.name = os.path.basename(os.path.normpath(path)) or path
        self.kind = kind
        self.size = size if kind is EntryKind.FILE else 0
        self.permissions = permissions

    @classmethod
    def from_stat(cls, path: str, st: os.stat_result) -> "DirectoryEntry":
        """Build an entry from an lstat result."""
        return cls(
            path=path,
            kind=EntryKind.from_mode(st.st_mode),
            size=st.st_size,
            permissions=PermissionSet.from_mode(st.st_mode),
        )

    @classmethod
    def from_path(cls, path: str) -> "DirectoryEntry":
        """
        Build an entry by calling lstat on path.

        Raises:
            FileRepositoryError: If the entry cannot be stat'ed
        """
        try:
            st = os.lstat(path)
        except OSError as e:
            raise FileRepositoryError(e.strerror or str(e), path) from e
        return cls.from_stat(path, st)

    def get_details(self) -> dict[str, Any]:
        """
        Get the entry details.

        Returns:
            Dictionary with entry information
        """
        return {
            "path": self.path,
            "name": self.name,
            "kind": self.kind.value,
            "size": self.size,
            "permissions": self.permissions.to_symbolic(),
        }

    def __str__(self) -> str:
        return (
            f"DirectoryEntry(name='{self.name}', kind='{self.kind.value}', "
            f"size={self.size}, permissions='{self.permissions}')"
        )

    def __repr__(self) -> str:
        return f"DirectoryEntry(path='{self.path}')"
