"""
File system port interface defining the contract for native filesystem calls.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from file_explorer.entities.directory_entry import DirectoryEntry
from file_explorer.entities.permission_set import PermissionSet


class FileSystemPort(ABC):
    """Port interface for filesystem operations."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if path exists, following symlinks."""
        pass

    @abstractmethod
    def lexists(self, path: str) -> bool:
        """Return True if path exists, counting dangling symlinks."""
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Return True if path is a directory, following symlinks."""
        pass

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Return True if path is a regular file, following symlinks."""
        pass

    @abstractmethod
    def is_link(self, path: str) -> bool:
        """Return True if path itself is a symlink."""
        pass

    @abstractmethod
    def canonicalize(self, path: str) -> str:
        """
        Weakly canonicalize a path.

        Symlinks in the existing prefix are resolved; the non-existing
        remainder is appended as is.
        """
        pass

    @abstractmethod
    def list_entries(self, directory: str) -> Iterator[DirectoryEntry]:
        """
        Yield the immediate children of a directory in native order.

        Raises:
            FileRepositoryError: If the directory cannot be opened
        """
        pass

    @abstractmethod
    def read_lines(self, path: str) -> Iterator[str]:
        """
        Yield the lines of a text file without line terminators.

        Raises:
            FileRepositoryError: If reading fails
        """
        pass

    @abstractmethod
    def copy_file(self, src: str, dst: str) -> None:
        """
        Copy a file's content and permission bits, overwriting dst.

        Raises:
            FileRepositoryError: If copying fails
        """
        pass

    @abstractmethod
    def rename(self, src: str, dst: str) -> None:
        """
        Atomically rename src to dst.

        Raises:
            FileRepositoryError: If the rename fails
        """
        pass

    @abstractmethod
    def remove_file(self, path: str) -> None:
        """
        Remove a single non-directory entry.

        Raises:
            FileRepositoryError: If removal fails
        """
        pass

    @abstractmethod
    def remove_tree(self, path: str) -> None:
        """
        Remove a directory and everything below it.

        Raises:
            FileRepositoryError: If removal fails
        """
        pass

    @abstractmethod
    def touch(self, path: str) -> None:
        """
        Create a file if absent without truncating existing content.

        Raises:
            FileRepositoryError: If the file cannot be opened
        """
        pass

    @abstractmethod
    def make_dirs(self, path: str) -> None:
        """
        Create a directory and any missing parents.

        Raises:
            FileRepositoryError: If creation fails
        """
        pass

    @abstractmethod
    def walk(self, start: str) -> Iterator[str]:
        """
        Yield the path of every entry below start, without following
        directory symlinks. Unreadable nested directories are skipped.

        Raises:
            FileRepositoryError: If start itself cannot be enumerated
        """
        pass

    @abstractmethod
    def set_permissions(self, path: str, permissions: PermissionSet) -> None:
        """
        Replace the permission bits of path.

        Raises:
            FileRepositoryError: If the change fails
        """
        pass
