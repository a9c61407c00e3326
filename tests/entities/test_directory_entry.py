"""
Tests for the DirectoryEntry entity.
"""

import os
import stat

import pytest

from file_explorer.entities.directory_entry import DirectoryEntry, EntryKind
from file_explorer.entities.permission_set import PermissionSet
from file_explorer.exceptions import FileRepositoryError


class TestEntryKind:
    """Test cases for EntryKind."""

    @pytest.mark.parametrize(
        "mode, kind, label",
        [
            (stat.S_IFREG, EntryKind.FILE, "file"),
            (stat.S_IFDIR, EntryKind.DIRECTORY, "dir"),
            (stat.S_IFLNK, EntryKind.SYMLINK, "symlink"),
            (stat.S_IFIFO, EntryKind.OTHER, "file"),
        ],
    )
    def test_from_mode(self, mode, kind, label):
        """Test classification and listing labels."""
        assert EntryKind.from_mode(mode | 0o644) is kind
        assert kind.label == label


class TestDirectoryEntry:
    """Test cases for DirectoryEntry."""

    def test_from_path_regular_file(self, temp_directory: str):
        """Test building an entry for a regular file."""
        path = os.path.join(temp_directory, "test1.txt")
        os.chmod(path, 0o640)

        entry = DirectoryEntry.from_path(path)

        assert entry.name == "test1.txt"
        assert entry.kind is EntryKind.FILE
        assert entry.size == len("This is a test file.")
        assert entry.permissions == PermissionSet(0o640)

    def test_from_path_directory_has_zero_size(self, temp_directory: str):
        """Test that directories report size 0."""
        entry = DirectoryEntry.from_path(os.path.join(temp_directory, "subdir"))

        assert entry.kind is EntryKind.DIRECTORY
        assert entry.size == 0

    def test_from_path_symlink_to_directory(self, temp_directory: str):
        """Test that a symlink to a directory is reported as a symlink."""
        link = os.path.join(temp_directory, "link")
        os.symlink(os.path.join(temp_directory, "subdir"), link)

        entry = DirectoryEntry.from_path(link)

        assert entry.kind is EntryKind.SYMLINK
        assert entry.size == 0

    def test_from_path_nonexistent(self):
        """Test that a missing path raises FileRepositoryError."""
        with pytest.raises(FileRepositoryError, match="No such file or directory"):
            DirectoryEntry.from_path("/nonexistent/path/file.txt")

    def test_empty_path(self):
        """Test that an empty path is rejected."""
        with pytest.raises(
            FileRepositoryError, match="Path must be a non-empty string"
        ):
            DirectoryEntry("", EntryKind.FILE, 0, PermissionSet())

    def test_get_details(self, temp_directory: str):
        """Test getting entry details."""
        path = os.path.join(temp_directory, "test2.py")
        os.chmod(path, 0o755)
        details = DirectoryEntry.from_path(path).get_details()

        assert details == {
            "path": path,
            "name": "test2.py",
            "kind": "file",
            "size": len("print('Hello, world!')"),
            "permissions": "rwxr-xr-x",
        }

    def test_str_and_repr(self, temp_directory: str):
        """Test string representations."""
        path = os.path.join(temp_directory, "test1.txt")
        entry = DirectoryEntry.from_path(path)

        assert "DirectoryEntry(name='test1.txt'" in str(entry)
        assert "kind='file'" in str(entry)
        assert repr(entry) == f"DirectoryEntry(path='{path}')"
