"""
Tests for the RemovePathUseCase, TouchFileUseCase and MakeDirectoryUseCase.
"""

import os
from unittest.mock import MagicMock

from file_explorer.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_explorer.entities.command_result import ErrorKind
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_system_port import FileSystemPort
from file_explorer.use_cases.files.create_entries import (
    MakeDirectoryUseCase,
    TouchFileUseCase,
)
from file_explorer.use_cases.files.remove_path import RemovePathUseCase


class TestRemovePathUseCase:
    """Test cases for the RemovePathUseCase."""

    def test_remove_non_empty_directory(self, temp_directory, mock_logger):
        use_case = RemovePathUseCase(
            LocalFileSystemAdapter(mock_logger), mock_logger
        )
        path = os.path.join(temp_directory, "subdir")
        os.makedirs(os.path.join(path, "deeper", "deepest"))

        result = use_case.execute(path)

        assert result.ok
        assert result.output == [f"Removing directory recursively: {path}", "Removed"]
        assert not os.path.exists(path)

    def test_remove_file(self, temp_directory, mock_logger):
        use_case = RemovePathUseCase(
            LocalFileSystemAdapter(mock_logger), mock_logger
        )
        path = os.path.join(temp_directory, "test1.txt")

        result = use_case.execute(path)

        assert result.output == ["Removed"]
        assert not os.path.exists(path)

    def test_remove_symlink_keeps_target(self, temp_directory, mock_logger):
        use_case = RemovePathUseCase(
            LocalFileSystemAdapter(mock_logger), mock_logger
        )
        link = os.path.join(temp_directory, "ln")
        os.symlink(os.path.join(temp_directory, "subdir"), link)

        result = use_case.execute(link)

        assert result.output == ["Removed"]
        assert not os.path.lexists(link)
        assert os.path.isfile(os.path.join(temp_directory, "subdir", "test3.md"))

    def test_remove_missing(self, mock_logger):
        mock_fs = MagicMock(spec=FileSystemPort)
        mock_fs.lexists.return_value = False
        use_case = RemovePathUseCase(mock_fs, mock_logger)

        result = use_case.execute("/missing")

        assert result.kind is ErrorKind.PRECONDITION
        assert result.output == ["Path doesn't exist"]
        mock_fs.remove_file.assert_not_called()
        mock_fs.remove_tree.assert_not_called()

    def test_remove_failure(self, mock_logger):
        mock_fs = MagicMock(spec=FileSystemPort)
        mock_fs.lexists.return_value = True
        mock_fs.is_dir.return_value = False
        mock_fs.remove_file.side_effect = FileRepositoryError("Permission denied")
        use_case = RemovePathUseCase(mock_fs, mock_logger)

        result = use_case.execute("/f")

        assert result.kind is ErrorKind.OPERATION
        assert result.output == ["Remove failed: Permission denied"]


class TestTouchFileUseCase:
    """Test cases for the TouchFileUseCase."""

    def test_touch_creates_file(self, temp_directory, mock_logger):
        use_case = TouchFileUseCase(
            LocalFileSystemAdapter(mock_logger), mock_logger
        )
        path = os.path.join(temp_directory, "f")

        result = use_case.execute(path)

        assert result.output == [f"Touched {path}"]
        assert os.path.getsize(path) == 0

    def test_touch_keeps_existing_content(self, temp_directory, mock_logger):
        use_case = TouchFileUseCase(
            LocalFileSystemAdapter(mock_logger), mock_logger
        )
        path = os.path.join(temp_directory, "test1.txt")

        result = use_case.execute(path)

        assert result.output == [f"Touched {path}"]
        with open(path, "rb") as f:
            assert f.read() == b"This is a test file."

    def test_touch_failure(self, temp_directory, mock_logger):
        use_case = TouchFileUseCase(
            LocalFileSystemAdapter(mock_logger), mock_logger
        )

        result = use_case.execute(os.path.join(temp_directory, "nope", "f"))

        assert result.kind is ErrorKind.OPERATION
        assert result.output == ["Could not touch: No such file or directory"]


class TestMakeDirectoryUseCase:
    """Test cases for the MakeDirectoryUseCase."""

    def test_mkdir_with_parents(self, temp_directory, mock_logger):
        use_case = MakeDirectoryUseCase(
            LocalFileSystemAdapter(mock_logger), mock_logger
        )
        path = os.path.join(temp_directory, "x", "y")

        result = use_case.execute(path)

        assert result.output == [f"Created {path}"]
        assert os.path.isdir(path)

    def test_mkdir_existing(self, temp_directory, mock_logger):
        use_case = MakeDirectoryUseCase(
            LocalFileSystemAdapter(mock_logger), mock_logger
        )
        path = os.path.join(temp_directory, "subdir")

        result = use_case.execute(path)

        assert result.kind is ErrorKind.PRECONDITION
        assert result.output == [f"Could not create: {path} already exists"]

    def test_mkdir_failure(self, temp_directory, mock_logger):
        use_case = MakeDirectoryUseCase(
            LocalFileSystemAdapter(mock_logger), mock_logger
        )

        result = use_case.execute(os.path.join(temp_directory, "test1.txt", "child"))

        assert result.kind is ErrorKind.OPERATION
        assert result.output == ["Could not create: Not a directory"]
