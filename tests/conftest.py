"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from file_explorer.container import DependencyContainer


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Canonical path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_dir = os.path.realpath(temp_dir)

        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


@pytest.fixture
def dispatcher(dependency_container):
    """Command dispatcher wired to the real local filesystem."""
    return dependency_container.get_dispatcher()


@pytest.fixture
def deep_tree(tmp_path):
    """
    Create a directory chain deeper than the interpreter recursion limit.

    Returns:
        Tuple of (root path, path of the file at the bottom, depth)
    """
    depth = 1100
    directories = []
    path = str(tmp_path)
    for _ in range(depth):
        path = os.path.join(path, "d")
        os.mkdir(path)
        directories.append(path)
    needle = os.path.join(path, "needle.txt")
    with open(needle, "w") as f:
        f.write("")

    yield str(tmp_path), needle, depth

    # shutil.rmtree recurses per level as well
    os.remove(needle)
    for directory in reversed(directories):
        os.rmdir(directory)
