"""
Local file system adapter implementation for filesystem operations.
"""

import logging
import os
import shutil
from typing import Iterator, Optional

from typing_extensions import override

from file_explorer.entities.directory_entry import DirectoryEntry
from file_explorer.entities.permission_set import PermissionSet
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_system_port import FileSystemPort


def _describe(error: OSError) -> str:
    """Return the system error text of an OSError."""
    return error.strerror or str(error)


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the filesystem port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default
                logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    @override
    def lexists(self, path: str) -> bool:
        return os.path.lexists(path)

    @override
    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    @override
    def is_link(self, path: str) -> bool:
        return os.path.islink(path)

    @override
    def canonicalize(self, path: str) -> str:
        return os.path.realpath(path)

    @override
    def list_entries(self, directory: str) -> Iterator[DirectoryEntry]:
        """
        Yield the immediate children of a directory.

        An error raised while iterating ends the listing silently; entries
        already yielded stay valid.
        """
        try:
            iterator = os.scandir(directory)
        except OSError as e:
            raise FileRepositoryError(_describe(e), directory) from e

        with iterator:
            while True:
                try:
                    entry = next(iterator)
                    st = entry.stat(follow_symlinks=False)
                except StopIteration:
                    return
                except OSError as e:
                    self._logger.warning(
                        f"Listing of {directory} stopped early: {_describe(e)}"
                    )
                    return
                yield DirectoryEntry.from_stat(entry.path, st)

    @override
    def read_lines(self, path: str) -> Iterator[str]:
        try:
            with open(
                path, "r", encoding="utf-8", errors="replace", newline="\n"
            ) as handle:
                for line in handle:
                    yield line.rstrip("\n")
        except OSError as e:
            raise FileRepositoryError(_describe(e), path) from e

    @override
    def copy_file(self, src: str, dst: str) -> None:
        try:
            shutil.copyfile(src, dst)
            shutil.copymode(src, dst)
        except OSError as e:
            raise FileRepositoryError(_describe(e), src) from e

    @override
    def rename(self, src: str, dst: str) -> None:
        try:
            os.rename(src, dst)
        except OSError as e:
            raise FileRepositoryError(_describe(e), src) from e

    @override
    def remove_file(self, path: str) -> None:
        try:
            os.remove(path)
        except OSError as e:
            raise FileRepositoryError(_describe(e), path) from e

    @override
    def remove_tree(self, path: str) -> None:
        try:
            shutil.rmtree(path)
        except OSError as e:
            raise FileRepositoryError(_describe(e), path) from e

    @override
    def touch(self, path: str) -> None:
        try:
            with open(path, "a"):
                pass
        except OSError as e:
            raise FileRepositoryError(_describe(e), path) from e

    @override
    def make_dirs(self, path: str) -> None:
        try:
            os.makedirs(path)
        except OSError as e:
            raise FileRepositoryError(_describe(e), path) from e

    @override
    def walk(self, start: str) -> Iterator[str]:
        """
        Yield every entry path below start, depth first.

        Entries of a directory come in native scandir order, each followed by
        its own subtree. Directory symlinks are reported but not descended
        into. Errors below start skip the affected directory; errors on start
        itself raise after the entries read so far have been walked.
        """
        try:
            entries, error = self._read_directory(start)
        except OSError as e:
            raise FileRepositoryError(_describe(e), start) from e

        pending = [(start, iter(entries), error)]
        while pending:
            directory, remaining, error = pending[-1]
            entry = next(remaining, None)
            if entry is None:
                pending.pop()
                if error is None:
                    continue
                if not pending:
                    raise FileRepositoryError(_describe(error), start) from error
                self._logger.info(f"Skipping rest of {directory}: {_describe(error)}")
                continue

            yield entry.path
            if not self._is_real_dir(entry):
                continue
            try:
                entries, error = self._read_directory(entry.path)
            except OSError as e:
                self._logger.info(f"Skipping {entry.path}: {_describe(e)}")
                continue
            pending.append((entry.path, iter(entries), error))

    @staticmethod
    def _read_directory(
        directory: str,
    ) -> tuple[list[os.DirEntry], Optional[OSError]]:
        """
        Read all entries of a directory and close it.

        Returns:
            The entries read, and the error that ended reading early if any

        Raises:
            OSError: If the directory cannot be opened
        """
        entries: list[os.DirEntry] = []
        with os.scandir(directory) as iterator:
            try:
                for entry in iterator:
                    entries.append(entry)
            except OSError as e:
                return entries, e
        return entries, None

    @staticmethod
    def _is_real_dir(entry: os.DirEntry) -> bool:
        try:
            return entry.is_dir(follow_symlinks=False)
        except OSError:
            return False

    @override
    def set_permissions(self, path: str, permissions: PermissionSet) -> None:
        try:
            os.chmod(path, permissions.bits)
        except OSError as e:
            raise FileRepositoryError(_describe(e), path) from e
