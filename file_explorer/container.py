"""
Dependency injection container for managing application dependencies.
"""

import logging

from file_explorer.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_explorer.ports.files.file_system_port import FileSystemPort
from file_explorer.shell.dispatcher import CommandDispatcher
from file_explorer.use_cases.files.change_directory import ChangeDirectoryUseCase
from file_explorer.use_cases.files.change_permissions import ChangePermissionsUseCase
from file_explorer.use_cases.files.copy_file import CopyFileUseCase
from file_explorer.use_cases.files.create_entries import (
    MakeDirectoryUseCase,
    TouchFileUseCase,
)
from file_explorer.use_cases.files.list_directory import ListDirectoryUseCase
from file_explorer.use_cases.files.move_file import MoveFileUseCase
from file_explorer.use_cases.files.remove_path import RemovePathUseCase
from file_explorer.use_cases.files.search_files import SearchFilesUseCase
from file_explorer.use_cases.files.show_file import ShowFileUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_system"]

    def get_copy_file_use_case(self) -> CopyFileUseCase:
        """
        Get copy file use case with injected dependencies.

        Returns:
            Configured CopyFileUseCase
        """
        if "copy_file_use_case" not in self._instances:
            self._instances["copy_file_use_case"] = CopyFileUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["copy_file_use_case"]

    def get_move_file_use_case(self) -> MoveFileUseCase:
        """
        Get move file use case, sharing the copy use case for its fallback.

        Returns:
            Configured MoveFileUseCase
        """
        if "move_file_use_case" not in self._instances:
            self._instances["move_file_use_case"] = MoveFileUseCase(
                self.get_file_system(), self.get_copy_file_use_case(), self._logger
            )
        return self._instances["move_file_use_case"]

    def get_dispatcher(self) -> CommandDispatcher:
        """
        Get the command dispatcher wired to every file use case.

        Returns:
            Configured CommandDispatcher
        """
        if "dispatcher" not in self._instances:
            fs = self.get_file_system()
            self._instances["dispatcher"] = CommandDispatcher(
                list_directory=ListDirectoryUseCase(fs, self._logger),
                change_directory=ChangeDirectoryUseCase(fs, self._logger),
                show_file=ShowFileUseCase(fs, self._logger),
                copy_file=self.get_copy_file_use_case(),
                move_file=self.get_move_file_use_case(),
                remove_path=RemovePathUseCase(fs, self._logger),
                touch_file=TouchFileUseCase(fs, self._logger),
                make_directory=MakeDirectoryUseCase(fs, self._logger),
                search_files=SearchFilesUseCase(fs, self._logger),
                change_permissions=ChangePermissionsUseCase(fs, self._logger),
                logger=self._logger,
            )
        return self._instances["dispatcher"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
