"""
Use case for changing the session working directory.
"""

import logging
import os
from typing import Optional

from file_explorer.entities.command_result import CommandResult
from file_explorer.ports.files.file_system_port import FileSystemPort

DASH_NOT_SUPPORTED = "Use absolute or relative path. '-' not supported here."


class ChangeDirectoryUseCase:
    """Resolve a cd target against the current directory."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, cwd: str, target: str) -> CommandResult:
        """
        Compute the new working directory.

        Args:
            cwd: Current working directory (absolute, canonical)
            target: The argument given to cd

        Returns:
            CommandResult carrying the new cwd on success
        """
        if target == "-":
            return CommandResult.usage(DASH_NOT_SUPPORTED)

        if target == "..":
            # dirname of the root is the root itself
            candidate = os.path.dirname(cwd)
        else:
            candidate = os.path.join(cwd, target)

        resolved = self._file_system.canonicalize(candidate)
        if not self._file_system.is_dir(resolved):
            self._logger.info(f"Refusing cd to {resolved}")
            return CommandResult.precondition(
                f"Cannot change directory to: {candidate}"
            )

        self._logger.info(f"Working directory is now {resolved}")
        return CommandResult(cwd=resolved)
