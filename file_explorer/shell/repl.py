"""
Read-eval-print loop of the file explorer.
"""

import logging
import sys
from typing import Optional, Protocol, TextIO

from file_explorer.entities.command_result import CommandResult
from file_explorer.shell.dispatcher import CommandDispatcher
from file_explorer.shell.parser import split_args


class Renderer(Protocol):
    def banner(self) -> None: ...
    def prompt(self, cwd: str) -> None: ...
    def farewell(self) -> None: ...
    def render(self, result: CommandResult) -> None: ...


class ShellRepl:
    """
    Interactive session over a command dispatcher.

    The working directory is the only state kept between commands. It is
    handed to the dispatcher with every command and replaced only when a
    result carries a new one.
    """

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        cwd: str,
        renderer: Renderer,
        stdin: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the session.

        Args:
            dispatcher: Dispatcher used to run each command
            cwd: Initial working directory (absolute, canonical)
            renderer: Output renderer
            stdin: Input stream, defaults to sys.stdin
            logger: Logger instance to use for logging
        """
        self._dispatcher = dispatcher
        self._cwd = cwd
        self._renderer = renderer
        self._stdin = stdin or sys.stdin
        self._logger = logger or logging.getLogger(__name__)

    @property
    def cwd(self) -> str:
        return self._cwd

    def run(self) -> int:
        """
        Run until exit, EOF or an unreadable input stream.

        Returns:
            Process exit code, always 0
        """
        self._renderer.banner()
        while True:
            self._renderer.prompt(self._cwd)
            line = self._read_line()
            if line is None:
                break

            tokens = split_args(line)
            if not tokens:
                continue

            result = self._dispatcher.dispatch(tokens, self._cwd)
            if result.exit:
                break
            self._renderer.render(result)
            if result.cwd is not None:
                self._cwd = result.cwd

        self._renderer.farewell()
        return 0

    def _read_line(self) -> Optional[str]:
        """Return the next input line, or None when input has ended."""
        try:
            line = self._stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            self._logger.error(f"Cannot read from standard input: {e}")
            return None
        except KeyboardInterrupt:
            self._logger.info("Interrupted while waiting for input")
            return None
        if not line:
            return None
        return line.rstrip("\r\n")
