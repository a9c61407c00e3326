"""
Output renderers for the interactive shell.

PlainRenderer writes exactly the text produced by the commands.
RichRenderer (--pretty) uses rich for the banner, help table and colours.
"""

import sys
from typing import Optional, TextIO

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from file_explorer.entities.command_result import CommandResult, ErrorKind

BANNER = "Simple File Explorer - type 'help' for commands"
FAREWELL = "Bye"


def printable(text: str) -> str:
    """
    Return text safe to write to a UTF-8 stream.

    Names of entries that are not valid UTF-8 arrive surrogate-escaped; their
    raw bytes are shown as \\xNN escapes.
    """
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


def prompt_string(cwd: str) -> str:
    return f"{printable(cwd)} $ "


class PlainRenderer:
    """Write command results to plain text streams."""

    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self._out = stdout or sys.stdout
        self._err = stderr or sys.stderr

    def banner(self) -> None:
        print(BANNER, file=self._out)

    def prompt(self, cwd: str) -> None:
        self._out.write(prompt_string(cwd))
        self._out.flush()

    def farewell(self) -> None:
        print(FAREWELL, file=self._out)

    def render(self, result: CommandResult) -> None:
        for line in result.errors:
            print(printable(line), file=self._err)
        if result.help_rows:
            print("Commands:", file=self._out)
            for signature, description in result.help_rows:
                print(f" {signature:<21} - {description}", file=self._out)
        for line in result.output:
            print(printable(line), file=self._out)
        self._out.flush()


class RichRenderer:
    """Render command results with rich."""

    _STYLES = {
        ErrorKind.USAGE: "yellow",
        ErrorKind.PRECONDITION: "yellow",
        ErrorKind.OPERATION: "red",
        ErrorKind.WARNING: "magenta",
    }

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ):
        self._console = console or Console(soft_wrap=True)
        self._err_console = err_console or Console(stderr=True, soft_wrap=True)

    def banner(self) -> None:
        self._console.print(
            Panel(Text(BANNER), box=box.ROUNDED, border_style="cyan", expand=False)
        )

    def prompt(self, cwd: str) -> None:
        self._console.print(Text(prompt_string(cwd), style="bold green"), end="")

    def farewell(self) -> None:
        self._console.print(Text(FAREWELL, style="cyan"))

    def render(self, result: CommandResult) -> None:
        for line in result.errors:
            self._err_console.print(Text(printable(line), style="red"))
        if result.help_rows:
            table = Table(title="Commands", box=box.ROUNDED, border_style="cyan")
            table.add_column("Command", style="bold")
            table.add_column("Description")
            for signature, description in result.help_rows:
                table.add_row(Text(signature), Text(description))
            self._console.print(table)
        style = self._STYLES.get(result.kind, "")
        for line in result.output:
            # Text keeps brackets in paths and file content literal
            self._console.print(Text(printable(line), style=style))
