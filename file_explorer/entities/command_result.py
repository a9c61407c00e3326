"""
Outcome of a single shell command.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """How a command ended."""

    NONE = "none"
    # missing/invalid arguments, unknown command
    USAGE = "usage"
    # path does not exist, wrong entry kind
    PRECONDITION = "precondition"
    # the native call failed
    OPERATION = "operation"
    # succeeded, with a side effect the user should know about
    WARNING = "warning"


@dataclass
class CommandResult:
    kind: ErrorKind = ErrorKind.NONE
    output: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    cwd: Optional[str] = None
    help_rows: list[tuple[str, str]] = field(default_factory=list)
    exit: bool = False

    @property
    def ok(self) -> bool:
        return self.kind in (ErrorKind.NONE, ErrorKind.WARNING)

    @classmethod
    def success(cls, *lines: str) -> "CommandResult":
        return cls(output=list(lines))

    @classmethod
    def usage(cls, message: str) -> "CommandResult":
        return cls(kind=ErrorKind.USAGE, output=[message])

    @classmethod
    def precondition(cls, message: str) -> "CommandResult":
        return cls(kind=ErrorKind.PRECONDITION, output=[message])

    @classmethod
    def failure(
        cls, *lines: str, errors: Optional[list[str]] = None
    ) -> "CommandResult":
        return cls(
            kind=ErrorKind.OPERATION, output=list(lines), errors=list(errors or [])
        )
