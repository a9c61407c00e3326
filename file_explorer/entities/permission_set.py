"""
Permission set value object: the nine POSIX read/write/execute bits.
"""

import re
import stat

from file_explorer.exceptions import InvalidModeError

_OCTAL_RE = re.compile(r"^[0-7]+$")
_SYMBOLIC_RE = re.compile(r"^([r-][w-][x-]){3}$")

# (shift, read, write, execute) for owner, group, other
_GROUPS = (
    (6, stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR),
    (3, stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP),
    (0, stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH),
)


class PermissionSet:
    """
    Owner/group/other x read/write/execute permission bits.

    Only the nine standard bits are represented; setuid, setgid and sticky
    bits are dropped on construction.
    """

    def __init__(self, bits: int = 0):
        """
        Initialize the permission set.

        Args:
            bits: Permission bits, e.g. 0o755

        Raises:
            ValueError: If bits are outside 0..0o777
        """
        if not 0 <= bits <= 0o777:
            raise ValueError(f"Permission bits out of range: {bits:o}")
        self.bits = bits

    @classmethod
    def from_octal(cls, text: str) -> "PermissionSet":
        """
        Build a permission set from an octal string such as "755" or "0755".

        Each octal digit is mapped to read (4), write (2) and execute (1)
        flags for owner, group and other. Digits above the nine standard
        bits are discarded.

        Raises:
            InvalidModeError: If text is empty or contains non-octal characters
        """
        value = (text or "").strip()
        if not _OCTAL_RE.match(value):
            raise InvalidModeError(f"Invalid octal mode: {text!r}")

        mode = int(value, 8)
        bits = 0
        for shift, read, write, execute in _GROUPS:
            digit = (mode >> shift) & 7
            if digit & 4:
                bits |= read
            if digit & 2:
                bits |= write
            if digit & 1:
                bits |= execute
        return cls(bits)

    @classmethod
    def from_mode(cls, st_mode: int) -> "PermissionSet":
        """Build a permission set from a raw st_mode value."""
        return cls(stat.S_IMODE(st_mode) & 0o777)

    @classmethod
    def from_symbolic(cls, text: str) -> "PermissionSet":
        """
        Build a permission set from a 9-character string like "rwxr-xr-x".

        Raises:
            InvalidModeError: If text does not match the symbolic pattern
        """
        if not text or not _SYMBOLIC_RE.match(text):
            raise InvalidModeError(f"Invalid symbolic mode: {text!r}")

        bits = 0
        for index, (_, read, write, execute) in enumerate(_GROUPS):
            chunk = text[index * 3 : index * 3 + 3]
            if chunk[0] == "r":
                bits |= read
            if chunk[1] == "w":
                bits |= write
            if chunk[2] == "x":
                bits |= execute
        return cls(bits)

    def to_octal(self) -> str:
        """Render as a 3-digit octal string, e.g. "755"."""
        return f"{self.bits:03o}"

    def to_symbolic(self) -> str:
        """Render as a 9-character symbolic string, e.g. "rwxr-xr-x"."""
        chars: list[str] = []
        for _, read, write, execute in _GROUPS:
            chars.append("r" if self.bits & read else "-")
            chars.append("w" if self.bits & write else "-")
            chars.append("x" if self.bits & execute else "-")
        return "".join(chars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PermissionSet):
            return NotImplemented
        return self.bits == other.bits

    def __hash__(self) -> int:
        return hash(self.bits)

    def __str__(self) -> str:
        return self.to_symbolic()

    def __repr__(self) -> str:
        return f"PermissionSet(0o{self.to_octal()})"
