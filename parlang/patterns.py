"""Binary operators, literals and match patterns of the language's syntax tree."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable

__all__ = [
    "BinOp",
    "Literal",
    "IntLiteral",
    "BoolLiteral",
    "CharLiteral",
    "ByteLiteral",
    "Pattern",
    "LiteralPattern",
    "VarPattern",
    "WildcardPattern",
    "TuplePattern",
    "RecordPattern",
    "ConstructorPattern",
    "escape_char",
]

_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_CHAR_ESCAPES = {
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\\": "\\\\",
    "'": "\\'",
}


def escape_char(c: str) -> str:
    """Return the source spelling of a character inside single quotes."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return _CHAR_ESCAPES.get(c, c)


class BinOp(enum.Enum):
    """Binary operators; the value is the operator's source symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EQ = "=="
    NEQ = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="

    @property
    def symbol(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class Literal:
    """Base of literal values usable in patterns."""

    __slots__ = ()


@dataclass(frozen=True)
class IntLiteral(Literal):
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"integer literal needs an int, got {self.value!r}")
        if not _INT_MIN <= self.value <= _INT_MAX:
            raise ValueError(f"integer literal out of 64-bit range: {self.value}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BoolLiteral(Literal):
    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(f"boolean literal needs a bool, got {self.value!r}")

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class CharLiteral(Literal):
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or len(self.value) != 1:
            raise ValueError(f"character literal needs one character, got {self.value!r}")

    def __str__(self) -> str:
        return f"'{escape_char(self.value)}'"


@dataclass(frozen=True)
class ByteLiteral(Literal):
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"byte literal needs an int, got {self.value!r}")
        if not 0 <= self.value <= 255:
            raise ValueError(f"byte literal out of range 0..255: {self.value}")

    def __str__(self) -> str:
        return f"{self.value}b"


class Pattern:
    """Base of patterns used in match arms."""

    __slots__ = ()


@dataclass(frozen=True)
class LiteralPattern(Pattern):
    """Matches exactly one literal value."""

    literal: Literal

    def __str__(self) -> str:
        return str(self.literal)


@dataclass(frozen=True)
class VarPattern(Pattern):
    """Matches anything and binds it to a name."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class WildcardPattern(Pattern):
    """Matches anything without binding."""

    def __str__(self) -> str:
        return "_"


@dataclass(frozen=True)
class TuplePattern(Pattern):
    """Matches a tuple element by element."""

    elements: tuple[Pattern, ...] = field(default_factory=tuple)

    def __init__(self, elements: Iterable[Pattern] = ()) -> None:
        object.__setattr__(self, "elements", tuple(elements))

    def __str__(self) -> str:
        return "(" + ", ".join(str(p) for p in self.elements) + ")"


@dataclass(frozen=True)
class RecordPattern(Pattern):
    """Matches some or all fields of a record, in the order written."""

    fields: tuple[tuple[str, Pattern], ...] = field(default_factory=tuple)

    def __init__(self, fields: Iterable[tuple[str, Pattern]] = ()) -> None:
        object.__setattr__(
            self, "fields", tuple((name, pattern) for name, pattern in fields)
        )

    def __str__(self) -> str:
        return "{" + ", ".join(f"{name}: {pat}" for name, pat in self.fields) + "}"


@dataclass(frozen=True)
class ConstructorPattern(Pattern):
    """Matches a data constructor and its arguments."""

    name: str
    args: tuple[Pattern, ...] = field(default_factory=tuple)

    def __init__(self, name: str, args: Iterable[Pattern] = ()) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "args", tuple(args))

    def __str__(self) -> str:
        return "".join([self.name, *(f" {arg}" for arg in self.args)])