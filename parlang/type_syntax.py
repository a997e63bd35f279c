"""Type expressions for aliases and type annotations for data definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

__all__ = [
    "TypeExpr",
    "IntType",
    "BoolType",
    "FunType",
    "AliasType",
    "TypeAnnotation",
    "ConcreteAnnotation",
    "VarAnnotation",
    "FunAnnotation",
    "AppAnnotation",
]


class TypeExpr:
    """Base of the type expressions written in type aliases."""

    __slots__ = ()


@dataclass(frozen=True)
class IntType(TypeExpr):
    """The integer type, written ``Int``."""

    def __str__(self) -> str:
        return "Int"


@dataclass(frozen=True)
class BoolType(TypeExpr):
    """The boolean type, written ``Bool``."""

    def __str__(self) -> str:
        return "Bool"


@dataclass(frozen=True)
class FunType(TypeExpr):
    """A function type ``arg -> ret``."""

    arg: TypeExpr
    ret: TypeExpr

    def __str__(self) -> str:
        if isinstance(self.arg, FunType):
            return f"({self.arg}) -> {self.ret}"
        return f"{self.arg} -> {self.ret}"


@dataclass(frozen=True)
class AliasType(TypeExpr):
    """A reference to a type alias by name."""

    name: str

    def __str__(self) -> str:
        return self.name


class TypeAnnotation:
    """Base of the type annotations used in data type definitions."""

    __slots__ = ()


@dataclass(frozen=True)
class ConcreteAnnotation(TypeAnnotation):
    """A concrete named type such as ``Int``."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class VarAnnotation(TypeAnnotation):
    """A type variable such as ``a``."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class FunAnnotation(TypeAnnotation):
    """A function type annotation, always shown in parentheses."""

    arg: TypeAnnotation
    ret: TypeAnnotation

    def __str__(self) -> str:
        return f"({self.arg} -> {self.ret})"


@dataclass(frozen=True)
class AppAnnotation(TypeAnnotation):
    """A type constructor applied to arguments, such as ``List a``."""

    name: str
    args: tuple[TypeAnnotation, ...] = field(default_factory=tuple)

    def __init__(self, name: str, args: Iterable[TypeAnnotation] = ()) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "args", tuple(args))

    def __str__(self) -> str:
        return "".join([self.name, *(f" {arg}" for arg in self.args)])