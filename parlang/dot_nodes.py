"""Building blocks for rendering syntax trees as Graphviz DOT graphs."""

from __future__ import annotations

from itertools import count
from typing import Iterator

from parlang.patterns import (
    BinOp,
    BoolLiteral,
    ByteLiteral,
    CharLiteral,
    ConstructorPattern,
    IntLiteral,
    Literal,
    LiteralPattern,
    Pattern,
    RecordPattern,
    TuplePattern,
    VarPattern,
    WildcardPattern,
)
from parlang.type_syntax import AliasType, BoolType, FunType, IntType, TypeExpr

__all__ = [
    "DotWriter",
    "pattern_to_dot",
    "type_expr_to_dot",
    "binop_label",
    "escape_label",
    "char_label",
]

_HEADER = (
    "digraph AST {\n"
    "  node [shape=box, style=rounded];\n"
    "  edge [fontsize=10];\n\n"
)

# Characters are shown with a doubled escape so the label shows the source spelling.
_CHAR_LABELS = {
    "\n": "\\\\n",
    "\t": "\\\\t",
    "\r": "\\\\r",
    "\\": "\\\\\\\\",
    "'": "\\\\'",
}


class DotWriter:
    """Accumulates the nodes and edges of a DOT graph and hands out node ids."""

    def __init__(self) -> None:
        self._ids: Iterator[int] = count()
        self._lines: list[str] = []

    def next_id(self) -> str:
        """Return a fresh node id: node0, node1, ..."""
        return f"node{next(self._ids)}"

    def node(self, node_id: str, label: str) -> None:
        """Add a node; the label is written as given."""
        self._lines.append(f'  {node_id} [label="{label}"];\n')

    def edge(self, source: str, target: str, label: str) -> None:
        """Add a labelled edge between two nodes."""
        self._lines.append(f'  {source} -> {target} [label="{label}"];\n')

    @property
    def body(self) -> str:
        """The node and edge lines written so far."""
        return "".join(self._lines)

    def render(self) -> str:
        """Return the complete graph text."""
        return _HEADER + self.body + "}\n"


def escape_label(text: str) -> str:
    """Escape backslashes, double quotes and newlines for use inside a label."""
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def char_label(c: str) -> str:
    """Return the label spelling of a character literal's value."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return _CHAR_LABELS.get(c, c)


def binop_label(op: BinOp) -> str:
    """Return the symbol shown for a binary operator."""
    return op.symbol


def _literal_label(literal: Literal) -> str:
    if isinstance(literal, BoolLiteral):
        return f"Literal\\nBool {'true' if literal.value else 'false'}"
    if isinstance(literal, IntLiteral):
        return f"Literal\\nInt {literal.value}"
    if isinstance(literal, CharLiteral):
        return f"Literal\\nChar '{char_label(literal.value)}'"
    if isinstance(literal, ByteLiteral):
        return f"Literal\\nByte {literal.value}b"
    raise TypeError(f"unknown literal: {literal!r}")


def pattern_to_dot(pattern: Pattern, writer: DotWriter) -> str:
    """Write a pattern and its sub-patterns; return the id of its node."""
    node_id = writer.next_id()

    if isinstance(pattern, LiteralPattern):
        writer.node(node_id, _literal_label(pattern.literal))
    elif isinstance(pattern, VarPattern):
        writer.node(node_id, f"Var\\n{escape_label(pattern.name)}")
    elif isinstance(pattern, WildcardPattern):
        writer.node(node_id, "Wildcard\\n_")
    elif isinstance(pattern, TuplePattern):
        writer.node(node_id, "TuplePattern")
        for i, element in enumerate(pattern.elements):
            element_id = pattern_to_dot(element, writer)
            writer.edge(node_id, element_id, f"elem {i}")
    elif isinstance(pattern, RecordPattern):
        writer.node(node_id, "RecordPattern")
        for i, (name, sub) in enumerate(pattern.fields):
            field_id = writer.next_id()
            writer.node(field_id, f"Field\\n{escape_label(name)}")
            sub_id = pattern_to_dot(sub, writer)
            writer.edge(node_id, field_id, f"field {i}")
            writer.edge(field_id, sub_id, "pattern")
    elif isinstance(pattern, ConstructorPattern):
        writer.node(node_id, f"ConstructorPattern\\n{escape_label(pattern.name)}")
        for i, arg in enumerate(pattern.args):
            arg_id = pattern_to_dot(arg, writer)
            writer.edge(node_id, arg_id, f"arg {i}")
    else:
        raise TypeError(f"unknown pattern: {pattern!r}")

    return node_id


def type_expr_to_dot(type_expr: TypeExpr, writer: DotWriter) -> str:
    """Write a type expression and its parts; return the id of its node."""
    node_id = writer.next_id()

    if isinstance(type_expr, IntType):
        writer.node(node_id, "Type\\nInt")
    elif isinstance(type_expr, BoolType):
        writer.node(node_id, "Type\\nBool")
    elif isinstance(type_expr, FunType):
        writer.node(node_id, "Type\\nFun")
        arg_id = type_expr_to_dot(type_expr.arg, writer)
        ret_id = type_expr_to_dot(type_expr.ret, writer)
        writer.edge(node_id, arg_id, "arg")
        writer.edge(node_id, ret_id, "ret")
    elif isinstance(type_expr, AliasType):
        writer.node(node_id, f"TypeAlias\\n{escape_label(type_expr.name)}")
    else:
        raise TypeError(f"unknown type expression: {type_expr!r}")

    return node_id