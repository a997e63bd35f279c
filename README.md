# parlang

Syntax-tree pieces of a small ML-style functional language: binary
operators, literals, match patterns and type syntax. It also has a small
toolkit for rendering patterns and type expressions as Graphviz DOT graphs.

## Modules

- `parlang.patterns`
  - `BinOp`: the binary operators `ADD`, `SUB`, `MUL`, `DIV`, `EQ`, `NEQ`,
    `LT`, `LE`, `GT` and `GE`. Each member's value and `symbol` is its source
    symbol (`"+"`, `"<="`, ...).
  - Literals: `IntLiteral` (a 64-bit signed integer), `BoolLiteral`,
    `CharLiteral` (exactly one character) and `ByteLiteral` (0 to 255). Their
    constructors raise `TypeError` or `ValueError` on a value of the wrong
    kind or out of range.
  - Patterns: `LiteralPattern`, `VarPattern`, `WildcardPattern`,
    `TuplePattern`, `RecordPattern` (fields kept in the order given) and
    `ConstructorPattern`.
  - `escape_char(c)`: the source spelling of a character inside single
    quotes, for example `escape_char("\n") == "\\n"`.
- `parlang.type_syntax`
  - Type expressions for aliases: `IntType`, `BoolType`, `FunType` and
    `AliasType`. A function type whose argument is itself a function type is
    shown with parentheses: `(Int -> Bool) -> Bool`.
  - Annotations for data type definitions: `ConcreteAnnotation`,
    `VarAnnotation`, `FunAnnotation` (always shown in parentheses) and
    `AppAnnotation` (such as `List a`).
- `parlang.dot_nodes`
  - `DotWriter`: collects the nodes and edges of a graph. `next_id()` hands
    out `node0`, `node1`, ...; `node(node_id, label)` and
    `edge(source, target, label)` add lines; `body` holds the lines written
    so far; `render()` returns the whole `digraph AST { ... }` text.
  - `pattern_to_dot(pattern, writer)` and `type_expr_to_dot(type_expr, writer)`
    write a tree into a `DotWriter` and return the id of its root node.
  - `binop_label(op)`, `escape_label(text)` and `char_label(c)` produce label
    text.

All nodes are frozen dataclasses, so they compare by value and can be
hashed. `str()` on any of them gives the language's concrete syntax.

## Example

```python
from parlang.patterns import IntLiteral, LiteralPattern, TuplePattern, VarPattern, WildcardPattern
from parlang.type_syntax import BoolType, FunType, IntType
from parlang.dot_nodes import DotWriter, pattern_to_dot

pattern = TuplePattern([LiteralPattern(IntLiteral(1)), VarPattern("x"), WildcardPattern()])
print(pattern)  # (1, x, _)

print(FunType(FunType(IntType(), BoolType()), BoolType()))  # (Int -> Bool) -> Bool

writer = DotWriter()
root = pattern_to_dot(TuplePattern([LiteralPattern(IntLiteral(1)), VarPattern("x")]), writer)
print(root)  # node0
print(writer.render())
```

The last line prints:

```
digraph AST {
  node [shape=box, style=rounded];
  edge [fontsize=10];

  node0 [label="TuplePattern"];
  node1 [label="Literal\nInt 1"];
  node0 -> node1 [label="elem 0"];
  node2 [label="Var\nx"];
  node0 -> node2 [label="elem 1"];
}
```

Save that text to a file and render it with Graphviz, for example
`dot -Tpng pattern.dot -o pattern.png`.

## What it does not do

The package has no expression nodes: there is no representation of `let`,
`fun`, `if`, `match` or other expressions, so it cannot render a whole
program as a graph, only patterns and type expressions. It has no parser,
type checker, evaluator, interactive prompt or command-line program; it does
not read or run source text.

## Tests

```
pip install -e ".[test]"
pytest
```