import pytest

from parlang.dot_nodes import (
    DotWriter,
    binop_label,
    char_label,
    escape_label,
    pattern_to_dot,
    type_expr_to_dot,
)
from parlang.patterns import (
    BinOp,
    BoolLiteral,
    ByteLiteral,
    CharLiteral,
    ConstructorPattern,
    IntLiteral,
    LiteralPattern,
    RecordPattern,
    TuplePattern,
    VarPattern,
    WildcardPattern,
)
from parlang.type_syntax import AliasType, BoolType, FunType, IntType


def test_next_id_is_sequential():
    writer = DotWriter()
    assert [writer.next_id() for _ in range(3)] == ["node0", "node1", "node2"]


def test_render_empty_graph():
    assert DotWriter().render() == (
        "digraph AST {\n"
        "  node [shape=box, style=rounded];\n"
        "  edge [fontsize=10];\n\n"
        "}\n"
    )


def test_node_and_edge_lines():
    writer = DotWriter()
    writer.node("node0", "App")
    writer.edge("node0", "node1", "func")
    assert writer.render().endswith(
        '  node0 [label="App"];\n  node0 -> node1 [label="func"];\n}\n'
    )


def test_escape_label():
    assert escape_label("hello") == "hello"
    assert escape_label('hello"world') == 'hello\\"world'
    assert escape_label("hello\\world") == "hello\\\\world"
    assert escape_label("hello\nworld") == "hello\\nworld"


@pytest.mark.parametrize(
    "op,expected",
    [
        (BinOp.ADD, "+"),
        (BinOp.SUB, "-"),
        (BinOp.MUL, "*"),
        (BinOp.DIV, "/"),
        (BinOp.EQ, "=="),
        (BinOp.NEQ, "!="),
        (BinOp.LT, "<"),
        (BinOp.LE, "<="),
        (BinOp.GT, ">"),
        (BinOp.GE, ">="),
    ],
)
def test_all_binops(op, expected):
    assert binop_label(op) == expected


def test_char_label():
    assert char_label("a") == "a"
    assert char_label("\n") == "\\\\n"
    assert char_label("\\") == "\\\\\\\\"
    assert char_label("'") == "\\\\'"


def test_char_label_rejects_multiple_characters():
    with pytest.raises(ValueError):
        char_label("ab")


def test_pattern_literal():
    writer = DotWriter()
    node_id = pattern_to_dot(LiteralPattern(IntLiteral(42)), writer)
    assert node_id == "node0"
    assert '[label="Literal\\nInt 42"]' in writer.render()


def test_pattern_other_literals():
    writer = DotWriter()
    pattern_to_dot(LiteralPattern(BoolLiteral(True)), writer)
    pattern_to_dot(LiteralPattern(ByteLiteral(7)), writer)
    pattern_to_dot(LiteralPattern(CharLiteral("\t")), writer)
    out = writer.render()
    assert '[label="Literal\\nBool true"]' in out
    assert '[label="Literal\\nByte 7b"]' in out
    assert "[label=\"Literal\\nChar '\\\\t'\"]" in out


def test_pattern_var():
    writer = DotWriter()
    pattern_to_dot(VarPattern("x"), writer)
    assert '[label="Var\\nx"]' in writer.render()


def test_pattern_wildcard():
    writer = DotWriter()
    pattern_to_dot(WildcardPattern(), writer)
    assert '[label="Wildcard\\n_"]' in writer.render()


def test_pattern_tuple():
    writer = DotWriter()
    pattern = TuplePattern([LiteralPattern(IntLiteral(1)), VarPattern("x")])
    pattern_to_dot(pattern, writer)
    out = writer.render()
    assert '[label="TuplePattern"]' in out
    assert '[label="Literal\\nInt 1"]' in out
    assert '[label="Var\\nx"]' in out


def test_pattern_tuple_exact_order():
    writer = DotWriter()
    pattern_to_dot(TuplePattern([LiteralPattern(IntLiteral(1)), VarPattern("x")]), writer)
    assert writer.body == (
        '  node0 [label="TuplePattern"];\n'
        '  node1 [label="Literal\\nInt 1"];\n'
        '  node0 -> node1 [label="elem 0"];\n'
        '  node2 [label="Var\\nx"];\n'
        '  node0 -> node2 [label="elem 1"];\n'
    )


def test_pattern_record():
    writer = DotWriter()
    pattern_to_dot(RecordPattern([("name", VarPattern("n"))]), writer)
    assert writer.body == (
        '  node0 [label="RecordPattern"];\n'
        '  node1 [label="Field\\nname"];\n'
        '  node2 [label="Var\\nn"];\n'
        '  node0 -> node1 [label="field 0"];\n'
        '  node1 -> node2 [label="pattern"];\n'
    )


def test_pattern_constructor():
    writer = DotWriter()
    root = pattern_to_dot(ConstructorPattern("Some", [VarPattern("x")]), writer)
    out = writer.render()
    assert root == "node0"
    assert '[label="ConstructorPattern\\nSome"]' in out
    assert '  node0 -> node1 [label="arg 0"];\n' in out


def test_type_expr_fun():
    writer = DotWriter()
    type_expr_to_dot(FunType(IntType(), BoolType()), writer)
    assert writer.body == (
        '  node0 [label="Type\\nFun"];\n'
        '  node1 [label="Type\\nInt"];\n'
        '  node2 [label="Type\\nBool"];\n'
        '  node0 -> node1 [label="arg"];\n'
        '  node0 -> node2 [label="ret"];\n'
    )


def test_type_expr_alias():
    writer = DotWriter()
    node_id = type_expr_to_dot(AliasType("MyInt"), writer)
    assert node_id == "node0"
    assert '[label="TypeAlias\\nMyInt"]' in writer.render()


def test_pattern_unknown_raises():
    with pytest.raises(TypeError):
        pattern_to_dot("not a pattern", DotWriter())