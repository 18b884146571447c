import pytest

from vslc.nodes import (
    ArgNode,
    BinaryNode,
    BlockNode,
    CallNode,
    EmptyNode,
    ExprNode,
    FieldAccessNode,
    IdentNode,
    IfNode,
    LiteralNode,
    MethodCallNode,
    Node,
    NodeKind,
    ReturnNode,
    SelfNode,
    TernaryNode,
    UnaryNode,
)
from vslc.visitor import NodeVisitor


def test_node_is_abstract():
    with pytest.raises(TypeError):
        Node()


def test_kind_checks():
    node = EmptyNode()
    assert node.is_(NodeKind.EMPTY)
    assert not node.is_not(NodeKind.EMPTY)
    assert node.is_not(NodeKind.BLOCK)
    assert not node.is_(NodeKind.BLOCK)


@pytest.mark.parametrize(
    "node",
    [
        IdentNode("x"),
        LiteralNode(1337),
        UnaryNode("-", IdentNode("x")),
        BinaryNode("*", IdentNode("x"), IdentNode("y")),
        TernaryNode(IdentNode("c"), IdentNode("x"), IdentNode("y")),
        CallNode(IdentNode("f")),
        FieldAccessNode(IdentNode("o"), "x"),
        MethodCallNode(IdentNode("o"), "f"),
        SelfNode(),
    ],
)
def test_expressions_are_expressions(node):
    assert node.is_expr() is True
    assert isinstance(node, ExprNode)


@pytest.mark.parametrize(
    "node",
    [
        BlockNode(),
        EmptyNode(),
        IfNode(IdentNode("x"), EmptyNode()),
        ReturnNode(),
        ArgNode("x", IdentNode("x")),
    ],
)
def test_statements_are_not_expressions(node):
    assert node.is_expr() is False


def test_if_without_else():
    node = IfNode(IdentNode("x"), EmptyNode())
    assert node.has_else() is False
    assert node.else_ is None


def test_if_with_else():
    then, otherwise = EmptyNode(), ReturnNode()
    cond = IdentNode("x")
    node = IfNode(cond, then, otherwise)
    assert node.has_else() is True
    assert node.condition is cond
    assert node.then is then
    assert node.else_ is otherwise


def test_return_value():
    assert ReturnNode().has_value() is False
    value = IdentNode("x")
    node = ReturnNode(value)
    assert node.has_value() is True
    assert node.value is value


def test_location_is_kept():
    loc = ("file.vsl", 3, 7)
    node = IdentNode("x", location=loc)
    assert node.location == loc
    assert EmptyNode().location is None


def test_block_copies_statements():
    stmts = [EmptyNode()]
    block = BlockNode(stmts)
    stmts.append(EmptyNode())
    assert len(block.statements) == 1


def test_call_args():
    arg = ArgNode("x", LiteralNode(1))
    callee = IdentNode("f")
    call = CallNode(callee, (arg,))
    assert call.callee is callee
    assert call.args == [arg]
    assert CallNode(callee).args == []


def test_method_call_fields():
    callee = IdentNode("o")
    arg = ArgNode("x", IdentNode("x"))
    call = MethodCallNode(callee, "f", [arg], location="here")
    assert call.callee is callee
    assert call.method == "f"
    assert call.args == [arg]
    assert call.location == "here"
    assert isinstance(call, CallNode)
    assert call.is_(NodeKind.METHOD_CALL)
    assert call.is_not(NodeKind.CALL)


def test_method_call_default_args():
    assert MethodCallNode(SelfNode(), "f").args == []


def test_literal_fields():
    lit = LiteralNode(1, bit_width=1)
    assert lit.value == 1
    assert lit.bit_width == 1


def test_binary_and_unary_fields():
    lhs, rhs = IdentNode("x"), IdentNode("y")
    node = BinaryNode("%", lhs, rhs)
    assert (node.op, node.lhs, node.rhs) == ("%", lhs, rhs)
    unary = UnaryNode("-", node)
    assert unary.op == "-"
    assert unary.expr is node


def test_field_access_fields():
    obj = SelfNode()
    node = FieldAccessNode(obj, "x")
    assert node.obj is obj
    assert node.field_name == "x"


def test_nodes_compare_by_identity():
    a, b = IdentNode("x"), IdentNode("x")
    assert a != b
    assert a == a
    assert len({a, b}) == 2


def test_accept_passes_node_itself():
    class Capture(NodeVisitor):
        def __init__(self):
            self.got = None

        def visit_ternary(self, node):
            self.got = node

    node = TernaryNode(IdentNode("c"), IdentNode("x"), IdentNode("y"))
    visitor = Capture()
    node.accept(visitor)
    assert visitor.got is node