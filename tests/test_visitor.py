import pytest

from vslc.nodes import (
    ArgNode,
    BinaryNode,
    BlockNode,
    CallNode,
    EmptyNode,
    FieldAccessNode,
    IdentNode,
    IfNode,
    LiteralNode,
    MethodCallNode,
    NodeKind,
    ReturnNode,
    SelfNode,
    TernaryNode,
    UnaryNode,
)
from vslc.visitor import NodeVisitor


class Recorder(NodeVisitor):
    def __init__(self):
        self.seen = {}

    def _record(self, node):
        self.seen.setdefault(node.kind, []).append(node)

    def visit_block(self, node):
        self._record(node)

    def visit_empty(self, node):
        self._record(node)

    def visit_if(self, node):
        self._record(node)

    def visit_return(self, node):
        self._record(node)

    def visit_ident(self, node):
        self._record(node)

    def visit_literal(self, node):
        self._record(node)

    def visit_unary(self, node):
        self._record(node)

    def visit_binary(self, node):
        self._record(node)

    def visit_ternary(self, node):
        self._record(node)

    def visit_call(self, node):
        self._record(node)

    def visit_arg(self, node):
        self._record(node)

    def visit_field_access(self, node):
        self._record(node)

    def visit_method_call(self, node):
        self._record(node)

    def visit_self(self, node):
        self._record(node)


def _x():
    return IdentNode("x")


FACTORIES = [
    (NodeKind.BLOCK, lambda: BlockNode([])),
    (NodeKind.EMPTY, lambda: EmptyNode()),
    (NodeKind.IF, lambda: IfNode(_x(), EmptyNode())),
    (NodeKind.RETURN, lambda: ReturnNode()),
    (NodeKind.IDENT, lambda: IdentNode("x")),
    (NodeKind.LITERAL, lambda: LiteralNode(1337)),
    (NodeKind.UNARY, lambda: UnaryNode("-", _x())),
    (NodeKind.BINARY, lambda: BinaryNode("+", _x(), _x())),
    (NodeKind.TERNARY, lambda: TernaryNode(_x(), _x(), _x())),
    (NodeKind.CALL, lambda: CallNode(_x())),
    (NodeKind.ARG, lambda: ArgNode("x", _x())),
    (NodeKind.FIELD_ACCESS, lambda: FieldAccessNode(SelfNode(), "x")),
    (NodeKind.METHOD_CALL, lambda: MethodCallNode(_x(), "f")),
    (NodeKind.SELF, lambda: SelfNode()),
]


@pytest.mark.parametrize(
    "kind, factory", FACTORIES, ids=[kind.name for kind, _ in FACTORIES]
)
def test_accept_dispatches_to_method_for_kind(kind, factory):
    node = factory()
    recorder = Recorder()
    node.accept(recorder)
    assert node.kind is kind
    assert recorder.seen == {kind: [node]}
    via_ast = Recorder()
    NodeVisitor.visit_ast(via_ast, [node])
    assert via_ast.seen == {kind: [node]}


@pytest.mark.parametrize(
    "kind, factory", FACTORIES, ids=[kind.name for kind, _ in FACTORIES]
)
def test_default_visitor_returns_nothing(kind, factory):
    node = factory()
    assert node.accept(NodeVisitor()) is None


def test_visit_ast_visits_in_order():
    first, second, third = IdentNode("a"), IdentNode("b"), IdentNode("c")
    recorder = Recorder()
    recorder.visit_ast([first, second, third])
    assert recorder.seen[NodeKind.IDENT] == [first, second, third]


def test_visit_ast_does_not_descend():
    inner = IdentNode("y")
    block = BlockNode([inner])
    recorder = Recorder()
    recorder.visit_ast([block])
    assert recorder.seen == {NodeKind.BLOCK: [block]}


def test_visit_ast_empty():
    recorder = Recorder()
    NodeVisitor.visit_ast(recorder, [])
    assert recorder.seen == {}


def test_visit_ast_accepts_generator():
    nodes = [EmptyNode(), EmptyNode()]
    recorder = Recorder()
    recorder.visit_ast(n for n in nodes)
    assert recorder.seen[NodeKind.EMPTY] == nodes