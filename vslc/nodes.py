"""Statement and expression nodes of the VSL syntax tree."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Sequence

from vslc.visitor import NodeVisitor


class NodeKind(enum.Enum):
    """The kind of a :class:`Node`."""

    FUNCTION = enum.auto()
    EXTFUNC = enum.auto()
    PARAM = enum.auto()
    VARIABLE = enum.auto()
    CLASS = enum.auto()
    FIELD = enum.auto()
    METHOD = enum.auto()
    CTOR = enum.auto()
    BLOCK = enum.auto()
    EMPTY = enum.auto()
    IF = enum.auto()
    RETURN = enum.auto()
    IDENT = enum.auto()
    LITERAL = enum.auto()
    UNARY = enum.auto()
    BINARY = enum.auto()
    TERNARY = enum.auto()
    CALL = enum.auto()
    ARG = enum.auto()
    FIELD_ACCESS = enum.auto()
    METHOD_CALL = enum.auto()
    SELF = enum.auto()


@dataclass(eq=False)
class Node(abc.ABC):
    """Base class of all syntax tree nodes.

    Nodes compare by identity; ``location`` is where the node was found in
    the source and is opaque to the tree itself.
    """

    kind: ClassVar[NodeKind]
    location: Any = field(default=None, kw_only=True)

    @abc.abstractmethod
    def accept(self, visitor: NodeVisitor) -> None:
        """Dispatch to the visitor method for this node's kind."""

    def is_(self, kind: NodeKind) -> bool:
        """True if this node is of the given kind."""
        return self.kind is kind

    def is_not(self, kind: NodeKind) -> bool:
        """True if this node is not of the given kind."""
        return self.kind is not kind

    def is_expr(self) -> bool:
        """True if this node is an expression."""
        return False


@dataclass(eq=False)
class ExprNode(Node):
    """Base class of expressions."""

    def is_expr(self) -> bool:
        return True


@dataclass(eq=False)
class BlockNode(Node):
    """A braced block of statements."""

    kind = NodeKind.BLOCK
    statements: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.statements = list(self.statements)

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_block(self)


@dataclass(eq=False)
class EmptyNode(Node):
    """An empty statement, ``;``."""

    kind = NodeKind.EMPTY

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_empty(self)


@dataclass(eq=False)
class IfNode(Node):
    """An if statement with an optional else branch."""

    kind = NodeKind.IF
    condition: ExprNode
    then: Node
    else_: Optional[Node] = None

    def has_else(self) -> bool:
        """True if there is an else branch."""
        return self.else_ is not None

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_if(self)


@dataclass(eq=False)
class ReturnNode(Node):
    """A return statement with an optional value."""

    kind = NodeKind.RETURN
    value: Optional[ExprNode] = None

    def has_value(self) -> bool:
        """True if a value is returned."""
        return self.value is not None

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_return(self)


@dataclass(eq=False)
class IdentNode(ExprNode):
    """An identifier."""

    kind = NodeKind.IDENT
    name: str

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_ident(self)


@dataclass(eq=False)
class LiteralNode(ExprNode):
    """An integer literal; a bit width of 1 marks a boolean."""

    kind = NodeKind.LITERAL
    value: int
    bit_width: int = 32

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_literal(self)


@dataclass(eq=False)
class UnaryNode(ExprNode):
    """A unary expression; ``op`` is the operator symbol."""

    kind = NodeKind.UNARY
    op: str
    expr: ExprNode

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_unary(self)


@dataclass(eq=False)
class BinaryNode(ExprNode):
    """A binary expression; ``op`` is the operator symbol."""

    kind = NodeKind.BINARY
    op: str
    lhs: ExprNode
    rhs: ExprNode

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_binary(self)


@dataclass(eq=False)
class TernaryNode(ExprNode):
    """A conditional expression, ``c ? x : y``."""

    kind = NodeKind.TERNARY
    condition: ExprNode
    then: ExprNode
    else_: ExprNode

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_ternary(self)


@dataclass(eq=False)
class CallNode(ExprNode):
    """A function call."""

    kind = NodeKind.CALL
    callee: ExprNode
    args: list["ArgNode"] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.args = list(self.args)

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_call(self)


@dataclass(eq=False)
class ArgNode(Node):
    """A named call argument, ``name: value``."""

    kind = NodeKind.ARG
    name: str
    value: ExprNode

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_arg(self)


@dataclass(eq=False)
class FieldAccessNode(ExprNode):
    """Access of a field of an object, ``obj.field_name``."""

    kind = NodeKind.FIELD_ACCESS
    obj: ExprNode
    field_name: str

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_field_access(self)


@dataclass(eq=False, init=False)
class MethodCallNode(CallNode):
    """A method call, ``callee.method(args)``."""

    kind = NodeKind.METHOD_CALL
    method: str

    def __init__(
        self,
        callee: ExprNode,
        method: str,
        args: Sequence[ArgNode] = (),
        *,
        location: Any = None,
    ) -> None:
        self.callee = callee
        self.method = method
        self.args = list(args)
        self.location = location

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_method_call(self)


@dataclass(eq=False)
class SelfNode(ExprNode):
    """The ``self`` keyword."""

    kind = NodeKind.SELF

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_self(self)