"""Declaration nodes of the VSL syntax tree: functions, variables and classes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from vslc.nodes import BlockNode, ExprNode, Node, NodeKind
from vslc.types import Access, ClassType, NamedType, Type
from vslc.visitor import NodeVisitor


@dataclass(eq=False)
class DeclNode(Node):
    """A declaration carrying an access specifier."""

    access: Access


@dataclass(eq=False)
class ParamNode(Node):
    """A function parameter, ``name: type``."""

    kind = NodeKind.PARAM
    name: str
    type: Optional[Type]

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_param(self)


@dataclass(eq=False)
class FuncInterfaceNode(DeclNode):
    """A function signature without a body."""

    name: str
    params: list[ParamNode]
    return_type: Optional[Type]

    def __post_init__(self) -> None:
        self.params = list(self.params)


@dataclass(eq=False)
class FunctionNode(FuncInterfaceNode):
    """A function definition with a body."""

    kind = NodeKind.FUNCTION
    body: BlockNode
    already_defined: bool = field(default=False, init=False)

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_function(self)


@dataclass(eq=False)
class ExtFuncNode(FuncInterfaceNode):
    """An external function, known outside the program as ``alias``."""

    kind = NodeKind.EXTFUNC
    alias: str

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_ext_func(self)


@dataclass(eq=False)
class VariableNode(DeclNode):
    """A variable declaration; needs a type, an initializer or both."""

    kind = NodeKind.VARIABLE
    name: str
    type: Optional[Type] = None
    init: Optional[ExprNode] = None
    const: bool = False

    def has_type(self) -> bool:
        """True if the type is known."""
        return self.type is not None

    def has_init(self) -> bool:
        """True if there is an initial value."""
        return self.init is not None

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_variable(self)


@dataclass(eq=False)
class ClassNode(DeclNode):
    """A class definition holding fields, an optional constructor and methods."""

    kind = NodeKind.CLASS
    name: str
    type: NamedType
    class_type: ClassType
    fields: list["FieldNode"] = field(default_factory=list, init=False)
    ctor: Optional["CtorNode"] = field(default=None, init=False)
    methods: list["MethodNode"] = field(default_factory=list, init=False)

    def add_field(self, field: "FieldNode") -> None:
        """Add a field; raise DuplicateFieldError if its name is taken."""
        self.class_type.set_field(field.name, field.type, len(self.fields), field.access)
        self.fields.append(field)

    def add_method(self, method: "MethodNode") -> None:
        """Add an instance method."""
        self.methods.append(method)

    def has_ctor(self) -> bool:
        """True if a constructor has been set."""
        return self.ctor is not None

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_class(self)


@dataclass(eq=False)
class FieldNode(VariableNode):
    """A field of a class."""

    kind = NodeKind.FIELD
    parent: ClassNode = field(kw_only=True, repr=False)

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_field(self)


@dataclass(eq=False)
class MethodNode(FunctionNode):
    """An instance method of a class."""

    kind = NodeKind.METHOD
    parent: ClassNode = field(kw_only=True, repr=False)

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_method(self)


@dataclass(eq=False, init=False)
class CtorNode(FunctionNode):
    """A class constructor; named after its class and returning the class type."""

    kind = NodeKind.CTOR
    parent: ClassNode = field(repr=False)

    def __init__(
        self,
        access: Access,
        params: Sequence[ParamNode],
        body: BlockNode,
        parent: ClassNode,
        *,
        location: Any = None,
    ) -> None:
        self.access = access
        self.name = parent.name
        self.params = list(params)
        self.return_type = parent.type
        self.body = body
        self.already_defined = False
        self.parent = parent
        self.location = location

    def accept(self, visitor: NodeVisitor) -> None:
        visitor.visit_ctor(self)