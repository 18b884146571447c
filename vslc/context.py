"""Owner of the syntax tree and the unique type objects it refers to."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vslc.nodes import Node, NodeKind
from vslc.types import ClassType, FunctionType, NamedType, SimpleType, Type, TypeKind

if TYPE_CHECKING:
    from vslc.decls import DeclNode, FuncInterfaceNode


class DuplicateTypeError(ValueError):
    """Raised when a named type of the given name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"type '{name}' already exists")
        self.name = name


class VSLContext:
    """Holds the nodes, global declarations and types of one compilation.

    Types handed out are unique, so they can be compared by identity.
    """

    def __init__(self) -> None:
        self.nodes: list[Node] = []
        self.global_decls: list["DeclNode"] = []
        self.error_type = SimpleType(TypeKind.ERROR)
        self.bool_type = SimpleType(TypeKind.BOOL)
        self.int_type = SimpleType(TypeKind.INT)
        self.void_type = SimpleType(TypeKind.VOID)
        self._named_types: dict[str, NamedType] = {}
        self._function_types: dict[FunctionType, FunctionType] = {}
        self._class_types: list[ClassType] = []

    def add_node(self, node: Node) -> Node:
        """Take ownership of a node and return it."""
        self.nodes.append(node)
        return node

    def set_global(self, decl: "DeclNode") -> None:
        """Record a declaration as belonging to the global scope."""
        self.global_decls.append(decl)

    def get_simple_type(self, kind: TypeKind) -> SimpleType:
        """Return the builtin type of the given kind, or the error type."""
        return {
            TypeKind.BOOL: self.bool_type,
            TypeKind.INT: self.int_type,
            TypeKind.VOID: self.void_type,
        }.get(kind, self.error_type)

    def has_named_type(self, name: str) -> bool:
        """True if a named type of this name exists."""
        return name in self._named_types

    def get_named_type(self, name: str) -> NamedType:
        """Return the named type of this name, creating it if needed."""
        return self._named_types.setdefault(name, NamedType(name))

    def create_named_type(self, name: str) -> NamedType:
        """Create a new named type; raise DuplicateTypeError if it exists."""
        if name in self._named_types:
            raise DuplicateTypeError(name)
        named = NamedType(name)
        self._named_types[name] = named
        return named

    def get_function_type(self, node: "FuncInterfaceNode") -> FunctionType:
        """Return the unique function type matching a function's signature."""
        params: list[Type] = [param.type for param in node.params]
        is_ctor = node.is_(NodeKind.CTOR)
        function_type = FunctionType(params, node.return_type, ctor=is_ctor)
        if node.is_(NodeKind.METHOD) or is_ctor:
            function_type.self_type = node.parent.type
        return self._function_types.setdefault(function_type, function_type)

    def create_class_type(self) -> ClassType:
        """Create a new, empty class type."""
        class_type = ClassType()
        self._class_types.append(class_type)
        return class_type