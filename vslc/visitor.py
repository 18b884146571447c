"""Double-dispatch visitor over the VSL syntax tree."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

if TYPE_CHECKING:
    from vslc.nodes import Node


class NodeVisitor:
    """Base visitor.

    Every ``visit_*`` method does nothing by default, so a subclass only
    overrides the node kinds it cares about.  Nodes route themselves to the
    matching method through ``Node.accept``.
    """

    def visit_ast(self, ast: Iterable["Node"]) -> None:
        """Visit each global declaration in order."""
        for decl in ast:
            decl.accept(self)

    def visit_function(self, node: Any) -> None:
        """Visit a function definition."""

    def visit_ext_func(self, node: Any) -> None:
        """Visit an external function declaration."""

    def visit_param(self, node: Any) -> None:
        """Visit a function parameter."""

    def visit_variable(self, node: Any) -> None:
        """Visit a variable declaration."""

    def visit_class(self, node: Any) -> None:
        """Visit a class definition."""

    def visit_field(self, node: Any) -> None:
        """Visit a class field."""

    def visit_method(self, node: Any) -> None:
        """Visit a class method."""

    def visit_ctor(self, node: Any) -> None:
        """Visit a class constructor."""

    def visit_block(self, node: Any) -> None:
        """Visit a block of statements."""

    def visit_empty(self, node: Any) -> None:
        """Visit an empty statement."""

    def visit_if(self, node: Any) -> None:
        """Visit an if/else statement."""

    def visit_return(self, node: Any) -> None:
        """Visit a return statement."""

    def visit_ident(self, node: Any) -> None:
        """Visit an identifier."""

    def visit_literal(self, node: Any) -> None:
        """Visit an integer or boolean literal."""

    def visit_unary(self, node: Any) -> None:
        """Visit a unary expression."""

    def visit_binary(self, node: Any) -> None:
        """Visit a binary expression."""

    def visit_ternary(self, node: Any) -> None:
        """Visit a ternary expression."""

    def visit_call(self, node: Any) -> None:
        """Visit a function call."""

    def visit_arg(self, node: Any) -> None:
        """Visit a call argument."""

    def visit_field_access(self, node: Any) -> None:
        """Visit a field access."""

    def visit_method_call(self, node: Any) -> None:
        """Visit a method call."""

    def visit_self(self, node: Any) -> None:
        """Visit the ``self`` keyword."""