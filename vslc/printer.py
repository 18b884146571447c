"""Pretty-printer that turns a VSL syntax tree back into source text."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Iterable, Sequence, TextIO

from vslc.nodes import Node, NodeKind
from vslc.types import Access
from vslc.visitor import NodeVisitor

if TYPE_CHECKING:
    from vslc.decls import (
        ClassNode,
        CtorNode,
        DeclNode,
        ExtFuncNode,
        FieldNode,
        FuncInterfaceNode,
        FunctionNode,
        MethodNode,
        ParamNode,
        VariableNode,
    )
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
        ReturnNode,
        SelfNode,
        TernaryNode,
        UnaryNode,
    )

_INDENT = "    "

_ACCESS_PREFIXES = {
    Access.PUBLIC: "public ",
    Access.PRIVATE: "private ",
}


def _access_prefix(access: Access) -> str:
    return _ACCESS_PREFIXES.get(access, "")


class NodePrinter(NodeVisitor):
    """Writes a readable rendering of the nodes it visits to a text stream."""

    def __init__(self, out: TextIO) -> None:
        self.out = out
        self.indent_level = 0

    # declarations

    def visit_ast(self, ast: Iterable["DeclNode"]) -> None:
        for decl in ast:
            decl.accept(self)
            self.out.write("\n")

    def visit_function(self, node: "FunctionNode") -> None:
        self._print_func_interface(node)
        self.out.write("\n")
        self.indent_level += 1
        self.visit_block(node.body)
        self.indent_level -= 1

    def visit_ext_func(self, node: "ExtFuncNode") -> None:
        self._print_func_interface(node)
        self.out.write(f" external({node.alias});")

    def visit_param(self, node: "ParamNode") -> None:
        self.out.write(f"{node.name}: {node.type}")

    def visit_variable(self, node: "VariableNode") -> None:
        self._indent()
        keyword = "let " if node.const else "var "
        self.out.write(f"{_access_prefix(node.access)}{keyword}{node.name}")
        if node.has_type():
            self.out.write(f": {node.type}")
        if node.has_init():
            self.out.write(" = ")
            node.init.accept(self)
        self.out.write(";")

    def visit_class(self, node: "ClassNode") -> None:
        self._indent()
        self.out.write(f"{_access_prefix(node.access)}class {node.name}\n")
        self.indent_level += 1
        self._open_block()
        for field in node.fields:
            field.accept(self)
            self.out.write("\n")
        if node.has_ctor():
            node.ctor.accept(self)
            self.out.write("\n")
        for method in node.methods:
            method.accept(self)
            self.out.write("\n")
        self._close_block()
        self.indent_level -= 1

    def visit_field(self, node: "FieldNode") -> None:
        self.visit_variable(node)

    def visit_method(self, node: "MethodNode") -> None:
        self.visit_function(node)

    def visit_ctor(self, node: "CtorNode") -> None:
        self._indent()
        self.out.write(f"{_access_prefix(node.access)}init")
        self._print_node_list(node.params)
        self.out.write("\n")
        self.indent_level += 1
        self.visit_block(node.body)
        self.indent_level -= 1

    # statements

    def visit_block(self, node: "BlockNode") -> None:
        self._open_block()
        for statement in node.statements:
            nested = statement.is_(NodeKind.BLOCK)
            if nested:
                self.indent_level += 1
            self._print_statement(statement)
            if nested:
                self.indent_level -= 1
        self._close_block()

    def visit_empty(self, node: "EmptyNode") -> None:
        self._indent()
        self.out.write(";")

    def visit_if(self, node: "IfNode") -> None:
        self._indent()
        self.out.write("if (")
        node.condition.accept(self)
        self.out.write(")\n")
        self.indent_level += 1
        self._print_statement(node.then)
        self.indent_level -= 1
        if node.has_else():
            self._indent()
            self.out.write("else\n")
            self.indent_level += 1
            self._print_statement(node.else_)
            self.indent_level -= 1

    def visit_return(self, node: "ReturnNode") -> None:
        self._indent()
        self.out.write("return")
        if node.has_value():
            self.out.write(" ")
            node.value.accept(self)
        self.out.write(";")

    # expressions

    def visit_ident(self, node: "IdentNode") -> None:
        self.out.write(node.name)

    def visit_literal(self, node: "LiteralNode") -> None:
        if node.bit_width == 1:
            self.out.write("true" if node.value & 1 else "false")
        else:
            self.out.write(str(node.value % (1 << node.bit_width)))

    def visit_unary(self, node: "UnaryNode") -> None:
        self.out.write(f"{node.op}(")
        node.expr.accept(self)
        self.out.write(")")

    def visit_binary(self, node: "BinaryNode") -> None:
        node.lhs.accept(self)
        self.out.write(f" {node.op} ")
        node.rhs.accept(self)

    def visit_ternary(self, node: "TernaryNode") -> None:
        node.condition.accept(self)
        self.out.write(" ? ")
        node.then.accept(self)
        self.out.write(" : ")
        node.else_.accept(self)

    def visit_call(self, node: "CallNode") -> None:
        node.callee.accept(self)
        self._print_node_list(node.args)

    def visit_arg(self, node: "ArgNode") -> None:
        self.out.write(f"{node.name}: ")
        node.value.accept(self)

    def visit_field_access(self, node: "FieldAccessNode") -> None:
        node.obj.accept(self)
        self.out.write(f".{node.field_name}")

    def visit_method_call(self, node: "MethodCallNode") -> None:
        node.callee.accept(self)
        self.out.write(f".{node.method}")
        self._print_node_list(node.args)

    def visit_self(self, node: "SelfNode") -> None:
        self.out.write("self")

    # helpers

    def _print_func_interface(self, node: "FuncInterfaceNode") -> None:
        self._indent()
        self.out.write(f"{_access_prefix(node.access)}func {node.name}")
        self._print_node_list(node.params)
        self.out.write(f" -> {node.return_type}")

    def _print_node_list(self, nodes: Sequence[Node]) -> None:
        self.out.write("(")
        for position, node in enumerate(nodes):
            if position:
                self.out.write(", ")
            node.accept(self)
        self.out.write(")")

    def _open_block(self) -> None:
        # the braces sit one level out from the statements they enclose
        self.indent_level -= 1
        self._indent()
        self.out.write("{\n")
        self.indent_level += 1

    def _close_block(self) -> None:
        self.indent_level -= 1
        self._indent()
        self.out.write("}")
        self.indent_level += 1

    def _print_statement(self, node: Node) -> None:
        # expression statements cannot indent or terminate themselves
        if node.is_expr():
            self._indent()
        node.accept(self)
        if node.is_expr():
            self.out.write(";")
        # an if statement's branches already end with a newline
        if node.is_not(NodeKind.IF):
            self.out.write("\n")

    def _indent(self) -> None:
        self.out.write(_INDENT * max(self.indent_level, 0))


def format_ast(ast: Iterable["DeclNode"]) -> str:
    """Render a list of global declarations as source text."""
    buffer = io.StringIO()
    NodePrinter(buffer).visit_ast(ast)
    return buffer.getvalue()