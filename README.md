# vslc

`vslc` provides front-end pieces for a compiler of VSL, a small statically
typed language with functions, external functions, global and local
variables, classes with fields, constructors and methods, `if`/`else`
statements and integer/boolean expressions.

It is a library for building, inspecting and printing VSL programs in
memory. It has no command of its own.

## Modules

- `vslc.types` – the type system.
  - `Type` with its `TypeKind` (`ERROR`, `VOID`, `BOOL`, `INT`, `NAMED`,
    `FUNCTION`, `CLASS`); `is_valid()` is false for Void and Error, and
    `str()` gives the printed form (`Int`, `Bool`, `Void`, `ErrorType`).
  - `SimpleType` for the builtin types.
  - `NamedType`, compared and hashed by name, with an optional
    `underlying_type`. It prints as `A (aka Int)`; intermediate names are
    skipped, and a class underlying type adds nothing.
  - `FunctionType` with `params`, `return_type`, `ctor` and `self_type`;
    `is_method()` is true when there is a self type and it is not a
    constructor. It prints as `(Int, Bool) -> Void`.
  - `ClassType`, whose `set_field(name, type, index, access)` records a
    `ClassField` and raises `DuplicateFieldError` for a name already used,
    and whose `get_field(name)` returns an invalid (falsy) `ClassField` for an
    unknown name.
  - `Access` (`PUBLIC`, `PRIVATE`, `NONE`) and `merge_access(parent, child)`:
    a private parent hides the child, a public parent lets the child decide.
- `vslc.nodes` – statement and expression nodes, each tagged with a
  `NodeKind`: `BlockNode`, `EmptyNode`, `IfNode`, `ReturnNode`, `IdentNode`,
  `LiteralNode` (a `bit_width` of 1 marks a boolean), `UnaryNode`,
  `BinaryNode`, `TernaryNode`, `CallNode`, `ArgNode`, `FieldAccessNode`,
  `MethodCallNode` and `SelfNode`. Every node takes an optional keyword
  `location` and has `accept(visitor)`, `is_(kind)`, `is_not(kind)` and
  `is_expr()`.
- `vslc.decls` – declaration nodes: `FunctionNode`, `ExtFuncNode`,
  `ParamNode`, `VariableNode`, and `ClassNode` with `FieldNode`,
  `MethodNode` and `CtorNode`. `ClassNode.add_field` records the field in the
  class's `ClassType` and raises `DuplicateFieldError` for a repeated name.
- `vslc.visitor` – `NodeVisitor`, whose `visit_*` methods do nothing by
  default; override the ones you need and call `visit_ast` on a list of
  declarations.
- `vslc.context` – `VSLContext`, which keeps the nodes of a program, the
  ordered `global_decls`, the builtin types (`int_type`, `bool_type`,
  `void_type`, `error_type`) and unique named, function and class types, so
  types can be compared by identity. `create_named_type` raises
  `DuplicateTypeError` if the name exists; `get_named_type` returns the
  existing type or creates it.
- `vslc.printer` – `NodePrinter`, a visitor that writes indented VSL source
  to a text stream, and `format_ast(ast)`, which returns it as a string.
- `vslc.diag` – `Diag`, which writes diagnostics at a `DiagLevel`
  (`INTERNAL`, `FATAL`, `ERROR`, `WARNING`), optionally with a location, and
  counts them in `num_errors` and `num_warnings`. Colour is used when asked
  for, or by default when the stream is a terminal.
- `vslc.options` – `OptionParser`, which reads compiler arguments
  (`-h`/`--help`, `-l`, `-p`, `-g`, `-o <file>`, `-O0`/`-O1`, and one input
  file, where `-` means standard input) into `action`, `optimize`, `infile`
  and `outfile` (default `a.out`). Bad arguments are written to the error
  stream and collected in `errors`; parsing goes on past them.

## Example

```python
from vslc.context import VSLContext
from vslc.decls import FunctionNode, ParamNode
from vslc.nodes import BinaryNode, BlockNode, IdentNode, LiteralNode, ReturnNode
from vslc.printer import format_ast
from vslc.types import Access

ctx = VSLContext()
body = BlockNode([ReturnNode(BinaryNode("+", IdentNode("x"), LiteralNode(1)))])
func = FunctionNode(
    Access.PUBLIC, "f", [ParamNode("x", ctx.int_type)], ctx.int_type, body
)
ctx.set_global(func)
print(format_ast(ctx.global_decls), end="")
```

prints

```
public func f(x: Int) -> Int
{
    return x + 1;
}
```

Diagnostics and options:

```python
import io

from vslc.diag import Diag, DiagLevel
from vslc.options import Action, OptionParser

out = io.StringIO()
diag = Diag(out, color=False)
diag.report(DiagLevel.ERROR, "unknown name ", "x", location="1:5")
assert out.getvalue() == "1:5: error: unknown name x\n"
assert diag.num_errors == 1

options = OptionParser().parse(["-O1", "-o", "out.o", "main.vsl"])
assert options.action is Action.COMPILE
assert options.optimize and options.outfile == "out.o"
assert options.infile == "main.vsl"
```

## What it does not do

The package has no lexer or parser, so it cannot read VSL source text; trees
are built by constructing nodes directly. It does no semantic checking, code
generation or object-file output, and it provides no command-line program or
interactive prompt: `OptionParser` only records which action was asked for.

## Testing

The test suite uses pytest and is declared under the `test` extra:

```
pip install -e .[test]
pytest
```