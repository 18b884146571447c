"""Type system of the VSL language: builtin, named, function and class types."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Optional


class Access(enum.Enum):
    """Access specifier of a declaration."""

    PUBLIC = enum.auto()
    """Can be accessed anywhere."""
    PRIVATE = enum.auto()
    """Can be accessed only in the context it was declared."""
    NONE = enum.auto()
    """Not applicable, e.g. inside a function."""


def merge_access(parent: Access, child: Access) -> Access:
    """Return the access of ``child`` as seen from outside ``parent``.

    A private parent hides everything inside it; a public parent lets the
    child's own access decide.
    """
    if parent is Access.PUBLIC:
        return child
    return parent


class TypeKind(enum.Enum):
    """The kind of a :class:`Type`."""

    ERROR = enum.auto()
    VOID = enum.auto()
    BOOL = enum.auto()
    INT = enum.auto()
    NAMED = enum.auto()
    FUNCTION = enum.auto()
    CLASS = enum.auto()


_KIND_NAMES = {
    TypeKind.ERROR: "ErrorType",
    TypeKind.BOOL: "Bool",
    TypeKind.INT: "Int",
    TypeKind.VOID: "Void",
}


class Type:
    """Base class of all VSL types; ``str()`` gives the printed form."""

    def __init__(self, kind: TypeKind) -> None:
        self.kind = kind

    def is_function_type(self) -> bool:
        """True if this is a function type."""
        return self.kind is TypeKind.FUNCTION

    def is_valid(self) -> bool:
        """True if a value of this type can be stored, i.e. not Void or Error."""
        return self.kind not in (TypeKind.ERROR, TypeKind.VOID)

    def __str__(self) -> str:
        return _KIND_NAMES.get(self.kind, "InvalidType")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


class SimpleType(Type):
    """Builtin type carrying no extra data (Error, Void, Bool, Int)."""


class NamedType(Type):
    """A named, possibly still unresolved, type.

    Equality and hashing use the name only, since the underlying type may be
    filled in later.
    """

    def __init__(self, name: str) -> None:
        super().__init__(TypeKind.NAMED)
        self.name = name
        self.underlying_type: Optional[Type] = None

    def has_underlying_type(self) -> bool:
        """True once the type this name stands for is known."""
        return self.underlying_type is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NamedType):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name + self._underlying_suffix()

    def _underlying_suffix(self) -> str:
        underlying = self.underlying_type
        if underlying is None:
            return ""
        if isinstance(underlying, NamedType):
            # skip intermediate names: "A (aka Int)" rather than "A (aka B (aka Int))"
            return underlying._underlying_suffix()
        if underlying.kind is TypeKind.CLASS:
            return ""
        return f" (aka {underlying})"


class FunctionType(Type):
    """Signature of a function, method or constructor."""

    def __init__(
        self,
        params: Iterable[Type],
        return_type: Type,
        ctor: bool = False,
    ) -> None:
        super().__init__(TypeKind.FUNCTION)
        self.params: tuple[Type, ...] = tuple(params)
        self.return_type = return_type
        self.ctor = ctor
        self.self_type: Optional[NamedType] = None

    def has_self_type(self) -> bool:
        """True for methods and constructors."""
        return self.self_type is not None

    def is_method(self) -> bool:
        """True if this is a method: has a self type but is not a constructor."""
        return not self.ctor and self.has_self_type()

    def _key(self) -> tuple:
        return (self.ctor, self.self_type, self.return_type, self.params)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FunctionType):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        params = ", ".join(str(param) for param in self.params)
        return f"({params}) -> {self.return_type}"


@dataclass(frozen=True)
class ClassField:
    """A field entry of a class type; the default value means "no such field"."""

    type: Optional[Type] = None
    index: int = 0
    access: Access = Access.NONE

    def is_valid(self) -> bool:
        """True if this describes an existing field."""
        return self.type is not None and self.access is not Access.NONE

    def __bool__(self) -> bool:
        return self.is_valid()


class DuplicateFieldError(ValueError):
    """Raised when a class type already has a field of the given name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"duplicate field '{name}'")
        self.name = name


class ClassType(Type):
    """Mutable, initially opaque type of objects of a class."""

    def __init__(self) -> None:
        super().__init__(TypeKind.CLASS)
        self._fields: dict[str, ClassField] = {}

    def get_field(self, name: str) -> ClassField:
        """Return the named field, or an invalid ClassField if there is none."""
        return self._fields.get(name, ClassField())

    def set_field(self, name: str, type: Type, index: int, access: Access) -> ClassField:
        """Add a field; raise DuplicateFieldError if the name is taken."""
        if name in self._fields:
            raise DuplicateFieldError(name)
        field = ClassField(type, index, access)
        self._fields[name] = field
        return field

    def __str__(self) -> str:
        return "<class type>"