"""Resolved bindings attached to the tree by semantic analysis."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Type:
    """A resolved semantic type and its Java spelling."""

    name: str
    jvm_name: str


ANY = Type("Any", "Object")
NIL = Type("Nil", "Void")
COMPARABLE = Type("Comparable", "Comparable")
BOOLEAN = Type("Boolean", "boolean")
INTEGER = Type("Integer", "int")
DECIMAL = Type("Decimal", "double")
CHARACTER = Type("Character", "char")
STRING = Type("String", "String")

TYPES: dict[str, Type] = {
    t.name: t
    for t in (ANY, NIL, COMPARABLE, BOOLEAN, INTEGER, DECIMAL, CHARACTER, STRING)
}


def lookup_type(name: str) -> Type:
    """Return the built-in type called name. Raises KeyError if unknown."""
    if name not in TYPES:
        raise KeyError("unknown type '" + name + "'")
    return TYPES[name]


@dataclass(frozen=True)
class Variable:
    """A variable binding: source name, emitted name, type, mutability."""

    name: str
    jvm_name: str
    type: Type
    mutable: bool = True


@dataclass(frozen=True)
class Function:
    """A callable binding. jvm_name is what the generated call site spells."""

    name: str
    jvm_name: str
    parameter_types: list[Type] = field(default_factory=list)
    return_type: Type = NIL

    @property
    def arity(self) -> int:
        return len(self.parameter_types)


PRINT = Function("print", "System.out.println", [ANY], NIL)

BUILTINS: dict[str, Function] = {PRINT.name: PRINT}
