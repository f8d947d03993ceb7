"""PLC syntax tree: fully analyzed node definitions.

Nodes arrive from the upstream lexer/parser/analyzer with every binding already
attached. The generator reads them and never mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .environment import Function, Type, Variable


# ============================================================
# LITERAL KINDS
# ============================================================

INTEGER: str = "Integer"
DECIMAL: str = "Decimal"
BOOLEAN: str = "Boolean"
CHARACTER: str = "Character"
STRING: str = "String"
NIL: str = "Nil"

LITERAL_KINDS: frozenset[str] = frozenset(
    {INTEGER, DECIMAL, BOOLEAN, CHARACTER, STRING, NIL}
)


# ============================================================
# EXPRESSIONS
# ============================================================


@dataclass(frozen=True)
class Literal:
    """Constant value. kind is one of LITERAL_KINDS.

    Decimal values are decimal.Decimal, integers are int, characters are a
    one-character str.
    """

    kind: str | None
    value: object
    type: Type | None = None


@dataclass(frozen=True)
class Group:
    """( expression )."""

    expression: Expr
    type: Type | None = None


@dataclass(frozen=True)
class Binary:
    """left operator right."""

    operator: str
    left: Expr
    right: Expr
    type: Type | None = None


@dataclass(frozen=True)
class Access:
    """name or name[offset]."""

    name: str | None
    offset: Expr | None = None
    variable: Variable | None = None

    @property
    def type(self) -> Type | None:
        if self.variable is None:
            return None
        return self.variable.type


@dataclass(frozen=True)
class Call:
    """name(arguments)."""

    name: str
    arguments: list[Expr] = field(default_factory=list)
    function: Function | None = None

    @property
    def type(self) -> Type | None:
        if self.function is None:
            return None
        return self.function.return_type


@dataclass(frozen=True)
class ListLiteral:
    """[values]."""

    values: list[Expr] = field(default_factory=list)
    type: Type | None = None


# ============================================================
# STATEMENTS
# ============================================================


@dataclass(frozen=True)
class ExpressionStatement:
    """Bare expression as statement."""

    expression: Expr


@dataclass(frozen=True)
class VariableDeclaration:
    """LET name: Type = value."""

    name: str
    type_name: str | None = None
    value: Expr | None = None
    mutable: bool = True
    variable: Variable | None = None


@dataclass(frozen=True)
class Assignment:
    """receiver = value."""

    receiver: Expr
    value: Expr


@dataclass(frozen=True)
class If:
    """IF condition DO ... ELSE ... END."""

    condition: Expr
    then_statements: list[Stmt] = field(default_factory=list)
    else_statements: list[Stmt] = field(default_factory=list)


@dataclass(frozen=True)
class Case:
    """CASE value: ... ; value is None for DEFAULT."""

    value: Expr | None
    statements: list[Stmt] = field(default_factory=list)


@dataclass(frozen=True)
class Switch:
    """SWITCH condition CASE ... DEFAULT ... END."""

    condition: Expr
    cases: list[Case] = field(default_factory=list)


@dataclass(frozen=True)
class While:
    """WHILE condition DO ... END."""

    condition: Expr
    statements: list[Stmt] = field(default_factory=list)


@dataclass(frozen=True)
class Return:
    """RETURN value."""

    value: Expr | None


# ============================================================
# DECLARATIONS
# ============================================================


@dataclass(frozen=True)
class GlobalDeclaration:
    """VAR/VAL/LIST name: Type = value.

    is_list marks a growable list; type_name is then the element type.
    """

    name: str
    type_name: str
    mutable: bool = True
    value: Expr | None = None
    is_list: bool = False
    variable: Variable | None = None


@dataclass(frozen=True)
class FunctionDeclaration:
    """FUN name(params): ReturnType DO ... END."""

    name: str
    parameters: list[str] = field(default_factory=list)
    parameter_type_names: list[str] = field(default_factory=list)
    return_type_name: str | None = None
    statements: list[Stmt] = field(default_factory=list)
    function: Function | None = None


@dataclass(frozen=True)
class Program:
    """Top-level source: globals, then functions."""

    globals: list[GlobalDeclaration] = field(default_factory=list)
    functions: list[FunctionDeclaration] = field(default_factory=list)


Expr = Literal | Group | Binary | Access | Call | ListLiteral
Stmt = (
    ExpressionStatement
    | VariableDeclaration
    | Assignment
    | If
    | Switch
    | Case
    | While
    | Return
)
Node = Program | GlobalDeclaration | FunctionDeclaration | Stmt | Expr
