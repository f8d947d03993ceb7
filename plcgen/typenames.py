"""Declared type names and literal spellings in Java."""

from __future__ import annotations

from decimal import Decimal

from . import ast
from .errors import GeneratorError

PRIMITIVES: dict[str, str] = {
    "Integer": "int",
    "Decimal": "double",
    "Boolean": "boolean",
    "Character": "char",
    "String": "String",
}


def translate(type_name: str) -> str:
    """Java spelling of a declared type; class names pass through unchanged."""
    return PRIMITIVES.get(type_name, type_name)


def return_type(type_name: str | None) -> str:
    if type_name is None or type_name == ast.NIL:
        return "void"
    return translate(type_name)


def infer_declared_type(value: ast.Expr | None) -> str | None:
    """Declared type for a type-less local, from the literal kind of its initializer.

    Only the literal kind is consulted, never the resolved semantic type.
    Returns None when the initializer is absent or not a primitive literal.
    """
    if not isinstance(value, ast.Literal):
        return None
    if value.kind not in PRIMITIVES:
        return None
    return value.kind


def plain_decimal(value: object) -> str:
    """Exact positional text of a decimal value, never scientific notation."""
    if isinstance(value, float):
        value = Decimal(repr(value))
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return format(value, "f")


def render_literal(literal: ast.Literal) -> str:
    kind = literal.kind
    value = literal.value
    if kind is None:
        raise GeneratorError("literal has no kind", literal)
    if kind == ast.DECIMAL:
        return plain_decimal(value)
    if kind == ast.INTEGER:
        return str(int(value))
    if kind == ast.BOOLEAN:
        return "true" if value else "false"
    if kind == ast.CHARACTER:
        return "'" + str(value) + "'"
    if kind == ast.STRING:
        return '"' + str(value) + '"'
    if kind == ast.NIL:
        return "null"
    return str(value)
