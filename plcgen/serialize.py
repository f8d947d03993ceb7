"""Serialization of analyzed trees to and from JSON-compatible dicts.

Each node is a dict tagged with "node" (its class name). Bindings are nested
dicts, and types are referenced by name. Decimal literal values travel as
strings so their exact text survives.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from . import ast
from .environment import Function, Type, Variable, lookup_type
from .errors import TreeFormatError


# ============================================================
# TO DICT
# ============================================================


def to_dict(node: object) -> object:
    """Recursively serialize a node (or list of nodes)."""
    if node is None:
        return None
    if isinstance(node, list):
        return [to_dict(n) for n in node]
    if isinstance(node, Type):
        return node.name
    if isinstance(node, Variable):
        return {
            "name": node.name,
            "jvm_name": node.jvm_name,
            "type": node.type.name,
            "mutable": node.mutable,
        }
    if isinstance(node, Function):
        return {
            "name": node.name,
            "jvm_name": node.jvm_name,
            "parameter_types": [t.name for t in node.parameter_types],
            "return_type": node.return_type.name,
        }
    if isinstance(node, ast.Literal):
        return {
            "node": "Literal",
            "kind": node.kind,
            "value": _literal_value_to_json(node),
            "type": to_dict(node.type),
        }
    if isinstance(node, _NODE_TYPES):
        d: dict[str, object] = {"node": type(node).__name__}
        for name in _FIELDS[type(node).__name__]:
            d[name] = to_dict(getattr(node, name))
        return d
    if isinstance(node, (bool, int, str)):
        return node
    raise TypeError("cannot serialize " + type(node).__name__)


def _literal_value_to_json(node: ast.Literal) -> object:
    if node.kind == ast.DECIMAL:
        return format(Decimal(str(node.value)), "f")
    return node.value


# ============================================================
# FROM DICT
# ============================================================


def from_dict(data: object, path: str = "$") -> ast.Node:
    """Build a node from its dict form. Raises TreeFormatError when malformed."""
    if not isinstance(data, dict):
        raise TreeFormatError("expected a node object", path)
    tag = data.get("node")
    if not isinstance(tag, str):
        raise TreeFormatError("missing 'node' tag", path)
    if tag == "Literal":
        return _literal_from_dict(data, path)
    if tag not in _FIELDS:
        raise TreeFormatError("unknown node '" + tag + "'", path)
    cls = _CLASSES[tag]
    kwargs: dict[str, object] = {}
    for name in _FIELDS[tag]:
        if name not in data:
            continue
        kwargs[name] = _field_from_json(tag, name, data[name], path + "." + name)
    try:
        return cls(**kwargs)
    except TypeError as e:
        raise TreeFormatError(str(e), path) from e


def _field_from_json(tag: str, name: str, value: object, path: str) -> object:
    if name in _TEXT_FIELDS:
        if value is None and (tag, name) in _NULLABLE_TEXT_FIELDS:
            return None
        return _text(value, path)
    if name in _FLAG_FIELDS:
        if not isinstance(value, bool):
            raise TreeFormatError("expected true or false", path)
        return value
    if name in _NAME_LIST_FIELDS:
        if not isinstance(value, list):
            raise TreeFormatError("expected a list", path)
        return [_text(v, path + "[" + str(i) + "]") for i, v in enumerate(value)]
    if value is None:
        return None
    if name in _NODE_FIELDS:
        return from_dict(value, path)
    if name in _NODE_LIST_FIELDS:
        if not isinstance(value, list):
            raise TreeFormatError("expected a list", path)
        return [from_dict(v, path + "[" + str(i) + "]") for i, v in enumerate(value)]
    if name == "variable":
        return _variable_from_dict(value, path)
    if name == "function":
        return _function_from_dict(value, path)
    if name == "type":
        return _type_from_json(value, path)
    return value


def _text(value: object, path: str) -> str:
    if not isinstance(value, str):
        raise TreeFormatError("expected a string", path)
    return value


def _literal_from_dict(data: dict, path: str) -> ast.Literal:
    kind = data.get("kind")
    value = data.get("value")
    if kind == ast.DECIMAL:
        if isinstance(value, bool):
            raise TreeFormatError("bad decimal '" + str(value) + "'", path)
        try:
            value = Decimal(str(value))
        except InvalidOperation as e:
            raise TreeFormatError("bad decimal '" + str(value) + "'", path) from e
        if not value.is_finite():
            raise TreeFormatError("bad decimal '" + str(value) + "'", path)
    elif kind == ast.BOOLEAN:
        if not isinstance(value, bool):
            raise TreeFormatError("bad boolean '" + str(value) + "'", path)
    elif kind == ast.STRING:
        if not isinstance(value, str):
            raise TreeFormatError("string literal must be a string", path)
    elif kind == ast.INTEGER:
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise TreeFormatError("bad integer '" + str(value) + "'", path)
        try:
            value = int(value)
        except ValueError as e:
            raise TreeFormatError("bad integer '" + str(value) + "'", path) from e
    elif kind == ast.CHARACTER:
        if not isinstance(value, str) or len(value) != 1:
            raise TreeFormatError("character literal must be one character", path)
    typ = _type_from_json(data.get("type"), path + ".type")
    return ast.Literal(kind, value, typ)


def _type_from_json(value: object, path: str) -> Type | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise TreeFormatError("type must be a name", path)
    try:
        return lookup_type(value)
    except KeyError as e:
        raise TreeFormatError("unknown type '" + value + "'", path) from e


def _variable_from_dict(data: object, path: str) -> Variable:
    if not isinstance(data, dict):
        raise TreeFormatError("expected a variable binding", path)
    try:
        mutable = data.get("mutable", True)
        if not isinstance(mutable, bool):
            raise TreeFormatError("expected true or false", path + ".mutable")
        return Variable(
            _text(data["name"], path + ".name"),
            _text(data["jvm_name"], path + ".jvm_name"),
            _type_from_json(data["type"], path + ".type"),
            mutable,
        )
    except KeyError as e:
        raise TreeFormatError("variable binding missing " + str(e), path) from e


def _function_from_dict(data: object, path: str) -> Function:
    if not isinstance(data, dict):
        raise TreeFormatError("expected a function binding", path)
    try:
        types = data.get("parameter_types", [])
        if not isinstance(types, list):
            raise TreeFormatError("expected a list", path + ".parameter_types")
        params = [_type_from_json(t, path + ".parameter_types") for t in types]
        return Function(
            _text(data["name"], path + ".name"),
            _text(data["jvm_name"], path + ".jvm_name"),
            params,
            _type_from_json(data.get("return_type", "Nil"), path + ".return_type"),
        )
    except KeyError as e:
        raise TreeFormatError("function binding missing " + str(e), path) from e


# ============================================================
# FIELD TABLES
# ============================================================

_FIELDS: dict[str, list[str]] = {
    "Program": ["globals", "functions"],
    "GlobalDeclaration": ["name", "type_name", "mutable", "value", "is_list", "variable"],
    "FunctionDeclaration": [
        "name",
        "parameters",
        "parameter_type_names",
        "return_type_name",
        "statements",
        "function",
    ],
    "ExpressionStatement": ["expression"],
    "VariableDeclaration": ["name", "type_name", "value", "mutable", "variable"],
    "Assignment": ["receiver", "value"],
    "If": ["condition", "then_statements", "else_statements"],
    "Switch": ["condition", "cases"],
    "Case": ["value", "statements"],
    "While": ["condition", "statements"],
    "Return": ["value"],
    "Group": ["expression", "type"],
    "Binary": ["operator", "left", "right", "type"],
    "Access": ["name", "offset", "variable"],
    "Call": ["name", "arguments", "function"],
    "ListLiteral": ["values", "type"],
}

_CLASSES: dict[str, type] = {name: getattr(ast, name) for name in _FIELDS}

_NODE_TYPES: tuple[type, ...] = tuple(_CLASSES.values())

_NODE_FIELDS: frozenset[str] = frozenset(
    {"value", "expression", "receiver", "condition", "left", "right", "offset"}
)

_NODE_LIST_FIELDS: frozenset[str] = frozenset(
    {
        "globals",
        "functions",
        "statements",
        "then_statements",
        "else_statements",
        "cases",
        "arguments",
        "values",
    }
)

_TEXT_FIELDS: frozenset[str] = frozenset(
    {"name", "operator", "type_name", "return_type_name"}
)

_NULLABLE_TEXT_FIELDS: frozenset[tuple[str, str]] = frozenset(
    {
        ("VariableDeclaration", "type_name"),
        ("FunctionDeclaration", "return_type_name"),
    }
)

_FLAG_FIELDS: frozenset[str] = frozenset({"mutable", "is_list"})

_NAME_LIST_FIELDS: frozenset[str] = frozenset({"parameters", "parameter_type_names"})
