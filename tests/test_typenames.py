"""Type-name translation and literal spelling tests."""

from decimal import Decimal

import pytest

from plcgen import ast
from plcgen.environment import DECIMAL
from plcgen.errors import GeneratorError
from plcgen.typenames import (
    infer_declared_type,
    plain_decimal,
    render_literal,
    return_type,
    translate,
)

from trees import boolean, char, decimal, integer, string, var


@pytest.mark.parametrize(
    "type_name,expected",
    [
        ("Integer", "int"),
        ("Decimal", "double"),
        ("Boolean", "boolean"),
        ("Character", "char"),
        ("String", "String"),
        ("Point", "Point"),
        ("Any", "Any"),
    ],
)
def test_translate(type_name: str, expected: str):
    assert translate(type_name) == expected


def test_return_type_void_when_absent():
    assert return_type(None) == "void"
    assert return_type("Nil") == "void"
    assert return_type("Decimal") == "double"


def test_infer_from_literal_kind():
    assert infer_declared_type(integer(1)) == "Integer"
    assert infer_declared_type(decimal("1.0")) == "Decimal"
    assert infer_declared_type(boolean(True)) == "Boolean"
    assert infer_declared_type(char("c")) == "Character"
    assert infer_declared_type(string("s")) == "String"


def test_infer_ignores_resolved_type():
    # kind says Integer even though analysis resolved Decimal
    lit = ast.Literal(ast.INTEGER, 1, DECIMAL)
    assert infer_declared_type(lit) == "Integer"


def test_infer_undefined_for_non_literals():
    assert infer_declared_type(var("x")) is None
    assert infer_declared_type(None) is None
    assert infer_declared_type(ast.Literal(ast.NIL, None)) is None


@pytest.mark.parametrize(
    "value,expected",
    [
        (Decimal("1.0"), "1.0"),
        (Decimal("2"), "2"),
        (Decimal("1E+3"), "1000"),
        (Decimal("1E-7"), "0.0000001"),
        (Decimal("123456789.123456789123456789"), "123456789.123456789123456789"),
        (Decimal("-0.50"), "-0.50"),
    ],
)
def test_plain_decimal(value: Decimal, expected: str):
    assert plain_decimal(value) == expected


def test_plain_decimal_from_float_keeps_shortest_text():
    assert plain_decimal(0.1) == "0.1"
    assert plain_decimal(1e20) == "100000000000000000000"


@pytest.mark.parametrize(
    "literal,expected",
    [
        (integer(0), "0"),
        (integer(10**30), "1000000000000000000000000000000"),
        (decimal("3.14"), "3.14"),
        (boolean(True), "true"),
        (boolean(False), "false"),
        (char("y"), "'y'"),
        (string("Hello, World!"), '"Hello, World!"'),
        (string("a\\nb"), '"a\\nb"'),
        (ast.Literal(ast.NIL, None), "null"),
        (ast.Literal("Symbol", "sym"), "sym"),
    ],
)
def test_render_literal(literal: ast.Literal, expected: str):
    assert render_literal(literal) == expected


def test_render_literal_without_kind_fails():
    with pytest.raises(GeneratorError, match="literal has no kind"):
        render_literal(ast.Literal(None, 1))
