"""Java generator: converts an analyzed PLC tree into Java source text.

Every emitter takes the indentation depth it starts at and writes into a
`Layout`. Statements always end themselves (with `;` or a closing brace), so a
statement renders the same inside a function body, a block, or a switch case.
"""

from __future__ import annotations

from typing import TextIO

from . import ast
from .errors import GeneratorError
from .layout import Layout
from .typenames import (
    infer_declared_type,
    render_literal,
    return_type,
    translate,
)

POWER_OPERATOR: str = "^"
POWER_FUNCTION: str = "Math.pow"
EXIT_FUNCTION: str = "System.exit"
ENTRY_NAME: str = "main"


def generate(node: ast.Node, writer: TextIO, class_name: str = "Main") -> None:
    """Emit node to writer, then close writer.

    The text is written in one piece after the whole pass succeeds; on failure
    nothing is written. writer is closed either way.
    """
    try:
        text = Generator(class_name).render(node)
        writer.write(text)
    finally:
        writer.close()


def to_source(node: ast.Node, class_name: str = "Main") -> str:
    """Render node as Java source text."""
    return Generator(class_name).render(node)


class Generator:
    def __init__(self, class_name: str = "Main") -> None:
        self.class_name: str = class_name

    # ── Public ──────────────────────────────────────────────

    def render(self, node: ast.Node, depth: int = 0) -> str:
        out = Layout()
        self._emit_node(out, node, depth)
        return out.text()

    def _emit_node(self, out: Layout, node: ast.Node, depth: int) -> None:
        if isinstance(node, ast.Program):
            self._emit_program(out, node)
            return
        if isinstance(node, ast.GlobalDeclaration):
            self._emit_global(out, node)
            return
        if isinstance(node, ast.FunctionDeclaration):
            self._emit_function(out, node, depth)
            return
        if isinstance(node, _STATEMENTS):
            self._emit_stmt(out, node, depth)
            return
        self._emit_expr(out, node)

    # ── Program ─────────────────────────────────────────────

    def _emit_program(self, out: Layout, program: ast.Program) -> None:
        out.write("public class " + self.class_name + " {")
        out.newline(0)
        if program.globals:
            for decl in program.globals:
                out.newline(1)
                self._emit_global(out, decl)
            out.newline(0)
        if not any(f.name == ENTRY_NAME for f in program.functions):
            self._emit_entry_point(out)
            out.newline(0)
        for function in program.functions:
            out.newline(1)
            self._emit_function(out, function, 1)
            out.newline(0)
        out.newline(0)
        out.write("}")
        out.newline(0)

    def _emit_entry_point(self, out: Layout) -> None:
        out.newline(1)
        out.write("public static void main(String[] args) {")
        out.newline(2)
        out.write(
            EXIT_FUNCTION + "(new " + self.class_name + "()." + ENTRY_NAME + "());"
        )
        out.newline(1)
        out.write("}")

    # ── Declarations ────────────────────────────────────────

    def _emit_global(self, out: Layout, decl: ast.GlobalDeclaration) -> None:
        if not decl.mutable:
            out.write("final ")
        out.write(translate(decl.type_name))
        if decl.is_list:
            out.write("[]")
        out.write(" ", decl.name)
        if decl.value is not None:
            out.write(" = ")
            if decl.is_list and isinstance(decl.value, ast.ListLiteral):
                self._emit_list_initializer(out, decl.value)
            else:
                self._emit_expr(out, decl.value)
        out.write(";")

    def _emit_list_initializer(self, out: Layout, values: ast.ListLiteral) -> None:
        parts: list[str] = []
        for value in values.values:
            if isinstance(value, ast.Literal):
                parts.append(render_literal(value))
            else:
                parts.append(self.render(value))
        out.write("{" + ", ".join(parts) + "}")

    def _emit_function(
        self, out: Layout, decl: ast.FunctionDeclaration, depth: int
    ) -> None:
        if len(decl.parameters) != len(decl.parameter_type_names):
            raise GeneratorError(
                "function '"
                + decl.name
                + "' has "
                + str(len(decl.parameters))
                + " parameters but "
                + str(len(decl.parameter_type_names))
                + " parameter types",
                decl,
            )
        params: list[str] = []
        for name, type_name in zip(decl.parameters, decl.parameter_type_names):
            params.append(translate(type_name) + " " + name)
        out.write(
            return_type(decl.return_type_name)
            + " "
            + decl.name
            + "("
            + ", ".join(params)
            + ") {"
        )
        if not decl.statements:
            out.write("}")
            return
        self._emit_block(out, decl.statements, depth)

    # ── Statements ──────────────────────────────────────────

    def _emit_block(self, out: Layout, stmts: list[ast.Stmt], depth: int) -> None:
        """Body lines at depth + 1, then the closing brace back at depth."""
        for stmt in stmts:
            out.newline(depth + 1)
            self._emit_stmt(out, stmt, depth + 1)
        out.newline(depth)
        out.write("}")

    def _emit_stmt(self, out: Layout, stmt: ast.Stmt, depth: int) -> None:
        if isinstance(stmt, ast.ExpressionStatement):
            self._emit_expr(out, stmt.expression)
            out.write(";")
            return
        if isinstance(stmt, ast.VariableDeclaration):
            self._emit_declaration(out, stmt)
            return
        if isinstance(stmt, ast.Assignment):
            self._emit_expr(out, stmt.receiver)
            out.write(" = ")
            self._emit_expr(out, stmt.value)
            out.write(";")
            return
        if isinstance(stmt, ast.If):
            self._emit_if(out, stmt, depth)
            return
        if isinstance(stmt, ast.Switch):
            self._emit_switch(out, stmt, depth)
            return
        if isinstance(stmt, ast.Case):
            self._emit_case(out, stmt, depth)
            return
        if isinstance(stmt, ast.While):
            self._emit_while(out, stmt, depth)
            return
        if isinstance(stmt, ast.Return):
            if stmt.value is None:
                raise GeneratorError("return without a value", stmt)
            out.write("return ")
            self._emit_expr(out, stmt.value)
            out.write(";")
            return
        raise GeneratorError("unhandled statement type: " + type(stmt).__name__)

    def _emit_declaration(self, out: Layout, stmt: ast.VariableDeclaration) -> None:
        type_name = stmt.type_name
        if type_name is None:
            type_name = infer_declared_type(stmt.value)
            if type_name is None:
                raise GeneratorError(
                    "cannot infer a type for '"
                    + stmt.name
                    + "' without a literal initializer",
                    stmt,
                )
        if not stmt.mutable:
            out.write("final ")
        out.write(translate(type_name), " ", stmt.name)
        if stmt.value is not None:
            out.write(" = ")
            self._emit_expr(out, stmt.value)
        out.write(";")

    def _emit_if(self, out: Layout, stmt: ast.If, depth: int) -> None:
        out.write("if (")
        self._emit_expr(out, stmt.condition)
        out.write(") {")
        self._emit_block(out, stmt.then_statements, depth)
        if stmt.else_statements:
            out.write(" else {")
            self._emit_block(out, stmt.else_statements, depth)

    def _emit_switch(self, out: Layout, stmt: ast.Switch, depth: int) -> None:
        out.write("switch (")
        self._emit_expr(out, stmt.condition)
        out.write(") {")
        for case in stmt.cases:
            out.newline(depth + 1)
            self._emit_case(out, case, depth + 1)
        out.newline(depth)
        out.write("}")

    def _emit_case(self, out: Layout, case: ast.Case, depth: int) -> None:
        if case.value is None:
            out.write("default:")
        else:
            out.write("case ")
            self._emit_expr(out, case.value)
            out.write(":")
        for stmt in case.statements:
            out.newline(depth + 1)
            self._emit_stmt(out, stmt, depth + 1)
        if case.value is not None:
            out.newline(depth + 1)
            out.write("break;")

    def _emit_while(self, out: Layout, stmt: ast.While, depth: int) -> None:
        out.write("while (")
        self._emit_expr(out, stmt.condition)
        out.write(") {")
        if not stmt.statements:
            out.write("}")
            return
        self._emit_block(out, stmt.statements, depth)

    # ── Expressions ─────────────────────────────────────────

    def _emit_expr(self, out: Layout, expr: ast.Expr) -> None:
        if isinstance(expr, ast.Literal):
            out.write(render_literal(expr))
            return
        if isinstance(expr, ast.Group):
            out.write("(")
            self._emit_expr(out, expr.expression)
            out.write(")")
            return
        if isinstance(expr, ast.Binary):
            self._emit_binary(out, expr)
            return
        if isinstance(expr, ast.Access):
            self._emit_access(out, expr)
            return
        if isinstance(expr, ast.Call):
            self._emit_call(out, expr)
            return
        if isinstance(expr, ast.ListLiteral):
            out.write("{")
            self._emit_comma_separated(out, expr.values)
            out.write("}")
            return
        raise GeneratorError("unhandled expression type: " + type(expr).__name__)

    def _emit_binary(self, out: Layout, expr: ast.Binary) -> None:
        if expr.operator == POWER_OPERATOR:
            out.write(POWER_FUNCTION + "(")
            self._emit_expr(out, expr.left)
            out.write(", ")
            self._emit_expr(out, expr.right)
            out.write(")")
            return
        self._emit_expr(out, expr.left)
        out.write(" " + expr.operator + " ")
        self._emit_expr(out, expr.right)

    def _emit_access(self, out: Layout, expr: ast.Access) -> None:
        if expr.variable is None:
            raise GeneratorError("unresolved variable '" + str(expr.name) + "'", expr)
        if not expr.variable.jvm_name:
            raise GeneratorError("variable binding has no name", expr)
        out.write(expr.variable.jvm_name)
        if expr.offset is not None:
            out.write("[")
            self._emit_expr(out, expr.offset)
            out.write("]")

    def _emit_call(self, out: Layout, expr: ast.Call) -> None:
        if expr.function is None:
            raise GeneratorError("unresolved function '" + expr.name + "'", expr)
        out.write(expr.function.jvm_name + "(")
        self._emit_comma_separated(out, expr.arguments)
        out.write(")")

    def _emit_comma_separated(self, out: Layout, exprs: list[ast.Expr]) -> None:
        first = True
        for e in exprs:
            if not first:
                out.write(", ")
            first = False
            self._emit_expr(out, e)


_STATEMENTS = (
    ast.ExpressionStatement,
    ast.VariableDeclaration,
    ast.Assignment,
    ast.If,
    ast.Switch,
    ast.Case,
    ast.While,
    ast.Return,
)
