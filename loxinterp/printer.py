"""Renders syntax trees as parenthesised prefix text."""

from __future__ import annotations

from typing import Union

from .syntax import (
    Assign,
    Binary,
    BlockStmt,
    Call,
    Expr,
    ExpressionStmt,
    Grouping,
    IfStmt,
    Literal,
    PrintStmt,
    Stmt,
    Unary,
    Variable,
    VarStmt,
    Visitor,
    WhileStmt,
)
from .values import value_to_string


class AstPrinter(Visitor):
    """Turns an expression or statement into a Lisp-like string."""

    def print(self, node: Union[Expr, Stmt]) -> str:
        """Return the text form of an expression or statement."""
        return node.accept(self)

    def visit_assign_expr(self, expr: Assign) -> str:
        return f"(assign {expr.name.lexeme} = {self.print(expr.value)})"

    def visit_binary_expr(self, expr: Binary) -> str:
        return f"({expr.op.lexeme} {self.print(expr.left)} {self.print(expr.right)})"

    def visit_call_expr(self, expr: Call) -> str:
        return f"(call {self.print(expr.callee)})"

    def visit_grouping_expr(self, expr: Grouping) -> str:
        return f"(group {self.print(expr.expression)})"

    def visit_literal_expr(self, expr: Literal) -> str:
        return value_to_string(expr.value)

    def visit_unary_expr(self, expr: Unary) -> str:
        return f"({expr.op.lexeme} {self.print(expr.right)})"

    def visit_variable_expr(self, expr: Variable) -> str:
        return expr.name.lexeme

    def visit_block_stmt(self, stmt: BlockStmt) -> str:
        parts = "".join(f" {self.print(inner)}" for inner in stmt.statements)
        return f"(block{parts})"

    def visit_expression_stmt(self, stmt: ExpressionStmt) -> str:
        return f"(; {self.print(stmt.expression)})"

    def visit_if_stmt(self, stmt: IfStmt) -> str:
        text = f"(if {self.print(stmt.condition)} {self.print(stmt.then_branch)}"
        if stmt.else_branch is not None:
            text += f" else {self.print(stmt.else_branch)}"
        return text + ")"

    def visit_print_stmt(self, stmt: PrintStmt) -> str:
        return f"(print {self.print(stmt.expression)})"

    def visit_var_stmt(self, stmt: VarStmt) -> str:
        if stmt.initializer is None:
            return f"(var {stmt.name.lexeme})"
        return f"(var {stmt.name.lexeme} = {self.print(stmt.initializer)})"

    def visit_while_stmt(self, stmt: WhileStmt) -> str:
        return f"(while {self.print(stmt.condition)} {self.print(stmt.body)})"