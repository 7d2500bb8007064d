"""Tree-walking evaluator for parsed statements."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Iterable, Optional, TextIO

from .environment import Environment
from .errors import LoxRuntimeError
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
from .tokens import Token, TokenType
from .values import value_to_string

_NUMERIC_OPERATORS: dict[TokenType, Callable[[float, float], Any]] = {
    TokenType.GREATER: operator.gt,
    TokenType.GREATER_EQUAL: operator.ge,
    TokenType.LESS: operator.lt,
    TokenType.LESS_EQUAL: operator.le,
    TokenType.MINUS: operator.sub,
    TokenType.STAR: operator.mul,
}


def is_truthy(value: Any) -> bool:
    """Return whether a value counts as true: only nil and false do not."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def _values_equal(left: Any, right: Any) -> bool:
    return type(left) is type(right) and left == right


def _is_number(value: Any) -> bool:
    return isinstance(value, float)


def _check_number_operand(op: Token, operand: Any) -> None:
    if not _is_number(operand):
        raise LoxRuntimeError(op, "Operand must be a number.")


def _check_number_operands(op: Token, left: Any, right: Any) -> None:
    if not (_is_number(left) and _is_number(right)):
        raise LoxRuntimeError(op, "Operands must be numbers.")


class Interpreter(Visitor):
    """Runs statements, writing program output to ``out`` and errors to ``err``."""

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> None:
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.globals = Environment()
        self._environment = self.globals

    def interpret(self, statements: Iterable[Optional[Stmt]]) -> bool:
        """Run the statements; report a runtime error and stop at the first one.

        Returns True if every statement ran, False if a runtime error stopped it.
        """
        try:
            for statement in statements:
                if statement is not None:
                    self.execute(statement)
        except LoxRuntimeError as error:
            print(f"RuntimeError: {error.message}\n[line {error.token.line}]", file=self.err)
            return False
        return True

    def evaluate(self, expr: Expr) -> Any:
        """Evaluate an expression and return its value."""
        return expr.accept(self)

    def execute(self, stmt: Stmt) -> None:
        """Execute one statement."""
        stmt.accept(self)

    def execute_block(self, statements: Iterable[Stmt], environment: Environment) -> None:
        """Execute statements in ``environment``, restoring the current scope afterwards."""
        previous = self._environment
        self._environment = environment
        try:
            for statement in statements:
                self.execute(statement)
        finally:
            self._environment = previous

    # --- statements ---

    def visit_expression_stmt(self, stmt: ExpressionStmt) -> None:
        self.evaluate(stmt.expression)

    def visit_print_stmt(self, stmt: PrintStmt) -> None:
        value = self.evaluate(stmt.expression)
        print(value_to_string(value), file=self.out)

    def visit_var_stmt(self, stmt: VarStmt) -> None:
        value = None
        if stmt.initializer is not None:
            value = self.evaluate(stmt.initializer)
        self._environment.define(stmt.name.lexeme, value)

    def visit_block_stmt(self, stmt: BlockStmt) -> None:
        self.execute_block(stmt.statements, Environment(self._environment))

    def visit_if_stmt(self, stmt: IfStmt) -> None:
        if is_truthy(self.evaluate(stmt.condition)):
            self.execute(stmt.then_branch)
        elif stmt.else_branch is not None:
            self.execute(stmt.else_branch)

    def visit_while_stmt(self, stmt: WhileStmt) -> None:
        while is_truthy(self.evaluate(stmt.condition)):
            self.execute(stmt.body)

    # --- expressions ---

    def visit_assign_expr(self, expr: Assign) -> Any:
        value = self.evaluate(expr.value)
        self._environment.assign(expr.name, value)
        return value

    def visit_variable_expr(self, expr: Variable) -> Any:
        return self._environment.get(expr.name)

    def visit_literal_expr(self, expr: Literal) -> Any:
        return expr.value

    def visit_grouping_expr(self, expr: Grouping) -> Any:
        return self.evaluate(expr.expression)

    def visit_unary_expr(self, expr: Unary) -> Any:
        right = self.evaluate(expr.right)
        if expr.op.type == TokenType.MINUS:
            _check_number_operand(expr.op, right)
            return -right
        if expr.op.type == TokenType.BANG:
            return not is_truthy(right)
        raise LoxRuntimeError(expr.op, "Invalid unary operator.")

    def visit_binary_expr(self, expr: Binary) -> Any:
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        kind = expr.op.type

        numeric = _NUMERIC_OPERATORS.get(kind)
        if numeric is not None:
            _check_number_operands(expr.op, left, right)
            return numeric(left, right)
        if kind == TokenType.BANG_EQUAL:
            return not _values_equal(left, right)
        if kind == TokenType.EQUAL_EQUAL:
            return _values_equal(left, right)
        if kind == TokenType.SLASH:
            _check_number_operands(expr.op, left, right)
            if right == 0.0:
                raise LoxRuntimeError(expr.op, "Division by zero.")
            return left / right
        if kind == TokenType.PLUS:
            if _is_number(left) and _is_number(right):
                return left + right
            if isinstance(left, str) and isinstance(right, str):
                return left + right
            raise LoxRuntimeError(expr.op, "Operands must be two numbers or two strings.")
        raise LoxRuntimeError(expr.op, "Invalid binary operator.")

    def visit_call_expr(self, expr: Call) -> Any:
        raise LoxRuntimeError(expr.paren, "Can only call functions and classes.")