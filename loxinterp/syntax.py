"""Syntax tree nodes for expressions and statements, and their visitor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from .tokens import Token


class Visitor(ABC):
    """Operations over every kind of syntax tree node."""

    @abstractmethod
    def visit_assign_expr(self, expr: "Assign") -> Any: ...

    @abstractmethod
    def visit_binary_expr(self, expr: "Binary") -> Any: ...

    @abstractmethod
    def visit_call_expr(self, expr: "Call") -> Any: ...

    @abstractmethod
    def visit_grouping_expr(self, expr: "Grouping") -> Any: ...

    @abstractmethod
    def visit_literal_expr(self, expr: "Literal") -> Any: ...

    @abstractmethod
    def visit_unary_expr(self, expr: "Unary") -> Any: ...

    @abstractmethod
    def visit_variable_expr(self, expr: "Variable") -> Any: ...

    @abstractmethod
    def visit_block_stmt(self, stmt: "BlockStmt") -> Any: ...

    @abstractmethod
    def visit_expression_stmt(self, stmt: "ExpressionStmt") -> Any: ...

    @abstractmethod
    def visit_if_stmt(self, stmt: "IfStmt") -> Any: ...

    @abstractmethod
    def visit_print_stmt(self, stmt: "PrintStmt") -> Any: ...

    @abstractmethod
    def visit_var_stmt(self, stmt: "VarStmt") -> Any: ...

    @abstractmethod
    def visit_while_stmt(self, stmt: "WhileStmt") -> Any: ...


class Expr(ABC):
    """Base of all expression nodes."""

    @abstractmethod
    def accept(self, visitor: Visitor) -> Any:
        """Dispatch to the visitor method for this node."""


@dataclass(frozen=True)
class Assign(Expr):
    name: Token
    value: Expr

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_assign_expr(self)


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    op: Token
    right: Expr

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_binary_expr(self)


@dataclass(frozen=True)
class Call(Expr):
    callee: Expr
    paren: Token
    arguments: Sequence[Expr]

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_call_expr(self)


@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_grouping_expr(self)


@dataclass(frozen=True)
class Literal(Expr):
    value: Any

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_literal_expr(self)


@dataclass(frozen=True)
class Unary(Expr):
    op: Token
    right: Expr

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_unary_expr(self)


@dataclass(frozen=True)
class Variable(Expr):
    name: Token

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_variable_expr(self)


class Stmt(ABC):
    """Base of all statement nodes."""

    @abstractmethod
    def accept(self, visitor: Visitor) -> Any:
        """Dispatch to the visitor method for this node."""


@dataclass(frozen=True)
class ExpressionStmt(Stmt):
    expression: Expr

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_expression_stmt(self)


@dataclass(frozen=True)
class PrintStmt(Stmt):
    expression: Expr

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_print_stmt(self)


@dataclass(frozen=True)
class BlockStmt(Stmt):
    statements: Sequence[Stmt]

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_block_stmt(self)


@dataclass(frozen=True)
class VarStmt(Stmt):
    name: Token
    initializer: Optional[Expr]

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_var_stmt(self)


@dataclass(frozen=True)
class IfStmt(Stmt):
    condition: Expr
    then_branch: Stmt
    else_branch: Optional[Stmt]

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_if_stmt(self)


@dataclass(frozen=True)
class WhileStmt(Stmt):
    condition: Expr
    body: Stmt

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_while_stmt(self)