"""Recursive-descent parser that turns tokens into statements."""

from __future__ import annotations

import sys
from typing import Callable, Optional, Sequence

from .syntax import (
    Assign,
    Binary,
    BlockStmt,
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
    WhileStmt,
)
from .tokens import Token, TokenType

# Token kinds that begin a statement; the parser resumes before them after an error.
_STATEMENT_STARTS = frozenset(
    {
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    }
)


class ParseError(Exception):
    """A syntax error found at a particular token."""

    def __init__(self, token: Token, message: str) -> None:
        self.token = token
        self.message = message
        if token.type == TokenType.END_OF_FILE:
            where = " at end"
        else:
            where = f" at '{token.lexeme}'"
        super().__init__(f"[line {token.line}] Error{where}: {message}")


class Parser:
    """Parses a token list into a list of statements.

    Syntax errors are written to standard error and kept in ``errors``;
    the parser then skips to the next statement and carries on. Declarations
    that failed to parse are left out of the result.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = list(tokens)
        self._current = 0
        self.errors: list[ParseError] = []

    @property
    def had_error(self) -> bool:
        """Whether any syntax error was reported."""
        return bool(self.errors)

    def parse(self) -> list[Stmt]:
        """Parse every declaration up to the end of input."""
        statements: list[Stmt] = []
        while not self._at_end():
            statement = self._declaration()
            if statement is not None:
                statements.append(statement)
        return statements

    # --- statements ---

    def _declaration(self) -> Optional[Stmt]:
        try:
            if self._match(TokenType.VAR):
                return self._var_declaration()
            return self._statement()
        except ParseError:
            self._synchronize()
            return None

    def _var_declaration(self) -> Stmt:
        name = self._consume(TokenType.IDENTIFIER, "Expect variable name.")
        initializer = self._expression() if self._match(TokenType.EQUAL) else None
        self._consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
        return VarStmt(name, initializer)

    def _statement(self) -> Stmt:
        if self._match(TokenType.IF):
            return self._if_statement()
        if self._match(TokenType.PRINT):
            return self._print_statement()
        if self._match(TokenType.WHILE):
            return self._while_statement()
        if self._match(TokenType.LEFT_BRACE):
            return BlockStmt(self._block())
        return self._expression_statement()

    def _if_statement(self) -> Stmt:
        self._consume(TokenType.LEFT_PAREN, "Expect '(' after 'if'.")
        condition = self._expression()
        self._consume(TokenType.RIGHT_PAREN, "Expect ')' after if condition.")
        then_branch = self._statement()
        else_branch = self._statement() if self._match(TokenType.ELSE) else None
        return IfStmt(condition, then_branch, else_branch)

    def _while_statement(self) -> Stmt:
        self._consume(TokenType.LEFT_PAREN, "Expect '(' after 'while'.")
        condition = self._expression()
        self._consume(TokenType.RIGHT_PAREN, "Expect ')' after condition.")
        body = self._statement()
        return WhileStmt(condition, body)

    def _print_statement(self) -> Stmt:
        value = self._expression()
        self._consume(TokenType.SEMICOLON, "Expect ';' after value.")
        return PrintStmt(value)

    def _expression_statement(self) -> Stmt:
        expr = self._expression()
        self._consume(TokenType.SEMICOLON, "Expect ';' after expression.")
        return ExpressionStmt(expr)

    def _block(self) -> list[Stmt]:
        statements: list[Stmt] = []
        while not self._check(TokenType.RIGHT_BRACE) and not self._at_end():
            statement = self._declaration()
            if statement is not None:
                statements.append(statement)
        self._consume(TokenType.RIGHT_BRACE, "Expect '}' after block.")
        return statements

    # --- expressions ---

    def _expression(self) -> Expr:
        return self._assignment()

    def _assignment(self) -> Expr:
        expr = self._equality()
        if self._match(TokenType.EQUAL):
            equals = self._previous()
            value = self._assignment()
            if isinstance(expr, Variable):
                return Assign(expr.name, value)
            raise self._error(equals, "Invalid assignment target.")
        return expr

    def _binary(self, operand: Callable[[], Expr], *kinds: TokenType) -> Expr:
        expr = operand()
        while self._match(*kinds):
            op = self._previous()
            right = operand()
            expr = Binary(expr, op, right)
        return expr

    def _equality(self) -> Expr:
        return self._binary(self._comparison, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)

    def _comparison(self) -> Expr:
        return self._binary(
            self._term,
            TokenType.GREATER,
            TokenType.GREATER_EQUAL,
            TokenType.LESS,
            TokenType.LESS_EQUAL,
        )

    def _term(self) -> Expr:
        return self._binary(self._factor, TokenType.MINUS, TokenType.PLUS)

    def _factor(self) -> Expr:
        return self._binary(self._unary, TokenType.SLASH, TokenType.STAR)

    def _unary(self) -> Expr:
        if self._match(TokenType.BANG, TokenType.MINUS):
            op = self._previous()
            return Unary(op, self._unary())
        return self._primary()

    def _primary(self) -> Expr:
        if self._match(TokenType.FALSE):
            return Literal(False)
        if self._match(TokenType.TRUE):
            return Literal(True)
        if self._match(TokenType.NIL):
            return Literal(None)
        if self._match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self._previous().literal)
        if self._match(TokenType.IDENTIFIER):
            return Variable(self._previous())
        if self._match(TokenType.LEFT_PAREN):
            expr = self._expression()
            self._consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)
        raise self._error(self._peek(), "Expect expression.")

    # --- token helpers ---

    def _match(self, *kinds: TokenType) -> bool:
        if any(self._check(kind) for kind in kinds):
            self._advance()
            return True
        return False

    def _consume(self, kind: TokenType, message: str) -> Token:
        if self._check(kind):
            return self._advance()
        raise self._error(self._peek(), message)

    def _check(self, kind: TokenType) -> bool:
        return not self._at_end() and self._peek().type == kind

    def _advance(self) -> Token:
        if not self._at_end():
            self._current += 1
        return self._previous()

    def _at_end(self) -> bool:
        return self._peek().type == TokenType.END_OF_FILE

    def _peek(self) -> Token:
        return self._tokens[self._current]

    def _previous(self) -> Token:
        return self._tokens[self._current - 1]

    def _error(self, token: Token, message: str) -> ParseError:
        error = ParseError(token, message)
        self.errors.append(error)
        print(str(error), file=sys.stderr)
        return error

    def _synchronize(self) -> None:
        self._advance()
        while not self._at_end():
            if self._previous().type == TokenType.SEMICOLON:
                return
            if self._peek().type in _STATEMENT_STARTS:
                return
            self._advance()