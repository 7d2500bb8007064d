"""Turns source text into a list of tokens."""

from __future__ import annotations

import string
import sys

from .tokens import Token, TokenType

_KEYWORDS = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

_SINGLE = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Characters that may be followed by '=' to form a two-character operator.
_WITH_EQUAL = {
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}

_DIGITS = frozenset(string.digits)
_ALPHA = frozenset(string.ascii_letters + "_")
_ALNUM = _ALPHA | _DIGITS


class Scanner:
    """Lexical scanner for one piece of source text.

    Lexical errors are written to standard error and kept in ``errors``;
    scanning carries on past them.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1
        self.errors: list[str] = []

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source and return its tokens, ending with END_OF_FILE."""
        while not self._at_end():
            self._start = self._current
            self._scan_token()
        self._tokens.append(Token(TokenType.END_OF_FILE, "", None, self._line))
        return self._tokens

    def _report(self, message: str) -> None:
        text = f"Error on line {self._line}: {message}"
        self.errors.append(text)
        print(text, file=sys.stderr)

    def _at_end(self) -> bool:
        return self._current >= len(self._source)

    def _advance(self) -> str:
        char = self._source[self._current]
        self._current += 1
        return char

    def _match(self, expected: str) -> bool:
        if self._at_end() or self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        return "\0" if self._at_end() else self._source[self._current]

    def _peek_next(self) -> str:
        if self._current + 1 >= len(self._source):
            return "\0"
        return self._source[self._current + 1]

    def _add_token(self, kind: TokenType, literal: object = None) -> None:
        text = self._source[self._start:self._current]
        self._tokens.append(Token(kind, text, literal, self._line))

    def _scan_token(self) -> None:
        char = self._advance()
        if char in _SINGLE:
            self._add_token(_SINGLE[char])
        elif char in _WITH_EQUAL:
            double, single = _WITH_EQUAL[char]
            self._add_token(double if self._match("=") else single)
        elif char == "/":
            if self._match("/"):
                while self._peek() != "\n" and not self._at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif char in " \r\t":
            pass
        elif char == "\n":
            self._line += 1
        elif char == '"':
            self._string()
        elif char in _DIGITS:
            self._number()
        elif char in _ALPHA:
            self._identifier()
        else:
            self._report(f"Unexpected character '{char}'.")

    def _string(self) -> None:
        while self._peek() != '"' and not self._at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._at_end():
            self._report("Unterminated string.")
            return

        self._advance()
        value = self._source[self._start + 1:self._current - 1]
        self._add_token(TokenType.STRING, value)

    def _number(self) -> None:
        while self._peek() in _DIGITS:
            self._advance()

        if self._peek() == "." and self._peek_next() in _DIGITS:
            self._advance()
            while self._peek() in _DIGITS:
                self._advance()

        value = float(self._source[self._start:self._current])
        self._add_token(TokenType.NUMBER, value)

    def _identifier(self) -> None:
        while self._peek() in _ALNUM:
            self._advance()
        text = self._source[self._start:self._current]
        self._add_token(_KEYWORDS.get(text, TokenType.IDENTIFIER))