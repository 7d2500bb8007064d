"""Errors raised while a program runs."""

from __future__ import annotations

from .tokens import Token


class LoxRuntimeError(Exception):
    """A runtime failure, tied to the token where it happened."""

    def __init__(self, token: Token, message: str) -> None:
        super().__init__(message)
        self.token = token
        self.message = message