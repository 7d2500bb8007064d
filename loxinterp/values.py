"""Runtime values and their textual form."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Sequence, Union

if TYPE_CHECKING:
    from .interpreter import Interpreter


class LoxCallable(ABC):
    """Something that can be called from a script."""

    @abstractmethod
    def call(self, interpreter: "Interpreter", arguments: Sequence[Any]) -> Any:
        """Run the callable with the given arguments and return its result."""

    @abstractmethod
    def arity(self) -> int:
        """Return the number of arguments the callable expects."""

    @abstractmethod
    def __str__(self) -> str:
        """Return a short description such as ``<fn name>``."""


Value = Union[None, bool, float, str, LoxCallable]


def _number_to_string(number: float) -> str:
    text = f"{number:f}".rstrip("0")
    if text.endswith("."):
        text = text[:-1]
    return text


def value_to_string(value: Any) -> str:
    """Render a runtime value the way ``print`` shows it."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _number_to_string(float(value))
    if isinstance(value, str):
        return value
    if isinstance(value, LoxCallable):
        return "<fn>"
    return "unknown value"