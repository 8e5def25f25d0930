"""Exception hierarchy shared by the Camel Cards engine."""

from __future__ import annotations

__all__ = [
    "ParseError",
    "UnknownSymbol",
    "WrongHandLength",
    "MalformedBid",
    "EmptyGame",
    "ClassificationDefect",
]


class ParseError(ValueError):
    """Raised when puzzle input cannot be turned into hands and bids."""

    def __init__(self, message: str, *, line: int | None = None, column: int | None = None) -> None:
        self.message = message
        self.line = line
        self.column = column
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"line {self.line}: {self.message}"
        return f"line {self.line}, column {self.column}: {self.message}"

    def at(self, *, line: int, column_offset: int = 0) -> "ParseError":
        """Return a copy of the error located on ``line``."""

        column = None if self.column is None else self.column + column_offset
        return type(self)(self.message, line=line, column=column)


class UnknownSymbol(ParseError):
    """Raised for a character outside the card alphabet."""


class WrongHandLength(ParseError):
    """Raised when a hand field does not hold exactly five symbols."""


class MalformedBid(ParseError):
    """Raised when the bid field is missing or not a non-negative integer."""


class EmptyGame(ParseError):
    """Raised when the input holds no rounds or has a gap inside the block."""


class ClassificationDefect(RuntimeError):
    """Raised when frequency counts reach the classifier in an impossible shape.

    This signals a bug in the engine rather than bad input, so it is kept out of
    the :class:`ParseError` family and is never translated into a category.
    """
