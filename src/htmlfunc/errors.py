"""Diagnostics for candidates the element resolver could not close."""

from __future__ import annotations

from .constants import UNTERMINATED_ELEMENT


class ParseError:
    """A skipped candidate, located by 1-based line and column."""

    __slots__ = ("code", "column", "line", "message")

    def __init__(self, code, line, column, message=None):
        self.code = code
        self.line = line
        self.column = column
        self.message = message or code

    def __repr__(self):
        return f"ParseError({self.code!r}, line={self.line}, column={self.column})"

    def __str__(self):
        if self.message == self.code:
            return f"({self.line},{self.column}): {self.code}"
        return f"({self.line},{self.column}): {self.code} - {self.message}"

    # Message text is informational; location and code identify the error.
    def __eq__(self, other):
        if not isinstance(other, ParseError):
            return NotImplemented
        return (self.code, self.line, self.column) == (other.code, other.line, other.column)

    __hash__ = None


def position_of(html: str, offset: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of an offset into html."""
    line = html.count("\n", 0, offset) + 1
    last_newline = html.rfind("\n", 0, offset)
    return line, offset - last_newline


def unterminated_element(html: str, offset: int, tag_name: str) -> ParseError:
    line, column = position_of(html, offset)
    return ParseError(
        UNTERMINATED_ELEMENT,
        line,
        column,
        message=f"No matching </{tag_name}> for <{tag_name}>",
    )
