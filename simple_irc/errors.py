"""Exception hierarchy for line parsing failures.

Classes:
  SimpleIrcError  – Base for all package errors.
  ParseError      – A line does not match the generic message grammar.
  TagBlockError   – Tag block is not terminated by a space.
  PrefixError     – Source prefix is unterminated, empty, or has no nick.
  CommandError    – No command token follows the tag block / prefix.

Malformed escape sequences inside tag values are never errors; see
``simple_irc.escaped``.
"""

from __future__ import annotations

from collections.abc import Mapping


class SimpleIrcError(Exception):
    """Base class for all package errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ParseError(SimpleIrcError):
    """Raised when a raw line cannot be parsed into a message.

    ``data["line"]`` holds the input that was being parsed, when known.
    """

    def __init__(self, message: str, *, line: str | None = None) -> None:
        super().__init__(message, data={"line": line} if line is not None else None)

    @property
    def line(self) -> str | None:
        line = self.data.get("line")
        return line if isinstance(line, str) else None


class TagBlockError(ParseError):
    """The ``@`` tag block is not followed by a space."""


class PrefixError(ParseError):
    """The ``:`` prefix is malformed or not followed by a space."""


class CommandError(ParseError):
    """No command token is present."""


__all__ = [
    "SimpleIrcError",
    "ParseError",
    "TagBlockError",
    "PrefixError",
    "CommandError",
]
