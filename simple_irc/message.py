"""Parse and build IRCv3 protocol lines.

Format: ``[@tags] [:prefix] COMMAND [params...] [:trailing]``

Reference: https://modern.ircdocs.horse/#messages
Tags: https://ircv3.net/specs/extensions/message-tags
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from .constants import PARSE_LOG_TRUNCATE_CHARS
from .errors import CommandError, ParseError, PrefixError, TagBlockError
from .escaped import escape_value, unescape_value
from .logs.logger import logger
from .prefix import Prefix, format_prefix, parse_prefix


@dataclass(frozen=True, slots=True)
class Message:
    """A single protocol line in structured form.

    ``prefix`` is kept as the raw source string by the parser; a decomposed
    ``Prefix`` may be supplied when building outgoing messages. The last
    entry of ``params`` is always written as the trailing parameter.

    Instances are immutable and hashable: ``params`` is stored as a tuple
    and ``tags`` as a read-only copy of the mapping passed in.
    """

    command: str
    params: Sequence[str] = ()
    prefix: str | Prefix | None = None
    tags: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))
        object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))

    def __hash__(self) -> int:
        return hash(
            (self.command, self.params, self.prefix, frozenset(self.tags.items()))
        )

    @classmethod
    def parse(cls, line: str) -> Message:
        return parse_message(line)

    @property
    def source(self) -> Prefix | None:
        """The prefix split into nick, user and host, if present."""
        if self.prefix is None or isinstance(self.prefix, Prefix):
            return self.prefix
        return parse_prefix(self.prefix)

    def __str__(self) -> str:
        return format_message(self)


def parse_message(line: str) -> Message:
    """Parse a raw line into a Message.

    At most one trailing LF and then one trailing CR are removed first.
    Runs of spaces between tokens count as a single separator.

    Raises:
        TagBlockError: the ``@`` block is not followed by a space.
        PrefixError: the ``:`` prefix is not followed by a space.
        CommandError: no command token is present.
    """
    rest = line
    if rest.endswith("\n"):
        rest = rest[:-1]
    if rest.endswith("\r"):
        rest = rest[:-1]

    tags: dict[str, str] = {}
    if rest.startswith("@"):
        end = rest.find(" ")
        if end == -1:
            raise _failure(
                TagBlockError,
                "tag_block_unterminated",
                "tag block is not followed by a space",
                line,
            )
        tags = _parse_tags(rest[1:end], line)
        rest = rest[end:].lstrip(" ")

    prefix: str | None = None
    if rest.startswith(":"):
        end = rest.find(" ")
        if end == -1:
            raise _failure(
                PrefixError,
                "prefix_unterminated",
                "prefix is not followed by a space",
                line,
            )
        prefix = rest[1:end]
        rest = rest[end:].lstrip(" ")

    command, _, rest = rest.partition(" ")
    if not command:
        raise _failure(CommandError, "command_missing", "missing command", line)

    params: list[str] = []
    rest = rest.lstrip(" ")
    while rest:
        if rest.startswith(":"):
            params.append(rest[1:])
            break
        param, _, rest = rest.partition(" ")
        params.append(param)
        rest = rest.lstrip(" ")

    return Message(command=command, params=params, prefix=prefix, tags=tags)


def _parse_tags(raw: str, line: str) -> dict[str, str]:
    """Parse the body of a tag block (without ``@``) into a dict.

    ``k`` and ``k=`` both yield an empty value; later duplicates win.
    Tag names must be non-empty, so a component such as ``=x`` is rejected
    rather than stored under an empty key.
    """
    tags: dict[str, str] = {}
    for component in raw.split(";"):
        if not component:
            continue
        name, _, value = component.partition("=")
        if not name:
            raise _failure(
                TagBlockError, "tag_name_empty", "tag has an empty name", line
            )
        tags[name] = unescape_value(value)
    return tags


def _failure(
    error_cls: type[ParseError], action: str, message: str, line: str
) -> ParseError:
    logger.log_event(
        "parse", action, logging.DEBUG, line=line[:PARSE_LOG_TRUNCATE_CHARS]
    )
    return error_cls(message, line=line)


def format_message(message: Message) -> str:
    """Serialize a Message into a raw line, without CRLF.

    Tags are written in ascending key order and an empty value is written
    as the bare name. The final parameter is always prefixed with ``:``.
    Fields are not validated; a middle parameter containing a space yields
    a line that will not parse back to the same message.
    """
    out: list[str] = []

    if message.tags:
        pieces = []
        for name in sorted(message.tags):
            value = message.tags[name]
            pieces.append(f"{name}={escape_value(value)}" if value else name)
        out.append("@" + ";".join(pieces) + " ")

    if message.prefix is not None:
        prefix = message.prefix
        if isinstance(prefix, Prefix):
            prefix = format_prefix(prefix)
        out.append(f":{prefix} ")

    out.append(message.command)

    if message.params:
        *middle, last = message.params
        for param in middle:
            out.append(f" {param}")
        out.append(f" :{last}")

    return "".join(out)


__all__ = ["Message", "parse_message", "format_message"]
