"""Source prefix sub-grammar: ``nick['!' user]['@' host]``."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import PrefixError
from .logs.logger import logger


@dataclass(frozen=True, slots=True)
class Prefix:
    """Decomposed message source.

    A bare server name is represented with only ``nick`` populated.
    """

    nick: str
    user: str | None = None
    host: str | None = None

    def __str__(self) -> str:
        return format_prefix(self)


def parse_prefix(text: str) -> Prefix:
    """Split a raw prefix into nick, user and host.

    The first ``!`` separates the nick from the rest, then the first ``@``
    in that remainder separates user from host. Without a ``!`` the whole
    string is the nick. Empty user or host segments are treated as absent,
    so ``nick!@host`` formats back as ``nick@host``.

    Raises:
        PrefixError: if the nick would be empty.
    """
    nick, bang, rest = text.partition("!")
    if not nick:
        logger.log_event("parse", "prefix_no_nick", logging.DEBUG, line=text)
        raise PrefixError("prefix has no nick", line=text)
    if not bang:
        return Prefix(nick)

    user, _, host = rest.partition("@")
    return Prefix(nick, user or None, host or None)


def format_prefix(prefix: Prefix) -> str:
    out = prefix.nick
    if prefix.user:
        out += f"!{prefix.user}"
    if prefix.host:
        out += f"@{prefix.host}"
    return out


__all__ = ["Prefix", "parse_prefix", "format_prefix"]
