"""Tag value escaping.

IRCv3 message tags reserve five characters inside tag values. Each is
written on the wire as a backslash followed by a single marker character:

    ``;``  -> ``\\:``
    space  -> ``\\s``
    ``\\`` -> ``\\\\``
    CR     -> ``\\r``
    LF     -> ``\\n``

Unescaping is lenient: a backslash followed by any other character yields
that character, and a lone backslash at the end of a value is dropped.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

ESCAPE_TABLE: Mapping[str, str] = MappingProxyType(
    {
        ";": r"\:",
        " ": r"\s",
        "\\": r"\\",
        "\r": r"\r",
        "\n": r"\n",
    }
)

# Marker character (the one after the backslash) -> raw character.
UNESCAPE_TABLE: Mapping[str, str] = MappingProxyType(
    {seq[1]: raw for raw, seq in ESCAPE_TABLE.items()}
)


def escape_char(c: str) -> str | None:
    """Return the two-character escape sequence for ``c``, or None."""
    return ESCAPE_TABLE.get(c)


def unescape_char(c: str) -> str:
    """Return the raw character for the marker ``c`` following a backslash.

    Unknown markers map to themselves.
    """
    return UNESCAPE_TABLE.get(c, c)


def escape_value(value: str) -> str:
    return "".join(ESCAPE_TABLE.get(c, c) for c in value)


def unescape_value(raw: str) -> str:
    """Decode an escaped tag value as it appears on the wire."""
    if "\\" not in raw:
        return raw

    out: list[str] = []
    chars = iter(raw)
    for c in chars:
        if c != "\\":
            out.append(c)
            continue
        marker = next(chars, None)
        if marker is not None:
            out.append(unescape_char(marker))
    return "".join(out)


__all__ = [
    "ESCAPE_TABLE",
    "UNESCAPE_TABLE",
    "escape_char",
    "unescape_char",
    "escape_value",
    "unescape_value",
]
