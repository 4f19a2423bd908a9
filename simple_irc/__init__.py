"""IRCv3 message line parser and serializer.

Exposes the message codec, the prefix sub-grammar, tag value escaping and
the parse error hierarchy.
"""

from .errors import (  # noqa: F401
    CommandError,
    ParseError,
    PrefixError,
    SimpleIrcError,
    TagBlockError,
)
from .escaped import escape_char, escape_value, unescape_char, unescape_value  # noqa: F401
from .message import Message, format_message, parse_message  # noqa: F401
from .prefix import Prefix, format_prefix, parse_prefix  # noqa: F401

__all__ = [
    "Message",
    "Prefix",
    "parse_message",
    "format_message",
    "parse_prefix",
    "format_prefix",
    "escape_char",
    "unescape_char",
    "escape_value",
    "unescape_value",
    "SimpleIrcError",
    "ParseError",
    "TagBlockError",
    "PrefixError",
    "CommandError",
]
