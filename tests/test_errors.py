from __future__ import annotations

from simple_irc import errors
from simple_irc.errors import (
    CommandError,
    ParseError,
    PrefixError,
    SimpleIrcError,
    TagBlockError,
)


def test_hierarchy():
    for cls in (TagBlockError, PrefixError, CommandError):
        assert issubclass(cls, ParseError)
    assert issubclass(ParseError, SimpleIrcError)
    assert issubclass(SimpleIrcError, Exception)


def test_base_error_copies_data():
    data = {"key": "value"}
    err = SimpleIrcError("boom", data=data)
    data["key"] = "changed"
    assert err.data == {"key": "value"}
    assert str(err) == "boom"


def test_base_error_defaults_to_empty_data():
    assert SimpleIrcError("x").data == {}


def test_parse_error_line():
    err = CommandError("missing command", line="@a ")
    assert err.line == "@a "
    assert err.data == {"line": "@a "}
    assert str(err) == "missing command"


def test_parse_error_without_line():
    err = PrefixError("bad")
    assert err.line is None
    assert err.data == {}


def test_all_exports():
    assert set(errors.__all__) == {
        "SimpleIrcError",
        "ParseError",
        "TagBlockError",
        "PrefixError",
        "CommandError",
    }
