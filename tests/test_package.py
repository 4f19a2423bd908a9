from __future__ import annotations

import simple_irc


def test_public_api_exports():
    for name in simple_irc.__all__:
        assert hasattr(simple_irc, name), name


def test_top_level_round_trip():
    msg = simple_irc.parse_message("@id=1 :n!u@h PRIVMSG #c :hi there\r\n")
    assert msg.source == simple_irc.Prefix("n", "u", "h")
    assert simple_irc.format_message(msg) == "@id=1 :n!u@h PRIVMSG #c :hi there"
