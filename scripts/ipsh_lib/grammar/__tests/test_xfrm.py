"""
Tests for the `ip xfrm` grammar.
"""

import pytest

from ipsh_lib.commands import XfrmCommand
from ipsh_lib.parser.dispatcher import parse_command
from ipsh_lib.parser.errors import NoMatch, UsageError


class TestXfrm:

    def test_state_add(self):
        command = parse_command(["x", "st", "add", "src", "10.0.0.1", "dst", "10.0.0.2",
                                 "proto", "esp", "spi", "0x1000", "mode", "tunnel",
                                 "auth", "sha256", "0xaa", "enc", "aes", "0xbb"])
        assert command.kind == "state"
        assert command.action == "add"
        assert command.options["auth"] == ("sha256", "0xaa")
        assert command.options["enc"] == ("aes", "0xbb")
        assert command.options["mode"] == "tunnel"

    def test_auth_trunc(self):
        command = parse_command(["x", "state", "add", "auth-t", "hmac(sha256)", "0xaa", "128"])
        assert command.options == {"auth-trunc": ("hmac(sha256)", "0xaa", "128")}

    def test_state_add_needs_options(self):
        with pytest.raises(UsageError):
            parse_command(["x", "state", "add"])

    def test_state_list_alone(self):
        assert parse_command(["x", "state", "list"]) == XfrmCommand(action="list", kind="state")

    def test_policy_template(self):
        command = parse_command(["x", "pol", "add", "dir", "o", "src", "10.0.0.0/24",
                                 "tmpl", "src", "10.0.0.1", "dst", "10.0.0.2", "proto", "esp"])
        assert command.options == {"dir": "out", "src": "10.0.0.0/24"}
        assert command.template == ["src", "10.0.0.1", "dst", "10.0.0.2", "proto", "esp"]

    def test_monitor(self):
        assert parse_command(["x", "mon"]).objects == ["all"]
        assert parse_command(["x", "monitor", "SA", "pol"]).objects == ["SA", "policy"]

    def test_help_forms(self):
        assert parse_command(["x", "help"]) == XfrmCommand(action="help")
        assert parse_command(["x", "state", "help"]) == XfrmCommand(action="help", kind="state")

    def test_needs_object(self):
        with pytest.raises(UsageError) as exc:
            parse_command(["xfrm"])
        assert exc.value.diagnostic.consumed == ("xfrm",)

    @pytest.mark.parametrize("tokens", [
        ["x", "monitor", "all", "SA"],
        ["x", "monitor", "SA", "all"],
    ])
    def test_monitor_all_stands_alone(self, tokens):
        with pytest.raises(UsageError) as exc:
            parse_command(tokens)
        assert isinstance(exc.value.cause, NoMatch)
        assert exc.value.diagnostic.offending == tokens[-1]

    def test_monitor_all_alone(self):
        assert parse_command(["x", "monitor", "all"]).objects == ["all"]
