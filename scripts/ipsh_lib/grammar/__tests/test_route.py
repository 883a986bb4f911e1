"""
Tests for the `ip route` grammar.
"""

import pytest

from ipsh_lib.commands import RouteCommand
from ipsh_lib.parser.dispatcher import parse_command
from ipsh_lib.parser.errors import UsageError


class TestRoute:

    def test_zero_tokens(self):
        assert parse_command(["r"]) == RouteCommand(action="show")

    def test_add_default(self):
        command = parse_command(["r", "add", "default", "via", "10.0.0.1", "dev", "eth0"])
        assert command == RouteCommand(
            action="add",
            prefix="default",
            options={"via": "10.0.0.1", "dev": "eth0"},
        )

    @pytest.mark.parametrize("tokens", [
        ["r", "add", "10.1.0.0/16", "via", "10.0.0.1"],
        ["r", "add", "to", "10.1.0.0/16", "via", "10.0.0.1"],
        ["r", "add", "unicast", "10.1.0.0/16", "via", "10.0.0.1"],
        ["r", "add", "unicast", "to", "10.1.0.0/16", "via", "10.0.0.1"],
    ])
    def test_node_spellings(self, tokens):
        command = parse_command(tokens)
        assert command.prefix == "10.1.0.0/16"
        assert command.options == {"via": "10.0.0.1"}

    def test_route_type(self):
        command = parse_command(["r", "append", "blackhole", "192.0.2.0/24", "metric", "5"])
        assert command.route_type == "blackhole"
        assert command.action == "append"
        assert command.options == {"metric": "5"}

    def test_get(self):
        command = parse_command(["r", "g", "8.8.8.8", "from", "10.0.0.2", "oif", "eth0"])
        assert command.action == "get"
        assert command.prefix == "8.8.8.8"
        assert command.options == {"from": "10.0.0.2", "oif": "eth0"}

    def test_show_selectors(self):
        command = parse_command(["r", "show", "10.0.0.0/8", "table", "main", "proto", "kernel"])
        assert command.prefix == "10.0.0.0/8"
        assert command.options == {"table": "main", "proto": "kernel"}

    def test_flush_requires_selector(self):
        with pytest.raises(UsageError):
            parse_command(["r", "flush"])

    def test_ambiguous_action(self):
        # append / add
        with pytest.raises(UsageError):
            parse_command(["r", "a", "default"])
