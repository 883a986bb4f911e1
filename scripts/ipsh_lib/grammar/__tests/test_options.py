"""
Tests for the option-list combinator.
"""

import pytest

from ipsh_lib.grammar.options import OptionSpec, parse_options
from ipsh_lib.parser.context import ParseContext
from ipsh_lib.parser.errors import AmbiguousPrefix, EndOfInput, NoMatch


def _ctx(*tokens):
    return ParseContext.from_tokens(list(tokens))


class TestParseOptions:

    def test_values_and_flags(self):
        spec = OptionSpec(values={"via": ("ADDR",), "onlink": ()})
        parsed = parse_options(_ctx("v", "10.0.0.1", "onl"), spec)
        assert parsed.options == {"via": "10.0.0.1"}
        assert parsed.flags == ["onlink"]

    def test_multi_value_keyword(self):
        spec = OptionSpec(values={"enc": ("ALGO", "KEY"), "spi": ("SPI",)})
        parsed = parse_options(_ctx("enc", "cbc(aes)", "0x01", "spi", "7"), spec)
        assert parsed.options == {"enc": ("cbc(aes)", "0x01"), "spi": "7"}

    def test_values_are_not_matched(self):
        spec = OptionSpec(values={"name": ("NAME",), "up": ()})
        parsed = parse_options(_ctx("name", "up"), spec)
        assert parsed.options == {"name": "up"}
        assert parsed.flags == []

    def test_choices_match_by_prefix(self):
        spec = OptionSpec(choices={"arp": ("on", "off")})
        parsed = parse_options(_ctx("arp", "of"), spec)
        assert parsed.options == {"arp": "off"}

    def test_bad_choice(self):
        ctx = _ctx("arp", "maybe")
        with pytest.raises(NoMatch):
            parse_options(ctx, OptionSpec(choices={"arp": ("on", "off")}))
        assert ctx.expecting == ("on", "off")

    def test_positional(self):
        spec = OptionSpec(values={"dev": ("IFNAME",), "up": ()}, positional="dev", placeholder="IFNAME")
        parsed = parse_options(_ctx("eth0", "up"), spec)
        assert parsed.options == {"dev": "eth0"}
        assert parsed.flags == ["up"]

    def test_positional_ambiguous_prefix(self):
        spec = OptionSpec(values={"dev": ("IFNAME",), "dynamic": ()}, positional="dev", placeholder="IFNAME")
        with pytest.raises(AmbiguousPrefix):
            parse_options(_ctx("d"), spec)

    def test_unknown_keyword_without_positional(self):
        with pytest.raises(NoMatch):
            parse_options(_ctx("bogus"), OptionSpec(values={"via": ("ADDR",)}))

    def test_required_keyword(self):
        spec = OptionSpec(values={"dev": ("IFNAME",), "label": ("LABEL",)}, required=("dev",))
        ctx = _ctx("label", "x")
        with pytest.raises(EndOfInput):
            parse_options(ctx, spec)
        assert ctx.expecting == ("dev", "label")

    def test_minimum(self):
        spec = OptionSpec(values={"dev": ("IFNAME",)}, minimum=1)
        with pytest.raises(EndOfInput):
            parse_options(_ctx(), spec)
        assert parse_options(_ctx("dev", "eth0"), spec).options == {"dev": "eth0"}

    def test_missing_value(self):
        ctx = _ctx("via")
        with pytest.raises(EndOfInput):
            parse_options(ctx, OptionSpec(values={"via": ("ADDR",)}))
        assert ctx.expecting == ("ADDR",)

    def test_rest(self):
        spec = OptionSpec(values={"mtu": ("MTU",)}, rest=("type", "TYPE"), required=("type",))
        parsed = parse_options(_ctx("mtu", "1400", "type", "vlan", "id", "mtu"), spec)
        assert parsed.options == {"mtu": "1400"}
        assert parsed.rest == ["vlan", "id", "mtu"]

    def test_rest_needs_a_value(self):
        ctx = _ctx("type")
        with pytest.raises(EndOfInput):
            parse_options(ctx, OptionSpec(rest=("type", "TYPE")))
        assert ctx.expecting == ("TYPE",)

    def test_empty_run(self):
        parsed = parse_options(_ctx(), OptionSpec(values={"via": ("ADDR",)}))
        assert parsed.options == {}
        assert parsed.flags == []
        assert parsed.rest == []
