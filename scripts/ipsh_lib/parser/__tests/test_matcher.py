"""
Tests for prefix matching.
"""

import pytest

from ipsh_lib.parser.errors import NoMatch, AmbiguousPrefix
from ipsh_lib.parser.matcher import find_prefix


TOP = ("address", "route", "link", "monitor", "neigh",
       "tunnel", "tcp_metrics", "tcpmetrics", "xfrm")


class TestFindPrefix:

    @pytest.mark.parametrize("token,expected", [
        ("a", "address"),
        ("addr", "address"),
        ("address", "address"),
        ("l", "link"),
        ("r", "route"),
        ("n", "neigh"),
        ("m", "monitor"),
        ("tu", "tunnel"),
        ("tcp_", "tcp_metrics"),
        ("tcpm", "tcpmetrics"),
        ("x", "xfrm"),
    ])
    def test_unique_prefix(self, token, expected):
        assert find_prefix(token, TOP) == expected

    def test_exact_match_beats_prefix(self):
        assert find_prefix("ipip", ("ipip6", "ipip", "gre")) == "ipip"
        assert find_prefix("auth", ("auth-trunc", "auth", "aead")) == "auth"

    @pytest.mark.parametrize("token,matches", [
        ("t", ("tunnel", "tcp_metrics", "tcpmetrics")),
        ("tcp", ("tcp_metrics", "tcpmetrics")),
    ])
    def test_ambiguous_prefix(self, token, matches):
        with pytest.raises(AmbiguousPrefix) as exc:
            find_prefix(token, TOP)
        assert exc.value.matches == matches
        assert exc.value.token == token

    def test_ambiguous_is_a_no_match(self):
        with pytest.raises(NoMatch):
            find_prefix("t", TOP)

    def test_no_match(self):
        with pytest.raises(NoMatch) as exc:
            find_prefix("bogus", TOP)
        assert not isinstance(exc.value, AmbiguousPrefix)
        assert exc.value.candidates == TOP

    def test_empty_token_matches_nothing(self):
        with pytest.raises(NoMatch):
            find_prefix("", TOP)

    def test_case_sensitive(self):
        with pytest.raises(NoMatch):
            find_prefix("A", TOP)
        assert find_prefix("S", ("SA", "all")) == "SA"

    def test_longer_than_candidate(self):
        with pytest.raises(NoMatch):
            find_prefix("linkx", TOP)
