"""
ipsh_lib.grammar - Grammar productions, one module per subcommand

This package contains:
- options: Option-list combinator shared by the productions
- address, link, route, neigh, monitor, tunnel, tcp_metrics, xfrm:
  recursive-descent productions returning a Command
"""

from .options import OptionSpec, ParsedOptions, parse_options

from . import address, link, route, neigh, monitor, tunnel, tcp_metrics, xfrm

from .address import parse_address
from .link import parse_link
from .route import parse_route
from .neigh import parse_neigh
from .monitor import parse_monitor
from .tunnel import parse_tunnel
from .tcp_metrics import parse_tcp_metrics
from .xfrm import parse_xfrm

# Subcommand keyword -> usage text printed for `ip <subcommand> help`
USAGE = {
    "address": address.USAGE,
    "link": link.USAGE,
    "route": route.USAGE,
    "neigh": neigh.USAGE,
    "monitor": monitor.USAGE,
    "tunnel": tunnel.USAGE,
    "tcp_metrics": tcp_metrics.USAGE,
    "xfrm": xfrm.USAGE,
}

__all__ = [
    'OptionSpec', 'ParsedOptions', 'parse_options',
    'parse_address', 'parse_link', 'parse_route', 'parse_neigh',
    'parse_monitor', 'parse_tunnel', 'parse_tcp_metrics', 'parse_xfrm',
    'USAGE',
]
