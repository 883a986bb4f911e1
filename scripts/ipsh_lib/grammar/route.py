"""
Grammar for `ip route`.

With no tokens after `route`, the main table is shown.
"""

from typing import Optional

from ipsh_lib.commands import RouteCommand
from ipsh_lib.parser.context import ParseContext
from .options import OptionSpec, parse_options


ACTIONS = ("show", "add", "append", "replace", "change", "delete", "get", "flush", "help")

ROUTE_TYPES = (
    "unicast", "local", "broadcast", "multicast", "throw",
    "unreachable", "prohibit", "blackhole", "nat",
)

SELECTORS = {
    "to": ("PREFIX",),
    "table": ("TABLE",),
    "dev": ("IFNAME",),
    "proto": ("PROTO",),
    "scope": ("SCOPE",),
    "type": ("TYPE",),
    "via": ("ADDR",),
    "src": ("ADDR",),
}

SHOW = OptionSpec(values=SELECTORS, positional="to", placeholder="PREFIX")
FLUSH = OptionSpec(values=SELECTORS, positional="to", placeholder="PREFIX", minimum=1)

INFO = OptionSpec(
    values={
        "via": ("ADDR",),
        "dev": ("IFNAME",),
        "src": ("ADDR",),
        "metric": ("NUMBER",),
        "table": ("TABLE",),
        "proto": ("PROTO",),
        "scope": ("SCOPE",),
        "mtu": ("NUMBER",),
        "onlink": (),
    },
)

GET = OptionSpec(
    values={
        "from": ("ADDR",),
        "iif": ("IFNAME",),
        "oif": ("IFNAME",),
        "dev": ("IFNAME",),
        "mark": ("MARK",),
        "vrf": ("NAME",),
    },
)

USAGE = """\
Usage: ip route [ show [ [to] PREFIX ] [ SELECTOR... ] ]
       ip route flush SELECTOR...
       ip route { add | append | replace | change | delete } ROUTE
       ip route get [to] ADDRESS [ from ADDR ] [ iif IFNAME ] [ oif IFNAME ] [ dev IFNAME ] [ mark MARK ] [ vrf NAME ]
       ip route help
SELECTOR := [ table TABLE ] [ dev IFNAME ] [ proto PROTO ] [ scope SCOPE ] [ type TYPE ] [ via ADDR ] [ src ADDR ]
ROUTE := [ TYPE ] [to] PREFIX [ via ADDR ] [ dev IFNAME ] [ src ADDR ] [ metric NUMBER ]
         [ table TABLE ] [ proto PROTO ] [ scope SCOPE ] [ mtu NUMBER ] [ onlink ]
TYPE := unicast | local | broadcast | multicast | throw | unreachable | prohibit | blackhole | nat
PREFIX := default | ADDR[/LEN]"""


def _parse_destination(ctx: ParseContext, placeholder: str) -> str:
    """`[to] PREFIX`: the `to` keyword is optional."""
    keyword, token = ctx.keyword_or_value(("to",), placeholder)
    return ctx.value(placeholder) if keyword else token


def _parse_node(ctx: ParseContext) -> tuple[Optional[str], str]:
    """`[TYPE] [to] PREFIX`."""
    keyword, token = ctx.keyword_or_value(ROUTE_TYPES + ("to",), "PREFIX")
    if keyword is None:
        return None, token
    if keyword == "to":
        return None, ctx.value("PREFIX")
    return keyword, _parse_destination(ctx, "PREFIX")


def parse_route(ctx: ParseContext) -> RouteCommand:
    """Parse everything after the `route` keyword."""
    ctx.enter("route")
    if not ctx.more(*ACTIONS):
        return RouteCommand(action="show", family=ctx.family)

    action = ctx.expect(*ACTIONS)
    if action == "help":
        return RouteCommand(action=action, family=ctx.family)

    route_type = None
    if action in ("show", "flush"):
        parsed = parse_options(ctx, SHOW if action == "show" else FLUSH)
        prefix = parsed.options.pop("to", None)
    elif action == "get":
        prefix = _parse_destination(ctx, "ADDRESS")
        parsed = parse_options(ctx, GET)
    else:
        route_type, prefix = _parse_node(ctx)
        parsed = parse_options(ctx, INFO)

    return RouteCommand(
        action=action,
        family=ctx.family,
        route_type=route_type,
        prefix=prefix,
        options=parsed.options,
        flags=parsed.flags,
    )
