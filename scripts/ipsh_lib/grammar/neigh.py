"""
Grammar for `ip neigh`.
"""

from ipsh_lib.commands import NeighborCommand
from ipsh_lib.parser.context import ParseContext
from .options import OptionSpec, parse_options


ACTIONS = ("show", "add", "delete", "replace", "change", "flush", "get", "help")

NUD_STATES = (
    "permanent", "noarp", "reachable", "stale", "none",
    "incomplete", "delay", "probe", "failed",
)

SELECTORS = OptionSpec(
    values={
        "to": ("PREFIX",),
        "dev": ("IFNAME",),
        "proxy": (),
        "unused": (),
    },
    choices={"nud": NUD_STATES},
    positional="to",
    placeholder="PREFIX",
)

FLUSH = OptionSpec(
    values=SELECTORS.values,
    choices=SELECTORS.choices,
    positional="to",
    placeholder="PREFIX",
    minimum=1,
)

CHANGE = OptionSpec(
    values={
        "lladdr": ("LLADDR",),
        "dev": ("IFNAME",),
        "router": (),
    },
    choices={"nud": NUD_STATES},
    required=("dev",),
)

GET = OptionSpec(values={"dev": ("IFNAME",)}, required=("dev",))

USAGE = """\
Usage: ip neigh [ show [ [to] PREFIX ] [ dev IFNAME ] [ nud STATE ] [ proxy ] [ unused ] ]
       ip neigh flush SELECTOR...
       ip neigh { add | delete | replace | change } [ proxy ] [to] ADDR [ lladdr LLADDR ]
                [ nud STATE ] [ router ] dev IFNAME
       ip neigh get [to] ADDR dev IFNAME
       ip neigh help
STATE := permanent | noarp | reachable | stale | none | incomplete | delay | probe | failed"""


def _parse_target(ctx: ParseContext, allow_proxy: bool = True) -> tuple[str, bool]:
    """`[proxy] [to] ADDR`, returning the address and whether `proxy` was given."""
    keyword, token = ctx.keyword_or_value(("proxy", "to") if allow_proxy else ("to",), "ADDR")
    is_proxy = keyword == "proxy"
    if is_proxy:
        keyword, token = ctx.keyword_or_value(("to",), "ADDR")
    if keyword == "to":
        return ctx.value("ADDR"), is_proxy
    return token, is_proxy


def parse_neigh(ctx: ParseContext) -> NeighborCommand:
    """Parse everything after the `neigh` keyword."""
    ctx.enter("neigh")
    if not ctx.more(*ACTIONS):
        return NeighborCommand(action="show", family=ctx.family)

    action = ctx.expect(*ACTIONS)
    if action == "help":
        return NeighborCommand(action=action, family=ctx.family)

    proxy = False
    if action in ("show", "flush"):
        parsed = parse_options(ctx, SELECTORS if action == "show" else FLUSH)
        address = parsed.options.pop("to", None)
    else:
        address, proxy = _parse_target(ctx, allow_proxy=action != "get")
        parsed = parse_options(ctx, GET if action == "get" else CHANGE)

    return NeighborCommand(
        action=action,
        family=ctx.family,
        address=address,
        device=parsed.options.pop("dev", None),
        options=parsed.options,
        flags=parsed.flags,
        proxy=proxy,
    )
