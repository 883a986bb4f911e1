"""
Grammar for `ip tunnel`.
"""

from ipsh_lib.commands import TunnelCommand
from ipsh_lib.parser.context import ParseContext
from .options import OptionSpec, parse_options


ACTIONS = ("show", "add", "change", "delete", "help")

MODES = (
    "ipip", "gre", "sit", "isatap", "vti",
    "ip6ip6", "ipip6", "ip6gre", "vti6", "any",
)

PARAMETERS = {
    "name": ("NAME",),
    "remote": ("ADDR",),
    "local": ("ADDR",),
    "ttl": ("TTL",),
    "tos": ("TOS",),
    "dev": ("PHYS_DEV",),
    "key": ("KEY",),
    "ikey": ("KEY",),
    "okey": ("KEY",),
    "pmtudisc": (),
    "nopmtudisc": (),
}

SHOW = OptionSpec(
    values=PARAMETERS,
    choices={"mode": MODES},
    positional="name",
    placeholder="NAME",
)

CHANGE = OptionSpec(
    values=PARAMETERS,
    choices={"mode": MODES},
    positional="name",
    placeholder="NAME",
    required=("name",),
)

USAGE = """\
Usage: ip tunnel { add | change | delete | show } [ [name] NAME ] [ mode MODE ]
                 [ remote ADDR ] [ local ADDR ] [ ttl TTL ] [ tos TOS ] [ dev PHYS_DEV ]
                 [ key KEY ] [ ikey KEY ] [ okey KEY ] [ pmtudisc | nopmtudisc ]
       ip tunnel help
MODE := ipip | gre | sit | isatap | vti | ip6ip6 | ipip6 | ip6gre | vti6 | any"""


def parse_tunnel(ctx: ParseContext) -> TunnelCommand:
    """Parse everything after the `tunnel` keyword."""
    ctx.enter("tunnel")
    if not ctx.more(*ACTIONS):
        return TunnelCommand(action="show", family=ctx.family)

    action = ctx.expect(*ACTIONS)
    if action == "help":
        return TunnelCommand(action=action, family=ctx.family)

    parsed = parse_options(ctx, SHOW if action == "show" else CHANGE)
    return TunnelCommand(
        action=action,
        family=ctx.family,
        name=parsed.options.pop("name", None),
        options=parsed.options,
        flags=parsed.flags,
    )
