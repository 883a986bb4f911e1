"""
Grammar for `ip address`.

    ip address [ show [ [dev] IFNAME ] [ scope SCOPE ] [ label LABEL ]
                      [ to PREFIX ] [ up ] [ permanent | dynamic ]
                      [ primary | secondary ] ]
    ip address { add | replace | delete } IFADDR dev IFNAME [ label LABEL ]
                      [ scope SCOPE ] [ broadcast ADDR ] [ peer PREFIX ]
                      [ valid_lft LFT ] [ preferred_lft LFT ]
                      [ noprefixroute ] [ nodad ] [ home ]
    ip address flush SELECTOR...
    ip address help

With no tokens after `address`, every address on every device is shown.
"""

from ipsh_lib.commands import AddressCommand
from ipsh_lib.parser.context import ParseContext
from .options import OptionSpec, parse_options


ACTIONS = ("show", "add", "replace", "delete", "flush", "help")

SELECTORS = {
    "dev": ("IFNAME",),
    "scope": ("SCOPE",),
    "label": ("LABEL",),
    "to": ("PREFIX",),
    "up": (),
    "permanent": (),
    "dynamic": (),
    "primary": (),
    "secondary": (),
}

SHOW = OptionSpec(values=SELECTORS, positional="dev", placeholder="IFNAME")
FLUSH = OptionSpec(values=SELECTORS, positional="dev", placeholder="IFNAME", minimum=1)

CHANGE = OptionSpec(
    values={
        "dev": ("IFNAME",),
        "label": ("LABEL",),
        "scope": ("SCOPE",),
        "broadcast": ("ADDR",),
        "peer": ("PREFIX",),
        "valid_lft": ("LFT",),
        "preferred_lft": ("LFT",),
        "noprefixroute": (),
        "nodad": (),
        "home": (),
    },
    required=("dev",),
)

USAGE = """\
Usage: ip address [ show [ [dev] IFNAME ] [ scope SCOPE ] [ label LABEL ] [ to PREFIX ] [ FLAG... ] ]
       ip address { add | replace | delete } IFADDR dev IFNAME [ label LABEL ] [ scope SCOPE ]
                  [ broadcast ADDR ] [ peer PREFIX ] [ valid_lft LFT ] [ preferred_lft LFT ]
       ip address flush [dev] IFNAME [ scope SCOPE ] [ label LABEL ] [ to PREFIX ]
       ip address help
FLAG := up | permanent | dynamic | primary | secondary"""


def parse_address(ctx: ParseContext) -> AddressCommand:
    """Parse everything after the `address` keyword."""
    ctx.enter("address")
    if not ctx.more(*ACTIONS):
        return AddressCommand(action="show", family=ctx.family)

    action = ctx.expect(*ACTIONS)
    if action == "help":
        return AddressCommand(action=action, family=ctx.family)

    address = None
    if action == "show":
        parsed = parse_options(ctx, SHOW)
    elif action == "flush":
        parsed = parse_options(ctx, FLUSH)
    else:
        address = ctx.value("IFADDR")
        parsed = parse_options(ctx, CHANGE)

    device = parsed.options.pop("dev", None)
    return AddressCommand(
        action=action,
        family=ctx.family,
        address=address,
        device=device,
        options=parsed.options,
        flags=parsed.flags,
    )
