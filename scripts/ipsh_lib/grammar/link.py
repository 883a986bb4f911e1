"""
Grammar for `ip link`.

With no tokens after `link`, every link is shown.
"""

from ipsh_lib.commands import LinkCommand
from ipsh_lib.parser.context import ParseContext
from .options import OptionSpec, parse_options


ACTIONS = ("show", "set", "add", "delete", "help")

SHOW = OptionSpec(
    values={
        "dev": ("IFNAME",),
        "type": ("TYPE",),
        "master": ("DEV",),
        "up": (),
    },
    positional="dev",
    placeholder="IFNAME",
)

ON_OFF = ("on", "off")

SET = OptionSpec(
    values={
        "up": (),
        "down": (),
        "address": ("LLADDR",),
        "broadcast": ("LLADDR",),
        "mtu": ("MTU",),
        "name": ("NAME",),
        "alias": ("NAME",),
        "master": ("DEV",),
        "nomaster": (),
        "netns": ("NETNS",),
        "txqueuelen": ("PACKETS",),
        "group": ("GROUP",),
    },
    choices={
        "arp": ON_OFF,
        "multicast": ON_OFF,
        "allmulticast": ON_OFF,
        "promisc": ON_OFF,
    },
    minimum=1,
)

ADD = OptionSpec(
    values={
        "link": ("DEV",),
        "name": ("NAME",),
        "address": ("LLADDR",),
        "mtu": ("MTU",),
        "txqueuelen": ("PACKETS",),
    },
    positional="name",
    placeholder="NAME",
    rest=("type", "TYPE"),
    required=("type",),
)

DELETE = OptionSpec(
    values={
        "dev": ("IFNAME",),
        "type": ("TYPE",),
    },
    positional="dev",
    placeholder="IFNAME",
    required=("dev",),
)

USAGE = """\
Usage: ip link show [ [dev] IFNAME ] [ type TYPE ] [ master DEV ] [ up ]
       ip link set [dev] IFNAME { up | down | arp { on | off } | multicast { on | off }
                   | allmulticast { on | off } | promisc { on | off } | address LLADDR
                   | broadcast LLADDR | mtu MTU | name NAME | alias NAME | master DEV
                   | nomaster | netns NETNS | txqueuelen PACKETS | group GROUP }...
       ip link add [ link DEV ] [name] NAME [ address LLADDR ] [ mtu MTU ]
                   [ txqueuelen PACKETS ] type TYPE [ ARGS ]
       ip link delete [dev] IFNAME [ type TYPE ]
       ip link help"""


def _parse_set(ctx: ParseContext) -> LinkCommand:
    keyword, token = ctx.keyword_or_value(("dev",), "IFNAME")
    device = ctx.value("IFNAME") if keyword else token
    parsed = parse_options(ctx, SET)
    return LinkCommand(
        action="set",
        family=ctx.family,
        device=device,
        options=parsed.options,
        flags=parsed.flags,
    )


def _parse_add(ctx: ParseContext) -> LinkCommand:
    parsed = parse_options(ctx, ADD)
    return LinkCommand(
        action="add",
        family=ctx.family,
        device=parsed.options.pop("name", None),
        link_type=parsed.rest[0],
        type_args=parsed.rest[1:],
        options=parsed.options,
        flags=parsed.flags,
    )


def parse_link(ctx: ParseContext) -> LinkCommand:
    """Parse everything after the `link` keyword."""
    ctx.enter("link")
    if not ctx.more(*ACTIONS):
        return LinkCommand(action="show", family=ctx.family)

    action = ctx.expect(*ACTIONS)
    if action == "help":
        return LinkCommand(action=action, family=ctx.family)
    if action == "set":
        return _parse_set(ctx)
    if action == "add":
        return _parse_add(ctx)

    parsed = parse_options(ctx, SHOW if action == "show" else DELETE)
    return LinkCommand(
        action=action,
        family=ctx.family,
        device=parsed.options.pop("dev", None),
        link_type=parsed.options.pop("type", None),
        options=parsed.options,
        flags=parsed.flags,
    )
