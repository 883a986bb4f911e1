"""
Grammar for `ip xfrm`.

Unlike the other subcommands, `xfrm` has no zero-argument form: an object
(`state`, `policy` or `monitor`) must follow.
"""

from ipsh_lib.commands import XfrmCommand
from ipsh_lib.parser.context import ParseContext
from .options import OptionSpec, parse_options


OBJECTS = ("state", "policy", "monitor", "help")

STATE_ACTIONS = (
    "add", "update", "allocspi", "delete", "get",
    "deleteall", "list", "flush", "count", "help",
)
POLICY_ACTIONS = (
    "add", "update", "delete", "get",
    "deleteall", "list", "flush", "count", "help",
)
MONITOR_OBJECTS = ("all", "acquire", "expire", "SA", "aevent", "policy", "report")

# Actions that identify or describe a single state/policy
NEED_ARGUMENTS = ("add", "update", "allocspi", "delete", "get")

STATE_VALUES = {
    "src": ("ADDR",),
    "dst": ("ADDR",),
    "proto": ("XFRM-PROTO",),
    "spi": ("SPI",),
    "mode": ("MODE",),
    "reqid": ("REQID",),
    "replay-window": ("SIZE",),
    "flag": ("FLAG",),
    "sel": ("SELECTOR",),
    "limit": ("LIMIT",),
    "if_id": ("IF_ID",),
    "output-mark": ("MARK",),
    "mark": ("MARK",),
    "enc": ("ALGO-NAME", "ALGO-KEYMAT"),
    "auth": ("ALGO-NAME", "ALGO-KEYMAT"),
    "comp": ("ALGO-NAME", "ALGO-KEYMAT"),
    "auth-trunc": ("ALGO-NAME", "ALGO-KEYMAT", "ALGO-TRUNC-LEN"),
    "aead": ("ALGO-NAME", "ALGO-KEYMAT", "ALGO-ICV-LEN"),
    "encap": ("ENCAP-TYPE", "SPORT", "DPORT", "OADDR"),
}

POLICY_VALUES = {
    "src": ("ADDR",),
    "dst": ("ADDR",),
    "ctx": ("CTX",),
    "mark": ("MARK",),
    "index": ("INDEX",),
    "ptype": ("PTYPE",),
    "action": ("ACTION",),
    "priority": ("PRIORITY",),
    "flag": ("FLAG",),
    "proto": ("PROTO",),
    "sport": ("PORT",),
    "dport": ("PORT",),
    "dev": ("IFNAME",),
    "if_id": ("IF_ID",),
}

DIRECTIONS = ("in", "out", "fwd")

USAGE = """\
Usage: ip xfrm state { add | update | allocspi | delete | get } ID [ OPTION... ]
       ip xfrm state { deleteall | list | flush | count } [ OPTION... ]
       ip xfrm policy { add | update | delete | get } [ OPTION... ] [ tmpl TMPL... ]
       ip xfrm policy { deleteall | list | flush | count } [ OPTION... ]
       ip xfrm monitor [ all | OBJECT... ]
       ip xfrm help
ID := [ src ADDR ] [ dst ADDR ] [ proto XFRM-PROTO ] [ spi SPI ]
OBJECT := acquire | expire | SA | aevent | policy | report"""


def _state_spec(action: str) -> OptionSpec:
    return OptionSpec(values=STATE_VALUES, minimum=1 if action in NEED_ARGUMENTS else 0)


def _policy_spec(action: str) -> OptionSpec:
    return OptionSpec(
        values=POLICY_VALUES,
        choices={"dir": DIRECTIONS},
        rest=("tmpl", "TMPL"),
        minimum=1 if action in NEED_ARGUMENTS else 0,
    )


def _parse_monitor(ctx: ParseContext) -> XfrmCommand:
    """`monitor [ all | OBJECT... ]`."""
    objects = []
    candidates = MONITOR_OBJECTS
    while ctx.more(*candidates):
        obj = ctx.expect(*candidates)
        objects.append(obj)
        if obj == "all":
            break
        candidates = tuple(c for c in candidates if c != "all")
    return XfrmCommand(
        action="monitor",
        family=ctx.family,
        kind="monitor",
        objects=objects or ["all"],
    )


def parse_xfrm(ctx: ParseContext) -> XfrmCommand:
    """Parse everything after the `xfrm` keyword."""
    ctx.enter("xfrm")
    kind = ctx.expect(*OBJECTS)
    if kind == "help":
        return XfrmCommand(action="help", family=ctx.family)
    if kind == "monitor":
        return _parse_monitor(ctx)

    ctx.enter(f"xfrm {kind}")
    if kind == "state":
        action = ctx.expect(*STATE_ACTIONS)
        spec = _state_spec(action)
    else:
        action = ctx.expect(*POLICY_ACTIONS)
        spec = _policy_spec(action)
    if action == "help":
        return XfrmCommand(action=action, family=ctx.family, kind=kind)

    parsed = parse_options(ctx, spec)
    return XfrmCommand(
        action=action,
        family=ctx.family,
        kind=kind,
        options=parsed.options,
        flags=parsed.flags,
        template=parsed.rest,
    )
