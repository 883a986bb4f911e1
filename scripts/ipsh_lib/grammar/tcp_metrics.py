"""
Grammar for `ip tcp_metrics` (also spelled `tcpmetrics`).
"""

from ipsh_lib.commands import TCPMetricsCommand
from ipsh_lib.parser.context import ParseContext
from .options import OptionSpec, parse_options


ACTIONS = ("show", "flush", "delete", "help")

SHOW = OptionSpec(values={"address": ("PREFIX",)}, positional="address", placeholder="PREFIX")
DELETE = OptionSpec(
    values={"address": ("ADDRESS",)},
    positional="address",
    placeholder="ADDRESS",
    required=("address",),
)

SPECS = {"show": SHOW, "delete": DELETE}

USAGE = """\
Usage: ip tcp_metrics [ show [ [address] PREFIX ] ]
       ip tcp_metrics flush [ all | [address] PREFIX ]
       ip tcp_metrics delete [address] ADDRESS
       ip tcp_metrics help"""


def _parse_flush(ctx: ParseContext) -> TCPMetricsCommand:
    """`flush [ all | [address] PREFIX ]`: one selector at most."""
    command = TCPMetricsCommand(action="flush", family=ctx.family)
    if not ctx.more("all", "address", placeholder="PREFIX"):
        return command

    keyword, token = ctx.keyword_or_value(("all", "address"), "PREFIX")
    if keyword == "all":
        command.flags.append("all")
    elif keyword == "address":
        command.address = ctx.value("PREFIX")
    else:
        command.address = token
    return command


def parse_tcp_metrics(ctx: ParseContext) -> TCPMetricsCommand:
    """Parse everything after the `tcp_metrics` keyword."""
    ctx.enter("tcp_metrics")
    if not ctx.more(*ACTIONS):
        return TCPMetricsCommand(action="show", family=ctx.family)

    action = ctx.expect(*ACTIONS)
    if action == "help":
        return TCPMetricsCommand(action=action, family=ctx.family)
    if action == "flush":
        return _parse_flush(ctx)

    parsed = parse_options(ctx, SPECS[action])
    return TCPMetricsCommand(
        action=action,
        family=ctx.family,
        address=parsed.options.pop("address", None),
        options=parsed.options,
        flags=parsed.flags,
    )
