"""
Grammar for `ip monitor`.

    ip monitor [ all | OBJECT... ] [ label ] [ dev IFNAME ]
    ip monitor help
"""

from ipsh_lib.commands import MonitorCommand
from ipsh_lib.parser.context import ParseContext


OBJECTS = ("all", "link", "address", "route", "neigh")
OPTIONS = ("label", "dev")

USAGE = """\
Usage: ip monitor [ all | OBJECT... ] [ label ] [ dev IFNAME ]
       ip monitor help
OBJECT := link | address | route | neigh"""


def parse_monitor(ctx: ParseContext) -> MonitorCommand:
    """Parse everything after the `monitor` keyword."""
    ctx.enter("monitor")
    command = MonitorCommand(family=ctx.family)

    keywords = OBJECTS + OPTIONS + ("help",)
    while ctx.more(*keywords):
        keyword = ctx.expect(*keywords)
        if keyword == "help":
            command.action = "help"
            return command
        keywords = tuple(k for k in keywords if k != "help")

        if keyword == "dev":
            command.options["dev"] = ctx.value("IFNAME")
        elif keyword == "label":
            command.flags.append(keyword)
        elif keyword == "all":
            # `all` stands alone: no named object may follow
            command.objects.append(keyword)
            keywords = OPTIONS
        else:
            command.objects.append(keyword)
            keywords = tuple(k for k in keywords if k != "all")

    if not command.objects:
        command.objects = ["all"]
    return command
