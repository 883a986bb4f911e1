"""
Dry-run executor: reports what would be run without running it.
"""

import shlex
from typing import Optional

from ipsh_lib.commands import Command
from ipsh_lib.config import PROG
from .base import Executor


def command_line(command: Command) -> str:
    """Canonical command line, e.g. `ip -4 route add to default via 10.0.0.1`."""
    return " ".join(shlex.quote(token) for token in [PROG] + command.to_argv())


class DryRunExecutor(Executor):
    """Return the canonical command line instead of running it."""

    def __init__(self):
        self.executed: list[Command] = []

    def execute(self, command: Command) -> tuple[str, Optional[str]]:
        self.executed.append(command)
        return command_line(command), None
