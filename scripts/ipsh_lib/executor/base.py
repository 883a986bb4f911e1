"""
Execution collaborator interface.

The parser never touches the networking subsystem. A completed Command is
handed to an Executor, which returns (output, error); error is None on
success.
"""

from typing import Optional

from ipsh_lib.commands import Command


class Executor:
    """Carries out parsed commands."""

    def execute(self, command: Command) -> tuple[str, Optional[str]]:
        raise NotImplementedError
