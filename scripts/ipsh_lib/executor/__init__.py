"""
ipsh_lib.executor - Execution collaborators

This package contains:
- base: Executor interface, execute(command) -> (output, error)
- system: SystemExecutor, runs the iproute2 `ip` binary
- dry_run: DryRunExecutor and command_line()
"""

from .base import Executor
from .system import SystemExecutor
from .dry_run import DryRunExecutor, command_line

__all__ = [
    'Executor',
    'SystemExecutor',
    'DryRunExecutor',
    'command_line',
]
