"""
ipsh_lib.config - Constants for ipsh.

This package contains:
- constants: Program name, iproute2 binary, timeouts and shell paths
"""

from .constants import (
    PROG,
    IPROUTE2_BINARY,
    EXEC_TIMEOUT,
    HISTORY_FILE,
    SHELL_PROMPT,
)

__all__ = [
    'PROG',
    'IPROUTE2_BINARY',
    'EXEC_TIMEOUT',
    'HISTORY_FILE',
    'SHELL_PROMPT',
]
