"""
Configuration constants for ipsh.

Program name, external binaries and paths used across the tool.
"""

from pathlib import Path


# Name used as the prefix of every user-facing failure line
PROG = "ip"

# iproute2 binary driven by the system executor
IPROUTE2_BINARY = "ip"
EXEC_TIMEOUT = 30

# Interactive shell
HISTORY_FILE = Path.home() / ".ipsh_history"
SHELL_PROMPT = "ip> "
