"""
System executor: hands commands to the iproute2 `ip` binary.

Each Command is re-serialized into its canonical, fully spelled token form,
so abbreviations are resolved here and not by iproute2.
"""

import shutil
import subprocess
from typing import Optional

from ipsh_lib.commands import Command
from ipsh_lib.config import IPROUTE2_BINARY, EXEC_TIMEOUT
from .base import Executor


class SystemExecutor(Executor):
    """Run commands through iproute2."""

    def __init__(self, binary: str = IPROUTE2_BINARY, timeout: int = EXEC_TIMEOUT):
        self.binary = binary
        self.timeout = timeout

    def argv(self, command: Command) -> list[str]:
        return [self.binary] + command.to_argv()

    def execute(self, command: Command) -> tuple[str, Optional[str]]:
        """
        Execute a command and capture its output.

        Args:
            command: Parsed command

        Returns:
            Tuple of (output, error). error is None on success, otherwise
            iproute2's stderr or the reason it could not be run.
        """
        if shutil.which(self.binary) is None:
            return "", f"{self.binary} not found"

        try:
            result = subprocess.run(
                self.argv(command),
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            return "", "Command timed out"
        except OSError as e:
            return "", str(e)

        if result.returncode != 0:
            return "", result.stderr.strip() or f"exit status {result.returncode}"
        return result.stdout, None
