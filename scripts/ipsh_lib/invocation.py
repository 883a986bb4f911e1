"""
One invocation: parse, then hand the command to the executor.
"""

from typing import Sequence

from ipsh_lib.commands import Family
from ipsh_lib.executor import Executor
from ipsh_lib.grammar import USAGE
from ipsh_lib.parser.dispatcher import parse_command
from ipsh_lib.parser.errors import ExecutionError


def run(tokens: Sequence[str], family: Family, executor: Executor) -> str:
    """
    Parse tokens and execute the resulting command.

    Every call builds its own parser context, so a long-lived host (the
    interactive shell) can call this repeatedly.

    Returns:
        Output text of the command; usage text for `help` actions.

    Raises:
        UsageError: the tokens do not parse
        ExecutionError: the executor reported a failure
    """
    command = parse_command(tokens, family)
    if command.action == "help":
        return USAGE[command.keyword]

    output, err = executor.execute(command)
    if err is not None:
        raise ExecutionError(command.keyword, err)
    return output
