"""
Shell context and prompt utilities for the ipsh REPL.

This module contains:
- ShellContext: Session state kept between lines (family, executor)
- get_prompt_text: Generates the prompt string for the current family
"""

from dataclasses import dataclass, field

from ipsh_lib.commands import Family
from ipsh_lib.config import SHELL_PROMPT
from ipsh_lib.executor import Executor, SystemExecutor


@dataclass
class ShellContext:
    """Session state. Parser state is never kept here; each line gets its own."""
    family: Family = Family.ALL
    executor: Executor = field(default_factory=SystemExecutor)


def get_prompt_text(ctx: ShellContext) -> str:
    """Generate the prompt string, showing the family when restricted."""
    if ctx.family.flag:
        return f"ip {ctx.family.flag}> "
    return SHELL_PROMPT
