"""
ipsh_lib.repl - Interactive shell components for ipsh

This package contains:
- context: Session state and prompt text
- completer: Tab completion driven by the parser's expectation sets
- shell: Line handler and the REPL loop
"""

from .context import ShellContext, get_prompt_text
from .completer import GrammarCompleter, next_keywords
from .shell import handle_line, run_repl

__all__ = [
    'ShellContext',
    'get_prompt_text',
    'GrammarCompleter',
    'next_keywords',
    'handle_line',
    'run_repl',
]
