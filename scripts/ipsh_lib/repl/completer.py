"""
Tab completion for the ipsh REPL.

Completions come from the parser itself: the typed tokens are probed and
whatever keywords the grammar would accept next are offered.
"""

from prompt_toolkit.completion import Completer, Completion

from ipsh_lib.commands import Family
from ipsh_lib.parser.context import ParseState
from ipsh_lib.parser.dispatcher import probe
from .context import ShellContext

# Shell-only commands, valid as the first word of a line
BUILTINS = ("help", "exit", "quit", "family")


def next_keywords(tokens: list[str], family: Family = Family.ALL) -> list[str]:
    """Keywords the grammar accepts after `tokens` (empty if none or on error)."""
    ctx = probe(tokens, family)
    if ctx.state is ParseState.FAILED and not ctx.stream.at_end():
        return []
    return list(ctx.keywords)


class GrammarCompleter(Completer):
    """Completer backed by the parser's expectation sets."""

    def __init__(self, ctx: ShellContext):
        self.ctx = ctx

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        words = text.split()

        # Completing a fresh word, or the one being typed
        if not words or text.endswith(' '):
            word = ""
        else:
            word = words.pop()

        completions = next_keywords(words, self.ctx.family)
        if not words:
            completions += BUILTINS

        for item in completions:
            if item.startswith(word):
                yield Completion(item, start_position=-len(word))
