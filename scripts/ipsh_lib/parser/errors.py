"""
Parse and execution errors for ipsh.

EndOfInput and NoMatch (with its AmbiguousPrefix refinement) are raised from
inside productions and turned into one UsageError by the parse boundary.
"""

from typing import Sequence


class ParseError(Exception):
    """Base for signals raised while consuming tokens."""
    pass


class EndOfInput(ParseError):
    """Raised when a production needs a token and the stream is exhausted."""
    pass


class NoMatch(ParseError):
    """Raised when a token is not one of the expected keywords."""

    def __init__(self, token: str, candidates: Sequence[str]):
        self.token = token
        self.candidates = tuple(candidates)
        super().__init__(f"'{token}' is not one of {list(self.candidates)}")


class AmbiguousPrefix(NoMatch):
    """Raised when a token is a prefix of two or more keywords."""

    def __init__(self, token: str, candidates: Sequence[str], matches: Sequence[str]):
        super().__init__(token, candidates)
        self.matches = tuple(matches)


class UsageError(Exception):
    """The single user-facing parse failure; carries a Diagnostic."""

    def __init__(self, diagnostic, cause: ParseError):
        self.diagnostic = diagnostic
        self.cause = cause
        super().__init__(str(diagnostic))


class ExecutionError(Exception):
    """Raised when the execution collaborator reports a failure."""

    def __init__(self, subcommand: str, message: str):
        self.subcommand = subcommand
        self.message = message
        super().__init__(f"{subcommand}: {message}")
