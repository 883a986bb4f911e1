"""
ipsh_lib.parser - Token stream, prefix matcher and dispatcher

This package contains:
- stream: TokenStream and the END sentinel
- matcher: find_prefix, unambiguous-prefix keyword matching
- context: ParseContext passed into every production
- errors: EndOfInput, NoMatch, AmbiguousPrefix, UsageError, ExecutionError
- diagnostics: Diagnostic built at the parse boundary
- dispatcher: top-level dispatch, parse_command and probe
"""

from .stream import END, TokenStream
from .matcher import find_prefix
from .errors import (
    ParseError,
    EndOfInput,
    NoMatch,
    AmbiguousPrefix,
    UsageError,
    ExecutionError,
)
from .context import END_MARK, ParseContext, ParseState
from .diagnostics import Diagnostic

__all__ = [
    'END', 'TokenStream',
    'find_prefix',
    'ParseError', 'EndOfInput', 'NoMatch', 'AmbiguousPrefix',
    'UsageError', 'ExecutionError',
    'END_MARK', 'ParseContext', 'ParseState',
    'Diagnostic',
]
