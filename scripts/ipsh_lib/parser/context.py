"""
Parser context for one invocation.

This module contains:
- ParseState: where the parse is (dispatching, inside a production, finished)
- ParseContext: token stream, expectation set and family, passed explicitly
  into every production
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from ipsh_lib.commands import Family
from .errors import EndOfInput, NoMatch, AmbiguousPrefix
from .matcher import find_prefix
from .stream import END, TokenStream


# Placeholder installed once a production expects nothing more
END_MARK = "<end>"


class ParseState(Enum):
    DISPATCH = "dispatch"
    IN_PRODUCTION = "in-production"
    DONE = "done"
    FAILED = "failed"


@dataclass
class ParseContext:
    """Cursor, expectation set and family for one parse."""
    stream: TokenStream
    family: Family = Family.ALL
    keywords: tuple[str, ...] = ()
    placeholders: tuple[str, ...] = ()
    state: ParseState = ParseState.DISPATCH
    productions: list[str] = field(default_factory=list)
    # True while the expectation is an optional continuation at end of input
    open_end: bool = False

    @classmethod
    def from_tokens(cls, tokens: Sequence[str], family: Family = Family.ALL) -> "ParseContext":
        return cls(stream=TokenStream(tokens), family=family)

    @property
    def expecting(self) -> tuple[str, ...]:
        """Everything valid at the cursor: keywords, then leaf placeholders."""
        return self.keywords + self.placeholders

    def install(self, keywords: Sequence[str] = (), placeholders: Sequence[str] = ()) -> None:
        """Set the expectation for the next consumption attempt."""
        if not keywords and not placeholders:
            raise ValueError("expectation set must not be empty")
        self.keywords = tuple(keywords)
        self.placeholders = tuple(placeholders)
        self.open_end = False

    def enter(self, production: str) -> None:
        self.state = ParseState.IN_PRODUCTION
        self.productions.append(production)

    def more(self, *keywords: str, placeholder: Optional[str] = None) -> bool:
        """Install an expectation and report whether any token is left.

        Productions with an optional continuation call this first, so the
        expectation is current even when the stream is already exhausted.
        """
        self.install(keywords, (placeholder,) if placeholder else ())
        self.open_end = self.stream.at_end()
        return not self.open_end

    def expect(self, *keywords: str) -> str:
        """Consume the current token as one of `keywords` (prefixes allowed)."""
        self.install(keywords)
        token = self.stream.peek()
        if token is END:
            raise EndOfInput(f"expected one of {list(keywords)}")
        keyword = find_prefix(token, keywords)
        self.stream.advance()
        return keyword

    def value(self, placeholder: str) -> str:
        """Consume the current token verbatim as a leaf value."""
        self.install((), (placeholder,))
        return self.stream.advance()

    def keyword_or_value(self, keywords: Sequence[str], placeholder: str) -> tuple[Optional[str], str]:
        """Consume a keyword, or failing that a leaf value.

        Returns:
            (keyword, token) when the token matches a keyword,
            (None, token) when it is taken as a leaf value.
            Ambiguous prefixes are still an error.
        """
        self.install(keywords, (placeholder,))
        token = self.stream.peek()
        if token is END:
            raise EndOfInput(f"expected one of {list(self.expecting)}")
        try:
            keyword = find_prefix(token, keywords)
        except AmbiguousPrefix:
            raise
        except NoMatch:
            keyword = None
        self.stream.advance()
        return keyword, token

    def finish(self) -> None:
        """Require the stream to be exhausted."""
        token = self.stream.peek()
        if token is END:
            if not self.open_end:
                self.install((), (END_MARK,))
            return
        self.install((), (END_MARK,))
        raise NoMatch(token, self.expecting)
