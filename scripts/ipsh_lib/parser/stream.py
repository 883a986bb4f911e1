"""
Token stream over the arguments of one invocation.
"""

from typing import Sequence

from .errors import EndOfInput


# Returned by peek() once every token has been consumed
END = None


class TokenStream:
    """Ordered tokens plus a cursor at the next unconsumed one."""

    def __init__(self, tokens: Sequence[str]):
        self.tokens = list(tokens)
        self.cursor = 0

    def peek(self):
        """Return the current token, or END when exhausted."""
        if self.cursor >= len(self.tokens):
            return END
        return self.tokens[self.cursor]

    def advance(self) -> str:
        """Return the current token and move past it."""
        if self.cursor >= len(self.tokens):
            raise EndOfInput(f"expected a token after {self.consumed()}")
        token = self.tokens[self.cursor]
        self.cursor += 1
        return token

    def at_end(self) -> bool:
        return self.cursor >= len(self.tokens)

    def consumed(self) -> list[str]:
        return self.tokens[:self.cursor]

    def remaining(self) -> list[str]:
        return self.tokens[self.cursor:]

    def __repr__(self) -> str:
        return f"TokenStream({self.consumed()} | {self.remaining()})"
