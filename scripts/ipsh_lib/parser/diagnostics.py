"""
Parse diagnostics.

A Diagnostic is a snapshot of the parser context at the point it could not
go on: what was read, what was left, where it stopped and what would have
been accepted there.
"""

from dataclasses import dataclass
from typing import Optional

from .context import ParseContext


def _fmt(tokens) -> str:
    return "[" + " ".join(tokens) + "]"


@dataclass(frozen=True)
class Diagnostic:
    """Structured parse-failure report."""
    consumed: tuple[str, ...]
    remaining: tuple[str, ...]
    offending: Optional[str]
    expected: tuple[str, ...]

    @classmethod
    def from_context(cls, ctx: ParseContext) -> "Diagnostic":
        remaining = tuple(ctx.stream.remaining())
        return cls(
            consumed=tuple(ctx.stream.consumed()),
            remaining=remaining,
            offending=remaining[0] if remaining else None,
            expected=ctx.expecting,
        )

    @property
    def at_end(self) -> bool:
        return self.offending is None

    def __str__(self) -> str:
        if self.at_end:
            where = "stopped at end of input"
        else:
            where = f"stopped at '{self.offending}' with {_fmt(self.remaining)} left"
        expected = ", ".join(self.expected)
        return f"parsed {_fmt(self.consumed)}, {where}, expected one of [{expected}]"
