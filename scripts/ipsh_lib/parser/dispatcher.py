"""
Top-level dispatcher and the parse boundary.

dispatch() picks the subcommand production from the first token;
parse_command() runs it under the one boundary that turns every parse
signal into a UsageError carrying a Diagnostic.
"""

from typing import Sequence

from ipsh_lib.commands import Command, Family
from ipsh_lib.grammar import (
    parse_address,
    parse_link,
    parse_route,
    parse_neigh,
    parse_monitor,
    parse_tunnel,
    parse_tcp_metrics,
    parse_xfrm,
)
from .context import ParseContext, ParseState
from .diagnostics import Diagnostic
from .errors import ParseError, UsageError


TOP_LEVEL = (
    "address", "route", "link", "monitor", "neigh",
    "tunnel", "tcp_metrics", "tcpmetrics", "xfrm",
)

# Literal keywords that name the same production
ALIASES = {
    "tcpmetrics": "tcp_metrics",
}

PRODUCTIONS = {
    "address": parse_address,
    "route": parse_route,
    "link": parse_link,
    "monitor": parse_monitor,
    "neigh": parse_neigh,
    "tunnel": parse_tunnel,
    "tcp_metrics": parse_tcp_metrics,
    "xfrm": parse_xfrm,
}


def dispatch(ctx: ParseContext) -> Command:
    """Match the subcommand keyword and run its production to completion."""
    ctx.state = ParseState.DISPATCH
    keyword = ctx.expect(*TOP_LEVEL)
    keyword = ALIASES.get(keyword, keyword)
    command = PRODUCTIONS[keyword](ctx)
    ctx.finish()
    ctx.state = ParseState.DONE
    return command


def parse_in_context(ctx: ParseContext) -> Command:
    """Run dispatch() under the parse boundary."""
    try:
        return dispatch(ctx)
    except ParseError as e:
        ctx.state = ParseState.FAILED
        raise UsageError(Diagnostic.from_context(ctx), e) from e


def parse_command(tokens: Sequence[str], family: Family = Family.ALL) -> Command:
    """
    Parse one invocation's tokens into a Command.

    Args:
        tokens: Arguments after flag resolution (e.g. ["a", "s", "dev", "eth0"])
        family: Address family selected by -4/-6

    Returns:
        The Command for the recognized subcommand.

    Raises:
        UsageError: The tokens do not form a command; `.diagnostic` says
            how far parsing got and what was expected there.
    """
    return parse_in_context(ParseContext.from_tokens(tokens, family))


def probe(tokens: Sequence[str], family: Family = Family.ALL) -> ParseContext:
    """Parse without raising and return the final context.

    Used for completion: on success or at end of input the context's
    keywords are what may follow the tokens.
    """
    ctx = ParseContext.from_tokens(tokens, family)
    try:
        dispatch(ctx)
    except ParseError:
        ctx.state = ParseState.FAILED
    return ctx
