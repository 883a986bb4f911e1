"""
Keyword matching by unambiguous prefix.

This is what lets `ip a s` mean `ip address show`.
"""

from typing import Sequence

from .errors import NoMatch, AmbiguousPrefix


def find_prefix(token: str, candidates: Sequence[str]) -> str:
    """
    Resolve a token against a keyword set.

    Args:
        token: Token as typed (case-sensitive)
        candidates: Keywords valid at this point

    Returns:
        The exact match if there is one, otherwise the single candidate
        the token is a prefix of.

    Raises:
        AmbiguousPrefix: token is a prefix of two or more candidates
        NoMatch: token is empty or matches nothing
    """
    if token in candidates:
        return token
    if not token:
        raise NoMatch(token, candidates)

    matches = [c for c in candidates if c.startswith(token)]
    if len(matches) == 1:
        return matches[0]
    if matches:
        raise AmbiguousPrefix(token, candidates, matches)
    raise NoMatch(token, candidates)
