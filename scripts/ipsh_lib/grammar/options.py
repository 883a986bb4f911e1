"""
Option-list combinator shared by the grammar productions.

Most `ip` sub-grammars end in a run of `keyword value...` pairs and bare
flags. An OptionSpec describes that run once; parse_options() consumes it
from the context, matching keywords by prefix and reading values verbatim.
"""

from dataclasses import dataclass, field
from typing import Optional

from ipsh_lib.commands import OptionValue
from ipsh_lib.parser.context import ParseContext
from ipsh_lib.parser.errors import EndOfInput


@dataclass(frozen=True)
class OptionSpec:
    """Keyword table for one option loop.

    Attributes:
        values: keyword -> placeholder names of the values it takes
            (empty tuple for a flag)
        choices: keyword -> allowed values, matched by prefix like keywords
        positional: option key a bare, non-keyword token is stored under
        placeholder: placeholder shown for that bare token
        rest: (keyword, placeholder); everything after the keyword is taken
            verbatim and the loop ends
        required: keywords that must appear before the loop may end
        minimum: number of items that must appear before the loop may end
    """
    values: dict = field(default_factory=dict)
    choices: dict = field(default_factory=dict)
    positional: Optional[str] = None
    placeholder: Optional[str] = None
    rest: Optional[tuple] = None
    required: tuple = ()
    minimum: int = 0

    @property
    def keywords(self) -> tuple[str, ...]:
        names = list(self.values) + list(self.choices)
        if self.rest:
            names.append(self.rest[0])
        return tuple(names)


@dataclass
class ParsedOptions:
    """What an option loop consumed."""
    options: dict[str, OptionValue] = field(default_factory=dict)
    flags: list[str] = field(default_factory=list)
    rest: list[str] = field(default_factory=list)


def _missing(spec: OptionSpec, parsed: ParsedOptions, count: int) -> list[str]:
    seen = set(parsed.options)
    if parsed.rest:
        seen.add(spec.rest[0])
    missing = [k for k in spec.required if k not in seen]
    if count < spec.minimum and not missing:
        missing = ["at least one option"]
    return missing


def parse_options(ctx: ParseContext, spec: OptionSpec) -> ParsedOptions:
    """Consume an option run until the stream is exhausted.

    Raises:
        EndOfInput: the stream ran out while a required keyword (or the
            minimum number of items) is still missing, or mid-value
        NoMatch: a token is neither a keyword nor an acceptable bare value
    """
    parsed = ParsedOptions()
    keywords = spec.keywords
    count = 0

    while True:
        if not ctx.more(*keywords, placeholder=spec.placeholder if spec.positional else None):
            missing = _missing(spec, parsed, count)
            if missing:
                raise EndOfInput(f"missing {', '.join(missing)}")
            return parsed

        if spec.positional:
            keyword, token = ctx.keyword_or_value(keywords, spec.placeholder)
            if keyword is None:
                parsed.options[spec.positional] = token
                count += 1
                continue
        else:
            keyword = ctx.expect(*keywords)
        count += 1

        if spec.rest and keyword == spec.rest[0]:
            parsed.rest.append(ctx.value(spec.rest[1]))
            while ctx.more(placeholder="ARG"):
                parsed.rest.append(ctx.value("ARG"))
            missing = _missing(spec, parsed, count)
            if missing:
                ctx.install(keywords)
                raise EndOfInput(f"missing {', '.join(missing)}")
            return parsed

        if keyword in spec.choices:
            parsed.options[keyword] = ctx.expect(*spec.choices[keyword])
            continue

        names = spec.values[keyword]
        if not names:
            parsed.flags.append(keyword)
        elif len(names) == 1:
            parsed.options[keyword] = ctx.value(names[0])
        else:
            parsed.options[keyword] = tuple(ctx.value(name) for name in names)
