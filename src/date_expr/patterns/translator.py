"""Template to CLDR pattern translation.

Babel date patterns (like Joda's and Java's SimpleDateFormat) treat every
ASCII letter outside single quotes as a field. "s3://bucket/%Y" cannot be
handed over with only %Y replaced: the "b" in bucket is not a valid field
and "s" would render seconds. The literal portions of a template are
therefore quoted out before the specifiers are substituted:

    s3://bucket/foo/%Y/%m/%d/bar/%H.%M/file-A
 -> 's3://bucket/foo/'yyyy'/'MM'/'dd'/bar/'HH'.'mm'/file-A'

CLDR QUOTING RULES:
    - Single quotes delimit literal text: 'at' -> "at"
    - Two consecutive single quotes '' produce a literal single quote,
      inside or outside a quoted section

An empty literal segment is emitted as nothing, never as '' (which would
insert a quote character). A template without any specifier translates
to a pattern that renders the template verbatim.

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache

from date_expr.constants import PATTERN_CACHE_SIZE

from .specs import CONVERSION_SPECS, specifier_run_pattern

__all__ = [
    "quote_literal",
    "split_template",
    "translate_pattern",
]


def quote_literal(text: str) -> str:
    """Quote text so a CLDR pattern renders it verbatim.

    Example:
        >>> quote_literal("s3://bucket/")
        "'s3://bucket/'"
        >>> quote_literal("foo's")
        "'foo''s'"
        >>> quote_literal("")
        ''
    """
    if not text:
        return text
    # Babel rewrites every '' to a quote before scanning, so "''''" would
    # yield two quotes. Quote-only text is emitted as bare escapes instead.
    if not text.strip("'"):
        return "''" * len(text)
    escaped = text.replace("'", "''")
    return f"'{escaped}'"


def split_template(template: str) -> tuple[list[str], list[str]]:
    """Split template into literal segments and specifier runs.

    The literal list is always one longer than the run list, so the template
    is literals[0] + runs[0] + literals[1] + ... + literals[-1].

    Example:
        >>> split_template("%Y/x/%H%M")
        (['', '/x/', ''], ['%Y', '%H%M'])
    """
    run_re = specifier_run_pattern()
    runs = run_re.findall(template)
    literals = run_re.split(template)
    return literals, runs


def _substitute_run(run: str) -> str:
    # Each code is exactly two characters, so a run slices cleanly
    return "".join(CONVERSION_SPECS[run[i : i + 2]].pattern for i in range(0, len(run), 2))


@lru_cache(maxsize=PATTERN_CACHE_SIZE)
def translate_pattern(template: str) -> str:
    """Translate a template into a Babel (CLDR) date pattern.

    Total: a template without specifiers becomes a fully quoted literal.

    Args:
        template: Percent-escaped template, e.g. "logs/%Y/%m/%d"

    Returns:
        CLDR pattern, e.g. "'logs/'yyyy'/'MM'/'dd"
    """
    literals, runs = split_template(template)
    parts: list[str] = []
    for literal, run in zip(literals, runs, strict=False):
        parts.append(quote_literal(literal))
        parts.append(_substitute_run(run))
    parts.append(quote_literal(literals[-1]))
    return "".join(parts)
