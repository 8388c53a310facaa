"""CLDR pattern to strptime conversion for parsing rendered text.

Rendering goes through Babel, which cannot parse arbitrary patterns.
Parsing instead converts the same CLDR pattern into a strptime directive
string, so both directions are driven by one translated pattern.

CONVERSION STRATEGY:
1. Tokenize: Split CLDR pattern into tokens (field runs, quoted literals, chars)
2. Map: Convert each field token using _CLDR_TOKEN_MAP
3. Escape: Literal text has "%" doubled so strptime reads it verbatim

    CLDR    | strptime | Meaning
    --------|----------|---------------------
    yyyy    | %Y       | 4-digit year
    MM      | %m       | month 01-12
    dd      | %d       | day 01-31
    a       | %p       | AM/PM
    HH      | %H       | hour 00-23
    hh      | %I       | hour 01-12
    mm      | %M       | minute 00-59
    ss      | %S       | second 00-60 (61 is rejected after parsing)
    Z       | %z       | +hhmm / -hhmm

MERIDIAN WITHOUT HOUR:
    strptime only applies %p to %I. A pattern with a day period but no hour
    field (".../%Y/%m/%d/%p") would otherwise parse "PM" as midnight. Such
    patterns get a synthetic "%I" directive and the input a matching "12",
    which strptime turns into 00:00 for AM and 12:00 for PM.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from date_expr.constants import PATTERN_CACHE_SIZE

__all__ = [
    "StrptimePattern",
    "cldr_to_strptime",
    "tokenize_cldr_pattern",
]

_CLDR_TOKEN_MAP: dict[str, str] = {
    "yyyy": "%Y",
    "MM": "%m",
    "dd": "%d",
    "a": "%p",
    "HH": "%H",
    "hh": "%I",
    "mm": "%M",
    "ss": "%S",
    "Z": "%z",
}

_HOUR_DIRECTIVES = frozenset({"%H", "%I"})

# Appended to both pattern and input for bare-meridian patterns. The
# separator keeps the synthetic hour from running into preceding digits.
_SYNTHETIC_HOUR_DIRECTIVE = "\x00%I"
_SYNTHETIC_HOUR_VALUE = "\x0012"


@dataclass(frozen=True, slots=True)
class StrptimePattern:
    """strptime directive string plus preprocessing flags.

    Attributes:
        pattern: Directive string for time.strptime()
        has_timezone: True if the pattern parses a UTC offset (%z)
        has_bare_meridian: True if %p appears without any hour directive
    """

    pattern: str
    has_timezone: bool = False
    has_bare_meridian: bool = False

    def directive(self) -> str:
        """Directive string with any synthetic hour appended."""
        if self.has_bare_meridian:
            return self.pattern + _SYNTHETIC_HOUR_DIRECTIVE
        return self.pattern

    def preprocess(self, value: str) -> str:
        """Prepare input text for directive()."""
        if self.has_bare_meridian:
            return value + _SYNTHETIC_HOUR_VALUE
        return value


def tokenize_cldr_pattern(pattern: str) -> list[str]:
    """Tokenize a CLDR pattern into field runs and literal tokens.

    CLDR quote escaping rules:
    - Single quotes delimit literal text: 'at' produces "at"
    - Two consecutive single quotes '' produce a literal single quote
    - '' inside quoted text also produces a literal single quote

    Quoted literals come back as one token each, and may therefore look like
    field runs ("'MM'" yields "MM"). Use cldr_to_strptime(), which keeps
    track of quoting, rather than re-classifying tokens.

    Examples:
        "'logs/'yyyy'/'MM" -> ["logs/", "yyyy", "/", "MM"]
        "HH'.'mm" -> ["HH", ".", "mm"]
        "'foo''s'" -> ["foo's"]

    Args:
        pattern: CLDR date pattern

    Returns:
        List of tokens
    """
    return [token for token, _ in _tokenize(pattern)]


def _tokenize(pattern: str) -> list[tuple[str, bool]]:
    """Tokenize pattern into (token, is_field) pairs."""
    tokens: list[tuple[str, bool]] = []
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]

        if char == "'":
            # '' outside quoted section -> literal single quote
            if i + 1 < n and pattern[i + 1] == "'":
                tokens.append(("'", False))
                i += 2
                continue

            i += 1  # Skip opening quote
            literal_chars: list[str] = []

            while i < n:
                if pattern[i] == "'":
                    # '' inside quoted section -> literal single quote
                    if i + 1 < n and pattern[i + 1] == "'":
                        literal_chars.append("'")
                        i += 2
                    else:
                        i += 1
                        break
                else:
                    literal_chars.append(pattern[i])
                    i += 1

            if literal_chars:
                tokens.append(("".join(literal_chars), False))
            continue

        if char.isalpha():
            # Collect consecutive same letters (e.g., "yyyy", "MM", "dd")
            j = i + 1
            while j < n and pattern[j] == char:
                j += 1
            tokens.append((pattern[i:j], True))
            i = j
            continue

        tokens.append((char, False))
        i += 1

    return tokens


@lru_cache(maxsize=PATTERN_CACHE_SIZE)
def cldr_to_strptime(cldr_pattern: str) -> StrptimePattern:
    """Convert a CLDR pattern produced by translate_pattern() to strptime form.

    Unknown field runs (which translate_pattern() never emits) pass through
    as literal text, the same way unquoted punctuation does.

    Args:
        cldr_pattern: CLDR date pattern

    Returns:
        StrptimePattern with the directive string and preprocessing flags
    """
    parts: list[str] = []
    directives: set[str] = set()

    for token, is_field in _tokenize(cldr_pattern):
        mapped = _CLDR_TOKEN_MAP.get(token) if is_field else None
        if mapped is None:
            parts.append(token.replace("%", "%%"))
        else:
            parts.append(mapped)
            directives.add(mapped)

    return StrptimePattern(
        pattern="".join(parts),
        has_timezone="%z" in directives,
        has_bare_meridian="%p" in directives and not directives & _HOUR_DIRECTIVES,
    )
