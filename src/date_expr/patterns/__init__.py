"""Template patterns: specifier table, translation and granularity.

Public API:
    CONVERSION_SPECS - Read-only mapping of specifier code to ConversionSpec
    extract_conversion_specs - All specifier occurrences in a template
    translate_pattern - Template -> Babel (CLDR) pattern with quoted literals
    cldr_to_strptime - CLDR pattern -> strptime directives for parsing
    compute_granularity / resolve_step - Finest granularity and its period

Python 3.13+.
"""

from .granularity import (
    GRANULARITY_PERIODS,
    compute_granularity,
    finest_granularity,
    resolve_step,
    template_granularities,
)
from .specs import (
    CONVERSION_SPECS,
    ConversionSpec,
    extract_conversion_specs,
    has_conversion_spec,
    specifier_run_pattern,
)
from .strptime import StrptimePattern, cldr_to_strptime, tokenize_cldr_pattern
from .translator import quote_literal, split_template, translate_pattern

__all__ = [
    "CONVERSION_SPECS",
    "GRANULARITY_PERIODS",
    "ConversionSpec",
    "StrptimePattern",
    "cldr_to_strptime",
    "compute_granularity",
    "extract_conversion_specs",
    "finest_granularity",
    "has_conversion_spec",
    "quote_literal",
    "resolve_step",
    "specifier_run_pattern",
    "split_template",
    "template_granularities",
    "tokenize_cldr_pattern",
    "translate_pattern",
]
