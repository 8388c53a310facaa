"""Tests for patterns/translator.py: template to CLDR pattern translation.

Python 3.13+.
"""

import pytest

from date_expr.patterns import quote_literal, split_template, translate_pattern


class TestQuoteLiteral:
    """Test quote_literal() escaping."""

    def test_plain_text(self):
        """Text is wrapped in single quotes."""
        assert quote_literal("s3://bucket/") == "'s3://bucket/'"

    def test_empty_text(self):
        """Empty text quotes to nothing (never to '')."""
        assert quote_literal("") == ""

    def test_embedded_quote_is_doubled(self):
        """A quote inside text is written as ''."""
        assert quote_literal("foo's") == "'foo''s'"

    @pytest.mark.parametrize(("text", "expected"), [("'", "''"), ("''", "''''")])
    def test_quote_only_text(self, text: str, expected: str):
        """Quote-only text becomes bare '' escapes."""
        assert quote_literal(text) == expected


class TestSplitTemplate:
    """Test split_template() decomposition."""

    def test_literals_surround_runs(self):
        """There is always one more literal than runs."""
        literals, runs = split_template("%Y/x/%H%M")

        assert literals == ["", "/x/", ""]
        assert runs == ["%Y", "%H%M"]

    def test_no_specifiers(self):
        """A template without specifiers is a single literal."""
        assert split_template("static/path") == (["static/path"], [])


class TestTranslatePattern:
    """Test translate_pattern() output."""

    def test_quotes_out_literal_letters(self):
        """Letters in literals must not be read as CLDR fields."""
        template = "s3://bucket/foo/%Y/%m/%d/bar/%H.%M/file-A"

        assert translate_pattern(template) == (
            "'s3://bucket/foo/'yyyy'/'MM'/'dd'/bar/'HH'.'mm'/file-A'"
        )

    def test_leading_specifier(self):
        """A template may start with a specifier."""
        assert translate_pattern("%Y/%m/foo/bar") == "yyyy'/'MM'/foo/bar'"

    def test_adjacent_specifiers_have_no_quotes_between(self):
        """Empty literal segments emit nothing."""
        assert translate_pattern("%H%M%z") == "HHmmZ"

    def test_twelve_hour_and_meridian(self):
        """%h and %p translate to hh and a."""
        assert translate_pattern("%h%p") == "hha"

    def test_literal_quote(self):
        """A quote in the template survives translation."""
        assert translate_pattern("it's/%Y") == "'it''s/'yyyy"

    def test_literal_percent(self):
        """Percent signs not forming a specifier are literal."""
        assert translate_pattern("100%/%Y") == "'100%/'yyyy"

    def test_no_specifiers(self):
        """Total: a template without specifiers is fully quoted."""
        assert translate_pattern("static/path") == "'static/path'"

    def test_empty_template(self):
        """An empty template translates to an empty pattern."""
        assert translate_pattern("") == ""

    def test_is_cached(self):
        """Repeated translation returns the cached result."""
        template = "cache/%Y/%m"
        first = translate_pattern(template)

        assert translate_pattern(template) is first
