"""Tests for line-level token extraction."""

import pytest

from pcasn.tokens import (
    closes_block,
    extract_command,
    extract_value,
    normalize_symbol,
    opens_block,
    split_structural,
)


class TestExtractCommand:
    """Test command keyword extraction."""

    def test_simple_command(self):
        """Leading and trailing whitespace around the keyword is trimmed."""
        assert extract_command("  atoms {") == "atoms"

    def test_no_brace(self):
        """A line without an opening brace has no command."""
        assert extract_command("no brace here") is None

    def test_record_header(self):
        """The record header keeps its internal spaces."""
        assert extract_command("PC-Compound ::= {") == "PC-Compound ::="

    def test_anonymous_block(self):
        """A bare brace opens a block with an empty command."""
        assert extract_command("    {") == ""

    def test_first_brace_wins(self):
        """Only text before the first brace counts."""
        assert extract_command("  atoms { aid { 1 } }") == "atoms"

    def test_closing_brace_only(self):
        """A closing brace alone is not a command."""
        assert extract_command("  },") is None


class TestExtractValue:
    """Test value extraction."""

    def test_trailing_space_kept(self):
        """Leading whitespace is dropped, trailing space before the comma kept."""
        assert extract_value("  12 ,") == "12 "

    def test_no_comma(self):
        """Without a comma the whole remainder is the value."""
        assert extract_value("      9") == "9"

    def test_internal_whitespace_kept(self):
        """Whitespace after the first visible character is retained."""
        assert extract_value("\t value sval x,") == "value sval x"

    def test_only_first_value(self):
        """Only text before the first comma is returned."""
        assert extract_value(" 1, 2, 3") == "1"

    def test_empty_line(self):
        """An empty line has an empty value."""
        assert extract_value("") == ""

    def test_leading_comma(self):
        """A comma before any content yields an empty value."""
        assert extract_value("   , 5") == ""


class TestNormalizeSymbol:
    """Test element symbol normalization."""

    @pytest.mark.parametrize("value,expected", [
        ("c", "C"),
        ("C", "C"),
        ("cl", "Cl"),
        ("Cl", "Cl"),
        ("NA", "NA"),
        ("CL", "CL"),
        ("br", "Br"),
    ])
    def test_first_character_only(self, value, expected):
        """Only the first character is uppercased; the rest is never folded."""
        assert normalize_symbol(value) == expected

    def test_empty(self):
        """An empty value stays empty."""
        assert normalize_symbol("") == ""


class TestBracePredicates:
    """Test brace presence checks."""

    def test_opens(self):
        assert opens_block("aid {")
        assert not opens_block("1,")

    def test_closes(self):
        assert closes_block("},")
        assert not closes_block("aid {")

    def test_both(self):
        """A line can open and close at once."""
        assert opens_block("x { 1 }")
        assert closes_block("x { 1 }")


class TestSplitStructural:
    """Test physical-to-logical line splitting."""

    def test_plain_line_unchanged(self):
        """A line without structural characters is one logical line."""
        assert split_structural("      single") == (["      single"], False)

    def test_one_value_per_line_layout(self):
        """PubChem's own layout is left untouched."""
        assert split_structural("      1,") == (["      1,"], False)
        assert split_structural("    aid {") == (["    aid {"], False)
        assert split_structural("    },") == (["    },"], False)

    def test_inline_block(self):
        """Cuts after open braces and commas and before close braces."""
        pieces, in_string = split_structural("  atoms { aid { 1, 2 }, element { c, o } },")
        assert pieces == [
            "  atoms {", " aid {", " 1,", " 2", "},",
            " element {", " c,", " o", "}", "},",
        ]
        assert not in_string

    def test_every_piece_has_at_most_one_brace(self):
        """Adjacent braces end up on separate logical lines."""
        pieces, _ = split_structural("{{}}")
        assert pieces == ["{", "{", "}", "}"]

    def test_blank_pieces_dropped(self):
        """Whitespace-only pieces are removed."""
        pieces, _ = split_structural("      } }")
        assert pieces == ["}", "}"]

    def test_quoted_text_not_split(self):
        """Commas and braces inside quotes are not cut."""
        pieces, in_string = split_structural('  value sval "a, {b}",')
        assert pieces == ['  value sval "a, {b}",']
        assert not in_string

    def test_string_spans_lines(self):
        """An unterminated string carries over to the next line."""
        pieces, in_string = split_structural('  value sval "first, part')
        assert pieces == ['  value sval "first, part']
        assert in_string

        pieces, in_string = split_structural('second, part" },', in_string)
        assert pieces == ['second, part"', "},"]
        assert not in_string

    def test_doubled_quote(self):
        """A doubled quote inside a string is an escape, not a terminator."""
        pieces, in_string = split_structural('  name "say ""hi, there""",')
        assert pieces == ['  name "say ""hi, there""",']
        assert not in_string

    def test_empty_line(self):
        """An empty line produces no logical lines."""
        assert split_structural("") == ([], False)

    def test_space_before_comma_dropped(self):
        """Values cut at a comma lose trailing blanks, like values cut at a brace."""
        pieces, _ = split_structural("aid { 1 , 2 }")
        assert pieces == ["aid {", " 1,", " 2", "}"]
