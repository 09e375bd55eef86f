"""
Unit tests for corona_core/codec.py.

Acceptance criteria:
- to_compact sorts segments by (offset, size)
- from_compact ignores whitespace and accepts non-positive centers and
  negative offsets (validation is separate)
- wrong field count / bad center / bad token raise CompactParseError with
  fixed messages
- parsing the printed form validates identically
"""

import pytest

from corona_core.codec import CompactParseError, from_compact, to_compact
from corona_core.enumeration import enumerate_unique_coronas
from corona_core.types import Corona, Segment
from corona_core.validator import validate


class TestToCompact:
    def test_single_segments(self):
        corona = Corona(1, [[Segment(2, 0)], [Segment(3, 0)], [Segment(4, 0)], [Segment(2, 0)]])
        assert to_compact(corona) == "1|2^0|3^0|4^0|2^0"

    def test_segments_sorted(self):
        edge = [Segment(2, 1), Segment(1, 0)]
        corona = Corona(2, [edge, [Segment(3, 0)], [Segment(4, 0)], [Segment(3, 0)]])
        assert to_compact(corona) == "2|1^0,2^1|3^0|4^0|3^0"


class TestFromCompact:
    def test_parses_segments(self):
        corona = from_compact("2|1^0,2^1|3^0|4^0|3^0")
        assert corona.center == 2
        assert corona.edges[0] == (Segment(1, 0), Segment(2, 1))
        assert corona.edges[3] == (Segment(3, 0),)

    def test_whitespace_ignored(self):
        corona = from_compact("  2 | 1^0, 2^1 |3^0|\t4^0|3^0\n")
        assert to_compact(corona) == "2|1^0,2^1|3^0|4^0|3^0"

    def test_negative_offset_and_center_parse(self):
        corona = from_compact("-1|2^-1|2^0|2^0|2^0")
        assert corona.center == -1
        assert corona.edges[0] == (Segment(2, -1),)

    @pytest.mark.parametrize(
        "text",
        ["1|2^0|2^0|2^0", "1|2^0|2^0|2^0|2^0|2^0", "1", ""],
    )
    def test_wrong_field_count(self, text):
        with pytest.raises(CompactParseError) as exc:
            from_compact(text)
        assert str(exc.value) == "Expected center + 4 edges"

    @pytest.mark.parametrize("token", ["2", "2^", "^0", "-2^0", "2^0^1", "a^0", "2^1.5"])
    def test_bad_token(self, token):
        with pytest.raises(CompactParseError, match="Bad segment token"):
            from_compact(f"1|{token}|2^0|2^0|2^0")

    def test_empty_edge_field_is_bad_token(self):
        with pytest.raises(CompactParseError) as exc:
            from_compact("1||2^0|2^0|2^0")
        assert str(exc.value) == "Bad segment token: "

    @pytest.mark.parametrize("center", ["x", "", "1.5"])
    def test_bad_center(self, center):
        with pytest.raises(CompactParseError, match="Bad center"):
            from_compact(f"{center}|2^0|2^0|2^0|2^0")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            from_compact("1|2^0")

    def test_non_ascii_digit_center_rejected(self):
        """Arabic-Indic digits are digits to int() but not to the format."""
        with pytest.raises(CompactParseError, match="Bad center"):
            from_compact("٢|3^0|3^0|3^0|3^0")

    @pytest.mark.parametrize("token", ["٣^0", "3^٠", "３^0"])
    def test_non_ascii_digit_token_rejected(self, token):
        with pytest.raises(CompactParseError, match="Bad segment token"):
            from_compact(f"2|{token}|3^0|3^0|3^0")


class TestRoundTrip:
    @pytest.mark.parametrize("center", [1, 2])
    def test_catalog_round_trip(self, center):
        for corona in enumerate_unique_coronas(center):
            text = to_compact(corona)
            parsed = from_compact(text)
            assert to_compact(parsed) == text
            assert validate(parsed) == validate(corona)

    @pytest.mark.parametrize(
        "text",
        [
            "1|1^0|2^0|2^0|2^0",
            "2|1^0,2^1|1^0,2^1|1^0,4^1|1^0,4^1",
            "3|2^0|2^0|2^0|2^0",
        ],
    )
    def test_invalid_round_trip(self, text):
        corona = from_compact(text)
        again = from_compact(to_compact(corona))
        assert validate(again).reason == validate(corona).reason
