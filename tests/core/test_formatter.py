"""Unit tests for result formatting.

Pure function tests - no mocks needed.
"""

import pytest

from prop_filter.core.formatter import (
    NO_MATCH_MESSAGE,
    TABLE_HEADERS,
    format_amenities,
    format_location,
    format_price,
    format_property_row,
    format_result_summary,
    format_results,
    render_table,
)
from prop_filter.core.property import Property


@pytest.fixture
def sample_property():
    return Property(
        square_footage=1200,
        lighting="high",
        price=250000.5,
        rooms=3,
        bathrooms=2,
        location=(40.7128, -74.006),
        description="Bright apartment",
        amenities={"pool": True, "garage": False, "gym": True},
    )


class TestFieldFormatting:
    """Tests for individual cell formatters."""

    def test_price_two_decimals(self):
        assert format_price(250000.5) == "$250000.50"
        assert format_price(0) == "$0.00"

    def test_location_four_decimals(self):
        assert format_location((40.7128, -74.006)) == "(40.7128, -74.0060)"

    def test_amenities_only_present(self, sample_property):
        assert format_amenities(sample_property) == "pool, gym"

    def test_amenities_empty(self):
        prop = Property(1, "low", 1.0, 1, 1, (0.0, 0.0))
        assert format_amenities(prop) == ""


class TestFormatPropertyRow:
    """Tests for format_property_row()."""

    def test_row_matches_headers(self, sample_property):
        row = format_property_row(sample_property)
        assert len(row) == len(TABLE_HEADERS)
        assert row == [
            "1200",
            "high",
            "$250000.50",
            "3",
            "2",
            "(40.7128, -74.0060)",
            "Bright apartment",
            "pool, gym",
        ]


class TestRenderTable:
    """Tests for render_table()."""

    def test_renders_bordered_grid(self):
        lines = render_table(["A", "Bee"], [["1", "2"], ["long", "x"]]).splitlines()

        assert lines[0].startswith("+-")
        assert lines[-1] == lines[0]
        assert lines[1].split("|")[1:3] == [" A    ", " BEE "]
        assert lines[2].startswith("+=")
        assert "| long | x   |" in lines

    def test_numeric_text_stays_left_aligned(self):
        lines = render_table(["Rooms"], [["3"], ["12"]]).splitlines()
        assert "| 3     |" in lines

    def test_all_lines_same_width(self, sample_property):
        table = render_table(TABLE_HEADERS, [format_property_row(sample_property)])
        widths = {len(line) for line in table.splitlines()}
        assert len(widths) == 1


class TestFormatResults:
    """Tests for format_results()."""

    def test_empty_shows_no_match_message(self):
        assert format_results([]) == NO_MATCH_MESSAGE

    def test_table_contains_each_property(self, sample_property):
        other = Property(650, "low", 125000.0, 1, 1, (42.3601, -71.0589), "Studio")
        output = format_results([sample_property, other])

        assert "SQ FT" in output
        assert "Bright apartment" in output
        assert "Studio" in output
        assert output.index("Bright apartment") < output.index("Studio")


class TestFormatResultSummary:
    """Tests for format_result_summary()."""

    def test_plural(self):
        assert format_result_summary(2, 10) == "Showing 2 of 10 properties"

    def test_singular_total(self):
        assert format_result_summary(1, 1) == "Showing 1 of 1 property"
