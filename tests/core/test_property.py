"""Unit tests for Property model and parsing.

Pure function tests - no mocks needed.
"""

import pytest

from prop_filter.core.property import (
    Property,
    PropertyParseError,
    parse_properties,
    parse_property,
)


@pytest.fixture
def sample_record():
    """A dataset record in the on-disk JSON shape."""
    return {
        "squareFootage": 1200,
        "lighting": "high",
        "price": 250000.0,
        "rooms": 3,
        "bathrooms": 2,
        "location": [40.7128, -74.0060],
        "description": "Bright apartment with a pool",
        "ammenities": {"pool": True, "garage": False, "gym": True},
    }


class TestParseProperty:
    """Tests for parse_property() function."""

    def test_parses_valid_record(self, sample_record):
        prop = parse_property(sample_record)

        assert prop.square_footage == 1200
        assert prop.lighting == "high"
        assert prop.price == 250000.0
        assert prop.rooms == 3
        assert prop.bathrooms == 2
        assert prop.location == (40.7128, -74.0060)
        assert prop.description == "Bright apartment with a pool"
        assert dict(prop.amenities) == {"pool": True, "garage": False, "gym": True}

    def test_accepts_amenities_spelling(self, sample_record):
        sample_record["amenities"] = sample_record.pop("ammenities")
        prop = parse_property(sample_record)
        assert prop.has_amenity("pool") is True

    def test_missing_amenities_defaults_to_empty(self, sample_record):
        del sample_record["ammenities"]
        assert dict(parse_property(sample_record).amenities) == {}

    def test_missing_description_defaults_to_empty(self, sample_record):
        del sample_record["description"]
        assert parse_property(sample_record).description == ""

    def test_integer_price_becomes_float(self, sample_record):
        sample_record["price"] = 100000
        price = parse_property(sample_record).price
        assert isinstance(price, float)
        assert price == 100000.0

    def test_missing_numeric_field_raises(self, sample_record):
        del sample_record["rooms"]
        with pytest.raises(PropertyParseError, match="rooms"):
            parse_property(sample_record)

    def test_fractional_rooms_raises(self, sample_record):
        sample_record["rooms"] = 2.5
        with pytest.raises(PropertyParseError, match="rooms"):
            parse_property(sample_record)

    def test_string_price_raises(self, sample_record):
        sample_record["price"] = "cheap"
        with pytest.raises(PropertyParseError, match="price"):
            parse_property(sample_record)

    def test_string_square_footage_raises(self, sample_record):
        sample_record["squareFootage"] = "1200"
        with pytest.raises(PropertyParseError, match="squareFootage"):
            parse_property(sample_record)

    def test_string_location_raises(self, sample_record):
        sample_record["location"] = ["40.7", "-74.0"]
        with pytest.raises(PropertyParseError, match="location"):
            parse_property(sample_record)

    @pytest.mark.parametrize("flag", ["false", 0, 1, None])
    def test_non_boolean_amenity_flag_raises(self, sample_record, flag):
        sample_record["ammenities"] = {"pool": flag}
        with pytest.raises(PropertyParseError, match="pool"):
            parse_property(sample_record)

    def test_bad_location_raises(self, sample_record):
        sample_record["location"] = [40.0]
        with pytest.raises(PropertyParseError, match="location"):
            parse_property(sample_record)

    def test_non_object_raises(self):
        with pytest.raises(PropertyParseError):
            parse_property(["not", "a", "dict"])

    def test_parse_error_is_value_error(self):
        assert issubclass(PropertyParseError, ValueError)


class TestParseProperties:
    """Tests for parse_properties() function."""

    def test_preserves_order(self, sample_record):
        second = dict(sample_record, price=1.0)
        result = parse_properties([sample_record, second])
        assert [p.price for p in result] == [250000.0, 1.0]

    def test_empty_list(self):
        assert parse_properties([]) == []

    def test_non_list_raises(self):
        with pytest.raises(PropertyParseError, match="list"):
            parse_properties({"properties": []})

    def test_invalid_element_reports_index(self, sample_record):
        bad = dict(sample_record)
        del bad["price"]
        with pytest.raises(PropertyParseError, match=r"property\[1\]"):
            parse_properties([sample_record, bad])


class TestProperty:
    """Tests for the Property dataclass."""

    def test_is_immutable(self, sample_record):
        prop = parse_property(sample_record)
        with pytest.raises(AttributeError):
            prop.price = 1.0

    def test_amenities_are_read_only(self, sample_record):
        prop = parse_property(sample_record)
        with pytest.raises(TypeError):
            prop.amenities["sauna"] = True

    def test_amenities_copied_from_source(self):
        source = {"pool": True}
        prop = Property(1, "low", 1.0, 1, 1, (0.0, 0.0), "", source)
        source["garage"] = True
        assert prop.has_amenity("garage") is False

    def test_coordinates(self, sample_record):
        prop = parse_property(sample_record)
        assert prop.latitude == 40.7128
        assert prop.longitude == -74.0060

    def test_present_amenities_in_order(self, sample_record):
        assert parse_property(sample_record).present_amenities == ["pool", "gym"]
