"""Property data model and parsing - Pure functions.

This module decodes the property dataset (already loaded from JSON)
into typed, immutable Property objects. No I/O happens here.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


class PropertyParseError(ValueError):
    """Raised when a dataset record cannot be decoded into a Property."""


@dataclass(frozen=True)
class Property:
    """Immutable real-estate listing.

    Attributes:
        square_footage: Floor area in square feet
        lighting: Lighting level (e.g. 'low', 'medium', 'high')
        price: Asking price
        rooms: Number of rooms
        bathrooms: Number of bathrooms
        location: (latitude, longitude) in decimal degrees
        description: Free-text description
        amenities: Amenity name -> presence flag
    """
    square_footage: int
    lighting: str
    price: float
    rooms: int
    bathrooms: int
    location: tuple[float, float]
    description: str = ""
    amenities: Mapping[str, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Frozen records must not share a mutable dict with the caller
        object.__setattr__(self, "amenities", MappingProxyType(dict(self.amenities)))

    @property
    def latitude(self) -> float:
        return self.location[0]

    @property
    def longitude(self) -> float:
        return self.location[1]

    @property
    def present_amenities(self) -> list[str]:
        """Names of amenities flagged as present, in dataset order."""
        return [name for name, present in self.amenities.items() if present]

    def has_amenity(self, name: str) -> bool:
        """Absent amenities count as not present."""
        return self.amenities.get(name, False) is True


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data or data[key] is None:
        raise PropertyParseError(f"missing field '{key}'")
    return data[key]


def _as_int(data: dict[str, Any], key: str) -> int:
    value = _require(data, key)
    if isinstance(value, (bool, str)):
        raise PropertyParseError(f"field '{key}' must be an integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise PropertyParseError(f"field '{key}' must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise PropertyParseError(f"field '{key}' must be an integer, got {value!r}") from e


def _as_float(data: dict[str, Any], key: str) -> float:
    value = _require(data, key)
    if isinstance(value, (bool, str)):
        raise PropertyParseError(f"field '{key}' must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise PropertyParseError(f"field '{key}' must be a number, got {value!r}") from e


def _parse_location(data: dict[str, Any]) -> tuple[float, float]:
    value = _require(data, "location")
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise PropertyParseError(
            f"field 'location' must be a [latitude, longitude] pair, got {value!r}"
        )
    if any(isinstance(v, (bool, str)) for v in value):
        raise PropertyParseError(f"field 'location' must contain numbers, got {value!r}")
    try:
        return (float(value[0]), float(value[1]))
    except (TypeError, ValueError) as e:
        raise PropertyParseError(f"field 'location' must contain numbers, got {value!r}") from e


def _parse_amenities(data: dict[str, Any]) -> dict[str, bool]:
    # The dataset spells the key "ammenities"; accept the correct spelling too
    raw = data.get("ammenities", data.get("amenities"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise PropertyParseError(f"field 'ammenities' must be an object, got {raw!r}")
    for name, flag in raw.items():
        if not isinstance(flag, bool):
            raise PropertyParseError(f"amenity '{name}' must be true or false, got {flag!r}")
    return {str(name): flag for name, flag in raw.items()}


def parse_property(data: dict[str, Any]) -> Property:
    """Parse a single dataset record into a Property.

    Pure function.

    Args:
        data: Decoded JSON object for one listing

    Returns:
        Property object

    Raises:
        PropertyParseError: If a required field is missing or has the wrong type
    """
    if not isinstance(data, dict):
        raise PropertyParseError(f"expected an object, got {type(data).__name__}")

    return Property(
        square_footage=_as_int(data, "squareFootage"),
        lighting=str(data.get("lighting") or ""),
        price=_as_float(data, "price"),
        rooms=_as_int(data, "rooms"),
        bathrooms=_as_int(data, "bathrooms"),
        location=_parse_location(data),
        description=str(data.get("description") or ""),
        amenities=_parse_amenities(data),
    )


def parse_properties(data: Any) -> list[Property]:
    """Parse the full dataset into a list of Properties.

    Pure function. Decoding is all-or-nothing; order is preserved.

    Args:
        data: Decoded JSON document (expected to be an array)

    Returns:
        List of Property objects in dataset order

    Raises:
        PropertyParseError: If the document is not an array or any record is invalid
    """
    if not isinstance(data, list):
        raise PropertyParseError(
            f"expected a list of properties, got {type(data).__name__}"
        )

    properties = []
    for index, record in enumerate(data):
        try:
            properties.append(parse_property(record))
        except PropertyParseError as e:
            raise PropertyParseError(f"property[{index}]: {e}") from e

    return properties
