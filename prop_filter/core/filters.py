"""Property filters - Pure functions.

This module is the filter engine: each filter scans the full property
list once and keeps the matching records in their original order.
Filters never mutate records and never raise on well-formed input.
"""

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Union

from prop_filter.core.geo import filter_by_distance
from prop_filter.core.property import Property


class NumericField(Enum):
    """Numeric property fields that can be compared against a threshold."""
    SQUARE_FOOTAGE = "squareFootage"
    PRICE = "price"
    ROOMS = "rooms"
    BATHROOMS = "bathrooms"

    @property
    def label(self) -> str:
        return _FIELD_LABELS[self]

    @property
    def is_integer(self) -> bool:
        """True for fields stored as whole numbers."""
        return self is not NumericField.PRICE

    def value_of(self, prop: Property) -> float:
        """Project the field from a property as a float."""
        return float(_FIELD_ACCESSORS[self](prop))

    @classmethod
    def parse(cls, name: Union[str, "NumericField"]) -> "NumericField | None":
        """Resolve a field name, returning None if it is unknown."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            return None


_FIELD_ACCESSORS: dict[NumericField, Callable[[Property], float]] = {
    NumericField.SQUARE_FOOTAGE: lambda p: p.square_footage,
    NumericField.PRICE: lambda p: p.price,
    NumericField.ROOMS: lambda p: p.rooms,
    NumericField.BATHROOMS: lambda p: p.bathrooms,
}

_FIELD_LABELS = {
    NumericField.SQUARE_FOOTAGE: "square footage",
    NumericField.PRICE: "price",
    NumericField.ROOMS: "number of rooms",
    NumericField.BATHROOMS: "number of bathrooms",
}


class ComparisonOperator(Enum):
    """Comparison applied as `field_value <op> threshold`."""
    GREATER_THAN = "greaterThan"
    LESS_THAN = "lessThan"
    EQUAL = "equal"

    def compare(self, value: float, threshold: float) -> bool:
        """Compare value against threshold.

        EQUAL is exact float equality; no tolerance is applied to prices.
        """
        return _OPERATORS[self](value, threshold)

    @classmethod
    def parse(cls, name: Union[str, "ComparisonOperator"]) -> "ComparisonOperator | None":
        """Resolve an operator name, returning None if it is unknown."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            return None


_OPERATORS: dict[ComparisonOperator, Callable[[float, float], bool]] = {
    ComparisonOperator.GREATER_THAN: operator.gt,
    ComparisonOperator.LESS_THAN: operator.lt,
    ComparisonOperator.EQUAL: operator.eq,
}

_OPERATOR_SYMBOLS = {
    ComparisonOperator.GREATER_THAN: ">",
    ComparisonOperator.LESS_THAN: "<",
    ComparisonOperator.EQUAL: "==",
}


def filter_by_number(
    properties: Iterable[Property],
    field: NumericField | str,
    op: ComparisonOperator | str,
    value: float,
) -> list[Property]:
    """Filter properties by comparing a numeric field to a threshold.

    Pure function. Unknown field or operator names yield an empty list.

    Args:
        properties: Properties to filter
        field: Field to compare (enum or dataset name, e.g. 'price')
        op: Comparison operator (enum or name, e.g. 'greaterThan')
        value: Threshold to compare against

    Returns:
        Matching properties in original order
    """
    resolved_field = NumericField.parse(field)
    resolved_op = ComparisonOperator.parse(op)
    if resolved_field is None or resolved_op is None:
        return []

    threshold = float(value)
    return [
        p for p in properties
        if resolved_op.compare(resolved_field.value_of(p), threshold)
    ]


def filter_by_amenity(properties: Iterable[Property], amenity: str) -> list[Property]:
    """Keep properties whose amenity flag is present and true.

    Pure function.
    """
    return [p for p in properties if p.has_amenity(amenity)]


def filter_by_description(properties: Iterable[Property], keyword: str) -> list[Property]:
    """Keep properties whose description contains keyword, ignoring case.

    Pure function. An empty keyword matches every property.
    """
    needle = keyword.lower()
    return [p for p in properties if needle in p.description.lower()]


def filter_by_lighting(properties: Iterable[Property], lighting: str) -> list[Property]:
    """Keep properties whose lighting level equals lighting exactly.

    Pure function. Comparison is case-sensitive.
    """
    return [p for p in properties if p.lighting == lighting]


@dataclass(frozen=True)
class NumericFilter:
    """Compare a numeric field against a threshold."""
    field: NumericField
    op: ComparisonOperator
    value: float

    def describe(self) -> str:
        return f"{self.field.value} {_OPERATOR_SYMBOLS[self.op]} {self.value:g}"


@dataclass(frozen=True)
class AmenityFilter:
    """Require an amenity to be present."""
    amenity: str

    def describe(self) -> str:
        return f"amenity '{self.amenity}'"


@dataclass(frozen=True)
class DescriptionFilter:
    """Case-insensitive keyword search in the description."""
    keyword: str

    def describe(self) -> str:
        return f"description contains '{self.keyword}'"


@dataclass(frozen=True)
class LightingFilter:
    """Exact lighting level match."""
    lighting: str

    def describe(self) -> str:
        return f"lighting == '{self.lighting}'"


@dataclass(frozen=True)
class DistanceFilter:
    """Properties within max_miles of origin.

    Attributes:
        origin: (latitude, longitude) of the user
        max_miles: Maximum distance in miles (inclusive)
    """
    origin: tuple[float, float]
    max_miles: float

    def describe(self) -> str:
        lat, lon = self.origin
        return f"within {self.max_miles:g} miles of ({lat:.4f}, {lon:.4f})"


FilterRequest = Union[
    NumericFilter,
    AmenityFilter,
    DescriptionFilter,
    LightingFilter,
    DistanceFilter,
]


def apply_filter(properties: Iterable[Property], request: FilterRequest) -> list[Property]:
    """Apply a single filter request to the property list.

    Pure function.

    Args:
        properties: Properties to filter
        request: One of the filter request variants

    Returns:
        Matching properties in original order (empty for unknown requests)
    """
    if isinstance(request, NumericFilter):
        return filter_by_number(properties, request.field, request.op, request.value)
    if isinstance(request, AmenityFilter):
        return filter_by_amenity(properties, request.amenity)
    if isinstance(request, DescriptionFilter):
        return filter_by_description(properties, request.keyword)
    if isinstance(request, LightingFilter):
        return filter_by_lighting(properties, request.lighting)
    if isinstance(request, DistanceFilter):
        return filter_by_distance(properties, request.origin, request.max_miles)
    return []
