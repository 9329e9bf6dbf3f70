"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Property record parsing
- Distance calculations
- Filter evaluation
- Result formatting
- Configuration validation

All functions here are deterministic and have no I/O.
"""

from prop_filter.core.property import Property, PropertyParseError, parse_properties
from prop_filter.core.geo import calculate_distance, filter_by_distance, is_within_radius
from prop_filter.core.filters import (
    AmenityFilter,
    ComparisonOperator,
    DescriptionFilter,
    DistanceFilter,
    LightingFilter,
    NumericField,
    NumericFilter,
    apply_filter,
    filter_by_amenity,
    filter_by_description,
    filter_by_lighting,
    filter_by_number,
)
from prop_filter.core.formatter import format_results, format_result_summary

__all__ = [
    # Property
    "Property",
    "PropertyParseError",
    "parse_properties",
    # Geo
    "calculate_distance",
    "filter_by_distance",
    "is_within_radius",
    # Filters
    "AmenityFilter",
    "ComparisonOperator",
    "DescriptionFilter",
    "DistanceFilter",
    "LightingFilter",
    "NumericField",
    "NumericFilter",
    "apply_filter",
    "filter_by_amenity",
    "filter_by_description",
    "filter_by_lighting",
    "filter_by_number",
    # Formatter
    "format_results",
    "format_result_summary",
]
