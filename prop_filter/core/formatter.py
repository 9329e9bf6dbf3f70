"""Result formatting - Pure functions.

This module turns filtered properties into the text shown to the user.
All functions are pure with no side effects.
"""

from typing import Sequence

from tabulate import tabulate

from prop_filter.core.property import Property


TABLE_HEADERS = [
    "Sq ft",
    "Lighting",
    "Price",
    "Rooms",
    "WC",
    "Location",
    "Description",
    "Amenities",
]

NO_MATCH_MESSAGE = "No properties match your criteria."


def format_price(price: float) -> str:
    """Format a price as currency, e.g. '$250000.00'."""
    return f"${price:.2f}"


def format_location(location: tuple[float, float]) -> str:
    """Format a coordinate pair, e.g. '(40.7128, -74.0060)'."""
    return f"({location[0]:.4f}, {location[1]:.4f})"


def format_amenities(prop: Property) -> str:
    """Comma-joined names of amenities the property has."""
    return ", ".join(prop.present_amenities)


def format_property_row(prop: Property) -> list[str]:
    """Format one property as a table row matching TABLE_HEADERS.

    Pure function.
    """
    return [
        str(prop.square_footage),
        prop.lighting,
        format_price(prop.price),
        str(prop.rooms),
        str(prop.bathrooms),
        format_location(prop.location),
        prop.description,
        format_amenities(prop),
    ]


def render_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render a bordered grid table with upper-cased headers.

    Pure function.

    Args:
        headers: Column headings
        rows: Cell values, one list per row (same length as headers)

    Returns:
        Multi-line table string without a trailing newline
    """
    return tabulate(
        [list(row) for row in rows],
        headers=[h.upper() for h in headers],
        tablefmt="grid",
        stralign="left",
        disable_numparse=True,
    )


def format_results(properties: Sequence[Property]) -> str:
    """Format filtered properties for display.

    Pure function.

    Returns:
        A table of the properties, or NO_MATCH_MESSAGE when there are none
    """
    if not properties:
        return NO_MATCH_MESSAGE

    return render_table(TABLE_HEADERS, [format_property_row(p) for p in properties])


def format_result_summary(count: int, total: int) -> str:
    """One-line summary such as 'Showing 2 of 10 properties'."""
    noun = "property" if total == 1 else "properties"
    return f"Showing {count} of {total} {noun}"
