"""Interactive Prompts - Imperative Shell.

This module collects filter parameters from the user on the terminal
using click. Answers are parsed here and handed to the core as typed
filter requests; the core never sees raw strings.
"""

import logging
from enum import Enum
from typing import Any, Callable, Sequence

import click

from prop_filter.core.config import check_origin
from prop_filter.core.filters import (
    AmenityFilter,
    ComparisonOperator,
    DescriptionFilter,
    DistanceFilter,
    FilterRequest,
    LightingFilter,
    NumericField,
    NumericFilter,
)


logger = logging.getLogger(__name__)


class Action(Enum):
    """Main menu entries, in display order."""
    PRICE = "Filter by price"
    AMENITIES = "Filter by amenities"
    DESCRIPTION = "Filter by description"
    DISTANCE = "Filter by distance"
    ROOMS = "Filter by rooms"
    BATHROOMS = "Filter by bathrooms"
    SQUARE_FOOTAGE = "Filter by square footage"
    LIGHTING = "Filter by lighting"
    EXIT = "Exit"


# Menu actions that compare a numeric field
NUMERIC_ACTIONS = {
    Action.PRICE: NumericField.PRICE,
    Action.ROOMS: NumericField.ROOMS,
    Action.BATHROOMS: NumericField.BATHROOMS,
    Action.SQUARE_FOOTAGE: NumericField.SQUARE_FOOTAGE,
}


class InvalidInputError(ValueError):
    """Raised when the user enters a value that does not parse.

    The current filter turn is abandoned; the session continues.
    """


def parse_number(raw: str, label: str, integer: bool = False) -> float:
    """Parse a numeric answer.

    Args:
        raw: Text entered by the user
        label: Name of the value for the error message
        integer: Require a whole number

    Returns:
        Parsed value as float

    Raises:
        InvalidInputError: If raw is not a valid number
    """
    text = raw.strip()
    try:
        return float(int(text)) if integer else float(text)
    except ValueError as e:
        raise InvalidInputError(f"Invalid {label} input") from e


class Prompter:
    """Asks the user for a menu action and filter parameters.

    This is part of the imperative shell - it handles terminal I/O.
    """

    def __init__(
        self,
        prompt: Callable[..., Any] = click.prompt,
        echo: Callable[..., Any] = click.echo,
    ) -> None:
        """Initialize prompter.

        Args:
            prompt: Function used to ask a question (click.prompt signature)
            echo: Function used to print text (click.echo signature)
        """
        self._prompt = prompt
        self._echo = echo

    def choose_action(self) -> Action:
        """Show the main menu and return the selected action."""
        actions = list(Action)

        self._echo("")
        for index, action in enumerate(actions, start=1):
            self._echo(f"  {index}. {action.value}")

        choice = self._prompt(
            "What would you like to do?",
            type=click.IntRange(1, len(actions)),
        )
        return actions[choice - 1]

    def ask_operator(self, field: NumericField) -> ComparisonOperator:
        """Ask which comparison to apply to field."""
        answer = self._prompt(
            f"Choose a filter operator for {field.label}",
            type=click.Choice([op.value for op in ComparisonOperator]),
            show_choices=True,
        )
        return ComparisonOperator(answer)

    def ask_numeric(self, field: NumericField) -> NumericFilter:
        """Ask for an operator and threshold for a numeric field.

        Raises:
            InvalidInputError: If the threshold does not parse
        """
        op = self.ask_operator(field)
        raw = self._prompt(f"Enter the {field.label}", type=str)
        value = parse_number(raw, field.label, integer=field.is_integer)
        return NumericFilter(field=field, op=op, value=value)

    def ask_amenity(self) -> AmenityFilter:
        amenity = self._prompt(
            "Enter the amenity to filter by (e.g., garage, pool)",
            type=str,
        )
        return AmenityFilter(amenity=amenity.strip())

    def ask_keyword(self) -> DescriptionFilter:
        # An empty keyword is allowed and matches everything
        keyword = self._prompt(
            "Enter a keyword to search in the description",
            type=str,
            default="",
            show_default=False,
        )
        return DescriptionFilter(keyword=keyword)

    def ask_lighting(self, levels: Sequence[str]) -> LightingFilter:
        """Ask for one of the configured lighting levels."""
        choices = list(dict.fromkeys(levels))
        lighting = self._prompt(
            "Select the lighting level",
            type=click.Choice(choices),
            show_choices=True,
        )
        return LightingFilter(lighting=lighting)

    def ask_distance(self) -> DistanceFilter:
        """Ask for the user's coordinates and a maximum distance.

        Raises:
            InvalidInputError: If any answer does not parse
        """
        latitude = parse_number(
            self._prompt("Enter your latitude", type=str), "latitude"
        )
        longitude = parse_number(
            self._prompt("Enter your longitude", type=str), "longitude"
        )
        max_miles = parse_number(
            self._prompt("Enter the maximum distance (in miles)", type=str), "distance"
        )

        for issue in check_origin(latitude, longitude):
            logger.warning("Unusual %s: %s", issue.field, issue.message)

        return DistanceFilter(origin=(latitude, longitude), max_miles=max_miles)

    def ask_filter(
        self,
        action: Action,
        lighting_levels: Sequence[str],
    ) -> FilterRequest | None:
        """Collect the filter request for a menu action.

        Returns:
            A filter request, or None for Action.EXIT

        Raises:
            InvalidInputError: If a numeric answer does not parse
        """
        if action in NUMERIC_ACTIONS:
            return self.ask_numeric(NUMERIC_ACTIONS[action])
        if action is Action.AMENITIES:
            return self.ask_amenity()
        if action is Action.DESCRIPTION:
            return self.ask_keyword()
        if action is Action.DISTANCE:
            return self.ask_distance()
        if action is Action.LIGHTING:
            return self.ask_lighting(lighting_levels)
        return None
