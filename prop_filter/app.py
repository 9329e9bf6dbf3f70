"""Application loop - Wires Functional Core and Imperative Shell.

This module runs the interactive session: ask for an action, collect
its parameters, apply the filter, and show the matches. It's the
"glue" between the prompts and the pure filter engine.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

import click

from prop_filter.core.config import Config
from prop_filter.core.filters import FilterRequest, apply_filter
from prop_filter.core.formatter import format_result_summary, format_results
from prop_filter.core.property import Property
from prop_filter.shell.prompts import Action, InvalidInputError, Prompter


logger = logging.getLogger(__name__)


WELCOME_MESSAGE = "Welcome to the Prop Filter CLI!"
GOODBYE_MESSAGE = "Goodbye!"


@dataclass
class TurnResult:
    """Result of a single menu turn.

    Attributes:
        action: The menu action chosen
        request: Filter request collected, None if the turn was abandoned
        matches: Properties that matched the request
        error: Input error message if the turn was abandoned
    """
    action: Action
    request: FilterRequest | None = None
    matches: list[Property] = field(default_factory=list)
    error: str | None = None

    @property
    def completed(self) -> bool:
        """Returns True if a filter was applied."""
        return self.request is not None


class PropFilterApp:
    """Interactive property filter session.

    The property list is loaded once and never modified.
    """

    def __init__(
        self,
        properties: Sequence[Property],
        config: Config | None = None,
        prompter: Prompter | None = None,
        echo: Callable[..., Any] = click.echo,
    ) -> None:
        """Initialize the session.

        Args:
            properties: Loaded property records
            config: Application configuration (defaults if not provided)
            prompter: Prompt collaborator (created if not provided)
            echo: Function used to print output
        """
        self.properties = tuple(properties)
        self.config = config or Config()
        self.prompter = prompter or Prompter(echo=echo)
        self.echo = echo

    def show(self, matches: Sequence[Property]) -> None:
        """Print matches as a table, or the no-match message."""
        self.echo(format_results(matches))
        if matches and self.config.show_summary:
            self.echo(format_result_summary(len(matches), len(self.properties)))

    def run_turn(self, action: Action) -> TurnResult:
        """Collect parameters for action, filter, and display the result.

        Input errors are reported and the turn is abandoned.
        """
        try:
            request = self.prompter.ask_filter(action, self.config.lighting_levels)
        except InvalidInputError as e:
            logger.info("Abandoned %s: %s", action.name, e)
            self.echo(str(e))
            return TurnResult(action=action, error=str(e))

        if request is None:
            return TurnResult(action=action)

        matches = apply_filter(self.properties, request)
        logger.info(
            "Filter %s matched %d of %d properties",
            request.describe(),
            len(matches),
            len(self.properties),
        )

        self.show(matches)
        return TurnResult(action=action, request=request, matches=matches)

    def run(self) -> int:
        """Run the menu loop until the user exits.

        Returns:
            Process exit code
        """
        self.echo(WELCOME_MESSAGE)

        while True:
            try:
                action = self.prompter.choose_action()
            except click.Abort:
                self.echo("\nPrompt failed: aborted")
                return 0

            if action is Action.EXIT:
                self.echo(GOODBYE_MESSAGE)
                return 0

            # An aborted turn returns to the menu; aborting the menu ends the session
            try:
                self.run_turn(action)
            except click.Abort:
                self.echo("\nPrompt failed: aborted")
