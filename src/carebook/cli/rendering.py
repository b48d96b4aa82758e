"""CLI result rendering policies and Rich views."""

from __future__ import annotations

from rich.console import Console
from rich.json import JSON
from rich.markdown import Markdown
from rich.panel import Panel
from rich.text import Text

from carebook.cli.renderers.persons import render_person_list
from carebook.cli.result_codes import HIDE_DATA_CODES, PLAIN_TEXT_CODES
from carebook.commands.types import CommandResult, CommandStatus
from carebook.config import DisplaySettings


class CliRenderer:
    """Render command results with Rich structures and code-based policies."""

    def __init__(
        self, *, console: Console, display: DisplaySettings | None = None
    ) -> None:
        """Store console used for rendering.

        Args:
            console: Rich console used for output rendering.
            display: Optional person table column toggles.
        """
        self._console = console
        self._display = display or DisplaySettings()

    def render(self, result: CommandResult) -> None:
        """Render one command result.

        Args:
            result: Structured command result.
        """
        if result.status == CommandStatus.OK:
            if result.code == "persons_listed" and render_person_list(
                self._console, result, self._display
            ):
                return
            body = (
                Text(result.message)
                if result.code in PLAIN_TEXT_CODES
                else Markdown(result.message)
            )
            self._console.print(
                Panel(
                    body,
                    title=Text(f"Carebook [{result.code}]"),
                    border_style="green",
                    expand=True,
                )
            )
            if result.data and result.code not in HIDE_DATA_CODES:
                self._render_data(result)
            return
        # Plain Text: usage strings and codes contain "[...]".
        self._console.print(
            Panel(
                Text(result.message),
                title=Text(f"Error [{result.code}]"),
                border_style="bold red",
                expand=True,
            )
        )
        if result.data:
            self._render_data(result)

    def _render_data(self, result: CommandResult) -> None:
        self._console.print(
            Panel(
                JSON.from_data(result.data),
                title="Data",
                border_style="cyan",
                expand=True,
            )
        )
