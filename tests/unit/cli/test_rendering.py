"""Unit tests for CLI result rendering."""

from __future__ import annotations

import pytest
from rich.console import Console

from carebook.cli.rendering import CliRenderer
from carebook.commands.types import CommandResult, listed_result
from carebook.config import DisplaySettings
from carebook.model import AddressBook, Model
from tests.unit.helpers import make_appointment, make_person


def _console() -> Console:
    return Console(record=True, width=160, color_system=None)


def _listed() -> CommandResult:
    person = make_person(
        "Alex Yeoh", tags=("diabetic",), appointments=(make_appointment(30, 14, 15),)
    )
    return listed_result(Model(AddressBook(persons=[person])), "Listed ({count})")


@pytest.mark.unit
def test_persons_listed_renders_table() -> None:
    """Person listings should render as a table with all columns."""
    # Arrange - console and listing
    console = _console()

    # Act - render listing
    CliRenderer(console=console).render(_listed())

    # Assert - title, columns, and cells present
    text = console.export_text()
    assert "Listed (1)" in text
    assert "Appointments" in text
    assert "Alex Yeoh" in text
    assert "diabetic" in text
    assert "30/10/2024 14:00 - 30/10/2024 15:00" in text


@pytest.mark.unit
def test_display_settings_hide_columns() -> None:
    """Disabled display toggles should drop tag and appointment columns."""
    console = _console()
    display = DisplaySettings(show_tags=False, show_appointments=False)

    CliRenderer(console=console, display=display).render(_listed())

    text = console.export_text()
    assert "Alex Yeoh" in text
    assert "Tags" not in text
    assert "Appointments" not in text


@pytest.mark.unit
def test_error_renders_message_literally() -> None:
    """Error bodies should keep square brackets from usage strings."""
    console = _console()

    CliRenderer(console=console).render(
        CommandResult.error("Usage: find [n/NAME]", code="invalid_command_format")
    )

    text = console.export_text()
    assert "Error [invalid_command_format]" in text
    assert "[n/NAME]" in text


@pytest.mark.unit
def test_success_data_panel_shown_unless_hidden() -> None:
    """Structured data should render for codes outside the hide list."""
    # Arrange - one visible-data and one hidden-data result
    console = _console()
    renderer = CliRenderer(console=console)

    # Act - render both
    renderer.render(CommandResult.ok("done", code="custom", data={"answer": 42}))
    renderer.render(CommandResult.ok("gone", code="cleared", data={"count": 7}))

    # Assert - only the first payload is printed
    text = console.export_text()
    assert "Carebook [custom]" in text
    assert "42" in text
    assert "7" not in text
