"""Person list Rich renderer helpers."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from carebook.commands.types import CommandResult
from carebook.config import DisplaySettings


def render_person_list(
    console: Console,
    result: CommandResult,
    display: DisplaySettings | None = None,
) -> bool:
    """Render person-listing results in table form.

    Args:
        console: Rich console.
        result: Command result payload.
        display: Optional column toggles.

    Returns:
        ``True`` when rendered.
    """
    settings = display or DisplaySettings()
    rows = _person_rows(result)
    if rows is None:
        return False
    table = Table(title=result.message, show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Role", style="magenta")
    table.add_column("Phone")
    table.add_column("Email")
    table.add_column("Address")
    if settings.show_tags:
        table.add_column("Tags", style="green")
    if settings.show_appointments:
        table.add_column("Appointments", style="yellow")
    for index, row in enumerate(rows, start=1):
        cells = [
            str(index),
            str(row.get("name", "")),
            str(row.get("role", "")),
            str(row.get("phone", "")),
            str(row.get("email", "")),
            str(row.get("address", "")),
        ]
        if settings.show_tags:
            cells.append(", ".join(_strings(row.get("tags"))))
        if settings.show_appointments:
            cells.append("\n".join(_strings(row.get("appointments"))))
        table.add_row(*cells)
    console.print(table)
    return True


def _person_rows(result: CommandResult) -> tuple[dict[str, object], ...] | None:
    """Extract person rows from command result payload.

    Args:
        result: Command result payload.

    Returns:
        Row mappings, or ``None`` when payload shape is incompatible.
    """
    data = result.data
    if not isinstance(data, dict):
        return None
    raw_rows = data.get("persons")
    if not isinstance(raw_rows, list):
        return None
    return tuple(row for row in raw_rows if isinstance(row, dict))


def _strings(value: object) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value]
