"""Handler for `clear`."""

from __future__ import annotations

from typing import ClassVar

from carebook.commands.types import Command, CommandResult
from carebook.model import Model, show_all


class ClearCommand(Command):
    """Remove every person from the address book."""

    COMMAND_WORD: ClassVar[str] = "clear"
    MESSAGE_USAGE: ClassVar[str] = "clear: Removes every person."

    def execute(self, model: Model) -> CommandResult:
        model.address_book.clear()
        model.update_filtered_person_list(show_all)
        return CommandResult.ok("Address book has been cleared!", code="cleared")
