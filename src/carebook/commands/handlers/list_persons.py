"""Handler for `list`."""

from __future__ import annotations

from typing import ClassVar

from carebook.commands.types import Command, CommandResult, listed_result
from carebook.model import Model, show_all


class ListCommand(Command):
    """Reset the filtered view to every person."""

    COMMAND_WORD: ClassVar[str] = "list"
    MESSAGE_USAGE: ClassVar[str] = "list: Lists all persons."

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(show_all)
        return listed_result(model, "Listed all persons ({count})")
