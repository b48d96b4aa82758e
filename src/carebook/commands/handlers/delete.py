"""Handler for `delete`."""

from __future__ import annotations

from typing import ClassVar

from carebook.commands.handlers import MESSAGE_INVALID_PERSON_INDEX
from carebook.commands.types import Command, CommandResult
from carebook.model import Model


class DeleteCommand(Command):
    """Delete the person at one display index."""

    COMMAND_WORD: ClassVar[str] = "delete"
    MESSAGE_USAGE: ClassVar[str] = (
        "delete: Deletes the person identified by the index number used in the "
        "displayed person list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete 1"
    )

    index: int

    def execute(self, model: Model) -> CommandResult:
        target = model.get_filtered_person(self.index)
        if target is None:
            return CommandResult.error(
                MESSAGE_INVALID_PERSON_INDEX,
                code="invalid_person_index",
                data={"index": self.index},
            )
        model.address_book.remove_person(target)
        return CommandResult.ok(
            f"Deleted Person: {target.name}",
            code="person_deleted",
            data={"name": target.name},
        )
