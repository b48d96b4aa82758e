"""Handler for `edit`."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from carebook.commands.handlers import MESSAGE_INVALID_PERSON_INDEX
from carebook.commands.types import Command, CommandResult, person_row
from carebook.model import DuplicatePersonError, Model, Person, Role


class EditPersonDescriptor(BaseModel):
    """Replacement values for the fields being edited."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    role: Role | None = None
    tags: tuple[str, ...] | None = None

    def is_any_field_edited(self) -> bool:
        return bool(self.model_dump(exclude_none=True))

    def apply(self, person: Person) -> Person:
        """Return ``person`` with every provided field replaced.

        Args:
            person: Record being edited.

        Returns:
            Validated edited record.
        """
        updates: dict[str, Any] = self.model_dump(exclude_none=True)
        return Person.model_validate({**person.model_dump(), **updates})


class EditCommand(Command):
    """Edit the person at one display index."""

    COMMAND_WORD: ClassVar[str] = "edit"
    MESSAGE_USAGE: ClassVar[str] = (
        "edit: Edits the details of the person identified by the index number "
        "used in the displayed person list. Existing values will be overwritten "
        "by the input values.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] "
        "[e/EMAIL] [a/ADDRESS] [role/ROLE] [tag/TAG]...\n"
        "Example: edit 1 p/91234567 e/johndoe@example.com"
    )
    MESSAGE_NOT_EDITED: ClassVar[str] = "At least one field to edit must be provided."

    index: int
    descriptor: EditPersonDescriptor

    def execute(self, model: Model) -> CommandResult:
        target = model.get_filtered_person(self.index)
        if target is None:
            return CommandResult.error(
                MESSAGE_INVALID_PERSON_INDEX,
                code="invalid_person_index",
                data={"index": self.index},
            )
        edited = self.descriptor.apply(target)
        try:
            model.address_book.set_person(target, edited)
        except DuplicatePersonError:
            return CommandResult.error(
                "This person already exists in the address book",
                code="duplicate_person",
                data={"name": edited.name},
            )
        return CommandResult.ok(
            f"Edited Person: {edited.name}",
            code="person_edited",
            data=person_row(edited),
        )
