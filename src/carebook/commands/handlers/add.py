"""Handler for `add`."""

from __future__ import annotations

from typing import ClassVar

from carebook.commands.types import Command, CommandResult, person_row
from carebook.model import DuplicatePersonError, Model, Person


class AddCommand(Command):
    """Add one person to the address book."""

    COMMAND_WORD: ClassVar[str] = "add"
    MESSAGE_USAGE: ClassVar[str] = (
        "add: Adds a person to the address book.\n"
        "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS role/ROLE [tag/TAG]...\n"
        "Example: add n/John Doe p/98765432 e/johnd@example.com "
        "a/311, Clementi Ave 2, #02-25 role/PATIENT tag/diabetic"
    )

    person: Person

    def execute(self, model: Model) -> CommandResult:
        try:
            model.address_book.add_person(self.person)
        except DuplicatePersonError:
            return CommandResult.error(
                "This person already exists in the address book",
                code="duplicate_person",
                data={"name": self.person.name},
            )
        return CommandResult.ok(
            f"New person added: {self.person.name}",
            code="person_added",
            data=person_row(self.person),
        )
