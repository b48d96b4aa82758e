"""Handler for `find`."""

from __future__ import annotations

from typing import ClassVar

from carebook.commands.types import Command, CommandResult, listed_result
from carebook.model import ContainsKeywordsPredicate, Model


class FindCommand(Command):
    """Filter persons by name keywords, role, and tags."""

    COMMAND_WORD: ClassVar[str] = "find"
    MESSAGE_USAGE: ClassVar[str] = (
        "find: Finds all persons matching every given criteria. Name keywords "
        "are case-insensitive and any one of them may match.\n"
        "Parameters: [n/KEYWORD [MORE_KEYWORDS]...] [role/ROLE] [tag/TAG]...\n"
        "Example: find n/alice bob role/PATIENT"
    )

    predicate: ContainsKeywordsPredicate

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        return listed_result(model, "{count} persons listed!")
