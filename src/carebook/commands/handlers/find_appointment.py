"""Handler for `findapp`."""

from __future__ import annotations

from typing import ClassVar

from carebook.commands.types import Command, CommandResult, listed_result
from carebook.model import ContainsKeywordsPredicate, Model
from carebook.parsing.validators import MESSAGE_INVALID_DATE, MESSAGE_INVALID_TIME


class FindAppointmentCommand(Command):
    """Filter persons with an appointment inside a date/time window."""

    COMMAND_WORD: ClassVar[str] = "findapp"
    MESSAGE_USAGE: ClassVar[str] = (
        "findapp: Finds all persons with an appointment inside the given window.\n"
        "Parameters: startdate/DATE start/TIME enddate/DATE end/TIME\n"
        "Example: findapp startdate/30/10/2024 start/14:00 "
        "enddate/30/10/2024 end/15:00"
    )
    MESSAGE_INVALID_DATE: ClassVar[str] = MESSAGE_INVALID_DATE
    MESSAGE_INVALID_TIME: ClassVar[str] = MESSAGE_INVALID_TIME
    MESSAGE_DUPLICATE_PREFIXES: ClassVar[str] = (
        "Duplicate prefixes detected for date and/or time fields."
    )

    predicate: ContainsKeywordsPredicate

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        return listed_result(model, "{count} persons with matching appointments!")
