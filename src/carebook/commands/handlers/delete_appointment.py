"""Handler for `deleteapp`."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from carebook.commands.handlers import MESSAGE_INVALID_PERSON_INDEX
from carebook.commands.types import Command, CommandResult, person_row
from carebook.model import Model


class DeleteAppointmentCommand(Command):
    """Remove the appointment starting at one moment from a person."""

    COMMAND_WORD: ClassVar[str] = "deleteapp"
    MESSAGE_USAGE: ClassVar[str] = (
        "deleteapp: Deletes the appointment with the given start from the person "
        "identified by the index number used in the displayed person list.\n"
        "Parameters: INDEX startdate/DATE start/TIME\n"
        "Example: deleteapp 1 startdate/30/10/2024 start/14:00"
    )

    index: int
    start: datetime

    def execute(self, model: Model) -> CommandResult:
        target = model.get_filtered_person(self.index)
        if target is None:
            return CommandResult.error(
                MESSAGE_INVALID_PERSON_INDEX,
                code="invalid_person_index",
                data={"index": self.index},
            )
        appointment = target.find_appointment(self.start)
        if appointment is None:
            return CommandResult.error(
                f"{target.name} has no appointment starting at "
                f"{self.start:%d/%m/%Y %H:%M}",
                code="appointment_not_found",
            )
        updated = target.without_appointment(appointment)
        model.address_book.set_person(target, updated)
        return CommandResult.ok(
            f"Deleted appointment for {target.name}: {appointment.display()}",
            code="appointment_deleted",
            data=person_row(updated),
        )
