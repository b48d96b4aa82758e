"""Handler for `addapp`."""

from __future__ import annotations

from typing import ClassVar

from carebook.commands.handlers import MESSAGE_INVALID_PERSON_INDEX
from carebook.commands.types import Command, CommandResult, person_row
from carebook.model import Appointment, Model


class AddAppointmentCommand(Command):
    """Attach one appointment to the person at a display index."""

    COMMAND_WORD: ClassVar[str] = "addapp"
    MESSAGE_USAGE: ClassVar[str] = (
        "addapp: Adds an appointment to the person identified by the index "
        "number used in the displayed person list.\n"
        "Parameters: INDEX startdate/DATE start/TIME enddate/DATE end/TIME\n"
        "Example: addapp 1 startdate/30/10/2024 start/14:00 "
        "enddate/30/10/2024 end/15:00"
    )

    index: int
    appointment: Appointment

    def execute(self, model: Model) -> CommandResult:
        target = model.get_filtered_person(self.index)
        if target is None:
            return CommandResult.error(
                MESSAGE_INVALID_PERSON_INDEX,
                code="invalid_person_index",
                data={"index": self.index},
            )
        if target.find_appointment(self.appointment.start) is not None:
            return CommandResult.error(
                f"{target.name} already has an appointment starting at "
                f"{self.appointment.start:%d/%m/%Y %H:%M}",
                code="duplicate_appointment",
            )
        updated = target.with_appointment(self.appointment)
        model.address_book.set_person(target, updated)
        return CommandResult.ok(
            f"Added appointment for {target.name}: {self.appointment.display()}",
            code="appointment_added",
            data=person_row(updated),
        )
