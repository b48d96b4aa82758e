"""Shared command-domain types."""

from __future__ import annotations

from abc import abstractmethod
from enum import StrEnum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from carebook.model import Model, Person


class CommandStatus(StrEnum):
    """Normalized command execution status."""

    OK = "ok"
    ERROR = "error"


class CommandResult(BaseModel):
    """Deterministic command execution result."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: CommandStatus
    code: str
    message: str
    data: dict[str, Any] | None = None

    @classmethod
    def ok(
        cls,
        message: str,
        *,
        code: str = "ok",
        data: dict[str, Any] | None = None,
    ) -> CommandResult:
        """Construct a successful command result.

        Args:
            message: User-facing output payload.
            code: Stable machine-readable success code.
            data: Optional structured payload for downstream consumers.

        Returns:
            Successful command result.
        """
        return cls(status=CommandStatus.OK, code=code, message=message, data=data)

    @classmethod
    def error(
        cls,
        message: str,
        *,
        code: str = "error",
        data: dict[str, Any] | None = None,
    ) -> CommandResult:
        """Construct an error command result.

        Args:
            message: User-facing error payload.
            code: Stable machine-readable error code.
            data: Optional structured payload for downstream consumers.

        Returns:
            Error command result.
        """
        return cls(status=CommandStatus.ERROR, code=code, message=message, data=data)


class Command(BaseModel):
    """Immutable, fully validated instruction against the address book."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    COMMAND_WORD: ClassVar[str] = ""
    MESSAGE_USAGE: ClassVar[str] = ""

    @abstractmethod
    def execute(self, model: Model) -> CommandResult:
        """Apply this command to ``model``.

        Args:
            model: Address book and filtered view to act on.
        """


def person_row(person: Person) -> dict[str, Any]:
    """Serialize one person for result payloads and table rendering."""
    return {
        "name": person.name,
        "phone": person.phone,
        "email": person.email,
        "address": person.address,
        "role": person.role.value,
        "tags": list(person.tags),
        "appointments": [item.display() for item in person.appointments],
    }


def listed_result(model: Model, message: str) -> CommandResult:
    """Build the ``persons_listed`` result for the current filtered view."""
    persons = model.filtered_persons
    return CommandResult.ok(
        message.format(count=len(persons)),
        code="persons_listed",
        data={"persons": [person_row(person) for person in persons]},
    )
