"""Runtime facade that turns one input line into a command result."""

from __future__ import annotations

import logging

from carebook.commands.parser import CommandParseError, parse_input
from carebook.commands.registry import CommandRegistry
from carebook.commands.types import CommandResult, CommandStatus
from carebook.model import Model

_LOGGER = logging.getLogger(__name__)

_MUTATING_CODES = frozenset(
    {
        "person_added",
        "person_edited",
        "person_deleted",
        "appointment_added",
        "appointment_deleted",
        "cleared",
    }
)


class RuntimeFacade:
    """Facade for parsing and executing commands against one model."""

    def __init__(self, command_registry: CommandRegistry | None = None) -> None:
        """Create facade with an optional custom registry.

        Args:
            command_registry: Registry used for parsing and dispatch.
        """
        self._command_registry = command_registry or CommandRegistry()

    def handle_input(self, text: str, model: Model) -> CommandResult:
        """Parse and execute one input line.

        Args:
            text: Raw user input line.
            model: Address book model to act on.

        Returns:
            Deterministic command result.
        """
        try:
            call = parse_input(text)
        except CommandParseError as exc:
            return CommandResult.error(str(exc), code="parser_error")
        result = self._command_registry.dispatch(call, model)
        if result.status == CommandStatus.ERROR:
            _LOGGER.debug("Command %r failed with %s", call.name, result.code)
        return result

    @staticmethod
    def is_mutation(result: CommandResult) -> bool:
        """Return whether ``result`` reports a change to the address book."""
        return result.status == CommandStatus.OK and result.code in _MUTATING_CODES
