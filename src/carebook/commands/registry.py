"""Command registry and dispatch."""

from __future__ import annotations

import logging

from carebook.commands.handlers.add import AddCommand
from carebook.commands.handlers.add_appointment import AddAppointmentCommand
from carebook.commands.handlers.clear import ClearCommand
from carebook.commands.handlers.delete import DeleteCommand
from carebook.commands.handlers.delete_appointment import DeleteAppointmentCommand
from carebook.commands.handlers.edit import EditCommand
from carebook.commands.handlers.find import FindCommand
from carebook.commands.handlers.find_appointment import FindAppointmentCommand
from carebook.commands.handlers.help import HelpCommand
from carebook.commands.handlers.list_persons import ListCommand
from carebook.commands.parser import CommandCall
from carebook.commands.types import Command, CommandResult
from carebook.model import Model
from carebook.parsing.errors import ParseError
from carebook.parsing.parsers.appointment import (
    AddAppointmentCommandParser,
    DeleteAppointmentCommandParser,
    FindAppointmentCommandParser,
)
from carebook.parsing.parsers.base import CommandParser, NoArgumentParser
from carebook.parsing.parsers.person import (
    AddCommandParser,
    DeleteCommandParser,
    EditCommandParser,
    FindCommandParser,
)

_LOGGER = logging.getLogger(__name__)

MESSAGE_UNKNOWN_COMMAND = "Unknown command"

BUILTIN_USAGES = tuple(
    command.MESSAGE_USAGE
    for command in (
        AddCommand,
        EditCommand,
        DeleteCommand,
        FindCommand,
        ListCommand,
        ClearCommand,
        AddAppointmentCommand,
        DeleteAppointmentCommand,
        FindAppointmentCommand,
        HelpCommand,
    )
)


class CommandRegistry:
    """Map command words to argument parsers and run the parsed command."""

    def __init__(self, parsers: dict[str, CommandParser] | None = None) -> None:
        """Construct registry with built-in parsers plus optional overrides.

        Args:
            parsers: Optional custom parsers keyed by command word.
        """
        self._parsers: dict[str, CommandParser] = {
            "add": AddCommandParser(),
            "edit": EditCommandParser(),
            "delete": DeleteCommandParser(),
            "find": FindCommandParser(),
            "list": NoArgumentParser(ListCommand),
            "clear": NoArgumentParser(ClearCommand),
            "addapp": AddAppointmentCommandParser(),
            "deleteapp": DeleteAppointmentCommandParser(),
            "findapp": FindAppointmentCommandParser(),
            "help": NoArgumentParser(self._help),
        }
        if parsers:
            self._parsers.update(parsers)

    @property
    def command_words(self) -> tuple[str, ...]:
        return tuple(sorted(self._parsers))

    def parse(self, call: CommandCall) -> Command | CommandResult:
        """Parse call arguments with the matching command parser.

        Args:
            call: Normalized command call.

        Returns:
            Parsed command, or an error result describing the failure.
        """
        parser = self._parsers.get(call.name)
        if parser is None:
            return CommandResult.error(
                MESSAGE_UNKNOWN_COMMAND,
                code="unknown_command",
                data={"command": call.name},
            )
        try:
            return parser.parse(call.arguments)
        except ParseError as exc:
            _LOGGER.debug("Parse failed for %r: %s", call.name, exc.kind)
            return CommandResult.error(exc.message, code=exc.kind.value)

    def dispatch(self, call: CommandCall, model: Model) -> CommandResult:
        """Parse and execute one command call.

        Args:
            call: Normalized command call.
            model: Address book model to act on.

        Returns:
            Command execution result.
        """
        parsed = self.parse(call)
        if isinstance(parsed, CommandResult):
            return parsed
        return parsed.execute(model)

    def _help(self) -> HelpCommand:
        return HelpCommand(usages=BUILTIN_USAGES)
