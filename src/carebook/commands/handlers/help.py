"""Handler for `help`."""

from __future__ import annotations

from typing import ClassVar

from carebook.commands.types import Command, CommandResult
from carebook.model import Model


class HelpCommand(Command):
    """Show usage for every registered command."""

    COMMAND_WORD: ClassVar[str] = "help"
    MESSAGE_USAGE: ClassVar[str] = "help: Shows usage for every command."

    usages: tuple[str, ...] = ()

    def execute(self, model: Model) -> CommandResult:
        del model
        body = "\n\n".join(self.usages) if self.usages else self.MESSAGE_USAGE
        return CommandResult.ok(body, code="help_shown")
