"""Parser protocol and the parser for commands without arguments."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from carebook.commands.types import Command


class CommandParser(Protocol):
    """Protocol implemented by per-command argument parsers."""

    def parse(self, args: str) -> Command:
        """Parse raw arguments into a command.

        Args:
            args: Text after the command word.

        Raises:
            ParseError: If arguments are invalid.
        """


class NoArgumentParser:
    """Build a fixed command and ignore any trailing text."""

    def __init__(self, factory: Callable[[], Command]) -> None:
        self._factory = factory

    def parse(self, args: str) -> Command:
        del args
        return self._factory()
