"""Deterministic command word splitter."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict


class CommandParseError(ValueError):
    """Raised when an input line carries no command word."""


class CommandCall(BaseModel):
    """Normalized command call: command word plus raw argument text."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    arguments: str = ""
    raw: str


_COMMAND_FORMAT = re.compile(r"\s*(?P<word>\S+)(?P<arguments>.*)", re.DOTALL)


def parse_input(text: str) -> CommandCall:
    """Split one input line into command word and argument text.

    Arguments keep their leading whitespace so prefix scanning sees the
    separator before the first prefix.

    Args:
        text: Raw user input line.

    Returns:
        Normalized command call.

    Raises:
        CommandParseError: If the line is blank.
    """
    match = _COMMAND_FORMAT.fullmatch(text)
    if match is None:
        raise CommandParseError("Error: a command word is required.")
    return CommandCall(
        name=match.group("word"),
        arguments=match.group("arguments"),
        raw=text,
    )
