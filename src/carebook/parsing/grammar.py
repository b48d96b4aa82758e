"""Declarative prefix grammar and the shared structural checks.

Every command parser describes its arguments with a ``CommandGrammar`` and
calls ``scan``. Structural failures are reported in a fixed order, one
message per attempt:

1. text before the first prefix (when the command forbids it)
2. a required prefix is missing, or required prefixes are out of order
3. a single-valued prefix is repeated
4. an explicit but empty ``tag/``

Field formats are checked afterwards by the command parser.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from carebook.parsing.errors import ParseError, ParseErrorKind
from carebook.parsing.syntax import PREFIX_TAG
from carebook.parsing.tokenizer import ArgumentMultimap, Prefix, tokenize

_LOGGER = logging.getLogger(__name__)

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{usage}"
MESSAGE_PREAMBLE_NOT_ALLOWED = (
    "Please do not enter anything before the keywords!\n"
    "Please remove this from your input: {preamble}"
)
MESSAGE_DUPLICATE_FIELDS = (
    "Multiple values specified for the following single-valued field(s): {prefixes}"
)
MESSAGE_EMPTY_TAG = "Tags cannot be empty or invalid."


@dataclass(frozen=True)
class FieldSpec:
    """One prefix accepted by a command."""

    prefix: Prefix
    required: bool = False
    multiple: bool = False


@dataclass(frozen=True)
class CommandGrammar:
    """Static description of one command's argument layout.

    Attributes:
        usage: Usage text shown on format errors.
        fields: Accepted prefixes in their canonical order.
        allow_preamble: Whether text before the first prefix is permitted.
        ordered: Whether required prefixes must appear in ``fields`` order.
        duplicate_message: Override for the repeated-prefix message.
    """

    usage: str
    fields: tuple[FieldSpec, ...] = ()
    allow_preamble: bool = False
    ordered: bool = False
    duplicate_message: str | None = None

    @property
    def prefixes(self) -> tuple[Prefix, ...]:
        return tuple(spec.prefix for spec in self.fields)

    def invalid_format(self) -> ParseError:
        """Build the generic format error carrying this command's usage."""
        return ParseError(
            ParseErrorKind.MISSING_OR_MISORDERED_PREFIX,
            MESSAGE_INVALID_COMMAND_FORMAT.format(usage=self.usage),
        )

    def scan(self, args: str) -> ArgumentMultimap:
        """Tokenize ``args`` and run structural checks in priority order.

        Args:
            args: Raw argument string after the command word.

        Returns:
            Structurally valid argument multimap.

        Raises:
            ParseError: On the first structural violation.
        """
        argument_map = tokenize(args, *self.prefixes)
        try:
            self._check_preamble(argument_map)
            self._check_required(argument_map)
            self._check_duplicates(argument_map)
            self._check_empty_tags(argument_map)
        except ParseError as exc:
            _LOGGER.debug("Rejected arguments %r: %s", args, exc.kind)
            raise
        return argument_map

    def _check_preamble(self, argument_map: ArgumentMultimap) -> None:
        if self.allow_preamble or not argument_map.preamble:
            return
        raise ParseError(
            ParseErrorKind.PREAMBLE_NOT_ALLOWED,
            MESSAGE_PREAMBLE_NOT_ALLOWED.format(preamble=argument_map.preamble),
        )

    def _check_required(self, argument_map: ArgumentMultimap) -> None:
        required = [spec.prefix for spec in self.fields if spec.required]
        positions = [argument_map.first_position(prefix) for prefix in required]
        if any(position is None for position in positions):
            raise self.invalid_format()
        if self.ordered and positions != sorted(positions):
            raise self.invalid_format()

    def _check_duplicates(self, argument_map: ArgumentMultimap) -> None:
        repeated = [
            spec.prefix
            for spec in self.fields
            if not spec.multiple and argument_map.count(spec.prefix) > 1
        ]
        if not repeated:
            return
        message = self.duplicate_message or MESSAGE_DUPLICATE_FIELDS.format(
            prefixes=" ".join(str(prefix) for prefix in repeated)
        )
        raise ParseError(ParseErrorKind.DUPLICATE_PREFIX, message)

    def _check_empty_tags(self, argument_map: ArgumentMultimap) -> None:
        if any(not value for value in argument_map.get_all_values(PREFIX_TAG)):
            raise ParseError(ParseErrorKind.EMPTY_TAG_VALUE, MESSAGE_EMPTY_TAG)
