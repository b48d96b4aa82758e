"""Parsers for appointment commands: `findapp`, `addapp`, `deleteapp`."""

from __future__ import annotations

from datetime import datetime

from pydantic import ValidationError

from carebook.commands.handlers.add_appointment import AddAppointmentCommand
from carebook.commands.handlers.delete_appointment import DeleteAppointmentCommand
from carebook.commands.handlers.find_appointment import FindAppointmentCommand
from carebook.model import (
    Appointment,
    AppointmentSearchCriteria,
    ContainsKeywordsPredicate,
    SearchCriteria,
    TagSearchCriteria,
)
from carebook.parsing.errors import ParseError, ParseErrorKind
from carebook.parsing.grammar import CommandGrammar, FieldSpec
from carebook.parsing.syntax import (
    PREFIX_END_DATE,
    PREFIX_END_TIME,
    PREFIX_START_DATE,
    PREFIX_START_TIME,
    PREFIX_TAG,
)
from carebook.parsing.tokenizer import ArgumentMultimap
from carebook.parsing.validators import parse_date, parse_index, parse_tags, parse_time

MESSAGE_INVALID_WINDOW = "Appointment end must be after its start."

_WINDOW_FIELDS = (
    FieldSpec(PREFIX_START_DATE, required=True),
    FieldSpec(PREFIX_START_TIME, required=True),
    FieldSpec(PREFIX_END_DATE, required=True),
    FieldSpec(PREFIX_END_TIME, required=True),
)

FIND_APPOINTMENT_GRAMMAR = CommandGrammar(
    usage=FindAppointmentCommand.MESSAGE_USAGE,
    fields=(*_WINDOW_FIELDS, FieldSpec(PREFIX_TAG, multiple=True)),
    ordered=True,
    duplicate_message=FindAppointmentCommand.MESSAGE_DUPLICATE_PREFIXES,
)

ADD_APPOINTMENT_GRAMMAR = CommandGrammar(
    usage=AddAppointmentCommand.MESSAGE_USAGE,
    fields=_WINDOW_FIELDS,
    allow_preamble=True,
    ordered=True,
    duplicate_message=FindAppointmentCommand.MESSAGE_DUPLICATE_PREFIXES,
)

DELETE_APPOINTMENT_GRAMMAR = CommandGrammar(
    usage=DeleteAppointmentCommand.MESSAGE_USAGE,
    fields=_WINDOW_FIELDS[:2],
    allow_preamble=True,
    ordered=True,
    duplicate_message=FindAppointmentCommand.MESSAGE_DUPLICATE_PREFIXES,
)


def _required(argument_map: ArgumentMultimap, spec: FieldSpec) -> str:
    value = argument_map.get_value(spec.prefix)
    # scan() guarantees presence of required prefixes.
    assert value is not None
    return value


def _index(grammar: CommandGrammar, argument_map: ArgumentMultimap) -> int:
    try:
        return parse_index(argument_map.preamble)
    except ParseError as exc:
        raise grammar.invalid_format() from exc


class FindAppointmentCommandParser:
    """Parse `findapp` arguments into a window search."""

    def parse(self, args: str) -> FindAppointmentCommand:
        """Parse window prefixes into a find-appointment command.

        Args:
            args: Text after the command word.

        Returns:
            Command filtering by the parsed window.

        Raises:
            ParseError: On the first structural or field violation.
        """
        argument_map = FIND_APPOINTMENT_GRAMMAR.scan(args)
        start_date = parse_date(_required(argument_map, _WINDOW_FIELDS[0]))
        start_time = parse_time(_required(argument_map, _WINDOW_FIELDS[1]))
        end_date = parse_date(_required(argument_map, _WINDOW_FIELDS[2]))
        end_time = parse_time(_required(argument_map, _WINDOW_FIELDS[3]))
        tags = parse_tags(argument_map.get_all_values(PREFIX_TAG))

        criteria: list[SearchCriteria] = [
            AppointmentSearchCriteria(
                start_date=start_date,
                start_time=start_time,
                end_date=end_date,
                end_time=end_time,
            )
        ]
        if tags:
            criteria.append(TagSearchCriteria(tags=tags))
        return FindAppointmentCommand(
            predicate=ContainsKeywordsPredicate(criteria=tuple(criteria))
        )


class AddAppointmentCommandParser:
    """Parse `addapp` arguments."""

    def parse(self, args: str) -> AddAppointmentCommand:
        argument_map = ADD_APPOINTMENT_GRAMMAR.scan(args)
        index = _index(ADD_APPOINTMENT_GRAMMAR, argument_map)
        start = datetime.combine(
            parse_date(_required(argument_map, _WINDOW_FIELDS[0])),
            parse_time(_required(argument_map, _WINDOW_FIELDS[1])),
        )
        end = datetime.combine(
            parse_date(_required(argument_map, _WINDOW_FIELDS[2])),
            parse_time(_required(argument_map, _WINDOW_FIELDS[3])),
        )
        try:
            appointment = Appointment(start=start, end=end)
        except ValidationError as exc:
            raise ParseError(
                ParseErrorKind.INVALID_APPOINTMENT, MESSAGE_INVALID_WINDOW
            ) from exc
        return AddAppointmentCommand(index=index, appointment=appointment)


class DeleteAppointmentCommandParser:
    """Parse `deleteapp` arguments."""

    def parse(self, args: str) -> DeleteAppointmentCommand:
        argument_map = DELETE_APPOINTMENT_GRAMMAR.scan(args)
        index = _index(DELETE_APPOINTMENT_GRAMMAR, argument_map)
        start = datetime.combine(
            parse_date(_required(argument_map, _WINDOW_FIELDS[0])),
            parse_time(_required(argument_map, _WINDOW_FIELDS[1])),
        )
        return DeleteAppointmentCommand(index=index, start=start)
