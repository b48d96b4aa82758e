"""Parsers for person commands: `add`, `edit`, `delete`, `find`."""

from __future__ import annotations

from carebook.commands.handlers.add import AddCommand
from carebook.commands.handlers.delete import DeleteCommand
from carebook.commands.handlers.edit import EditCommand, EditPersonDescriptor
from carebook.commands.handlers.find import FindCommand
from carebook.model import (
    ContainsKeywordsPredicate,
    NameSearchCriteria,
    Person,
    RoleSearchCriteria,
    SearchCriteria,
    TagSearchCriteria,
)
from carebook.parsing.errors import ParseError, ParseErrorKind
from carebook.parsing.grammar import CommandGrammar, FieldSpec
from carebook.parsing.syntax import (
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_ROLE,
    PREFIX_TAG,
)
from carebook.parsing.validators import (
    parse_address,
    parse_email,
    parse_index,
    parse_keywords,
    parse_name,
    parse_phone,
    parse_role,
    parse_tags,
)

ADD_GRAMMAR = CommandGrammar(
    usage=AddCommand.MESSAGE_USAGE,
    fields=(
        FieldSpec(PREFIX_NAME, required=True),
        FieldSpec(PREFIX_PHONE, required=True),
        FieldSpec(PREFIX_EMAIL, required=True),
        FieldSpec(PREFIX_ADDRESS, required=True),
        FieldSpec(PREFIX_ROLE, required=True),
        FieldSpec(PREFIX_TAG, multiple=True),
    ),
)

EDIT_GRAMMAR = CommandGrammar(
    usage=EditCommand.MESSAGE_USAGE,
    fields=(
        FieldSpec(PREFIX_NAME),
        FieldSpec(PREFIX_PHONE),
        FieldSpec(PREFIX_EMAIL),
        FieldSpec(PREFIX_ADDRESS),
        FieldSpec(PREFIX_ROLE),
        FieldSpec(PREFIX_TAG, multiple=True),
    ),
    allow_preamble=True,
)

DELETE_GRAMMAR = CommandGrammar(usage=DeleteCommand.MESSAGE_USAGE, allow_preamble=True)

FIND_GRAMMAR = CommandGrammar(
    usage=FindCommand.MESSAGE_USAGE,
    fields=(
        FieldSpec(PREFIX_NAME),
        FieldSpec(PREFIX_ROLE),
        FieldSpec(PREFIX_TAG, multiple=True),
    ),
)


class AddCommandParser:
    """Parse `add` arguments into a new person."""

    def parse(self, args: str) -> AddCommand:
        """Parse person fields into an add command.

        Args:
            args: Text after the command word.

        Returns:
            Command adding the parsed person.

        Raises:
            ParseError: On the first structural or field violation.
        """
        argument_map = ADD_GRAMMAR.scan(args)
        person = Person(
            name=parse_name(argument_map.get_value(PREFIX_NAME) or ""),
            phone=parse_phone(argument_map.get_value(PREFIX_PHONE) or ""),
            email=parse_email(argument_map.get_value(PREFIX_EMAIL) or ""),
            address=parse_address(argument_map.get_value(PREFIX_ADDRESS) or ""),
            role=parse_role(argument_map.get_value(PREFIX_ROLE) or ""),
            tags=parse_tags(argument_map.get_all_values(PREFIX_TAG)),
        )
        return AddCommand(person=person)


class EditCommandParser:
    """Parse `edit` arguments into an index plus replacement fields."""

    def parse(self, args: str) -> EditCommand:
        argument_map = EDIT_GRAMMAR.scan(args)
        try:
            index = parse_index(argument_map.preamble)
        except ParseError as exc:
            raise EDIT_GRAMMAR.invalid_format() from exc

        name = argument_map.get_value(PREFIX_NAME)
        phone = argument_map.get_value(PREFIX_PHONE)
        email = argument_map.get_value(PREFIX_EMAIL)
        address = argument_map.get_value(PREFIX_ADDRESS)
        role = argument_map.get_value(PREFIX_ROLE)
        descriptor = EditPersonDescriptor(
            name=parse_name(name) if name is not None else None,
            phone=parse_phone(phone) if phone is not None else None,
            email=parse_email(email) if email is not None else None,
            address=parse_address(address) if address is not None else None,
            role=parse_role(role) if role is not None else None,
            tags=(
                parse_tags(argument_map.get_all_values(PREFIX_TAG))
                if argument_map.contains(PREFIX_TAG)
                else None
            ),
        )
        if not descriptor.is_any_field_edited():
            raise ParseError(
                ParseErrorKind.MISSING_EDIT_FIELD, EditCommand.MESSAGE_NOT_EDITED
            )
        return EditCommand(index=index, descriptor=descriptor)


class DeleteCommandParser:
    """Parse `delete` arguments."""

    def parse(self, args: str) -> DeleteCommand:
        argument_map = DELETE_GRAMMAR.scan(args)
        try:
            return DeleteCommand(index=parse_index(argument_map.preamble))
        except ParseError as exc:
            raise DELETE_GRAMMAR.invalid_format() from exc


class FindCommandParser:
    """Parse `find` arguments into name, role, and tag criteria."""

    def parse(self, args: str) -> FindCommand:
        argument_map = FIND_GRAMMAR.scan(args)
        if not argument_map.occurrences:
            raise FIND_GRAMMAR.invalid_format()

        criteria: list[SearchCriteria] = []
        name = argument_map.get_value(PREFIX_NAME)
        if name is not None:
            criteria.append(NameSearchCriteria(keywords=parse_keywords(name)))
        role = argument_map.get_value(PREFIX_ROLE)
        if role is not None:
            criteria.append(RoleSearchCriteria(role=parse_role(role)))
        tags = parse_tags(argument_map.get_all_values(PREFIX_TAG))
        if tags:
            criteria.append(TagSearchCriteria(tags=tags))
        return FindCommand(
            predicate=ContainsKeywordsPredicate(criteria=tuple(criteria))
        )
