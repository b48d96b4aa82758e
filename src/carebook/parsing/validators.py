"""Single-field parsers that turn trimmed raw strings into typed values."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date, datetime, time

from carebook.model.person import (
    ADDRESS_CONSTRAINTS,
    EMAIL_CONSTRAINTS,
    NAME_CONSTRAINTS,
    PHONE_CONSTRAINTS,
    ROLE_CONSTRAINTS,
    TAG_CONSTRAINTS,
    Role,
    is_valid_address,
    is_valid_email,
    is_valid_name,
    is_valid_phone,
    is_valid_tag,
)
from carebook.parsing.errors import ParseError, ParseErrorKind
from carebook.parsing.syntax import DATE_FORMAT, TIME_FORMAT

MESSAGE_INVALID_DATE = f"Invalid date format! Please use {DATE_FORMAT}."
MESSAGE_INVALID_TIME = f"Invalid time format! Please use {TIME_FORMAT} (24-hour)."
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_EMPTY_KEYWORDS = "Keywords should not be blank."

_DATE_SHAPE = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")
_TIME_SHAPE = re.compile(r"[0-9]{2}:[0-9]{2}")
_INDEX_SHAPE = re.compile(r"[0-9]+")


def parse_date(value: str) -> date:
    """Parse ``dd/MM/yyyy`` into a calendar date.

    Args:
        value: Raw date text.

    Returns:
        Parsed date.

    Raises:
        ParseError: If the shape or calendar values are invalid.
    """
    trimmed = value.strip()
    if _DATE_SHAPE.fullmatch(trimmed) is None:
        raise ParseError(ParseErrorKind.INVALID_DATE, MESSAGE_INVALID_DATE)
    try:
        return datetime.strptime(trimmed, "%d/%m/%Y").date()
    except ValueError as exc:
        raise ParseError(ParseErrorKind.INVALID_DATE, MESSAGE_INVALID_DATE) from exc


def parse_time(value: str) -> time:
    """Parse 24-hour ``HH:mm`` into a time of day.

    Args:
        value: Raw time text.

    Returns:
        Parsed time.

    Raises:
        ParseError: If the shape or hour/minute range is invalid.
    """
    trimmed = value.strip()
    if _TIME_SHAPE.fullmatch(trimmed) is None:
        raise ParseError(ParseErrorKind.INVALID_TIME, MESSAGE_INVALID_TIME)
    try:
        return datetime.strptime(trimmed, "%H:%M").time()
    except ValueError as exc:
        raise ParseError(ParseErrorKind.INVALID_TIME, MESSAGE_INVALID_TIME) from exc


def parse_role(value: str) -> Role:
    """Parse an exact, case-sensitive role name."""
    trimmed = value.strip()
    try:
        return Role(trimmed)
    except ValueError as exc:
        raise ParseError(ParseErrorKind.INVALID_ROLE, ROLE_CONSTRAINTS) from exc


def parse_tag(value: str) -> str:
    """Parse one alphanumeric tag.

    Raises:
        ParseError: ``EMPTY_TAG_VALUE`` when blank, ``INVALID_TAG`` otherwise.
    """
    trimmed = value.strip()
    if not trimmed:
        raise ParseError(ParseErrorKind.EMPTY_TAG_VALUE, TAG_CONSTRAINTS)
    if not is_valid_tag(trimmed):
        raise ParseError(ParseErrorKind.INVALID_TAG, TAG_CONSTRAINTS)
    return trimmed


def parse_tags(values: Iterable[str]) -> tuple[str, ...]:
    """Parse every tag value, keeping each distinct tag once in input order."""
    tags: list[str] = []
    for value in values:
        tag = parse_tag(value)
        if tag not in tags:
            tags.append(tag)
    return tuple(tags)


def parse_index(value: str) -> int:
    """Parse a 1-based display index."""
    trimmed = value.strip()
    if _INDEX_SHAPE.fullmatch(trimmed) is None or int(trimmed) < 1:
        raise ParseError(ParseErrorKind.INVALID_INDEX, MESSAGE_INVALID_INDEX)
    return int(trimmed)


def parse_name(value: str) -> str:
    trimmed = value.strip()
    if not is_valid_name(trimmed):
        raise ParseError(ParseErrorKind.INVALID_NAME, NAME_CONSTRAINTS)
    return trimmed


def parse_phone(value: str) -> str:
    trimmed = value.strip()
    if not is_valid_phone(trimmed):
        raise ParseError(ParseErrorKind.INVALID_PHONE, PHONE_CONSTRAINTS)
    return trimmed


def parse_email(value: str) -> str:
    trimmed = value.strip()
    if not is_valid_email(trimmed):
        raise ParseError(ParseErrorKind.INVALID_EMAIL, EMAIL_CONSTRAINTS)
    return trimmed


def parse_address(value: str) -> str:
    trimmed = value.strip()
    if not is_valid_address(trimmed):
        raise ParseError(ParseErrorKind.INVALID_ADDRESS, ADDRESS_CONSTRAINTS)
    return trimmed


def parse_keywords(value: str) -> tuple[str, ...]:
    """Split whitespace-separated search keywords.

    Raises:
        ParseError: If no keyword is present.
    """
    keywords = tuple(value.split())
    if not keywords:
        raise ParseError(ParseErrorKind.INVALID_KEYWORD, MESSAGE_EMPTY_KEYWORDS)
    return keywords
