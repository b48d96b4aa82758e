"""Unit tests for single-field validators."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, time

import pytest

from carebook.model import ROLE_CONSTRAINTS, Role
from carebook.parsing.errors import ParseError, ParseErrorKind
from carebook.parsing.validators import (
    MESSAGE_INVALID_DATE,
    MESSAGE_INVALID_TIME,
    parse_address,
    parse_date,
    parse_email,
    parse_index,
    parse_keywords,
    parse_name,
    parse_phone,
    parse_role,
    parse_tag,
    parse_tags,
    parse_time,
)


@pytest.mark.unit
def test_parse_date_accepts_day_month_year() -> None:
    """Well-formed dd/MM/yyyy should parse to a date."""
    assert parse_date(" 30/10/2024 ") == date(2024, 10, 30)


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw",
    [
        "30-10-2024",
        "2024/10/30",
        "3/10/2024",
        "32/10/2024",
        "30/13/2024",
        "31/02/2024",
        "aa/bb/cccc",
        "",
        "15/10/\u0662\u0660\u0662\u0664",
        "1\u0665/10/2024",
    ],
    ids=[
        "dashes",
        "iso_order",
        "one_digit_day",
        "day_range",
        "month_range",
        "no_feb_31",
        "letters",
        "empty",
        "arabic_indic_year",
        "arabic_indic_day_digit",
    ],
)
def test_parse_date_rejects_malformed(raw: str) -> None:
    """Malformed or impossible dates should fail with the date message."""
    with pytest.raises(ParseError) as exc_info:
        parse_date(raw)

    assert exc_info.value.kind == ParseErrorKind.INVALID_DATE
    assert exc_info.value.message == MESSAGE_INVALID_DATE


@pytest.mark.unit
def test_parse_time_accepts_24_hour_clock() -> None:
    """HH:mm in 24-hour form should parse to a time."""
    assert parse_time("23:59") == time(23, 59)
    assert parse_time("00:00") == time(0, 0)


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw",
    ["14:60", "24:00", "9:00", "14.00", "1400", "noon", "1\u0664:3\u0660"],
    ids=[
        "minute_60",
        "hour_24",
        "one_digit_hour",
        "dot",
        "no_colon",
        "word",
        "arabic_indic_digits",
    ],
)
def test_parse_time_rejects_malformed(raw: str) -> None:
    """Out-of-range or misshaped times should fail with the time message."""
    with pytest.raises(ParseError) as exc_info:
        parse_time(raw)

    assert exc_info.value.kind == ParseErrorKind.INVALID_TIME
    assert exc_info.value.message == MESSAGE_INVALID_TIME


@pytest.mark.unit
def test_parse_role_is_case_sensitive() -> None:
    """Only exact upper-case role names should be accepted."""
    assert parse_role("PATIENT") is Role.PATIENT
    assert parse_role(" CAREGIVER ") is Role.CAREGIVER

    with pytest.raises(ParseError) as exc_info:
        parse_role("patient")

    assert exc_info.value.kind == ParseErrorKind.INVALID_ROLE
    assert exc_info.value.message == ROLE_CONSTRAINTS


@pytest.mark.unit
def test_parse_tag_distinguishes_empty_from_invalid() -> None:
    """Blank and non-alphanumeric tags share a message but not a kind."""
    with pytest.raises(ParseError) as empty:
        parse_tag("   ")
    with pytest.raises(ParseError) as invalid:
        parse_tag("not valid")

    assert empty.value.kind == ParseErrorKind.EMPTY_TAG_VALUE
    assert invalid.value.kind == ParseErrorKind.INVALID_TAG
    assert empty.value.message == "Tags cannot be empty or invalid."
    assert invalid.value.message == empty.value.message


@pytest.mark.unit
def test_parse_tags_drops_repeats_and_keeps_order() -> None:
    """Repeated tags should appear once in first-seen order."""
    assert parse_tags(["diabetic", "elderly", "diabetic"]) == ("diabetic", "elderly")
    assert parse_tags([]) == ()


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["0", "-1", "abc", "", "1 2", "\u0661", "\uff11"])
def test_parse_index_rejects_non_positive_integers(raw: str) -> None:
    """Index must be a non-zero unsigned integer."""
    with pytest.raises(ParseError) as exc_info:
        parse_index(raw)

    assert exc_info.value.kind == ParseErrorKind.INVALID_INDEX


@pytest.mark.unit
def test_parse_index_accepts_positive_integer() -> None:
    """Positive integers should parse unchanged."""
    assert parse_index(" 12 ") == 12


@pytest.mark.unit
def test_person_field_validators() -> None:
    """Name, phone, email, and address validators should trim valid input."""
    assert parse_name(" Alex Yeoh ") == "Alex Yeoh"
    assert parse_phone("98765432") == "98765432"
    assert parse_email("alex@example.com") == "alex@example.com"
    assert parse_address(" Blk 30 Geylang Street 29 ") == "Blk 30 Geylang Street 29"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("validator", "raw", "kind"),
    [
        (parse_name, "R@chel", ParseErrorKind.INVALID_NAME),
        (parse_name, "", ParseErrorKind.INVALID_NAME),
        (parse_phone, "12", ParseErrorKind.INVALID_PHONE),
        (parse_phone, "9123a", ParseErrorKind.INVALID_PHONE),
        (parse_phone, "9\u0661\u0662\u0663", ParseErrorKind.INVALID_PHONE),
        (parse_email, "alex.example.com", ParseErrorKind.INVALID_EMAIL),
        (parse_address, "  ", ParseErrorKind.INVALID_ADDRESS),
        (parse_keywords, "   ", ParseErrorKind.INVALID_KEYWORD),
    ],
    ids=[
        "name_symbol",
        "name_blank",
        "phone_short",
        "phone_letter",
        "phone_non_ascii_digit",
        "email_no_at",
        "address_blank",
        "keywords_blank",
    ],
)
def test_person_field_validators_reject_invalid(
    validator: Callable[[str], object], raw: str, kind: ParseErrorKind
) -> None:
    """Invalid person fields should raise their field-specific kind."""
    with pytest.raises(ParseError) as exc_info:
        validator(raw)

    assert exc_info.value.kind == kind


@pytest.mark.unit
def test_parse_keywords_splits_on_any_whitespace() -> None:
    """Keywords should split on spaces, tabs, and newlines."""
    assert parse_keywords("alice\tbob\n carol") == ("alice", "bob", "carol")
