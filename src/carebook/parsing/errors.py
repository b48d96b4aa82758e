"""Typed parse failures surfaced to the user verbatim."""

from __future__ import annotations

from enum import StrEnum


class ParseErrorKind(StrEnum):
    """Stable machine-readable parse failure categories."""

    PREAMBLE_NOT_ALLOWED = "preamble_not_allowed"
    MISSING_OR_MISORDERED_PREFIX = "missing_or_misordered_prefix"
    DUPLICATE_PREFIX = "duplicate_prefix"
    EMPTY_TAG_VALUE = "empty_tag_value"
    INVALID_DATE = "invalid_date"
    INVALID_TIME = "invalid_time"
    INVALID_ROLE = "invalid_role"
    INVALID_TAG = "invalid_tag"
    INVALID_INDEX = "invalid_index"
    INVALID_NAME = "invalid_name"
    INVALID_PHONE = "invalid_phone"
    INVALID_EMAIL = "invalid_email"
    INVALID_ADDRESS = "invalid_address"
    INVALID_KEYWORD = "invalid_keyword"
    INVALID_APPOINTMENT = "invalid_appointment"
    MISSING_EDIT_FIELD = "missing_edit_field"


class ParseError(ValueError):
    """Raised when command arguments fail structural or field validation."""

    def __init__(self, kind: ParseErrorKind, message: str) -> None:
        """Store failure category and user-facing message.

        Args:
            kind: Failure category.
            message: Message shown to the user as-is.
        """
        super().__init__(message)
        self.kind = kind
        self.message = message
