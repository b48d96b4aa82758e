"""Person and appointment records."""

from __future__ import annotations

import re
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class Role(StrEnum):
    """Role of a person in the address book."""

    PATIENT = "PATIENT"
    CAREGIVER = "CAREGIVER"


ROLE_CONSTRAINTS = "Roles should only be 'PATIENT' or 'CAREGIVER'"
NAME_CONSTRAINTS = (
    "Names should only contain alphanumeric characters and spaces, "
    "and it should not be blank"
)
PHONE_CONSTRAINTS = (
    "Phone numbers should only contain numbers, and it should be at least 3 digits long"
)
EMAIL_CONSTRAINTS = (
    "Emails should be of the format local-part@domain, where the local-part "
    "contains only alphanumerics and the characters +_.- and the domain is made "
    "of alphanumeric labels separated by periods"
)
ADDRESS_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
TAG_CONSTRAINTS = "Tags cannot be empty or invalid."

_NAME_PATTERN = re.compile(r"[^\W_](?:[^\W_]| )*")
_PHONE_PATTERN = re.compile(r"[0-9]{3,}")
_EMAIL_PATTERN = re.compile(
    r"[A-Za-z0-9](?:[A-Za-z0-9+_.-]*[A-Za-z0-9])?"
    r"@[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?)*"
)
_TAG_PATTERN = re.compile(r"[A-Za-z0-9]+")


def _sorted_appointments(
    appointments: tuple[Appointment, ...],
) -> tuple[Appointment, ...]:
    return tuple(sorted(appointments, key=lambda appointment: appointment.start))


def is_valid_name(value: str) -> bool:
    """Return whether ``value`` is a valid person name."""
    return _NAME_PATTERN.fullmatch(value) is not None


def is_valid_phone(value: str) -> bool:
    """Return whether ``value`` is a valid phone number."""
    return _PHONE_PATTERN.fullmatch(value) is not None


def is_valid_email(value: str) -> bool:
    """Return whether ``value`` is a valid email address."""
    return _EMAIL_PATTERN.fullmatch(value) is not None


def is_valid_address(value: str) -> bool:
    """Return whether ``value`` is a valid address."""
    return bool(value.strip())


def is_valid_tag(value: str) -> bool:
    """Return whether ``value`` is a valid tag name."""
    return _TAG_PATTERN.fullmatch(value) is not None


class Appointment(BaseModel):
    """One scheduled appointment window."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def _validate_window(self) -> Appointment:
        """Reject windows that do not move forward in time.

        Returns:
            Validated appointment.

        Raises:
            ValueError: If ``end`` is not after ``start``.
        """
        if self.end <= self.start:
            raise ValueError("Appointment end must be after its start.")
        return self

    def display(self) -> str:
        """Render appointment window in command syntax order."""
        return f"{self.start:%d/%m/%Y %H:%M} - {self.end:%d/%m/%Y %H:%M}"


class Person(BaseModel):
    """Immutable person record."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    phone: str
    email: str
    address: str
    role: Role
    tags: tuple[str, ...] = ()
    appointments: tuple[Appointment, ...] = ()

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        if not is_valid_name(value):
            raise ValueError(NAME_CONSTRAINTS)
        return value

    @field_validator("phone")
    @classmethod
    def _validate_phone(cls, value: str) -> str:
        if not is_valid_phone(value):
            raise ValueError(PHONE_CONSTRAINTS)
        return value

    @field_validator("email")
    @classmethod
    def _validate_email(cls, value: str) -> str:
        if not is_valid_email(value):
            raise ValueError(EMAIL_CONSTRAINTS)
        return value

    @field_validator("address")
    @classmethod
    def _validate_address(cls, value: str) -> str:
        if not is_valid_address(value):
            raise ValueError(ADDRESS_CONSTRAINTS)
        return value

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Keep tags unique and sorted so equal records compare equal.

        Args:
            value: Candidate tag tuple.

        Returns:
            Sorted, de-duplicated tags.

        Raises:
            ValueError: If any tag is not alphanumeric.
        """
        for tag in value:
            if not is_valid_tag(tag):
                raise ValueError(TAG_CONSTRAINTS)
        return tuple(sorted(set(value)))

    @field_validator("appointments")
    @classmethod
    def _sort_appointments(
        cls, value: tuple[Appointment, ...]
    ) -> tuple[Appointment, ...]:
        return _sorted_appointments(value)

    def is_same_person(self, other: Person) -> bool:
        """Return whether ``other`` refers to the same person by name.

        Args:
            other: Candidate person.

        Returns:
            ``True`` when names match case-insensitively.
        """
        return self.name.casefold() == other.name.casefold()

    def find_appointment(self, start: datetime) -> Appointment | None:
        """Return the appointment starting at ``start`` if any."""
        for appointment in self.appointments:
            if appointment.start == start:
                return appointment
        return None

    def with_appointment(self, appointment: Appointment) -> Person:
        """Return a copy with ``appointment`` added."""
        return self.model_copy(
            update={
                "appointments": _sorted_appointments(
                    (*self.appointments, appointment)
                )
            }
        )

    def without_appointment(self, appointment: Appointment) -> Person:
        """Return a copy with ``appointment`` removed."""
        remaining = tuple(item for item in self.appointments if item != appointment)
        return self.model_copy(update={"appointments": remaining})
