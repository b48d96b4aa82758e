"""Shared record builders for unit tests."""

from __future__ import annotations

from datetime import datetime

from carebook.model import Appointment, Person, Role


def make_person(
    name: str = "Alex Yeoh",
    *,
    role: Role = Role.PATIENT,
    tags: tuple[str, ...] = (),
    appointments: tuple[Appointment, ...] = (),
) -> Person:
    """Build a valid person with overridable identity fields.

    Args:
        name: Person name.
        role: Person role.
        tags: Tag names.
        appointments: Attached appointments.

    Returns:
        Person record.
    """
    return Person(
        name=name,
        phone="87438807",
        email="person@example.com",
        address="Blk 30 Geylang Street 29",
        role=role,
        tags=tags,
        appointments=appointments,
    )


def make_appointment(day: int, start_hour: int, end_hour: int) -> Appointment:
    """Build an October 2024 appointment on ``day`` between two hours."""
    return Appointment(
        start=datetime(2024, 10, day, start_hour, 0),
        end=datetime(2024, 10, day, end_hour, 0),
    )
