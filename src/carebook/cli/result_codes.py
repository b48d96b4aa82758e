"""Result code groupings used by CLI rendering policy."""

from __future__ import annotations

HIDE_DATA_CODES = frozenset(
    {
        "persons_listed",
        "person_added",
        "person_edited",
        "person_deleted",
        "appointment_added",
        "appointment_deleted",
        "help_shown",
        "cleared",
    }
)

PLAIN_TEXT_CODES = frozenset({"help_shown"})
