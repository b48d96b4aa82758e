"""Unit tests for the address book store and filtered model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from carebook.model import (
    AddressBook,
    DuplicatePersonError,
    Model,
    PersonNotFoundError,
    Role,
)
from tests.unit.helpers import make_person


@pytest.mark.unit
def test_add_person_rejects_same_identity() -> None:
    """Adding a name that already exists should fail."""
    book = AddressBook()
    book.add_person(make_person("Alex Yeoh"))

    with pytest.raises(DuplicatePersonError):
        book.add_person(make_person("ALEX YEOH", role=Role.CAREGIVER))


@pytest.mark.unit
def test_set_person_replaces_in_place() -> None:
    """Edits should keep list position."""
    first = make_person("Alex")
    second = make_person("Bernice")
    book = AddressBook(persons=[first, second])

    book.set_person(first, make_person("Alex", tags=("vip",)))

    assert book.persons[0].tags == ("vip",)
    assert book.persons[1] == second


@pytest.mark.unit
def test_set_person_rejects_collision_with_other() -> None:
    """Renaming onto another person's identity should fail."""
    first = make_person("Alex")
    book = AddressBook(persons=[first, make_person("Bernice")])

    with pytest.raises(DuplicatePersonError):
        book.set_person(first, make_person("Bernice"))


@pytest.mark.unit
def test_remove_missing_person_raises() -> None:
    """Removing an unknown person should raise lookup error."""
    with pytest.raises(PersonNotFoundError):
        AddressBook().remove_person(make_person())


@pytest.mark.unit
def test_model_filtered_index_lookup() -> None:
    """Display indexes should address the filtered list, 1-based."""
    model = Model(
        AddressBook(
            persons=[
                make_person("Alex", role=Role.PATIENT),
                make_person("Bernice", role=Role.CAREGIVER),
            ]
        )
    )

    model.update_filtered_person_list(lambda p: p.role is Role.CAREGIVER)

    assert [p.name for p in model.filtered_persons] == ["Bernice"]
    assert model.get_filtered_person(1) is not None
    assert model.get_filtered_person(1).name == "Bernice"
    assert model.get_filtered_person(0) is None
    assert model.get_filtered_person(2) is None


@pytest.mark.unit
def test_address_book_rejects_duplicate_identities() -> None:
    """Constructing a book with the same person twice should fail validation."""
    with pytest.raises(ValidationError, match="more than once"):
        AddressBook(persons=[make_person("Alex Yeoh"), make_person("ALEX YEOH")])
