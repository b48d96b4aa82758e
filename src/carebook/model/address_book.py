"""In-memory record store and the filtered view shown to the user."""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from carebook.model.person import Person

PersonPredicate = Callable[[Person], bool]


class DuplicatePersonError(ValueError):
    """Raised when a person with the same identity already exists."""


class PersonNotFoundError(LookupError):
    """Raised when a target person is not in the address book."""


class AddressBook(BaseModel):
    """Ordered collection of unique persons."""

    model_config = ConfigDict(extra="forbid")

    persons: list[Person] = Field(default_factory=list)

    @model_validator(mode="after")
    def _reject_duplicate_persons(self) -> AddressBook:
        seen: list[Person] = []
        for person in self.persons:
            if any(existing.is_same_person(person) for existing in seen):
                raise ValueError(f"Address book lists {person.name!r} more than once.")
            seen.append(person)
        return self

    def has_person(self, person: Person) -> bool:
        """Return whether a person with the same identity exists."""
        return any(existing.is_same_person(person) for existing in self.persons)

    def add_person(self, person: Person) -> None:
        """Append ``person``.

        Args:
            person: Person to add.

        Raises:
            DuplicatePersonError: If the identity already exists.
        """
        if self.has_person(person):
            raise DuplicatePersonError(person.name)
        self.persons.append(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited`` in place.

        Args:
            target: Existing person.
            edited: Replacement record.

        Raises:
            PersonNotFoundError: If ``target`` is absent.
            DuplicatePersonError: If ``edited`` collides with another person.
        """
        index = self._index_of(target)
        if not target.is_same_person(edited) and self.has_person(edited):
            raise DuplicatePersonError(edited.name)
        self.persons[index] = edited

    def remove_person(self, target: Person) -> None:
        """Remove ``target``.

        Raises:
            PersonNotFoundError: If ``target`` is absent.
        """
        del self.persons[self._index_of(target)]

    def clear(self) -> None:
        self.persons.clear()

    def _index_of(self, target: Person) -> int:
        for index, existing in enumerate(self.persons):
            if existing == target:
                return index
        raise PersonNotFoundError(target.name)


def show_all(_: Person) -> bool:
    """Predicate that keeps every person."""
    return True


class Model:
    """Address book plus the current filtered list used for index lookups."""

    def __init__(self, address_book: AddressBook | None = None) -> None:
        """Wrap ``address_book`` with an unfiltered view.

        Args:
            address_book: Backing store; a new empty book when omitted.
        """
        self.address_book = address_book or AddressBook()
        self._predicate: PersonPredicate = show_all

    @property
    def filtered_persons(self) -> tuple[Person, ...]:
        """Persons passing the current predicate, in store order."""
        return tuple(p for p in self.address_book.persons if self._predicate(p))

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        self._predicate = predicate

    def get_filtered_person(self, one_based_index: int) -> Person | None:
        """Return person at 1-based position of the filtered list.

        Args:
            one_based_index: Display index.

        Returns:
            Person, or ``None`` when out of range.
        """
        persons = self.filtered_persons
        if one_based_index < 1 or one_based_index > len(persons):
            return None
        return persons[one_based_index - 1]
