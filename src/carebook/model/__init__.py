"""Carebook domain model."""

from carebook.model.address_book import (
    AddressBook,
    DuplicatePersonError,
    Model,
    PersonNotFoundError,
    show_all,
)
from carebook.model.criteria import (
    AppointmentSearchCriteria,
    ContainsKeywordsPredicate,
    NameSearchCriteria,
    RoleSearchCriteria,
    SearchCriteria,
    TagSearchCriteria,
)
from carebook.model.person import ROLE_CONSTRAINTS, Appointment, Person, Role

__all__ = [
    "ROLE_CONSTRAINTS",
    "AddressBook",
    "Appointment",
    "AppointmentSearchCriteria",
    "ContainsKeywordsPredicate",
    "DuplicatePersonError",
    "Model",
    "NameSearchCriteria",
    "Person",
    "PersonNotFoundError",
    "Role",
    "RoleSearchCriteria",
    "SearchCriteria",
    "TagSearchCriteria",
    "show_all",
]
