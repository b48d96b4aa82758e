"""Search criteria and the predicate that combines them."""

from __future__ import annotations

from abc import abstractmethod
from datetime import date, datetime, time

from pydantic import BaseModel, ConfigDict

from carebook.model.person import Person, Role


class SearchCriteria(BaseModel):
    """Base class for one validated search constraint."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    @abstractmethod
    def test(self, person: Person) -> bool:
        """Return whether ``person`` satisfies this constraint.

        Args:
            person: Candidate person.
        """


class NameSearchCriteria(SearchCriteria):
    """Match persons whose name contains any keyword as a whole word."""

    keywords: tuple[str, ...]

    def test(self, person: Person) -> bool:
        words = {word.casefold() for word in person.name.split()}
        return any(keyword.casefold() in words for keyword in self.keywords)


class RoleSearchCriteria(SearchCriteria):
    """Match persons holding one role."""

    role: Role

    def test(self, person: Person) -> bool:
        return person.role == self.role


class TagSearchCriteria(SearchCriteria):
    """Match persons carrying every listed tag."""

    tags: tuple[str, ...]

    def test(self, person: Person) -> bool:
        return set(self.tags).issubset(person.tags)


class AppointmentSearchCriteria(SearchCriteria):
    """Match persons with an appointment inside a date/time window.

    Start and end are not checked against each other; an inverted window
    simply matches nothing.
    """

    start_date: date
    start_time: time
    end_date: date
    end_time: time

    @property
    def window_start(self) -> datetime:
        return datetime.combine(self.start_date, self.start_time)

    @property
    def window_end(self) -> datetime:
        return datetime.combine(self.end_date, self.end_time)

    def test(self, person: Person) -> bool:
        start = self.window_start
        end = self.window_end
        return any(
            appointment.start >= start and appointment.end <= end
            for appointment in person.appointments
        )


class ContainsKeywordsPredicate(BaseModel):
    """Person filter that requires every wrapped criteria to match."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    criteria: tuple[SearchCriteria, ...]

    def __call__(self, person: Person) -> bool:
        """Evaluate predicate against one person.

        Args:
            person: Candidate person.

        Returns:
            ``True`` when all criteria match.
        """
        return all(item.test(person) for item in self.criteria)
