"""Person records and an ordering by identity document."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class PersonID:
    """Identity document: a series and a number."""

    series: int
    number: int


@dataclass
class Person:
    id: PersonID
    first_name: str
    middle_name: str
    last_name: str
    birth_date: date

    def full_name(self) -> str:
        return f"{self.first_name} {self.middle_name} {self.last_name}"


class Student(Person):
    """A person enrolled as a student."""


class Teacher(Person):
    """A person employed as a teacher."""


def by_person_id(a: Person, b: Person) -> bool:
    """Order people by ID series, then by ID number."""
    return (a.id.series, a.id.number) < (b.id.series, b.id.number)