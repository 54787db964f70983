"""
Domain beinhaltet die Personen + Enums

Dieses Modul enthält nur die Fachlogik.
Es enthält keine UI- oder Datei-Logik.

- Personen sind unveränderliche Dataclasses.
- Das Alter wird immer berechnet und nicht gespeichert.
- Der Stichtag ("heute") wird immer übergeben, nie intern gelesen.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from enum import Enum


class Position(Enum):
    """
    Dienststellung einer Lehrkraft.
    Die Reihenfolge der Member ist gleichzeitig die Sortierreihenfolge.
    """
    Assistant = "Assistant"
    SeniorLecturer = "SeniorLecturer"
    Docent = "Docent"
    Professor = "Professor"
    DepartmentHead = "DepartmentHead"

    @property
    def rank(self) -> int:
        """Index in der Deklarationsreihenfolge."""
        return list(Position).index(self)


def calculate_age(birth_date: date, today: date) -> int:
    """
    Berechnet das Alter in Jahren.
    - Jahresdifferenz
    - minus 1, wenn der Geburtstag im Jahr von today noch nicht erreicht ist
    Schaltjahre werden nicht gesondert behandelt.
    Geburtsdaten in der Zukunft liefern negative Werte.
    """
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


@dataclass(frozen=True, slots=True)
class Person(ABC):
    """
    Gemeinsame Identität aller Personen.
    Kann nicht direkt erzeugt werden. Varianten sind BasicPerson, Student und Teacher.
    """
    last_name: str
    first_name: str
    patronymic: str
    birth_date: date

    def age(self, today: date) -> int:
        """Alter zum Stichtag."""
        return calculate_age(self.birth_date, today)

    @property
    def full_name(self) -> str:
        return f"{self.last_name} {self.first_name} {self.patronymic}"

    @abstractmethod
    def render(self, today: date) -> str:
        """Feste, lesbare Textzeile für die Anzeige."""
        ...


@dataclass(frozen=True, slots=True)
class BasicPerson(Person):
    """Person ohne Zusatzdaten (Ergebnis einer 4-Spalten-Zeile)."""

    def render(self, today: date) -> str:
        return (
            f"{self.last_name}, {self.first_name}, {self.patronymic}, "
            f"{self.birth_date.strftime('%d-%m-%Y')}, {self.age(today)}"
        )


@dataclass(frozen=True, slots=True)
class Student(Person):
    """
    Ein Student.
    - course beginnt bei 1
    - average_score hat keinen festen Bereich
    """
    course: int
    group: str
    average_score: float

    def __post_init__(self) -> None:
        """Prüft Grundregeln nach dem Erzeugen."""
        if self.course < 1:
            raise ValueError(f"course muss >= 1 sein, ist aber {self.course}.")

    def render(self, today: date) -> str:
        return (
            f"Student: {self.full_name}, Age: {self.age(today)}, "
            f"Course: {self.course}, Group: {self.group}, "
            f"Average score: {self.average_score:.2f}"
        )


@dataclass(frozen=True, slots=True)
class Teacher(Person):
    """
    Eine Lehrkraft.
    - experience in Jahren, mindestens 0
    """
    department: str
    experience: int
    position: Position

    def __post_init__(self) -> None:
        """Prüft Grundregeln nach dem Erzeugen."""
        if self.experience < 0:
            raise ValueError(f"experience muss >= 0 sein, ist aber {self.experience}.")

    def render(self, today: date) -> str:
        return (
            f"Teacher: {self.full_name}, Age: {self.age(today)}, "
            f"Department: {self.department}, Experience: {self.experience}, "
            f"Position: {self.position.name}"
        )
