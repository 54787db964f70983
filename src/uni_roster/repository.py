"""
Repository (University)

Hält alle Personen im Speicher.
- Jeder Eintrag bekommt beim Hinzufügen ein festes Handle (int).
- Entfernt wird über das Handle, nicht über Gleichheit.
- Abfragen liefern immer neue Listen (Schnappschüsse).

Nichts wird zurück in Dateien geschrieben.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from itertools import count
from typing import Callable, Dict, Iterator, List, Optional, Type, TypeVar

from .domain import Person, Student, Teacher

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Person)


class SortOrder(Enum):
    """Mögliche Reihenfolgen für Listen."""
    BIRTH_DATE = "birth_date"
    NAME = "name"


@dataclass(frozen=True, slots=True)
class Entry:
    """Ein Eintrag im Repository: Handle + Person."""
    handle: int
    person: Person


def _by_birth_date(e: Entry):
    return e.person.birth_date


def _by_name(e: Entry):
    return (e.person.last_name, e.person.first_name)


SORT_KEYS: Dict[SortOrder, Callable[[Entry], object]] = {
    SortOrder.BIRTH_DATE: _by_birth_date,
    SortOrder.NAME: _by_name,
}


def sort_entries(entries: List[Entry], order: SortOrder = SortOrder.BIRTH_DATE) -> List[Entry]:
    """
    Sortiert stabil.
    Gleiche Schlüssel behalten die Einfügereihenfolge.
    """
    return sorted(entries, key=SORT_KEYS[order])


class University:
    """
    In-Memory-Repository für Studenten und Lehrkräfte.

    Die Standardreihenfolge aller Listen ist das Geburtsdatum (aufsteigend).
    """

    def __init__(self) -> None:
        self._entries: Dict[int, Person] = {}
        self._handles = count(1)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        """Einträge in Einfügereihenfolge."""
        for handle, person in list(self._entries.items()):
            yield Entry(handle, person)

    def add(self, person: Person) -> int:
        """Fügt eine Person hinzu und gibt ihr Handle zurück."""
        handle = next(self._handles)
        self._entries[handle] = person
        logger.debug("Added #%d: %s %s", handle, person.last_name, person.first_name)
        return handle

    def get(self, handle: int) -> Optional[Person]:
        return self._entries.get(handle)

    def remove(self, handle: int) -> bool:
        """
        Entfernt den Eintrag mit dem Handle.
        Unbekannte oder veraltete Handles sind kein Fehler: Rückgabe False.
        """
        person = self._entries.pop(handle, None)
        if person is None:
            logger.debug("Remove #%d: not found", handle)
            return False
        logger.debug("Removed #%d: %s %s", handle, person.last_name, person.first_name)
        return True

    def remove_person(self, person: Person) -> bool:
        """
        Entfernt den ersten Eintrag, der genau dieses Objekt ist (Identität, nicht Gleichheit).
        """
        for handle, stored in self._entries.items():
            if stored is person:
                return self.remove(handle)
        return False

    def list_all(self, order: SortOrder = SortOrder.BIRTH_DATE) -> List[Entry]:
        """Alle Personen."""
        return sort_entries(list(self), order)

    def list_students(self, order: SortOrder = SortOrder.BIRTH_DATE) -> List[Entry]:
        """Nur Studenten."""
        return sort_entries(self._of_type(Student), order)

    def list_teachers(self, order: SortOrder = SortOrder.BIRTH_DATE) -> List[Entry]:
        """Nur Lehrkräfte."""
        return sort_entries(self._of_type(Teacher), order)

    def find_by_last_name(self, text: str, order: SortOrder = SortOrder.BIRTH_DATE) -> List[Entry]:
        """
        Sucht nach Nachnamen.
        - Groß/Klein egal
        - Teilstring genügt ("etro" findet "Petrov")
        - Leere Eingabe oder nur Leerzeichen: leeres Ergebnis
        """
        needle = (text or "").strip().lower()
        if not needle:
            return []

        found = [e for e in self if needle in e.person.last_name.strip().lower()]
        return sort_entries(found, order)

    def find_by_average_score_above(self, threshold: float) -> List[Entry]:
        """
        Studenten mit Durchschnitt echt größer als threshold.
        Sortiert nach Durchschnitt (aufsteigend).
        """
        found = [e for e in self._of_type(Student) if e.person.average_score > threshold]
        found.sort(key=lambda e: e.person.average_score)
        return found

    def find_by_department(self, text: str) -> List[Entry]:
        """
        Lehrkräfte, deren Lehrstuhl den Text enthält (Groß/Klein egal).
        Sortiert nach Position.
        """
        needle = (text or "").strip().lower()
        if not needle:
            return []

        found = [e for e in self._of_type(Teacher) if needle in e.person.department.lower()]
        found.sort(key=lambda e: e.person.position.rank)
        return found

    def _of_type(self, cls: Type[P]) -> List[Entry]:
        return [e for e in self if isinstance(e.person, cls)]
