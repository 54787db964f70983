"""
Controller layer

Der RosterController steuert die App. Er verbindet Repository, Parser und View.

Aufgaben:
- Stichtag für das Alter festlegen
- Menü anzeigen und Eingaben verarbeiten
- Listen über die View seitenweise ausgeben
- Personen hinzufügen und entfernen (nur im Speicher)
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, List, Optional

from .domain import Position
from .parsing import DATE_FORMAT, FormatError, parse_score, parse_student, parse_teacher
from .repository import Entry, SortOrder, University
from .view import ConsoleRosterView

logger = logging.getLogger(__name__)


class RosterController:
    """
    Hauptcontroller für das Personenverzeichnis.

    Aufgaben:
    - Menü-Schleife
    - Aufrufe an Repository und View
    """

    def __init__(
        self,
        university: University,
        view: ConsoleRosterView,
        today: Optional[date] = None,
    ) -> None:
        """
        Erstellt den Controller.

        - university: Datenbestand
        - view: Ein-/Ausgabe
        - today: Stichtag für das Alter (None = beim Start abfragen)
        """
        self._university = university
        self._view = view
        self._today: date = today or date.today()
        self._ask_for_date = today is None

    @property
    def today(self) -> date:
        """Aktueller Stichtag."""
        return self._today

    def starte_app(self) -> None:
        """
        Startet die Anwendung.

        - optional Stichtag setzen
        - Menü-Schleife starten
        """
        if self._ask_for_date:
            self._prompt_reference_date()

        while True:
            self._view.render_menu()
            choice = self._view.prompt("Choose a menu item: ").strip()

            if choice == "1":
                self.show_all()
            elif choice == "2":
                self.show_students()
            elif choice == "3":
                self.show_teachers()
            elif choice == "4":
                self.add_student()
            elif choice == "5":
                self.add_teacher()
            elif choice == "6":
                self.find_by_last_name()
            elif choice == "7":
                self.find_by_average_score()
            elif choice == "8":
                self.find_by_department()
            elif choice == "9":
                self.remove_person()
            elif choice == "0":
                self._view.show_message("Goodbye.")
                break
            else:
                self._view.show_message("Invalid choice!")

    def show_all(self) -> None:
        self._show(self._university.list_all(SortOrder.NAME), "=== All people ===")

    def show_students(self) -> None:
        self._show(self._university.list_students(SortOrder.NAME), "=== All students ===")

    def show_teachers(self) -> None:
        self._show(self._university.list_teachers(SortOrder.NAME), "=== All teachers ===")

    def add_student(self) -> None:
        """Liest eine Student-Zeile ein. Fehler werden gemeldet, der Bestand bleibt."""
        self._view.show_message("\n=== Add student ===")
        self._view.show_message(
            "Format: LastName; FirstName; Patronymic; BirthDate(dd.mm.yyyy); Course; Group; AverageScore"
        )
        self._view.show_message("Example: Ivanov; Petr; Sergeevich; 15.05.2000; 2; IST-201; 4,5")
        self._add(parse_student, "Student")

    def add_teacher(self) -> None:
        """Liest eine Teacher-Zeile ein. Fehler werden gemeldet, der Bestand bleibt."""
        self._view.show_message("\n=== Add teacher ===")
        self._view.show_message(
            "Format: LastName; FirstName; Patronymic; BirthDate(dd.mm.yyyy); Department; Experience; Position"
        )
        self._view.show_message(f"Positions: {', '.join(p.name for p in Position)}")
        self._view.show_message(
            "Example: Petrov; Ivan; Mikhailovich; 20.08.1975; Information Systems; 15; Professor"
        )
        self._add(parse_teacher, "Teacher")

    def find_by_last_name(self) -> None:
        self._view.show_message("\n=== Find by last name ===")
        last_name = self._view.prompt("Last name: ")
        results = self._university.find_by_last_name(last_name, SortOrder.NAME)
        self._show(results, f"=== Search results for '{last_name.strip()}' ===")

    def find_by_average_score(self) -> None:
        """Studenten über einer Schwelle. Komma oder Punkt als Dezimaltrenner."""
        self._view.show_message("\n=== Students with average score above ===")
        raw = self._view.prompt("Minimum average score: ").strip()
        try:
            threshold = parse_score(raw)
        except ValueError:
            self._view.show_message("Invalid score format!")
            return

        results = self._university.find_by_average_score_above(threshold)
        self._show(results, f"=== Students with average score above {threshold:.2f} ===")

    def find_by_department(self) -> None:
        self._view.show_message("\n=== Find teachers by department ===")
        department = self._view.prompt("Department: ")
        results = self._university.find_by_department(department)
        self._show(results, f"=== Teachers of department '{department.strip()}' ===")

    def remove_person(self) -> None:
        """
        Entfernt eine Person.
        - Suche über Nachnamen
        - Treffer nach Vornamen sortiert
        - Auswahl über Nummer im Blätter-Modus
        """
        self._view.show_message("\n=== Remove person ===")
        last_name = self._view.prompt("Last name: ")

        results = self._university.find_by_last_name(last_name)
        results.sort(key=lambda e: e.person.first_name)
        if not results:
            self._view.show_message("No people with this last name found.")
            return

        selected = self._view.display_paginated(
            results,
            f"=== Remove person ({len(results)} found) ===",
            self._render,
            selectable=True,
        )
        if selected is None:
            self._view.show_message("Operation cancelled.")
            return

        entry = results[selected - 1]
        if self._university.remove(entry.handle):
            p = entry.person
            self._view.show_message(f"Person removed: {p.last_name} {p.first_name}")
        else:
            self._view.show_message("Person was already removed.")

    def _add(self, parse: Callable, kind: str) -> None:
        """Gemeinsamer Ablauf für das Hinzufügen."""
        raw = self._view.prompt("Data: ")
        try:
            person = parse(raw)
        except FormatError as e:
            logger.info("%s rejected: %s", kind, e)
            self._view.show_message(f"Error: {e}")
            return

        self._university.add(person)
        self._view.show_message(f"{kind} added successfully!")

    def _show(self, entries: List[Entry], title: str) -> None:
        self._view.display_paginated(entries, title, self._render)

    def _render(self, entry: Entry) -> str:
        return entry.person.render(self._today)

    def _prompt_reference_date(self) -> None:
        """
        Fragt einen Stichtag ab.
        Leere oder ungültige Eingabe bedeutet: heute.
        """
        eingabe = self._view.prompt("Reference date (dd.mm.yyyy, empty = today): ").strip()
        if not eingabe:
            return
        try:
            self._today = datetime.strptime(eingabe, DATE_FORMAT).date()
        except ValueError:
            self._view.show_message("Invalid date. Using today.")
            self._today = date.today()
