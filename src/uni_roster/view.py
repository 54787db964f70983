"""
UI layer für die Console

Diese View zeigt Listen und das Menü in der Konsole.
- Text ausgeben
- Eingaben abfragen
- Listen seitenweise anzeigen (über den Pager)
"""

from __future__ import annotations

import shutil
from typing import Callable, Optional, Sequence, TypeVar

from .pagination import PAGE_SIZE, Pager, PagerStep

T = TypeVar("T")


class ConsoleRosterView:
    """
    View für die Konsole.

    Die Breite der Trennlinien richtet sich nach dem aktuellen Fenster.
    """

    def __init__(self, width: int | None = None, page_size: int = PAGE_SIZE) -> None:
        """
        Erstellt die View.
        - Wenn width None ist, wird die Terminal-Breite genutzt.
        - Maximal 80 Zeichen für Trennlinien.
        """
        if width is None:
            width = shutil.get_terminal_size(fallback=(80, 24)).columns

        self._width = max(20, min(width, 80))
        self._page_size = page_size

    def render_menu(self) -> None:
        """Zeigt das Hauptmenü."""
        self.show_message("")
        self.show_message("=== University roster ===")
        self.show_message("1) Show all people")
        self.show_message("2) Show all students")
        self.show_message("3) Show all teachers")
        self.show_message("4) Add student")
        self.show_message("5) Add teacher")
        self.show_message("6) Find by last name")
        self.show_message("7) Find students with average score above")
        self.show_message("8) Find teachers by department")
        self.show_message("9) Remove person")
        self.show_message("0) Exit")

    def prompt(self, frage: str) -> str:
        """
        Fragt den Nutzer nach Eingabe.
        """
        return input(frage)

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        print(text)

    def display_paginated(
        self,
        items: Sequence[T],
        title: str,
        render: Callable[[T], str],
        selectable: bool = False,
    ) -> Optional[int]:
        """
        Zeigt items seitenweise an.

        - Leere Liste: Hinweis, kein Blättern.
        - selectable: Nummer wählt einen Eintrag.
        Rückgabe: gewählte Nummer (1-basiert) oder None.
        """
        if not items:
            self.show_message(f"{title}: none found.")
            return None

        pager = Pager(len(items), page_size=self._page_size, selectable=selectable)

        while not pager.exited:
            self._render_page(pager, items, title, render)

            step = pager.feed(self.prompt("Your choice: "))
            if step == PagerStep.REJECTED:
                if selectable:
                    self.show_message("Invalid input! Try again.")
                else:
                    self.show_message("Invalid input! Use 'n', 'p' or 'q'.")

        return pager.selected

    def _render_page(
        self,
        pager: Pager,
        items: Sequence[T],
        title: str,
        render: Callable[[T], str],
    ) -> None:
        """
        Baut eine Seite.
        Die Nummerierung läuft über alle Seiten.
        """
        sep = "=" * self._width
        self.show_message("")
        self.show_message(
            f"{title} (page {pager.page + 1} of {pager.total_pages}, total: {pager.count})"
        )
        self.show_message(sep)

        start, stop = pager.page_bounds()
        for index in range(start, stop):
            self.show_message(f"{index + 1}. {render(items[index])}")

        self.show_message(sep)
        self.show_message(self._navigation_hint(pager))

    def _navigation_hint(self, pager: Pager) -> str:
        """Hinweistext je nach Seite und Modus."""
        parts = []
        if not pager.is_last_page:
            parts.append("'n' - next page")
        if pager.page > 0:
            parts.append("'p' - previous page")
        if pager.selectable:
            parts.append("number - select")
            parts.append("'q' - cancel")
        else:
            parts.append("'q' - exit")
        return ", ".join(parts)
