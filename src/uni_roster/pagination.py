"""
Seitenweises Blättern

Der Pager ist nur der Zustand. Er kennt keine Ein-/Ausgabe.
Die View fragt Eingaben ab und füttert sie in den Pager.

Zustände:
- Blättern auf Seite page (0 .. total_pages - 1)
- Beendet (optional mit gewähltem Index)
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional

PAGE_SIZE = 100


class PagerStep(Enum):
    """Ergebnis einer Eingabe."""
    MOVED = "moved"
    IGNORED = "ignored"
    REJECTED = "rejected"
    EXITED = "exited"
    SELECTED = "selected"


class Pager:
    """
    Zustand für das Blättern über count Einträge.

    - selectable=True erlaubt die Auswahl über eine Nummer (1..count).
    - Es gibt immer mindestens eine Seite.
    """

    def __init__(self, count: int, page_size: int = PAGE_SIZE, selectable: bool = False) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size muss > 0 sein, ist aber {page_size}.")
        self.count = count
        self.page_size = page_size
        self.selectable = selectable
        self.page = 0
        self.exited = False
        self.selected: Optional[int] = None

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.count / self.page_size))

    @property
    def is_last_page(self) -> bool:
        return self.page >= self.total_pages - 1

    def page_bounds(self) -> tuple[int, int]:
        """Start (inklusive) und Ende (exklusive) der aktuellen Seite."""
        start = self.page * self.page_size
        return start, min(start + self.page_size, self.count)

    def feed(self, raw: Optional[str]) -> PagerStep:
        """
        Verarbeitet eine Eingabe.
        - 'n' nächste Seite, 'p' vorherige Seite, 'q' beenden
        - Nummer wählt einen Eintrag (nur wenn selectable)
        """
        if self.exited:
            return PagerStep.IGNORED

        cmd = (raw or "").strip().lower()

        if cmd == "q":
            self.exited = True
            return PagerStep.EXITED

        if cmd == "n":
            if self.page + 1 < self.total_pages:
                self.page += 1
                return PagerStep.MOVED
            return PagerStep.IGNORED

        if cmd == "p":
            if self.page > 0:
                self.page -= 1
                return PagerStep.MOVED
            return PagerStep.IGNORED

        if self.selectable and cmd.isdecimal():
            k = int(cmd)
            if 1 <= k <= self.count:
                self.selected = k
                self.exited = True
                return PagerStep.SELECTED

        if cmd and (self.total_pages > 1 or self.selectable):
            return PagerStep.REJECTED

        return PagerStep.IGNORED
