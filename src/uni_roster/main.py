"""
Entry point für das Personenverzeichnis.
Dieses Modul startet die Anwendung.
"""

from __future__ import annotations

import logging
import sys

from .config import config
from .controller import RosterController
from .persistence import RosterFileLoader
from .repository import University
from .view import ConsoleRosterView

logger = logging.getLogger(__name__)


def main() -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Logging einrichten
    - Daten aus dem Datenverzeichnis laden
    - Komponenten erstellen
    - Controller starten
    """
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        data_dir = config.get_data_dir()

        # Fehler beim Laden führen nie zum Abbruch.
        university = University()
        report = RosterFileLoader(data_dir).load_into(university)

        view = ConsoleRosterView()
        view.show_message(
            f"Loaded {report.students_loaded} students and "
            f"{report.teachers_loaded} teachers from {data_dir}"
        )
        for name in report.missing_files:
            view.show_message(f"File not found: {name}")
        if report.skipped:
            view.show_message(f"Skipped {len(report.skipped)} malformed line(s), see log.")

        controller = RosterController(university, view)
        controller.starte_app()

    except KeyboardInterrupt:
        # Sauberer Abbruch per Strg+C.
        print("\nApplication closed.")
        sys.exit(0)

    except Exception:
        # Unerwarteter Fehler.
        logger.exception("Unexpected error")
        sys.exit(1)


if __name__ == "__main__":
    main()
