"""
Persistence layer (Textdateien)

Beim Start werden Student.txt und Teacher.txt gelesen.
Die Domain selbst bleibt frei von Datei-Details.
- FileStorage: Dateizugriff
- RosterFileLoader: Zeilen parsen und ins Repository legen

Fehlerbehandlung (einheitlich für beide Dateien):
- Fehlerhafte Zeile -> Warnung ins Log, Zeile wird übersprungen, Laden geht weiter.
- Fehlende Datei -> kein Fehler, nur Hinweis.
- Lesefehler (OSError) -> Log, es geht mit leerem Bestand weiter.
Änderungen werden nie zurückgeschrieben.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from .config import Config
from .domain import Person
from .parsing import FormatError, parse_student, parse_teacher
from .repository import University

logger = logging.getLogger(__name__)


class FileStorage:
    """
    Klasse für Dateihandling beim Laden.
    - Nur lesen.
    - UTF-8 wird fest genutzt.
    """

    def exists(self, pfad: Path) -> bool:
        return pfad.is_file()

    def read_lines(self, pfad: Path) -> List[str]:
        """
        Liest eine Datei zeilenweise.
        Fehlerbehandlung:
        - FileNotFoundError, wenn Datei fehlt
        - OSError bei sonstigen Leseproblemen
        """
        with open(pfad, "r", encoding="utf-8-sig") as f:
            return f.read().splitlines()


@dataclass(slots=True)
class SkippedLine:
    """Eine übersprungene Zeile mit Grund."""
    file_name: str
    line_number: int
    reason: str


@dataclass(slots=True)
class LoadReport:
    """Ergebnis des Ladens."""
    students_loaded: int = 0
    teachers_loaded: int = 0
    skipped: List[SkippedLine] = field(default_factory=list)
    missing_files: List[str] = field(default_factory=list)
    failed_files: List[str] = field(default_factory=list)

    @property
    def total_loaded(self) -> int:
        return self.students_loaded + self.teachers_loaded


class RosterFileLoader:
    """
    Lädt Studenten und Lehrkräfte aus dem Datenverzeichnis.
    """

    def __init__(
        self,
        data_dir: Path,
        storage: Optional[FileStorage] = None,
        student_file: str = Config.STUDENT_FILE,
        teacher_file: str = Config.TEACHER_FILE,
    ) -> None:
        self._data_dir = Path(data_dir)
        self._storage = storage or FileStorage()
        self._student_file = student_file
        self._teacher_file = teacher_file

    def load_into(self, university: University) -> LoadReport:
        """
        Lädt beide Dateien in das Repository.
        """
        report = LoadReport()
        report.students_loaded = self._load_file(
            university, self._student_file, parse_student, report
        )
        report.teachers_loaded = self._load_file(
            university, self._teacher_file, parse_teacher, report
        )
        logger.info(
            "Loaded %d students and %d teachers (%d lines skipped)",
            report.students_loaded,
            report.teachers_loaded,
            len(report.skipped),
        )
        return report

    def _load_file(
        self,
        university: University,
        file_name: str,
        parse: Callable[[str], Person],
        report: LoadReport,
    ) -> int:
        """
        Lädt eine Datei.
        Gibt die Anzahl geladener Einträge zurück.
        """
        pfad = self._data_dir / file_name

        try:
            if not self._storage.exists(pfad):
                logger.warning("Data file not found: %s", pfad)
                report.missing_files.append(file_name)
                return 0
            lines = self._storage.read_lines(pfad)
        except OSError as e:
            logger.error("Could not read %s: %s", pfad, e)
            report.failed_files.append(file_name)
            return 0

        loaded = 0
        for number, line in enumerate(lines, 1):
            if not line.strip():
                continue
            try:
                person = parse(line)
            except FormatError as e:
                logger.warning("%s:%d skipped: %s", file_name, number, e)
                report.skipped.append(SkippedLine(file_name, number, str(e)))
                continue
            university.add(person)
            loaded += 1

        logger.info("Loaded %d records from %s", loaded, pfad)
        return loaded
