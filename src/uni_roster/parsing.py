"""
Zeilen-Codec

Wandelt eine Textzeile <-> Person.
Die Domain selbst bleibt frei von Text-Details.

Zeilenformate:
- Person:  Nachname; Vorname; Vatersname; TT.MM.JJJJ
- Student: ...; Kurs; Gruppe; Durchschnitt
- Teacher: ...; Lehrstuhl; Dienstjahre; Position

',' und ';' sind gleichwertige Trenner.
Bei Student- und Teacher-Zeilen gilt: enthält die Zeile ein ';', trennt nur ';'.
So bleibt ein Dezimalkomma ("4,5") erhalten. Person-Zeilen trennen immer an beiden.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import List

from .domain import BasicPerson, Person, Position, Student, Teacher

DATE_FORMAT = "%d.%m.%Y"

PERSON_COLUMNS = 4
STUDENT_COLUMNS = 7
TEACHER_COLUMNS = 7

_ANY_SEPARATOR = re.compile(r"[,;]")


class FormatError(ValueError):
    """Zeile hat falsche Spaltenzahl oder ein Feld lässt sich nicht umwandeln."""


def split_row(text: str, decimal_safe: bool = True) -> List[str]:
    """
    Zerlegt eine Zeile in Felder.
    - decimal_safe: enthält die Zeile ein ';', trennt nur ';' (für Zeilen mit Dezimalzahl).
      Sonst trennen ',' und ';' gleichwertig.
    - Felder werden getrimmt.
    - Leere Felder (z.B. ';;') werden verworfen.
    """
    if decimal_safe and ";" in text:
        parts = text.split(";")
    else:
        parts = _ANY_SEPARATOR.split(text)
    return [p.strip() for p in parts if p.strip()]


def _expect_columns(columns: List[str], expected: int, kind: str) -> None:
    if len(columns) != expected:
        raise FormatError(
            f"Wrong number of columns for {kind}: expected {expected}, got {len(columns)}"
        )


def parse_date(raw: str) -> date:
    """Liest ein Datum im Format TT.MM.JJJJ."""
    return datetime.strptime(raw.strip(), DATE_FORMAT).date()


def parse_score(raw: str) -> float:
    """Liest eine Dezimalzahl. Punkt und Komma sind erlaubt."""
    return float(raw.strip().replace(",", "."))


def parse_position(raw: str) -> Position:
    """
    Liest eine Position.
    Nur exakte Member-Namen sind gültig (Groß/Klein wird beachtet).
    """
    s = raw.strip()
    if s not in Position.__members__:
        allowed = ", ".join(Position.__members__)
        raise ValueError(f"unknown position '{s}' (allowed: {allowed})")
    return Position[s]


def parse_person(text: str) -> BasicPerson:
    """Baut eine BasicPerson aus einer 4-Spalten-Zeile."""
    columns = split_row(text, decimal_safe=False)
    _expect_columns(columns, PERSON_COLUMNS, "person")

    try:
        return BasicPerson(
            last_name=columns[0],
            first_name=columns[1],
            patronymic=columns[2],
            birth_date=parse_date(columns[3]),
        )
    except ValueError as e:
        raise FormatError(f"Error parsing person data: {e}") from e


def parse_student(text: str) -> Student:
    """
    Baut einen Student aus einer 7-Spalten-Zeile.
    Die Fehlermeldung enthält den Grund der fehlgeschlagenen Umwandlung.
    """
    columns = split_row(text)
    _expect_columns(columns, STUDENT_COLUMNS, "student")

    try:
        return Student(
            last_name=columns[0],
            first_name=columns[1],
            patronymic=columns[2],
            birth_date=parse_date(columns[3]),
            course=int(columns[4]),
            group=columns[5],
            average_score=parse_score(columns[6]),
        )
    except ValueError as e:
        raise FormatError(f"Error parsing student data: {e}") from e


def parse_teacher(text: str) -> Teacher:
    """Baut einen Teacher aus einer 7-Spalten-Zeile."""
    columns = split_row(text)
    _expect_columns(columns, TEACHER_COLUMNS, "teacher")

    try:
        return Teacher(
            last_name=columns[0],
            first_name=columns[1],
            patronymic=columns[2],
            birth_date=parse_date(columns[3]),
            department=columns[4],
            experience=int(columns[5]),
            position=parse_position(columns[6]),
        )
    except ValueError as e:
        raise FormatError(f"Error parsing teacher data: {e}") from e


def format_person_row(p: Person) -> str:
    """Schreibt die vier gemeinsamen Felder als Zeile."""
    return "; ".join([
        p.last_name,
        p.first_name,
        p.patronymic,
        p.birth_date.strftime(DATE_FORMAT),
    ])


def format_student_row(s: Student) -> str:
    """Student als Zeile. Durchschnitt mit zwei Nachkommastellen."""
    return "; ".join([
        format_person_row(s),
        str(s.course),
        s.group,
        f"{s.average_score:.2f}",
    ])


def format_teacher_row(t: Teacher) -> str:
    """Teacher als Zeile."""
    return "; ".join([
        format_person_row(t),
        t.department,
        str(t.experience),
        t.position.name,
    ])
