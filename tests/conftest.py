"""Pytest configuration and fixtures for uni_roster tests."""

from datetime import date
from typing import List

import pytest

from uni_roster.domain import Position, Student, Teacher
from uni_roster.repository import University
from uni_roster.view import ConsoleRosterView


class ScriptedView(ConsoleRosterView):
    """Console view fed from a list of inputs, recording every message."""

    def __init__(self, inputs: List[str], page_size: int = 100):
        super().__init__(width=80, page_size=page_size)
        self.inputs = list(inputs)
        self.messages: List[str] = []
        self.prompts: List[str] = []

    def prompt(self, frage: str) -> str:
        self.prompts.append(frage)
        if not self.inputs:
            raise AssertionError(f"No scripted input left for prompt {frage!r}")
        return self.inputs.pop(0)

    def show_message(self, text: str) -> None:
        self.messages.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.messages)


@pytest.fixture
def today():
    return date(2025, 3, 1)


@pytest.fixture
def scripted_view():
    return ScriptedView


@pytest.fixture
def sample_students():
    return [
        Student("Sidorov", "Ivan", "Petrovich", date(2000, 5, 15), 2, "IST-201", 4.2),
        Student("Ivanova", "Maria", "Sergeevna", date(2001, 8, 22), 1, "IST-101", 4.7),
        Student("Petrov", "Aleksey", "Vladimirovich", date(1999, 3, 10), 3, "IST-301", 3.8),
    ]


@pytest.fixture
def sample_teachers():
    return [
        Teacher("Smirnova", "Olga", "Nikolaevna", date(1975, 12, 5),
                "Information Systems", 15, Position.Professor),
        Teacher("Kozlov", "Dmitry", "Ivanovich", date(1980, 7, 18),
                "Software Engineering", 10, Position.Docent),
        Teacher("Pavlova", "Elena", "Viktorovna", date(1985, 2, 28),
                "Information Systems", 8, Position.SeniorLecturer),
    ]


@pytest.fixture
def university(sample_students, sample_teachers):
    uni = University()
    for person in sample_students + sample_teachers:
        uni.add(person)
    return uni
