"""
Gemeinsame Fixtures für die Tests.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import pytest

from studenten_verwaltung.domain import Student
from studenten_verwaltung.persistence import TextStudentRepository
from studenten_verwaltung.service import StudentService
from studenten_verwaltung.view import ConsoleStudentView


def make_student(student_id: int = 1, **overrides) -> Student:
    """Gültiger Student mit überschreibbaren Feldern."""
    werte = dict(
        student_id=student_id,
        first_name="Ann",
        last_name="Lee",
        email="ann@x.com",
        phone_number="1234567890",
        course="CS",
        gpa=9.0,
    )
    werte.update(overrides)
    return Student(**werte)


class ScriptedView(ConsoleStudentView):
    """
    View mit vorgegebenen Eingaben.
    Nachrichten werden gesammelt statt nur gedruckt.
    """

    def __init__(self, antworten: Iterable[str]) -> None:
        super().__init__(width=120)
        self._antworten = iter(antworten)
        self.fragen: List[str] = []
        self.nachrichten: List[str] = []

    def prompt(self, frage: str) -> str:
        self.fragen.append(frage)
        return next(self._antworten)

    def show_message(self, text: str) -> None:
        self.nachrichten.append(text)

    def alle_nachrichten(self) -> str:
        return "\n".join(self.nachrichten)


@pytest.fixture()
def data_file(tmp_path) -> Path:
    return tmp_path / "students.txt"


@pytest.fixture()
def repo(data_file) -> TextStudentRepository:
    return TextStudentRepository(data_file)


@pytest.fixture()
def service(repo) -> StudentService:
    return StudentService(repo)
