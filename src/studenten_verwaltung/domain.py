"""
Domain beinhaltet die Entity + Enum

Dieses Modul enthält nur die Fachlogik.
Es enthält keine UI- oder Datei-Logik.

- Student ist eine unveränderliche Dataclass (Snapshot).
- Gleichheit und Hash hängen nur an der student_id.
- Die GPA-Kategorie wird immer berechnet und nicht gespeichert.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class GpaKategorie(Enum):
    """Leistungsgruppen nach GPA (Skala 0.0..10.0)."""
    EXZELLENT = "Exzellent"
    GUT = "Gut"
    DURCHSCHNITT = "Durchschnitt"
    NICHT_BESTANDEN = "Nicht bestanden"

    @classmethod
    def fuer_gpa(cls, gpa: float) -> GpaKategorie:
        """
        Ordnet einen GPA einer Kategorie zu.
        - >= 8.0 -> EXZELLENT
        - >= 6.0 -> GUT
        - >= 4.0 -> DURCHSCHNITT
        - sonst  -> NICHT_BESTANDEN
        """
        if gpa >= 8.0:
            return cls.EXZELLENT
        if gpa >= 6.0:
            return cls.GUT
        if gpa >= 4.0:
            return cls.DURCHSCHNITT
        return cls.NICHT_BESTANDEN


@dataclass(frozen=True, slots=True, eq=False)
class Student:
    """
    Ein Student.

    Die Identität ist allein die student_id. Zwei Objekte mit gleicher ID
    gelten als derselbe Student, egal welche anderen Werte sie haben.
    Ändern heißt: ein neues Objekt mit gleicher ID erzeugen und das alte ersetzen.
    """
    student_id: int
    first_name: str
    last_name: str
    email: str
    phone_number: str
    course: str
    gpa: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.student_id == other.student_id

    def __hash__(self) -> int:
        return hash(self.student_id)

    @property
    def full_name(self) -> str:
        """Vor- und Nachname mit Leerzeichen."""
        return f"{self.first_name} {self.last_name}"

    @property
    def gpa_kategorie(self) -> GpaKategorie:
        return GpaKategorie.fuer_gpa(self.gpa)

    def bereinigt(self) -> Student:
        """Kopie mit getrimmten Textfeldern, so wie sie in der Datei landen."""
        return replace(
            self,
            first_name=self.first_name.strip(),
            last_name=self.last_name.strip(),
            email=self.email.strip(),
            phone_number=self.phone_number.strip(),
            course=self.course.strip(),
        )

    def __str__(self) -> str:
        """
        Eine Zeile für die Konsolen-Tabelle.
        Spaltenbreiten wie TABELLEN_KOPF in view.py.
        """
        return (
            f"{self.student_id:<5d} | {self.full_name:<20} | {self.email:<25} | "
            f"{self.phone_number:<12} | {self.course:<15} | {self.gpa:.2f}"
        )
