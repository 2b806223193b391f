"""
Prüfregeln für Studentendaten

Reine Funktionen ohne Zustand.
- Jede Prüfung arbeitet auf der getrimmten Eingabe.
- Eingaben werden nie verändert.
- None ist immer ungültig.

Die Regeln werden zweimal genutzt: im Controller direkt bei der Eingabe
und im StudentService vor jeder Änderung.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Optional

from .domain import Student

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE_PATTERN = re.compile(r"\+?[0-9]{10,15}")
# Nur Leerzeichen und Tab als Leerraum, ein Zeilenumbruch würde die Datei zerlegen.
NAME_PATTERN = re.compile(r"[A-Za-z \t]+")
COURSE_PATTERN = re.compile(r"[A-Za-z0-9 \t&.\-]+")

GPA_MIN = 0.0
GPA_MAX = 10.0


def is_valid_string(value: Optional[str]) -> bool:
    """Gültig, wenn nicht None und nach dem Trimmen nicht leer."""
    return value is not None and value.strip() != ""


def is_valid_student_id(student_id: int) -> bool:
    """Nur positive IDs."""
    return student_id > 0


def is_valid_email(email: Optional[str]) -> bool:
    """
    Prüft das Format lokaler-teil@domain.tld.
    Die letzte Domain-Komponente braucht mindestens 2 Buchstaben.
    """
    if not is_valid_string(email):
        return False
    return EMAIL_PATTERN.fullmatch(email.strip()) is not None


def is_valid_phone_number(phone_number: Optional[str]) -> bool:
    """10 bis 15 Ziffern, optional mit führendem +."""
    if not is_valid_string(phone_number):
        return False
    return PHONE_PATTERN.fullmatch(phone_number.strip()) is not None


def is_valid_gpa(gpa: float) -> bool:
    """Bereich 0.0..10.0, beide Grenzen inklusive."""
    return GPA_MIN <= gpa <= GPA_MAX


def is_valid_name(name: Optional[str]) -> bool:
    """Mindestens 2 Zeichen, nur ASCII-Buchstaben, Leerzeichen und Tab."""
    if not is_valid_string(name):
        return False
    trimmed = name.strip()
    return len(trimmed) >= 2 and NAME_PATTERN.fullmatch(trimmed) is not None


def is_valid_course(course: Optional[str]) -> bool:
    """
    Mindestens 2 Zeichen.
    Erlaubt sind Buchstaben, Ziffern, Leerzeichen und & . -
    """
    if not is_valid_string(course):
        return False
    trimmed = course.strip()
    return len(trimmed) >= 2 and COURSE_PATTERN.fullmatch(trimmed) is not None


# Feldname -> Prüfregel, in der Reihenfolge des Dateiformats.
FELD_REGELN: Dict[str, Callable[[Student], bool]] = {
    "student_id": lambda s: is_valid_student_id(s.student_id),
    "first_name": lambda s: is_valid_name(s.first_name),
    "last_name": lambda s: is_valid_name(s.last_name),
    "email": lambda s: is_valid_email(s.email),
    "phone_number": lambda s: is_valid_phone_number(s.phone_number),
    "course": lambda s: is_valid_course(s.course),
    "gpa": lambda s: is_valid_gpa(s.gpa),
}


def ungueltige_felder(student: Optional[Student]) -> List[str]:
    """
    Liefert die Namen aller Felder, die ihre Prüfregel nicht erfüllen.
    Leere Liste bedeutet: der Student ist gültig.
    """
    if student is None:
        return list(FELD_REGELN)
    return [name for name, regel in FELD_REGELN.items() if not regel(student)]


def ist_gueltig(student: Optional[Student]) -> bool:
    """Kurzform von ungueltige_felder()."""
    return not ungueltige_felder(student)
