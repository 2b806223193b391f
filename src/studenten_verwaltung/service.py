"""
Application/Use-Case layer

Der StudentService hält alle Studenten im Speicher und synchronisiert sie
nach jeder Änderung mit dem Repository.
Der StatistikService berechnet Kennzahlen und bildet einen StatistikState für die ConsoleStudentView.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .domain import GpaKategorie, Student
from .persistence import StudentRepository
from .validation import ungueltige_felder

logger = logging.getLogger(__name__)


class StudentService:
    """
    Verwaltung der Studenten.

    - Liste im Speicher (Reihenfolge: Datei, danach Hinzufügen)
    - Zähler für die nächste freie ID, wird nie kleiner
    - Nach jeder erfolgreichen Änderung wird die komplette Datei neu geschrieben

    Fehler beim Laden oder Speichern werden geloggt und nicht weitergereicht.
    Der Speicher bleibt die Quelle der Wahrheit.
    """

    def __init__(self, repo: StudentRepository) -> None:
        """
        Erstellt den Service und lädt sofort alle Studenten.
        """
        self._repo = repo
        self._studenten: List[Student] = []
        self._next_id: int = 1
        self._letzte_speicherung_ok: bool = True
        self._lade()

    @property
    def letzte_speicherung_ok(self) -> bool:
        """False, wenn der letzte Schreibversuch fehlgeschlagen ist."""
        return self._letzte_speicherung_ok

    def add(self, student: Student) -> bool:
        """
        Fügt einen Studenten hinzu.
        False ohne Änderung, wenn ein Feld ungültig ist oder die ID schon existiert.
        """
        if not self._ist_gueltig(student):
            return False
        student = student.bereinigt()

        if self.find_by_id(student.student_id) is not None:
            logger.debug("ID %d existiert bereits.", student.student_id)
            return False

        self._studenten.append(student)
        self._next_id = max(self._next_id, student.student_id + 1)
        self._speichere()
        return True

    def find_by_id(self, student_id: int) -> Optional[Student]:
        """Lineare Suche, erster Treffer oder None."""
        for s in self._studenten:
            if s.student_id == student_id:
                return s
        return None

    def update(self, student: Student) -> bool:
        """
        Ersetzt den Studenten mit gleicher ID.
        Die Position in der Liste bleibt erhalten.
        """
        if not self._ist_gueltig(student):
            return False
        student = student.bereinigt()

        for i, s in enumerate(self._studenten):
            if s.student_id == student.student_id:
                self._studenten[i] = student
                self._speichere()
                return True

        logger.debug("Update: ID %d nicht gefunden.", student.student_id)
        return False

    def delete(self, student_id: int) -> bool:
        """
        Entfernt alle Studenten mit dieser ID.
        Der ID-Zähler wird dabei nicht zurückgesetzt.
        """
        vorher = len(self._studenten)
        self._studenten = [s for s in self._studenten if s.student_id != student_id]

        if len(self._studenten) == vorher:
            return False

        self._speichere()
        return True

    def get_all(self) -> List[Student]:
        """Kopie der Liste, damit niemand von außen den Speicher ändert."""
        return list(self._studenten)

    def next_id(self) -> int:
        return self._next_id

    def _ist_gueltig(self, student: Optional[Student]) -> bool:
        """Prüft alle Felder, loggt die ungültigen."""
        fehler = ungueltige_felder(student)
        if fehler:
            logger.debug("Student abgelehnt, ungültige Felder: %s", ", ".join(fehler))
            return False
        return True

    def _lade(self) -> None:
        """
        Lädt alle Studenten aus dem Repository.
        Bei Dateifehlern: leerer Speicher.
        Doppelte IDs in der Datei: der erste Eintrag gewinnt.
        """
        try:
            geladen = self._repo.lade()
        except (OSError, UnicodeError) as e:
            logger.error("Fehler beim Laden der Studenten: %s", e)
            return

        for s in geladen:
            if self.find_by_id(s.student_id) is not None:
                logger.warning("Doppelte ID %d in der Datei übersprungen.", s.student_id)
                continue
            self._studenten.append(s)
            self._next_id = max(self._next_id, s.student_id + 1)

    def _speichere(self) -> None:
        """
        Schreibt die komplette Liste.
        Fehler werden geloggt, der Speicher bleibt unverändert.
        """
        try:
            self._repo.speichere(self._studenten)
            self._letzte_speicherung_ok = True
        except OSError as e:
            self._letzte_speicherung_ok = False
            logger.error("Fehler beim Speichern der Studenten: %s", e)


@dataclass(slots=True)
class StatistikState:
    """
    Datenobjekt für die View.
    """
    anzahl: int = 0
    durchschnitt: Optional[float] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    verteilung: Dict[GpaKategorie, int] = field(
        default_factory=lambda: {k: 0 for k in GpaKategorie}
    )


class StatistikService:
    """
    Service für die Statistik.
    Er liest nur die Liste aus get_all() und baut daraus ein ViewModel.
    """

    def erzeuge_statistik(self, studenten: List[Student]) -> StatistikState:
        """
        Baut den kompletten StatistikState.
        - Anzahl
        - Durchschnitt, Minimum, Maximum der GPA
        - Verteilung auf die GPA-Kategorien
        """
        state = StatistikState(anzahl=len(studenten))
        if not studenten:
            return state

        gpas = [s.gpa for s in studenten]
        state.durchschnitt = sum(gpas) / len(gpas)
        state.minimum = min(gpas)
        state.maximum = max(gpas)

        for s in studenten:
            state.verteilung[s.gpa_kategorie] += 1

        return state
