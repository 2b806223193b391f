"""
Persistence layer (Textdatei)

Hier liegt die Speicherung in einer einfachen Textdatei. Die Domain selbst bleibt frei von Datei-Details.
- StudentRepository: Schnittstelle (lade / speichere)
- FileStorage: Datei-Zugriff
- PipeSerializer: Mapping zwischen Student und Textzeile
- TextStudentRepository: Datei-Repository

Format: eine Zeile pro Student, sieben Felder mit "|" getrennt:
    id|firstName|lastName|email|phoneNumber|course|gpa
Die GPA wird immer mit zwei Nachkommastellen geschrieben.
Felder werden nicht maskiert. Ein "|" in einem Feld macht die Zeile unlesbar.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Union

from .domain import Student

logger = logging.getLogger(__name__)

TRENNZEICHEN = "|"
ANZAHL_FELDER = 7


class ZeilenFormatFehler(ValueError):
    """Eine Zeile der Datei passt nicht zum Format."""


class StudentRepository(Protocol):
    """
    Schnittstelle für Persistenz.
    """
    def lade(self) -> List[Student]:
        """Lädt alle Studenten."""
        ...

    def speichere(self, studenten: Iterable[Student]) -> None:
        """Speichert alle Studenten."""
        ...


class FileStorage:
    """
    Klasse für Dateihandling beim laden und speichern.
    - Nur lesen/schreiben.
    - UTF-8 wird fest genutzt.
    """

    def existiert(self, pfad: Union[str, Path]) -> bool:
        return Path(pfad).exists()

    def lese_zeilen(self, pfad: Union[str, Path]) -> List[bytes]:
        """
        Liest eine Datei zeilenweise als Bytes.
        Getrennt wird nur an "\\n", dekodiert wird erst pro Zeile.
        Fehlerbehandlung:
        - FileNotFoundError, wenn Datei fehlt
        - OSError bei Leseproblemen
        """
        with open(pfad, "rb") as f:
            return f.read().split(b"\n")

    def schreibe_text(self, pfad: Union[str, Path], content: str) -> None:
        """
        Schreibt Text in eine Datei.
        Die Datei wird komplett überschrieben.
        Der Ordner wird bei Bedarf angelegt.
        """
        Path(pfad).parent.mkdir(parents=True, exist_ok=True)
        with open(pfad, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)


class PipeSerializer:
    """
    Wandelt Student <-> Textzeile.
    - Felder werden beim Lesen getrimmt.
    - Falsche Feldanzahl oder keine Zahl bei ID/GPA -> ZeilenFormatFehler.
    """

    def to_line(self, student: Student) -> str:
        """Macht aus einem Studenten eine Zeile (ohne Zeilenumbruch)."""
        return TRENNZEICHEN.join([
            str(student.student_id),
            student.first_name,
            student.last_name,
            student.email,
            student.phone_number,
            student.course,
            f"{student.gpa:.2f}",
        ])

    def from_line(self, line: str) -> Student:
        """
        Baut einen Studenten aus einer Zeile.
        """
        teile = [t.strip() for t in line.split(TRENNZEICHEN)]
        if len(teile) != ANZAHL_FELDER:
            raise ZeilenFormatFehler(
                f"{ANZAHL_FELDER} Felder erwartet, aber {len(teile)} gefunden: {line!r}"
            )

        try:
            student_id = int(teile[0])
            gpa = float(teile[6])
        except ValueError as e:
            raise ZeilenFormatFehler(f"ID oder GPA ist keine Zahl: {line!r}") from e

        return Student(
            student_id=student_id,
            first_name=teile[1],
            last_name=teile[2],
            email=teile[3],
            phone_number=teile[4],
            course=teile[5],
            gpa=gpa,
        )

    def from_bytes(self, raw: bytes) -> Student:
        """Wie from_line, aber die Zeile muss gültiges UTF-8 sein."""
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ZeilenFormatFehler(f"Kein gültiges UTF-8: {raw!r}") from e
        return self.from_line(line)

    def to_text(self, studenten: Iterable[Student]) -> str:
        """Alle Studenten als Text, jede Zeile mit Zeilenumbruch abgeschlossen."""
        return "".join(self.to_line(s) + "\n" for s in studenten)


class TextStudentRepository:
    """
    Repository für eine Textdatei.
    - FileStorage für Datei-Zugriff
    - PipeSerializer für Mapping

    Fehlende Datei bedeutet: noch keine Daten.
    Fehlerhafte Zeilen werden übersprungen und als Warnung geloggt.
    """

    def __init__(
        self,
        pfad: Union[str, Path],
        storage: Optional[FileStorage] = None,
        serializer: Optional[PipeSerializer] = None
    ) -> None:
        """
        Erstellt das Repository.
        """
        self._pfad = Path(pfad)
        self._storage = storage or FileStorage()
        self._serializer = serializer or PipeSerializer()

    @property
    def pfad(self) -> Path:
        return self._pfad

    def lade(self) -> List[Student]:
        """
        Lädt die Datei und baut die Domain-Objekte.
        Jede Zeile wird für sich geparst. Eine kaputte Zeile stoppt das Laden nicht.
        """
        if not self._storage.existiert(self._pfad):
            logger.info("Keine Datendatei gefunden (%s), starte leer.", self._pfad)
            return []

        studenten: List[Student] = []
        for nummer, zeile in enumerate(self._storage.lese_zeilen(self._pfad), 1):
            # Leere Zeilen sind kein Fehler.
            if not zeile.strip():
                continue
            try:
                studenten.append(self._serializer.from_bytes(zeile))
            except ZeilenFormatFehler as e:
                logger.warning("Zeile %d in %s übersprungen: %s", nummer, self._pfad, e)

        logger.info("%d Studenten aus %s geladen.", len(studenten), self._pfad)
        return studenten

    def speichere(self, studenten: Iterable[Student]) -> None:
        """
        Serialisiert und schreibt in die Datei.
        """
        raw = self._serializer.to_text(studenten)
        self._storage.schreibe_text(self._pfad, raw)
