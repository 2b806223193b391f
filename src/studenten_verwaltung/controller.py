"""
Controller layer

Der StudentController steuert die App. Er verbindet StudentService, StatistikService und View.

Aufgaben:
- Menü anzeigen und Eingaben verarbeiten
- Eingaben direkt prüfen (validation) bevor der Service aufgerufen wird
- Ergebnisse über ConsoleStudentView ausgeben
"""

from __future__ import annotations

from typing import Callable, Optional

from .domain import Student
from .service import StatistikService, StudentService
from .validation import (
    is_valid_course,
    is_valid_email,
    is_valid_gpa,
    is_valid_name,
    is_valid_phone_number,
    is_valid_student_id,
    ungueltige_felder,
)
from .view import ConsoleStudentView

FEHLER_NAME = "Der Name darf nur Buchstaben enthalten und muss mindestens 2 Zeichen lang sein."
FEHLER_EMAIL = "Bitte eine gültige E-Mail-Adresse eingeben (z.B. student@example.com)."
FEHLER_PHONE = "Die Telefonnummer muss 10-15 Ziffern haben (optional mit + am Anfang)."
FEHLER_COURSE = (
    "Der Studiengang muss mindestens 2 Zeichen lang sein "
    "und darf nur Buchstaben, Ziffern, Leerzeichen und & . - enthalten."
)
FEHLER_GPA = "Die GPA muss zwischen 0.0 und 10.0 liegen."


class StudentController:
    """
    Hauptcontroller für die Studentenverwaltung.

    Aufgaben:
    - Menü-Schleife
    - Aufrufe an Service und View
    """

    def __init__(
        self,
        service: StudentService,
        statistik: StatistikService,
        view: ConsoleStudentView
    ) -> None:
        """
        Erstellt den Controller.

        - service: Datenhaltung
        - statistik: Kennzahlen
        - view: Ein-/Ausgabe
        """
        self._service = service
        self._statistik = statistik
        self._view = view

    def starte_app(self) -> None:
        """
        Startet die Anwendung.
        Endlosschleife bis der Nutzer 7 wählt.
        """
        self._view.render_titel("STUDENTENVERWALTUNG")

        while True:
            self._view.render_menue()
            choice = self._view.prompt("Auswahl (1-7): ").strip()

            if choice == "1":
                self.fuege_student_hinzu()
            elif choice == "2":
                self.liste_studenten()
            elif choice == "3":
                self.suche_student()
            elif choice == "4":
                self.bearbeite_student()
            elif choice == "5":
                self.loesche_student()
            elif choice == "6":
                self.zeige_statistik()
            elif choice == "7":
                self._view.show_message("Programm wird beendet.")
                break
            else:
                self._view.show_message("Ungültige Auswahl. Bitte 1-7 wählen.")

    def fuege_student_hinzu(self) -> None:
        """
        Legt einen neuen Studenten an.
        Die ID wird automatisch vergeben.
        Jedes Feld wird so lange abgefragt, bis es gültig ist.
        """
        self._view.render_titel("STUDENT HINZUFÜGEN")

        student_id = self._service.next_id()
        self._view.show_message(f"Student-ID (automatisch): {student_id}")

        student = Student(
            student_id=student_id,
            first_name=self._frage_gueltig("Vorname: ", is_valid_name, FEHLER_NAME),
            last_name=self._frage_gueltig("Nachname: ", is_valid_name, FEHLER_NAME),
            email=self._frage_gueltig("E-Mail: ", is_valid_email, FEHLER_EMAIL),
            phone_number=self._frage_gueltig("Telefon: ", is_valid_phone_number, FEHLER_PHONE),
            course=self._frage_gueltig("Studiengang: ", is_valid_course, FEHLER_COURSE),
            gpa=self._frage_gpa(),
        )

        if self._service.add(student):
            self._view.show_message("\nStudent erfolgreich hinzugefügt:")
            self._view.render_student(student)
            self._warne_bei_speicherfehler()
        else:
            self._zeige_ablehnung(student, neu=True)

    def liste_studenten(self) -> None:
        """Zeigt alle Studenten."""
        self._view.render_titel("ALLE STUDENTEN")
        self._view.render_tabelle(self._service.get_all())

    def suche_student(self) -> None:
        """Sucht einen Studenten über die ID."""
        self._view.render_titel("STUDENT SUCHEN")

        student_id = self._frage_id("Student-ID: ")
        if student_id is None:
            return

        student = self._service.find_by_id(student_id)
        if student is None:
            self._view.show_message(f"Student mit ID {student_id} nicht gefunden.")
            return

        self._view.show_message("\nStudent gefunden:")
        self._view.render_student(student)

    def bearbeite_student(self) -> None:
        """
        Ändert einen vorhandenen Studenten.
        Leere Eingabe behält den aktuellen Wert.
        """
        self._view.render_titel("STUDENT BEARBEITEN")

        student_id = self._frage_id("Student-ID zum Bearbeiten: ")
        if student_id is None:
            return

        alt = self._service.find_by_id(student_id)
        if alt is None:
            self._view.show_message(f"Student mit ID {student_id} nicht gefunden.")
            return

        self._view.show_message("\nAktuelle Daten:")
        self._view.render_student(alt)
        self._view.show_message("\nNeue Werte eingeben (Enter = Wert behalten):")

        neu = Student(
            student_id=student_id,
            first_name=self._frage_optional("Vorname", alt.first_name, is_valid_name, FEHLER_NAME),
            last_name=self._frage_optional("Nachname", alt.last_name, is_valid_name, FEHLER_NAME),
            email=self._frage_optional("E-Mail", alt.email, is_valid_email, FEHLER_EMAIL),
            phone_number=self._frage_optional("Telefon", alt.phone_number, is_valid_phone_number, FEHLER_PHONE),
            course=self._frage_optional("Studiengang", alt.course, is_valid_course, FEHLER_COURSE),
            gpa=self._frage_gpa(aktuell=alt.gpa),
        )

        if self._service.update(neu):
            self._view.show_message("\nStudent erfolgreich aktualisiert:")
            self._view.render_student(neu)
            self._warne_bei_speicherfehler()
        else:
            self._zeige_ablehnung(neu, neu=False)

    def loesche_student(self) -> None:
        """
        Löscht einen Studenten.
        Vorher wird nachgefragt (yes/no).
        """
        self._view.render_titel("STUDENT LÖSCHEN")

        student_id = self._frage_id("Student-ID zum Löschen: ")
        if student_id is None:
            return

        student = self._service.find_by_id(student_id)
        if student is None:
            self._view.show_message(f"Student mit ID {student_id} nicht gefunden.")
            return

        self._view.show_message("\nDieser Student wird gelöscht:")
        self._view.render_student(student)

        antwort = self._view.prompt("\nWirklich löschen? (yes/no): ").strip().lower()
        if antwort not in ("yes", "y"):
            self._view.show_message("Löschen abgebrochen.")
            return

        if self._service.delete(student_id):
            self._view.show_message("Student erfolgreich gelöscht.")
            self._warne_bei_speicherfehler()
        else:
            self._view.show_message("Löschen fehlgeschlagen.")

    def zeige_statistik(self) -> None:
        """Zeigt Kennzahlen über alle Studenten."""
        self._view.render_titel("STATISTIK")
        state = self._statistik.erzeuge_statistik(self._service.get_all())
        self._view.render_statistik(state)

    def _frage_gueltig(self, frage: str, regel: Callable[[str], bool], fehlermeldung: str) -> str:
        """
        Fragt so lange, bis die Eingabe die Regel erfüllt.
        """
        while True:
            eingabe = self._view.prompt(frage).strip()
            if regel(eingabe):
                return eingabe
            self._view.show_message(fehlermeldung)

    def _frage_optional(
        self,
        feld: str,
        aktuell: str,
        regel: Callable[[str], bool],
        fehlermeldung: str
    ) -> str:
        """
        Wie _frage_gueltig, aber leere Eingabe behält den aktuellen Wert.
        """
        while True:
            eingabe = self._view.prompt(f"{feld} [{aktuell}]: ").strip()
            if eingabe == "":
                return aktuell
            if regel(eingabe):
                return eingabe
            self._view.show_message(fehlermeldung)

    def _frage_gpa(self, aktuell: Optional[float] = None) -> float:
        """
        Fragt die GPA ab.
        - Komma wird als Dezimaltrenner akzeptiert.
        - Mit aktuell gesetzt: leere Eingabe behält den Wert.
        """
        frage = "GPA (0.0-10.0): " if aktuell is None else f"GPA [{aktuell:.2f}]: "
        while True:
            raw = self._view.prompt(frage).strip()
            if raw == "" and aktuell is not None:
                return aktuell

            try:
                gpa = float(raw.replace(",", "."))
            except ValueError:
                self._view.show_message("Bitte eine Zahl für die GPA eingeben.")
                continue

            if is_valid_gpa(gpa):
                return gpa
            self._view.show_message(FEHLER_GPA)

    def _frage_id(self, frage: str) -> Optional[int]:
        """
        Liest eine Student-ID.
        None bei keiner Zahl oder nicht positiver ID.
        """
        raw = self._view.prompt(frage).strip()
        try:
            student_id = int(raw)
        except ValueError:
            self._view.show_message("Ungültige Eingabe. Bitte eine gültige Student-ID eingeben.")
            return None

        if not is_valid_student_id(student_id):
            self._view.show_message("Ungültige Student-ID. Bitte eine positive Zahl eingeben.")
            return None

        return student_id

    def _zeige_ablehnung(self, student: Student, neu: bool) -> None:
        """
        Erklärt, warum der Service den Studenten abgelehnt hat.
        Der Service selbst liefert nur True/False.
        """
        felder = ungueltige_felder(student)
        if felder:
            self._view.show_message(f"Ungültige Felder: {', '.join(felder)}")
        elif neu:
            self._view.show_message(f"Student-ID {student.student_id} ist bereits vergeben.")
        else:
            self._view.show_message(f"Student mit ID {student.student_id} nicht gefunden.")

    def _warne_bei_speicherfehler(self) -> None:
        if not self._service.letzte_speicherung_ok:
            self._view.show_message(
                "WARNUNG: Die Änderung konnte nicht in die Datei geschrieben werden."
            )
