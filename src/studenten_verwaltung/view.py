"""
UI layer für die Console

Diese View zeigt Studenten und Statistik in der Konsole.
- Text formatieren und ausgeben
- Tabellen und Statistik als ASCII-Block bauen
- Eingaben und Menü anzeigen
"""

from __future__ import annotations

import shutil
from typing import List, Optional

from .domain import GpaKategorie, Student
from .service import StatistikState

TABELLEN_KOPF = (
    f"{'ID':<5} | {'Name':<20} | {'Email':<25} | {'Phone':<12} | {'Course':<15} | GPA"
)

KATEGORIE_TEXTE = {
    GpaKategorie.EXZELLENT: "Exzellent (8.0-10.0)",
    GpaKategorie.GUT: "Gut (6.0-7.9)",
    GpaKategorie.DURCHSCHNITT: "Durchschnitt (4.0-5.9)",
    GpaKategorie.NICHT_BESTANDEN: "Nicht bestanden (<4.0)",
}


class ConsoleStudentView:
    """
    View für die Konsole.

    Die Breite wird automatisch ermittelt anhand der breite des aktuellen Fensters.
    """

    def __init__(self, width: int | None = None) -> None:
        """
        Erstellt die View.
        - Wenn width None ist, wird die Terminal-Breite genutzt.
        - Es gibt eine Mindestbreite.
        """
        if width is None:
            width = shutil.get_terminal_size(fallback=(110, 24)).columns

        self._width = max(80, width)

    def render_titel(self, titel: str) -> None:
        """Überschrift mit Trennlinien."""
        sep = "=" * min(self._width, 60)
        print()
        print(sep)
        print(titel.center(len(sep)).rstrip())
        print(sep)

    def render_menue(self) -> None:
        """Zeigt das Hauptmenü."""
        print()
        print("╔═══════════════════════════════════════╗")
        print("║            HAUPTMENÜ                  ║")
        print("╠═══════════════════════════════════════╣")
        print("║  1) Student hinzufügen                ║")
        print("║  2) Alle Studenten anzeigen           ║")
        print("║  3) Student per ID suchen             ║")
        print("║  4) Student bearbeiten                ║")
        print("║  5) Student löschen                   ║")
        print("║  6) Statistik anzeigen                ║")
        print("║  7) Beenden                           ║")
        print("╚═══════════════════════════════════════╝")

    def prompt(self, frage: str) -> str:
        """
        Fragt den Nutzer nach Eingabe.
        """
        return input(frage)

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        print(text)

    def render_student(self, student: Student) -> None:
        """Ein einzelner Student mit Tabellenkopf."""
        print(self._build_tabelle([student], mit_summe=False))

    def render_tabelle(self, studenten: List[Student]) -> None:
        """Alle Studenten als Tabelle inkl. Anzahl."""
        if not studenten:
            print("Keine Studenten vorhanden.")
            return
        print(self._build_tabelle(studenten, mit_summe=True))

    def render_statistik(self, state: StatistikState) -> None:
        """Zeichnet die Statistik."""
        print(self._build_statistik(state))

    def _build_tabelle(self, studenten: List[Student], mit_summe: bool) -> str:
        """
        Baut die Tabelle als Text.
        Zeilen werden nicht gekürzt, damit die GPA immer sichtbar bleibt.
        """
        zeilen = [str(s) for s in studenten]
        sep = "-" * max(len(z) for z in [TABELLEN_KOPF, *zeilen])
        lines = [TABELLEN_KOPF, sep, *zeilen]

        if mit_summe:
            lines.append(sep)
            lines.append(f"Anzahl Studenten: {len(studenten)}")

        return "\n".join(lines)

    def _build_statistik(self, state: StatistikState) -> str:
        """
        Baut die Statistik als Text.
        """
        if state.anzahl == 0:
            return "Keine Studenten vorhanden."

        lines = [
            f"Anzahl Studenten: {state.anzahl}",
            f"Ø-GPA:            {self._fmt_gpa(state.durchschnitt)}",
            f"Höchste GPA:      {self._fmt_gpa(state.maximum)}",
            f"Niedrigste GPA:   {self._fmt_gpa(state.minimum)}",
            "",
            "GPA-Verteilung:",
        ]

        for kategorie in GpaKategorie:
            anzahl = state.verteilung.get(kategorie, 0)
            balken = self._balken(anzahl, state.anzahl)
            lines.append(f"  {KATEGORIE_TEXTE[kategorie]:<24} {balken} {anzahl}")

        return "\n".join(lines)

    def _balken(self, anzahl: int, gesamt: int, length: int = 20) -> str:
        """
        Erstellt einen Balken für den Anteil.
        - █ = gefüllt, ░ = leer.
        """
        anteil = anzahl / gesamt if gesamt else 0.0
        filled = int(round(anteil * length))
        return "[" + "█" * filled + "░" * (length - filled) + "]"

    def _fmt_gpa(self, gpa: Optional[float]) -> str:
        """Zwei Nachkommastellen, '-' wenn nicht vorhanden."""
        if gpa is None:
            return "-"
        return f"{gpa:.2f}"
