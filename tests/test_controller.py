"""
Tests für den StudentController mit vorgegebenen Eingaben.
"""
from __future__ import annotations

import pytest

from conftest import ScriptedView, make_student
from studenten_verwaltung.controller import StudentController
from studenten_verwaltung.service import StatistikService, StudentService


def starte(service: StudentService, antworten) -> ScriptedView:
    view = ScriptedView(antworten)
    StudentController(service, StatistikService(), view).starte_app()
    return view


def test_beenden(service):
    view = starte(service, ["7"])
    assert "Programm wird beendet." in view.nachrichten


def test_ungueltige_auswahl(service):
    view = starte(service, ["abc", "9", "7"])
    assert view.nachrichten.count("Ungültige Auswahl. Bitte 1-7 wählen.") == 2


def test_hinzufuegen_mit_wiederholung(service, capsys):
    view = starte(service, [
        "1",
        "J", "Ann",            # Vorname, erster Versuch zu kurz
        "Lee",
        "a@b", "ann@x.com",    # E-Mail, erster Versuch ungültig
        "1234567890",
        "CS",
        "sehr gut", "11", "9,5",  # GPA: keine Zahl, zu groß, ok
        "7",
    ])

    s = service.find_by_id(1)
    assert s is not None
    assert s.first_name == "Ann"
    assert s.email == "ann@x.com"
    assert s.gpa == 9.5
    assert service.next_id() == 2

    text = view.alle_nachrichten()
    assert "Student-ID (automatisch): 1" in text
    assert "Bitte eine Zahl für die GPA eingeben." in text
    assert "Die GPA muss zwischen 0.0 und 10.0 liegen." in text
    assert "Student erfolgreich hinzugefügt:" in text
    assert "Ann Lee" in capsys.readouterr().out


def test_liste_leer_und_gefuellt(service, capsys):
    starte(service, ["2", "7"])
    assert "Keine Studenten vorhanden." in capsys.readouterr().out

    service.add(make_student(1))
    service.add(make_student(2, first_name="Bob"))
    starte(service, ["2", "7"])
    out = capsys.readouterr().out
    assert "Ann Lee" in out
    assert "Bob Lee" in out
    assert "Anzahl Studenten: 2" in out


def test_suche(service, capsys):
    service.add(make_student(3))
    view = starte(service, ["3", "3", "3", "4", "3", "x", "7"])

    assert "Ann Lee" in capsys.readouterr().out
    text = view.alle_nachrichten()
    assert "Student gefunden:" in text
    assert "Student mit ID 4 nicht gefunden." in text
    assert "Ungültige Eingabe. Bitte eine gültige Student-ID eingeben." in text


def test_suche_negative_id(service):
    view = starte(service, ["3", "-1", "7"])
    assert "Ungültige Student-ID. Bitte eine positive Zahl eingeben." in view.nachrichten


def test_bearbeiten_enter_behaelt_werte(service):
    service.add(make_student(1))
    starte(service, [
        "4", "1",
        "",              # Vorname behalten
        "",              # Nachname behalten
        "ann2@x.com",
        "",
        "bad/course", "Math",
        "",              # GPA behalten
        "7",
    ])

    s = service.find_by_id(1)
    assert s.first_name == "Ann"
    assert s.email == "ann2@x.com"
    assert s.course == "Math"
    assert s.gpa == 9.0


def test_bearbeiten_unbekannte_id(service):
    view = starte(service, ["4", "5", "7"])
    assert "Student mit ID 5 nicht gefunden." in view.nachrichten


@pytest.mark.parametrize("antwort", ["yes", "Y", " y "])
def test_loeschen_bestaetigt(service, antwort):
    service.add(make_student(1))
    view = starte(service, ["5", "1", antwort, "7"])
    assert service.find_by_id(1) is None
    assert "Student erfolgreich gelöscht." in view.nachrichten


@pytest.mark.parametrize("antwort", ["no", "", "ja"])
def test_loeschen_abgebrochen(service, antwort):
    service.add(make_student(1))
    view = starte(service, ["5", "1", antwort, "7"])
    assert service.find_by_id(1) is not None
    assert "Löschen abgebrochen." in view.nachrichten


def test_statistik(service, capsys):
    service.add(make_student(1, gpa=9.0))
    service.add(make_student(2, gpa=5.0))
    starte(service, ["6", "7"])
    out = capsys.readouterr().out
    assert "Anzahl Studenten: 2" in out
    assert "7.00" in out


def test_ablehnung_doppelte_id(service):
    service.add(make_student(1))
    view = ScriptedView([])
    controller = StudentController(service, StatistikService(), view)

    controller._zeige_ablehnung(make_student(1), neu=True)
    controller._zeige_ablehnung(make_student(1, email="kaputt"), neu=True)

    assert view.nachrichten == [
        "Student-ID 1 ist bereits vergeben.",
        "Ungültige Felder: email",
    ]


def test_warnung_bei_speicherfehler():
    class KaputtesRepo:
        def lade(self):
            return []

        def speichere(self, studenten):
            raise OSError("schreibgeschützt")

    service = StudentService(KaputtesRepo())
    view = starte(service, [
        "1", "Ann", "Lee", "ann@x.com", "1234567890", "CS", "9", "7",
    ])
    assert service.find_by_id(1) is not None
    assert any(n.startswith("WARNUNG") for n in view.nachrichten)
