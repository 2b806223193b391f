"""
Tests für Einstellungen und den Einstiegspunkt.
"""
from __future__ import annotations

import builtins

import pytest

from studenten_verwaltung import config, main as main_module


@pytest.fixture(autouse=True)
def frische_settings():
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


def test_standardwerte(monkeypatch):
    monkeypatch.delenv("STUDENT_DATA_FILE", raising=False)
    monkeypatch.delenv("STUDENT_LOG_LEVEL", raising=False)

    settings = config.get_settings()
    assert settings.data_file == config.DEFAULT_DATA_FILE
    assert settings.data_file.name == "students.txt"
    assert settings.log_level == "WARNING"


def test_werte_aus_umgebung(monkeypatch, tmp_path):
    monkeypatch.setenv("STUDENT_DATA_FILE", str(tmp_path / "s.txt"))
    monkeypatch.setenv("STUDENT_LOG_LEVEL", "debug")

    settings = config.get_settings()
    assert settings.data_file == tmp_path / "s.txt"
    assert settings.log_level == "DEBUG"


def test_unbekanntes_log_level(monkeypatch):
    monkeypatch.setenv("STUDENT_LOG_LEVEL", "laut")
    assert config.get_settings().log_level == "WARNING"


def test_main_startet_und_beendet(monkeypatch, tmp_path, capsys):
    data_file = tmp_path / "students.txt"
    data_file.write_text("4|Ann|Lee|ann@x.com|1234567890|CS|9.00\n", encoding="utf-8")
    monkeypatch.setenv("STUDENT_DATA_FILE", str(data_file))

    antworten = iter(["2", "7"])
    monkeypatch.setattr(builtins, "input", lambda frage="": next(antworten))

    main_module.main()

    out = capsys.readouterr().out
    assert "Ann Lee" in out
    assert "Programm wird beendet." in out


def test_main_eof_beendet_sauber(monkeypatch, tmp_path):
    monkeypatch.setenv("STUDENT_DATA_FILE", str(tmp_path / "students.txt"))

    def kein_input(frage=""):
        raise EOFError

    monkeypatch.setattr(builtins, "input", kein_input)

    with pytest.raises(SystemExit) as exc:
        main_module.main()
    assert exc.value.code == 0
