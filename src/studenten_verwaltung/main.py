"""
Entry point für die Studentenverwaltung.
Dieses Modul startet die Anwendung.
"""

from __future__ import annotations

import logging
import sys

from .config import get_settings, setup_logging
from .controller import StudentController
from .persistence import TextStudentRepository
from .service import StatistikService, StudentService
from .view import ConsoleStudentView

logger = logging.getLogger(__name__)


def main() -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Einstellungen lesen, Logging einrichten
    - Komponenten erstellen (Daten werden dabei geladen)
    - Controller starten
    """
    try:
        settings = get_settings()
        setup_logging(settings.log_level)
        logger.info("Datendatei: %s", settings.data_file)

        # Bausteine der App erstellen.
        # Fehlt die Datei, startet der Service leer.
        repo = TextStudentRepository(settings.data_file)
        service = StudentService(repo)
        view = ConsoleStudentView()
        controller = StudentController(service, StatistikService(), view)

        # App starten.
        controller.starte_app()

    except (KeyboardInterrupt, EOFError):
        # Sauberer Abbruch per Strg+C oder Ende der Eingabe.
        print("\nAnwendung beendet.")
        sys.exit(0)

    except Exception as e:
        # Unerwarteter Fehler.
        logger.exception("Unerwarteter Fehler")
        print(f"\nFEHLER: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
