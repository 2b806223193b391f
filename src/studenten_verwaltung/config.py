"""
Konfiguration und Logging.

Die Einstellungen kommen aus Umgebungsvariablen, damit Controller und
Service nicht selbst os.environ lesen:
- STUDENT_DATA_FILE: Pfad der Datendatei (Standard: data/students.txt im Repo-Root)
- STUDENT_LOG_LEVEL: Log-Level (Standard: WARNING)
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

# .../src/studenten_verwaltung/config.py -> Repo-Root
REPO_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_DATA_FILE = REPO_ROOT / "data" / "students.txt"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    """Typisierte Sicht auf die Umgebungsvariablen."""

    data_file: Path
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Liest die aktuelle Umgebung und baut ein Settings-Objekt."""
    def _level(value: str | None) -> str:
        if not value:
            return DEFAULT_LOG_LEVEL
        name = value.strip().upper()
        return name if isinstance(logging.getLevelName(name), int) else DEFAULT_LOG_LEVEL

    raw_path = (os.getenv("STUDENT_DATA_FILE") or "").strip()

    return Settings(
        data_file=Path(raw_path).expanduser() if raw_path else DEFAULT_DATA_FILE,
        log_level=_level(os.getenv("STUDENT_LOG_LEVEL")),
    )


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """
    Richtet das Logging ein.
    Ausgabe geht nach stderr, damit sie sich nicht mit dem Menü auf stdout mischt.
    """
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
