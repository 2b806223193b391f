"""
Start ohne Installation: python run.py

Nimmt src/ in den Suchpfad auf und ruft studenten_verwaltung.main.main() auf.
Nach "pip install -e ." reicht der Befehl studenten-verwaltung.
"""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from studenten_verwaltung.main import main

if __name__ == "__main__":
    main()
