"""
studenten_verwaltung package

Dieses Paket implementiert eine Konsolen-Anwendung zur Verwaltung von
Studentendaten (Anlegen, Suchen, Ändern, Löschen, Auflisten, Statistik).

Schichtenarchitektur:
- domain.py: Entität Student + Enum für GPA-Kategorien
- validation.py: Prüfregeln für einzelne Felder
- persistence.py: Speicherung als Textdatei (eine Zeile pro Student)
- service.py: StudentService (Datenhaltung) + Statistik
- view.py: Ausgabe in der Konsole
- controller.py: Menü-Orchestrierung
- config.py: Einstellungen + Logging
- main.py: Einstiegspunkt
"""

__version__ = "1.0.0"
