"""
uni_roster package

Dieses Paket implementiert ein Personenverzeichnis einer Hochschule als Konsolen-Anwendung:
Studenten und Lehrkräfte im Speicher, Laden aus Textdateien, Suche und seitenweises Blättern.

Schichtenarchitektur:
- domain.py: Personen + Enums
- parsing.py: Zeilen-Codec
- repository.py: In-Memory-Repository (University)
- pagination.py: Blätter-Zustand
- persistence.py: Laden aus Textdateien
- view.py: Konsolen-Ausgabe
- controller.py: Menü-Orchestrierung
- config.py: Konfiguration
- main.py: Einstiegspunkt
"""
