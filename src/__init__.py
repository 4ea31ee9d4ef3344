# KVK/eGK Kartenleser - Hauptpaket
"""
Dekodierung der Versichertendaten von Krankenversichertenkarte (KVK),
PKV-Card und elektronischer Gesundheitskarte (eGK).

Struktur:
- src/config/     - Formatkonstanten und Logging
- src/layouts/    - KVK-Tag-Tabelle, eGK-Element-Tabellen
- src/parser/     - TLV-Parser (KVK), Entpacken/XML (eGK), Fehlerklassen
- src/domain/     - KvkResult, EgkResult, CardResult
"""

__version__ = "0.1.0"
