#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Fehlerklassen fuer das Dekodieren von Kartendaten.

Jeder dieser Fehler bricht den jeweiligen Dekodiervorgang komplett ab,
es wird nie ein teilweise gefuellter Datensatz zurueckgegeben.
"""

from typing import Optional


class CardDataError(Exception):
    """Basisklasse fuer alle Fehler beim Dekodieren von Kartendaten."""


class OutOfBoundsError(CardDataError):
    """Wird ausgeloest wenn ueber das Ende der Rohdaten hinaus gelesen wird."""
    def __init__(self, offset: int, size: int):
        self.offset = offset
        self.size = size
        super().__init__(f"Lesezugriff auf Offset {offset} ausserhalb der Daten ({size} Bytes)")


class FormatError(CardDataError):
    """Laengenangabe oder Rahmung der Rohdaten ist ungueltig."""


class DecompressionError(CardDataError):
    """Die komprimierten Nutzdaten sind beschaedigt oder unvollstaendig."""


class StructuralParseError(CardDataError):
    """Das entpackte XML-Dokument entspricht nicht der erwarteten Struktur."""
    def __init__(self, message: str, root_tag: Optional[str] = None):
        self.root_tag = root_tag
        super().__init__(message)
