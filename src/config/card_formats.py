#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Feste Formatkonstanten fuer KVK- und eGK-Rohdaten.

Die Werte sind durch die Kartenformate vorgegeben und werden bewusst
nicht ueber Einstellungen konfigurierbar gemacht.
"""

from typing import FrozenSet


# =============================================================================
# KVK / PKV-Card (TLV-Format)
# =============================================================================

# Erstes Byte der Antwort, bei dem ein Transport-Header vorangestellt ist
KVK_HEADER_MARKERS: FrozenSet[int] = frozenset({0x82, 0x92, 0xA2})

# Laenge dieses Headers in Byte
KVK_HEADER_LENGTH = 30

# Statuswort (SW1 SW2) am Ende jeder Antwort
KVK_STATUS_LENGTH = 2

# Struktur-Tag (Template), der selbst kein Datenfeld ist
KVK_STRUCTURE_TAG = 0x60


# =============================================================================
# eGK (komprimierte XML-Dokumente)
# =============================================================================

# Die ersten 2 Bytes enthalten die Laenge der Nutzdaten (Big Endian)
EGK_LENGTH_PREFIX_SIZE = 2

# Zeichenkodierung der entpackten XML-Dokumente
EGK_ENCODING = "iso-8859-15"

# Wurzelelemente der Versichertenstammdaten
EGK_PD_ROOT = "UC_PersoenlicheVersichertendatenXML"
EGK_GVD_ROOT = "UC_GeschuetzteVersichertendatenXML"
