#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
KVK Domain-Modell

KvkResult stellt die Daten einer Krankenversichertenkarte (KVK) bzw.
PKV-Card über benannte Eigenschaften bereit. Nicht vorhandene Tags
ergeben None.
"""

from typing import Dict, Optional

from layouts.kvk_layouts import KVK_TAGS
from parser.kvk_parser import decode_kvk


class KvkResult:
    """Ausgelesene Daten einer KVK/PKV-Card."""

    def __init__(self, data: bytes):
        """
        Dekodiert die Rohantwort der Karte.

        Args:
            data: Rohantwort inkl. Statuswort (2 Bytes am Ende)

        Raises:
            CardDataError: wenn die Rohdaten nicht dekodiert werden können
        """
        self._values: Dict[int, str] = decode_kvk(data)

    def __getitem__(self, tag: int) -> Optional[str]:
        return self._values.get(tag)

    def get(self, tag: int) -> Optional[str]:
        """Wert zu einem Tag oder None."""
        return self._values.get(tag)

    def __contains__(self, tag: int) -> bool:
        return tag in self._values

    def __len__(self) -> int:
        return len(self._values)

    @property
    def tags(self):
        """Alle vorhandenen Tags."""
        return frozenset(self._values)

    @property
    def krankenkassen_name(self) -> Optional[str]:
        return self[0x80]

    @property
    def krankenkassen_nummer(self) -> Optional[str]:
        return self[0x81]

    @property
    def vertragskassen_nummer(self) -> Optional[str]:
        return self[0x8F]

    @property
    def versicherten_nummer(self) -> Optional[str]:
        return self[0x82]

    @property
    def versicherten_status(self) -> Optional[str]:
        return self[0x83]

    @property
    def status_ergaenzung(self) -> Optional[str]:
        return self[0x90]

    @property
    def titel(self) -> Optional[str]:
        return self[0x84]

    @property
    def vorname(self) -> Optional[str]:
        return self[0x85]

    @property
    def namenszusatz_vorsatzwort(self) -> Optional[str]:
        return self[0x86]

    @property
    def familienname(self) -> Optional[str]:
        return self[0x87]

    @property
    def geburtsdatum(self) -> Optional[str]:
        return self[0x88]

    @property
    def strassenname_hausnummer(self) -> Optional[str]:
        return self[0x89]

    @property
    def wohnsitzlaendercode(self) -> Optional[str]:
        return self[0x8A]

    @property
    def postleitzahl(self) -> Optional[str]:
        return self[0x8B]

    @property
    def ortsname(self) -> Optional[str]:
        return self[0x8C]

    @property
    def gueltigkeitsdatum(self) -> Optional[str]:
        return self[0x8D]

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Alle bekannten Felder als Dictionary Feldname -> Wert (Kopie)."""
        return {t["name"]: self._values.get(t["tag"]) for t in KVK_TAGS}

    def __str__(self) -> str:
        return f"{self.vorname} {self.familienname}, {self.krankenkassen_name}"

    def __repr__(self) -> str:
        return f"KvkResult({len(self._values)} Felder)"
