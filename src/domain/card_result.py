#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Kartenergebnis

CardResult vereint die Daten einer KVK/PKV-Card und einer eGK zu einer
gemeinsamen Sicht. Für jedes Feld gilt:

1. Wert aus der KVK, falls vorhanden
2. sonst Wert aus der eGK
3. sonst None

Ausnahme: Das Geschlecht gibt es nur auf der eGK.
"""

import logging
from typing import Optional

from parser.errors import CardDataError
from .kvk_models import KvkResult
from .egk_result import EgkResult


logger = logging.getLogger(__name__)


def join_values(*values: Optional[str]) -> Optional[str]:
    """
    Verbindet die nicht-leeren Werte mit einem Leerzeichen.

    Returns:
        Der verbundene Text oder None, wenn kein Wert übrig bleibt
    """
    non_empty = [v for v in values if v]
    return " ".join(non_empty) if non_empty else None


def _first_present(*values: Optional[str]) -> Optional[str]:
    for value in values:
        if value is not None:
            return value
    return None


class CardResult:
    """
    Gemeinsame Sicht auf die ausgelesenen Kartendaten.

    Die Eigenschaften werden bei jedem Zugriff neu berechnet.
    """

    def __init__(self, egk_result: Optional[EgkResult] = None, kvk_result: Optional[KvkResult] = None):
        self.egk_result = egk_result
        self.kvk_result = kvk_result

    @property
    def success(self) -> bool:
        """Ob das Auslesen für eine eGK oder eine KVK/PKV-Card erfolgreich war."""
        return self.egk_result is not None or self.kvk_result is not None

    def _kvk(self, name: str) -> Optional[str]:
        return getattr(self.kvk_result, name) if self.kvk_result is not None else None

    def _egk(self, name: str) -> Optional[str]:
        return getattr(self.egk_result, name) if self.egk_result is not None else None

    @property
    def versicherten_id(self) -> Optional[str]:
        """Der 10-stellige unveränderliche Teil der Krankenversichertennummer."""
        return _first_present(self._kvk("versicherten_nummer"), self._egk("versicherten_id"))

    @property
    def titel(self) -> Optional[str]:
        """Akademische Grade der Person, z.B. "Dr."."""
        return _first_present(self._kvk("titel"), self._egk("titel"))

    @property
    def vorname(self) -> Optional[str]:
        return _first_present(self._kvk("vorname"), self._egk("vorname"))

    @property
    def nachname(self) -> Optional[str]:
        return _first_present(self._kvk("familienname"), self._egk("nachname"))

    @property
    def geschlecht(self) -> Optional[str]:
        """"M" = männlich, "W" = weiblich (nur eGK)."""
        return self._egk("geschlecht")

    @property
    def namenszusatz_vorsatzwort(self) -> Optional[str]:
        """Namenszusätze der Person, z.B. "Freiherr von"."""
        return _first_present(
            self._kvk("namenszusatz_vorsatzwort"),
            join_values(self._egk("namenszusatz"), self._egk("vorsatzwort")),
        )

    @property
    def geburtsdatum(self) -> Optional[str]:
        """Geburtsdatum im Format YYYYMMDD."""
        return _first_present(self._kvk("geburtsdatum"), self._egk("geburtsdatum"))

    @property
    def strasse_hausnummer(self) -> Optional[str]:
        return _first_present(
            self._kvk("strassenname_hausnummer"),
            join_values(self._egk("strasse"), self._egk("hausnummer")),
        )

    @property
    def wohnsitzlaendercode(self) -> Optional[str]:
        return _first_present(self._kvk("wohnsitzlaendercode"), self._egk("wohnsitzlaendercode"))

    @property
    def postleitzahl(self) -> Optional[str]:
        return _first_present(self._kvk("postleitzahl"), self._egk("postleitzahl"))

    @property
    def ort(self) -> Optional[str]:
        return _first_present(self._kvk("ortsname"), self._egk("ort"))

    def __str__(self) -> str:
        if not self.success:
            return "CardResult(nicht erfolgreich)"
        quelle = "KVK" if self.kvk_result is not None else "eGK"
        return f"CardResult({self.vorname} {self.nachname}, Quelle={quelle})"


def read_card_result(
    kvk_data: Optional[bytes] = None,
    pd_data: Optional[bytes] = None,
    gvd_data: Optional[bytes] = None
) -> CardResult:
    """
    Dekodiert alle übergebenen Rohdaten und liefert das gemeinsame Ergebnis.

    Ein Dekodierfehler einer Quelle ist nicht fatal: die Quelle gilt dann
    als nicht vorhanden. Scheitern alle Quellen, ist success == False.
    Scheitern nur die GVD, bleibt das eGK-Ergebnis ohne GVD erhalten.

    Args:
        kvk_data: Rohantwort einer KVK/PKV-Card
        pd_data: Rohdaten der Persönlichen Versichertendaten einer eGK
        gvd_data: Rohdaten der Geschützten Versichertendaten einer eGK

    Returns:
        CardResult
    """
    kvk_result: Optional[KvkResult] = None
    egk_result: Optional[EgkResult] = None

    if kvk_data is not None:
        try:
            kvk_result = KvkResult(kvk_data)
        except CardDataError as e:
            logger.warning(f"KVK-Daten nicht lesbar: {e}")

    if pd_data is not None:
        try:
            egk_result = EgkResult(pd_data, gvd_data)
        except CardDataError as e:
            if gvd_data is None:
                logger.warning(f"eGK-Daten nicht lesbar: {e}")
            else:
                logger.warning(f"eGK-Daten (PD/GVD) nicht lesbar, versuche PD allein: {e}")
                try:
                    egk_result = EgkResult(pd_data)
                except CardDataError as e2:
                    logger.warning(f"eGK-Daten nicht lesbar: {e2}")

    result = CardResult(egk_result=egk_result, kvk_result=kvk_result)
    if result.success:
        logger.info(f"Karte gelesen: {result}")
    else:
        logger.warning("Keine Kartendaten lesbar")
    return result
