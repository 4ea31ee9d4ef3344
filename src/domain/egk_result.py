#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
eGK Ergebnis

EgkResult dekodiert die Versichertenstammdaten einer eGK und bietet
flache Zugriffe auf die verschachtelten Personendaten.
"""

import logging
from typing import Optional

from config.card_formats import EGK_PD_ROOT, EGK_GVD_ROOT
from parser.egk_parser import load_document
from .egk_mapper import map_pd, map_gvd
from .egk_models import (
    PersoenlicheVersichertendaten, GeschuetzteVersichertendaten,
    Versicherter, Person, StrassenAdresse
)


logger = logging.getLogger(__name__)


def decode_pd(data: bytes) -> PersoenlicheVersichertendaten:
    """Rohdaten -> Persönliche Versichertendaten (PD)."""
    return map_pd(load_document(data, EGK_PD_ROOT))


def decode_gvd(data: bytes) -> GeschuetzteVersichertendaten:
    """Rohdaten -> Geschützte Versichertendaten (GVD)."""
    return map_gvd(load_document(data, EGK_GVD_ROOT))


class EgkResult:
    """
    Ausgelesene Daten einer elektronischen Gesundheitskarte (eGK).

    Usage:
        result = EgkResult(pd_bytes)
        print(result.nachname, result.geburtsdatum)
    """

    def __init__(self, pd_data: bytes, gvd_data: Optional[bytes] = None):
        """
        Dekodiert die Rohdaten der eGK.

        Args:
            pd_data: Rohdaten der Persönlichen Versichertendaten (PD)
            gvd_data: Optionale Rohdaten der Geschützten Versichertendaten (GVD)

        Raises:
            CardDataError: wenn eines der Dokumente nicht dekodiert werden kann
        """
        self.persoenliche_versichertendaten = decode_pd(pd_data)
        self.geschuetzte_versichertendaten: Optional[GeschuetzteVersichertendaten] = (
            decode_gvd(gvd_data) if gvd_data is not None else None
        )
        logger.info(
            f"eGK dekodiert (PD-Version {self.persoenliche_versichertendaten.cdm_version}, "
            f"GVD {'vorhanden' if self.geschuetzte_versichertendaten else 'nicht vorhanden'})"
        )

    # Zwischenknoten ------------------------------------------------------

    @property
    def versicherter(self) -> Optional[Versicherter]:
        return self.persoenliche_versichertendaten.versicherter

    @property
    def person(self) -> Optional[Person]:
        versicherter = self.versicherter
        return versicherter.person if versicherter else None

    @property
    def strassen_adresse(self) -> Optional[StrassenAdresse]:
        person = self.person
        return person.strassen_adresse if person else None

    # Blattfelder ---------------------------------------------------------

    @property
    def versicherten_id(self) -> Optional[str]:
        versicherter = self.versicherter
        return versicherter.versicherten_id if versicherter else None

    @property
    def titel(self) -> Optional[str]:
        return self.person.titel if self.person else None

    @property
    def vorname(self) -> Optional[str]:
        return self.person.vorname if self.person else None

    @property
    def nachname(self) -> Optional[str]:
        return self.person.nachname if self.person else None

    @property
    def geschlecht(self) -> Optional[str]:
        return self.person.geschlecht if self.person else None

    @property
    def namenszusatz(self) -> Optional[str]:
        return self.person.namenszusatz if self.person else None

    @property
    def vorsatzwort(self) -> Optional[str]:
        return self.person.vorsatzwort if self.person else None

    @property
    def geburtsdatum(self) -> Optional[str]:
        return self.person.geburtsdatum if self.person else None

    @property
    def strasse(self) -> Optional[str]:
        adresse = self.strassen_adresse
        return adresse.strasse if adresse else None

    @property
    def hausnummer(self) -> Optional[str]:
        adresse = self.strassen_adresse
        return adresse.hausnummer if adresse else None

    @property
    def postleitzahl(self) -> Optional[str]:
        adresse = self.strassen_adresse
        return adresse.postleitzahl if adresse else None

    @property
    def ort(self) -> Optional[str]:
        adresse = self.strassen_adresse
        return adresse.ort if adresse else None

    @property
    def wohnsitzlaendercode(self) -> Optional[str]:
        adresse = self.strassen_adresse
        if adresse is None or adresse.land is None:
            return None
        return adresse.land.wohnsitzlaendercode

    @property
    def besondere_personengruppe(self) -> Optional[str]:
        gvd = self.geschuetzte_versichertendaten
        return gvd.besondere_personengruppe if gvd else None

    def __str__(self) -> str:
        return f"{self.vorname} {self.nachname} ({self.versicherten_id})"
