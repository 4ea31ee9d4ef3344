#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
eGK Domain-Modelle

Fachliche Klassen für die Versichertenstammdaten der eGK:
- PersoenlicheVersichertendaten (PD)
- GeschuetzteVersichertendaten (GVD)

Hierarchie der PD:
PersoenlicheVersichertendaten
  └── Versicherter
        └── Person
              ├── StrassenAdresse ── Land
              └── PostfachAdresse ── Land

Alle Felder sind optional: None bedeutet "nicht auf der Karte vorhanden",
"" bedeutet "vorhanden, aber leer".
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Persönliche Versichertendaten (PD)
# =============================================================================

@dataclass(frozen=True)
class Land:
    """Länderangabe einer Adresse."""
    wohnsitzlaendercode: Optional[str] = None


@dataclass(frozen=True)
class StrassenAdresse:
    """Straßenadresse der Person."""
    postleitzahl: Optional[str] = None
    ort: Optional[str] = None
    land: Optional[Land] = None
    strasse: Optional[str] = None
    hausnummer: Optional[str] = None
    anschriftenzusatz: Optional[str] = None


@dataclass(frozen=True)
class PostfachAdresse:
    """Postfachadresse der Person."""
    postleitzahl: Optional[str] = None
    ort: Optional[str] = None
    postfach: Optional[str] = None
    land: Optional[Land] = None


@dataclass(frozen=True)
class Person:
    """
    Personendaten des Versicherten.

    - geburtsdatum: Format YYYYMMDD (ISO-8601)
    - geschlecht: "M" = männlich, "W" = weiblich (5.2 zusätzlich "X", "D")
    """
    geburtsdatum: Optional[str] = None
    vorname: Optional[str] = None
    nachname: Optional[str] = None
    geschlecht: Optional[str] = None
    vorsatzwort: Optional[str] = None
    namenszusatz: Optional[str] = None
    titel: Optional[str] = None
    strassen_adresse: Optional[StrassenAdresse] = None
    postfach_adresse: Optional[PostfachAdresse] = None


@dataclass(frozen=True)
class Versicherter:
    """Der Versicherte mit seiner Versicherten-ID."""
    # 10-stelliger unveränderlicher Teil der Krankenversichertennummer
    versicherten_id: Optional[str] = None
    person: Optional[Person] = None


@dataclass(frozen=True)
class PersoenlicheVersichertendaten:
    """Persönliche Versichertendaten (PD) einer eGK."""
    versicherter: Optional[Versicherter] = None
    cdm_version: Optional[str] = None


# =============================================================================
# Geschützte Versichertendaten (GVD)
# =============================================================================

@dataclass(frozen=True)
class Zuzahlungsstatus:
    """Befreiung nach § 62 SGB V (nur für Berechtigte lesbar)."""
    status: Optional[str] = None
    gueltig_bis: Optional[str] = None


@dataclass(frozen=True)
class Selektivvertraege:
    """
    Ärztliche/zahnärztliche Selektivverträge (nur 5.2).

    1 = liegt vor, 0 = liegt nicht vor, 9 = Kennzeichen wird nicht genutzt
    """
    aerztlich: Optional[str] = None
    zahnaerztlich: Optional[str] = None
    art: Optional[str] = None


@dataclass(frozen=True)
class RuhenderLeistungsanspruch:
    """Ruhender Leistungsanspruch nach § 16 SGB V (nur 5.2)."""
    beginn: Optional[str] = None
    ende: Optional[str] = None
    # 1 = vollständig, 2 = eingeschränkt
    art_des_ruhens: Optional[str] = None


@dataclass(frozen=True)
class GeschuetzteVersichertendaten:
    """Geschützte Versichertendaten (GVD) einer eGK."""
    zuzahlungsstatus: Optional[Zuzahlungsstatus] = None
    # 4 = BSHG, 6 = BVG, 7/8 = SVA, 9 = AsylbLG
    besondere_personengruppe: Optional[str] = None
    dmp_kennzeichnung: Optional[str] = None
    selektivvertraege: Optional[Selektivvertraege] = None
    ruhender_leistungsanspruch: Optional[RuhenderLeistungsanspruch] = None
    cdm_version: Optional[str] = None
