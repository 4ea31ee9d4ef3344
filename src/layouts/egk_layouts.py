#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
eGK Layout-Definitionen

Element-Tabellen der Versichertenstammdaten (VSD) der elektronischen
Gesundheitskarte. Zwei Schema-Versionen sind im Umlauf (5.1 und 5.2);
sie unterscheiden sich im XML-Namespace und bei einzelnen Elementnamen.

WICHTIG:
- `elements` ist eine geordnete Liste alternativer Elementnamen.
  Das erste vorhandene Element gewinnt (5.1 vor 5.2).
- Verschachtelte Knoten (z.B. Person, StrassenAdresse) stehen nicht in
  diesen Tabellen, sie werden im Mapper explizit aufgeloest.
"""

from typing import TypedDict, List


class ElementDefinition(TypedDict):
    """Definition eines Blattfeldes im XML-Dokument."""
    name: str
    label: str
    elements: List[str]


# =============================================================================
# Persönliche Versichertendaten (PD)
# =============================================================================

VERSICHERTER_ELEMENTS: List[ElementDefinition] = [
    {"name": "versicherten_id", "label": "Versicherten-ID", "elements": ["Versicherten_ID"]},
]

PERSON_ELEMENTS: List[ElementDefinition] = [
    {"name": "geburtsdatum", "label": "Geburtsdatum", "elements": ["Geburtsdatum"]},
    {"name": "vorname", "label": "Vorname", "elements": ["Vorname"]},
    {"name": "nachname", "label": "Nachname", "elements": ["Nachname"]},
    {"name": "geschlecht", "label": "Geschlecht", "elements": ["Geschlecht"]},
    {"name": "vorsatzwort", "label": "Vorsatzwort", "elements": ["Vorsatzwort"]},
    {"name": "namenszusatz", "label": "Namenszusatz", "elements": ["Namenszusatz"]},
    {"name": "titel", "label": "Titel", "elements": ["Titel"]},
]

STRASSEN_ADRESSE_ELEMENTS: List[ElementDefinition] = [
    {"name": "postleitzahl", "label": "Postleitzahl", "elements": ["Postleitzahl"]},
    {"name": "ort", "label": "Ort", "elements": ["Ort"]},
    {"name": "strasse", "label": "Straße", "elements": ["Strasse"]},
    {"name": "hausnummer", "label": "Hausnummer", "elements": ["Hausnummer"]},
    {"name": "anschriftenzusatz", "label": "Anschriftenzusatz", "elements": ["Anschriftenzusatz"]},
]

POSTFACH_ADRESSE_ELEMENTS: List[ElementDefinition] = [
    {"name": "postleitzahl", "label": "Postleitzahl", "elements": ["Postleitzahl"]},
    {"name": "ort", "label": "Ort", "elements": ["Ort"]},
    {"name": "postfach", "label": "Postfach", "elements": ["Postfach"]},
]

LAND_ELEMENTS: List[ElementDefinition] = [
    {"name": "wohnsitzlaendercode", "label": "Wohnsitzländercode", "elements": ["Wohnsitzlaendercode"]},
]


# =============================================================================
# Geschützte Versichertendaten (GVD)
# =============================================================================

GVD_ELEMENTS: List[ElementDefinition] = [
    # 5.1: Besondere_Personengruppe, 5.2: BesonderePersonengruppe
    {"name": "besondere_personengruppe", "label": "Besondere Personengruppe",
     "elements": ["Besondere_Personengruppe", "BesonderePersonengruppe"]},
    {"name": "dmp_kennzeichnung", "label": "DMP-Kennzeichnung", "elements": ["DMP_Kennzeichnung"]},
]

ZUZAHLUNGSSTATUS_ELEMENTS: List[ElementDefinition] = [
    {"name": "status", "label": "Zuzahlungsstatus", "elements": ["Status"]},
    {"name": "gueltig_bis", "label": "Gültig bis", "elements": ["Gueltig_bis"]},
]

SELEKTIVVERTRAEGE_ELEMENTS: List[ElementDefinition] = [
    {"name": "aerztlich", "label": "Ärztlicher Selektivvertrag", "elements": ["Aerztlich"]},
    {"name": "zahnaerztlich", "label": "Zahnärztlicher Selektivvertrag", "elements": ["Zahnaerztlich"]},
    {"name": "art", "label": "Art", "elements": ["Art"]},
]

RUHENDER_LEISTUNGSANSPRUCH_ELEMENTS: List[ElementDefinition] = [
    {"name": "beginn", "label": "Beginn", "elements": ["Beginn"]},
    {"name": "ende", "label": "Ende", "elements": ["Ende"]},
    {"name": "art_des_ruhens", "label": "Art des Ruhens", "elements": ["ArtDesRuhens"]},
]

# Attribut mit der Schema-Version am Wurzelelement
CDM_VERSION_ATTRIBUTE = "CDM_VERSION"
