#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
KVK Layout-Definitionen

Tag-Tabelle der Krankenversichertenkarte (KVK) bzw. PKV-Card.
Jedes Datenfeld ist genau einem Ein-Byte-Tag zugeordnet.

Referenz: Technische Spezifikation der Krankenversichertenkarte (KBV)
"""

from typing import TypedDict, List, Dict, Optional


class TagDefinition(TypedDict):
    """Definition eines KVK-Datenfeldes."""
    tag: int
    name: str
    label: str


KVK_TAGS: List[TagDefinition] = [
    {"tag": 0x80, "name": "krankenkassen_name", "label": "Krankenkassenname"},
    {"tag": 0x81, "name": "krankenkassen_nummer", "label": "Krankenkassennummer"},
    {"tag": 0x8F, "name": "vertragskassen_nummer", "label": "Vertragskassennummer (WOP)"},
    {"tag": 0x82, "name": "versicherten_nummer", "label": "Versichertennummer"},
    {"tag": 0x83, "name": "versicherten_status", "label": "Versichertenstatus"},
    {"tag": 0x90, "name": "status_ergaenzung", "label": "Statusergänzung"},
    {"tag": 0x84, "name": "titel", "label": "Titel"},
    {"tag": 0x85, "name": "vorname", "label": "Vorname"},
    {"tag": 0x86, "name": "namenszusatz_vorsatzwort", "label": "Namenszusatz / Vorsatzwort"},
    {"tag": 0x87, "name": "familienname", "label": "Familienname"},
    {"tag": 0x88, "name": "geburtsdatum", "label": "Geburtsdatum"},
    {"tag": 0x89, "name": "strassenname_hausnummer", "label": "Straßenname und Hausnummer"},
    {"tag": 0x8A, "name": "wohnsitzlaendercode", "label": "Wohnsitzländercode"},
    {"tag": 0x8B, "name": "postleitzahl", "label": "Postleitzahl"},
    {"tag": 0x8C, "name": "ortsname", "label": "Ortsname"},
    {"tag": 0x8D, "name": "gueltigkeitsdatum", "label": "Gültigkeitsdatum"},
]

_TAGS_BY_TAG: Dict[int, TagDefinition] = {t["tag"]: t for t in KVK_TAGS}


def get_tag_definition(tag: int) -> Optional[TagDefinition]:
    """Gibt die Felddefinition zu einem Tag zurück oder None."""
    return _TAGS_BY_TAG.get(tag)
