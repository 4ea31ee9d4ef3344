#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
eGK Domain Mapper

Mapping der normalisierten XML-Bäume auf die eGK-Domain-Objekte.
Fehlende Zwischenknoten ergeben None, nie einen Fehler.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Optional

from layouts.egk_layouts import (
    VERSICHERTER_ELEMENTS, PERSON_ELEMENTS, STRASSEN_ADRESSE_ELEMENTS,
    POSTFACH_ADRESSE_ELEMENTS, LAND_ELEMENTS, GVD_ELEMENTS,
    ZUZAHLUNGSSTATUS_ELEMENTS, SELEKTIVVERTRAEGE_ELEMENTS,
    RUHENDER_LEISTUNGSANSPRUCH_ELEMENTS, CDM_VERSION_ATTRIBUTE
)
from parser.egk_parser import find_child, read_fields
from .egk_models import (
    PersoenlicheVersichertendaten, Versicherter, Person, StrassenAdresse,
    PostfachAdresse, Land, GeschuetzteVersichertendaten, Zuzahlungsstatus,
    Selektivvertraege, RuhenderLeistungsanspruch
)


logger = logging.getLogger(__name__)


# =============================================================================
# PD
# =============================================================================

def map_land(element: Optional[ET.Element]) -> Optional[Land]:
    if element is None:
        return None
    return Land(**read_fields(element, LAND_ELEMENTS))


def map_strassen_adresse(element: Optional[ET.Element]) -> Optional[StrassenAdresse]:
    if element is None:
        return None
    return StrassenAdresse(
        land=map_land(find_child(element, "Land")),
        **read_fields(element, STRASSEN_ADRESSE_ELEMENTS)
    )


def map_postfach_adresse(element: Optional[ET.Element]) -> Optional[PostfachAdresse]:
    if element is None:
        return None
    return PostfachAdresse(
        land=map_land(find_child(element, "Land")),
        **read_fields(element, POSTFACH_ADRESSE_ELEMENTS)
    )


def map_person(element: Optional[ET.Element]) -> Optional[Person]:
    if element is None:
        return None
    return Person(
        strassen_adresse=map_strassen_adresse(find_child(element, "StrassenAdresse")),
        postfach_adresse=map_postfach_adresse(find_child(element, "PostfachAdresse")),
        **read_fields(element, PERSON_ELEMENTS)
    )


def map_versicherter(element: Optional[ET.Element]) -> Optional[Versicherter]:
    if element is None:
        return None
    return Versicherter(
        person=map_person(find_child(element, "Person")),
        **read_fields(element, VERSICHERTER_ELEMENTS)
    )


def map_pd(root: ET.Element) -> PersoenlicheVersichertendaten:
    """
    Mappt das Wurzelelement UC_PersoenlicheVersichertendatenXML.

    Args:
        root: Das namespace-freie Wurzelelement

    Returns:
        PersoenlicheVersichertendaten-Objekt
    """
    pd = PersoenlicheVersichertendaten(
        versicherter=map_versicherter(find_child(root, "Versicherter")),
        cdm_version=root.get(CDM_VERSION_ATTRIBUTE),
    )
    if pd.versicherter is None:
        logger.warning("PD ohne Element 'Versicherter'")
    return pd


# =============================================================================
# GVD
# =============================================================================

def map_gvd(root: ET.Element) -> GeschuetzteVersichertendaten:
    """
    Mappt das Wurzelelement UC_GeschuetzteVersichertendatenXML.

    Die besondere Personengruppe wird versionsabhängig aus
    'Besondere_Personengruppe' (5.1) oder 'BesonderePersonengruppe' (5.2) gelesen.
    """
    zuzahlung = find_child(root, "Zuzahlungsstatus")
    selektiv = find_child(root, "Selektivvertraege")
    ruhend = find_child(root, "RuhenderLeistungsanspruch")

    return GeschuetzteVersichertendaten(
        zuzahlungsstatus=(
            Zuzahlungsstatus(**read_fields(zuzahlung, ZUZAHLUNGSSTATUS_ELEMENTS))
            if zuzahlung is not None else None
        ),
        selektivvertraege=(
            Selektivvertraege(**read_fields(selektiv, SELEKTIVVERTRAEGE_ELEMENTS))
            if selektiv is not None else None
        ),
        ruhender_leistungsanspruch=(
            RuhenderLeistungsanspruch(**read_fields(ruhend, RUHENDER_LEISTUNGSANSPRUCH_ELEMENTS))
            if ruhend is not None else None
        ),
        cdm_version=root.get(CDM_VERSION_ATTRIBUTE),
        **read_fields(root, GVD_ELEMENTS)
    )
