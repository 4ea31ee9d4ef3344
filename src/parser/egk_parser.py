#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
eGK Parser

Dekodiert die Versichertenstammdaten einer elektronischen Gesundheitskarte.
Aufbau der Rohdaten:

    [Laenge (2 Bytes, Big Endian)] [gzip-komprimiertes XML, ISO-8859-15]

Ablauf:
1. extract_payload():   Laengenpraefix auswerten, Nutzdaten ausschneiden
2. decompress():        gzip entpacken
3. decode_text():       ISO-8859-15 dekodieren
4. parse_document():    XML parsen, Namespaces entfernen, Wurzel pruefen

Die Schema-Versionen 5.1 und 5.2 deklarieren unterschiedliche Namespaces
bei kompatibler Struktur. Deshalb werden alle Namespaces vor dem
Strukturabgleich entfernt.
"""

import gzip
import io
import logging
import zlib
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional

from config.card_formats import EGK_LENGTH_PREFIX_SIZE, EGK_ENCODING
from layouts.egk_layouts import ElementDefinition
from .errors import FormatError, DecompressionError, StructuralParseError


logger = logging.getLogger(__name__)


# =============================================================================
# Rahmung und Kompression
# =============================================================================

def extract_payload(data: bytes) -> bytes:
    """
    Schneidet die Nutzdaten anhand des 2-Byte-Laengenpraefixes aus.

    Raises:
        FormatError: wenn Praefix fehlt oder weniger Bytes als angegeben folgen
    """
    if len(data) < EGK_LENGTH_PREFIX_SIZE:
        raise FormatError(f"eGK-Daten zu kurz fuer Laengenangabe ({len(data)} Bytes)")

    length = (data[0] << 8) + data[1]
    end = EGK_LENGTH_PREFIX_SIZE + length
    if len(data) < end:
        raise FormatError(
            f"Laengenangabe {length} ueberschreitet verfuegbare Daten "
            f"({len(data) - EGK_LENGTH_PREFIX_SIZE} Bytes)"
        )

    return bytes(data[EGK_LENGTH_PREFIX_SIZE:end])


def decompress(payload: bytes) -> bytes:
    """
    Entpackt die gzip-komprimierten Nutzdaten.

    Raises:
        DecompressionError: bei beschaedigten oder abgeschnittenen Daten
    """
    try:
        with gzip.GzipFile(fileobj=io.BytesIO(payload), mode="rb") as gzip_stream:
            return gzip_stream.read()
    except (OSError, EOFError, zlib.error) as e:
        raise DecompressionError(f"Nutzdaten konnten nicht entpackt werden: {e}") from e


def decode_text(raw: bytes) -> str:
    """Dekodiert die entpackten Bytes (immer ISO-8859-15)."""
    return raw.decode(EGK_ENCODING)


# =============================================================================
# XML-Struktur
# =============================================================================

def _local_name(name: str) -> str:
    """'{namespace}Name' -> 'Name'"""
    if name.startswith("{"):
        return name.split("}", 1)[1]
    return name


def strip_namespaces(root: ET.Element) -> ET.Element:
    """
    Setzt alle Element- und Attributnamen auf "kein Namespace".

    Der Baum wird dabei direkt umgeschrieben und wieder zurueckgegeben.
    """
    for element in root.iter():
        if isinstance(element.tag, str):
            element.tag = _local_name(element.tag)
        if element.attrib:
            element.attrib = {_local_name(k): v for k, v in element.attrib.items()}
    return root


def parse_document(text: str, root_tag: str) -> ET.Element:
    """
    Parst das XML-Dokument und normalisiert die Namespaces.

    Args:
        text: Der dekodierte XML-Text
        root_tag: Erwarteter Name des Wurzelelements (ohne Namespace)

    Raises:
        StructuralParseError: bei ungueltigem XML oder falschem Wurzelelement
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise StructuralParseError(f"Ungueltiges XML-Dokument: {e}", root_tag) from e

    strip_namespaces(root)

    if root.tag != root_tag:
        raise StructuralParseError(
            f"Unerwartetes Wurzelelement '{root.tag}' (erwartet: '{root_tag}')", root_tag
        )
    return root


def load_document(data: bytes, root_tag: str) -> ET.Element:
    """
    Kompletter Ablauf: Rohdaten -> normalisiertes XML-Wurzelelement.

    Fehler brechen den Vorgang ab, es gibt keinen Teilbaum.
    """
    payload = extract_payload(data)
    xml_content = decode_text(decompress(payload))
    logger.debug(f"eGK-Dokument ({len(payload)} Bytes komprimiert):\n{xml_content}")
    return parse_document(xml_content, root_tag)


# =============================================================================
# Feldzugriff
# =============================================================================

def find_child(element: Optional[ET.Element], name: str) -> Optional[ET.Element]:
    """Direktes Kindelement oder None (auch wenn `element` None ist)."""
    if element is None:
        return None
    return element.find(name)


def read_element_text(element: Optional[ET.Element], names: List[str]) -> Optional[str]:
    """
    Liest den Text des ersten vorhandenen Kindelements aus `names`.

    Ein vorhandenes, leeres Element ergibt "", ein fehlendes None.
    """
    for name in names:
        child = find_child(element, name)
        if child is not None:
            return child.text if child.text is not None else ""
    return None


def read_fields(element: Optional[ET.Element], definitions: List[ElementDefinition]) -> Dict[str, Optional[str]]:
    """Liest alle Blattfelder einer Element-Tabelle."""
    return {
        definition["name"]: read_element_text(element, definition["elements"])
        for definition in definitions
    }
