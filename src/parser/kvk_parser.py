#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
KVK Parser

Dekodiert die Rohantwort einer Krankenversichertenkarte (KVK) bzw.
PKV-Card. Die Daten liegen als TLV-Folge vor:

    [Header (30 Bytes, optional)] Tag Laenge Wert ... Tag Laenge Wert [SW1 SW2]

Ergebnis ist ein Dictionary Tag -> Text.
"""

import logging
from typing import Dict

from config.card_formats import (
    KVK_HEADER_MARKERS, KVK_HEADER_LENGTH, KVK_STATUS_LENGTH, KVK_STRUCTURE_TAG
)
from layouts.kvk_layouts import get_tag_definition
from .din66003 import decode_din66003
from .errors import FormatError
from .tlv import read_length


logger = logging.getLogger(__name__)


def get_start_offset(data: bytes) -> int:
    """
    Ermittelt die Position des ersten Tags.

    Beginnt die Antwort mit einem der Header-Marker, ist ein 30 Byte langer
    Transport-Header vorangestellt, der keine Felddaten enthaelt.
    """
    if data and data[0] in KVK_HEADER_MARKERS:
        return KVK_HEADER_LENGTH
    return 0


def decode_kvk(data: bytes) -> Dict[int, str]:
    """
    Dekodiert die TLV-Felder einer KVK-Antwort.

    Die letzten 2 Bytes (Statuswort) werden nicht ausgewertet. Der
    Struktur-Tag 0x60 wird nicht uebernommen; der Lesezeiger springt dabei
    NICHT ueber dessen Wert, sondern liest direkt dahinter den naechsten Tag
    (d.h. der Inhalt des Templates wird als TLV-Folge weitergelesen).

    Args:
        data: Die komplette Rohantwort inkl. Statuswort

    Returns:
        Dictionary Tag -> dekodierter Text

    Raises:
        FormatError: Antwort zu kurz, Wert laenger als die Daten, doppelter Tag
        OutOfBoundsError: Tag oder Laengenfeld ueber das Datenende hinaus
    """
    if len(data) < KVK_STATUS_LENGTH:
        raise FormatError(f"KVK-Antwort zu kurz fuer Statuswort ({len(data)} Bytes)")

    body = bytes(data[:-KVK_STATUS_LENGTH])
    result: Dict[int, str] = {}

    offset = get_start_offset(data)
    # Ein Feld braucht mindestens Tag + Laenge
    while offset < len(body) - 1:
        tag = body[offset]
        length, offset = read_length(body, offset + 1)

        if tag == KVK_STRUCTURE_TAG:
            # Template: Inhalt wird als weitere TLV-Folge gelesen
            continue

        end = offset + length
        if end > len(body):
            raise FormatError(
                f"Tag 0x{tag:02X}: Laenge {length} ab Offset {offset} "
                f"ueberschreitet Datenende ({len(body)} Bytes)"
            )

        if tag in result:
            raise FormatError(f"Tag 0x{tag:02X} mehrfach vorhanden (Offset {offset})")

        result[tag] = decode_din66003(body[offset:end])
        definition = get_tag_definition(tag)
        label = definition["label"] if definition else "unbekannt"
        logger.debug(f"KVK-Tag 0x{tag:02X} ({label}): {length} Bytes")
        offset = end

    logger.debug(f"KVK dekodiert: {len(result)} Felder")
    return result
