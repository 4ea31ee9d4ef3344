#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
DIN 66003 - deutsche Referenzversion des 7-Bit-Codes (ISO 646-DE).

Die KVK speichert Texte in diesem Zeichensatz. Gegenueber ASCII sind acht
Codepunkte mit Umlauten, Eszett und Paragraphenzeichen belegt.
"""

# ASCII-Codepunkt -> deutsches Zeichen
DIN_66003_TABLE = str.maketrans({
    "@": "§",
    "[": "Ä",
    "\\": "Ö",
    "]": "Ü",
    "{": "ä",
    "|": "ö",
    "}": "ü",
    "~": "ß",
})


def decode_din66003(data: bytes) -> str:
    """
    Dekodiert Bytes im DIN-66003-Zeichensatz.

    Bytes mit gesetztem 8. Bit werden wie bei den 7-Bit-Codepages von
    Windows auf 7 Bit reduziert.
    """
    text = bytes(b & 0x7F for b in data).decode("ascii")
    return text.translate(DIN_66003_TABLE)


def encode_din66003(text: str) -> bytes:
    """Gegenstueck zu decode_din66003 (nur fuer Zeichen, die DIN 66003 kennt)."""
    reverse = {ord(v): chr(k) for k, v in DIN_66003_TABLE.items()}
    return text.translate(reverse).encode("ascii")
