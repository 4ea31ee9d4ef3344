#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Laengenfeld-Kodierung der KVK-TLV-Daten.

Unterstuetzte Formen:
- 0x00..0x7F:       Laenge steht direkt im Byte (0..127)
- 0x81 LL:          ein Folgebyte (128..255)
- 0x82 HH LL:       zwei Folgebytes, Big Endian (256..65535)
"""

from typing import Tuple

from .errors import OutOfBoundsError

LENGTH_ONE_BYTE = 0x81
LENGTH_TWO_BYTES = 0x82


def _byte_at(data: bytes, offset: int) -> int:
    """Liest ein Byte und prueft dabei die Grenzen."""
    if offset < 0 or offset >= len(data):
        raise OutOfBoundsError(offset, len(data))
    return data[offset]


def read_length(data: bytes, offset: int) -> Tuple[int, int]:
    """
    Dekodiert ein Laengenfeld ab `offset`.

    Args:
        data: Die Rohdaten
        offset: Position des ersten Laengenbytes

    Returns:
        Tuple (laenge, offset hinter dem Laengenfeld)

    Raises:
        OutOfBoundsError: wenn das Laengenfeld ueber das Datenende hinausgeht
    """
    first = _byte_at(data, offset)

    if first == LENGTH_ONE_BYTE:  # 128..255
        return _byte_at(data, offset + 1), offset + 2

    if first == LENGTH_TWO_BYTES:  # 256..65535
        high = _byte_at(data, offset + 1)
        low = _byte_at(data, offset + 2)
        return (high << 8) + low, offset + 3

    # 0..127
    return first, offset + 1


def encode_length(length: int) -> bytes:
    """Erzeugt die kuerzeste Laengenfeld-Form fuer `length`."""
    if length < 0 or length > 0xFFFF:
        raise ValueError(f"Laenge {length} nicht darstellbar (0..65535)")
    if length < 0x80:
        return bytes([length])
    if length <= 0xFF:
        return bytes([LENGTH_ONE_BYTE, length])
    return bytes([LENGTH_TWO_BYTES, length >> 8, length & 0xFF])
