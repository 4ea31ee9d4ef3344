"""
Testdaten-Helfer fuer KVK- und eGK-Rohdaten.

Baut Rohantworten so auf, wie sie vom Kartenterminal geliefert werden.
"""

import gzip
from typing import Dict, Optional

from parser.din66003 import encode_din66003
from parser.tlv import encode_length

STATUS_OK = bytes([0x90, 0x00])

NS_51 = "http://ws.gematik.de/fa/vsds/UC_PersoenlicheVersichertendatenXML/v5.1"
NS_52 = "http://ws.gematik.de/fa/vsdm/vsd/v5.2"
NS_GVD_51 = "http://ws.gematik.de/fa/vsds/UC_GeschuetzteVersichertendatenXML/v5.1"
NS_GVD_52 = "http://ws.gematik.de/fa/vsdm/vsd/v5.2"


def tlv(tag: int, value: bytes) -> bytes:
    """Ein TLV-Feld mit passender Laengenkodierung."""
    return bytes([tag]) + encode_length(len(value)) + value


def kvk_response(fields: Dict[int, str], header: Optional[bytes] = None, template: bool = True) -> bytes:
    """
    KVK-Rohantwort: [Header] [60 L] Felder... 90 00

    Args:
        fields: Tag -> Text (wird DIN-66003-kodiert)
        header: Optionaler 30-Byte-Header
        template: Felder in einen 0x60-Template-Tag einbetten
    """
    body = b"".join(tlv(tag, encode_din66003(text)) for tag, text in fields.items())
    if template:
        body = tlv(0x60, body)
    return (header or b"") + body + STATUS_OK


def egk_response(xml: str, encoding: str = "iso-8859-15") -> bytes:
    """eGK-Rohdaten: 2-Byte-Laenge + gzip-komprimiertes XML."""
    payload = gzip.compress(xml.encode(encoding))
    return len(payload).to_bytes(2, "big") + payload


def pd_xml(
    namespace: str = NS_52,
    version: str = "5.2.0",
    nachname: str = "Schmidt",
    vorname: str = "Anna",
    geschlecht: str = "W",
    namenszusatz: str = "",
    vorsatzwort: str = "von",
    titel: str = "Dr.",
    strasse: str = "Hauptstraße",
    hausnummer: str = "12a",
) -> str:
    """Persoenliche Versichertendaten als XML-Text."""
    return (
        f'<UC_PersoenlicheVersichertendatenXML xmlns="{namespace}" CDM_VERSION="{version}">'
        "<Versicherter>"
        "<Versicherten_ID>A123456780</Versicherten_ID>"
        "<Person>"
        "<Geburtsdatum>19800215</Geburtsdatum>"
        f"<Vorname>{vorname}</Vorname>"
        f"<Nachname>{nachname}</Nachname>"
        f"<Geschlecht>{geschlecht}</Geschlecht>"
        f"<Vorsatzwort>{vorsatzwort}</Vorsatzwort>"
        f"<Namenszusatz>{namenszusatz}</Namenszusatz>"
        f"<Titel>{titel}</Titel>"
        "<StrassenAdresse>"
        "<Postleitzahl>10115</Postleitzahl>"
        "<Ort>Berlin</Ort>"
        "<Land><Wohnsitzlaendercode>D</Wohnsitzlaendercode></Land>"
        f"<Strasse>{strasse}</Strasse>"
        f"<Hausnummer>{hausnummer}</Hausnummer>"
        "</StrassenAdresse>"
        "</Person>"
        "</Versicherter>"
        "</UC_PersoenlicheVersichertendatenXML>"
    )


def gvd_xml(body: str, namespace: str = NS_GVD_52, version: str = "5.2.0") -> str:
    """Geschuetzte Versichertendaten als XML-Text."""
    return (
        f'<UC_GeschuetzteVersichertendatenXML xmlns="{namespace}" CDM_VERSION="{version}">'
        f"{body}"
        "</UC_GeschuetzteVersichertendatenXML>"
    )
