"""
Tests fuer die Zusammenfuehrung von KVK- und eGK-Daten (CardResult).

Ausfuehrung: python -m pytest src/tests/test_card_result.py -v
"""

import logging
import os
import sys
import pytest

# src/ zum Path hinzufügen
_src_dir = os.path.join(os.path.dirname(__file__), '..')
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

from card_fixtures import kvk_response, egk_response, pd_xml, gvd_xml, STATUS_OK
from domain.card_result import CardResult, join_values, read_card_result
from domain.egk_result import EgkResult
from domain.kvk_models import KvkResult


@pytest.fixture
def egk():
    return EgkResult(egk_response(pd_xml()))


@pytest.fixture
def kvk():
    return KvkResult(kvk_response({
        0x82: "1234567890",
        0x84: "Prof.",
        0x85: "Hans",
        0x87: "Müller",
        0x88: "01021970",
        0x8B: "80331",
    }))


# ==============================================================================
# 1. join_values
# ==============================================================================

class TestJoinValues:
    """Leere und fehlende Werte werden uebersprungen."""

    def test_single_value_unchanged(self):
        assert join_values("Hauptstraße", None) == "Hauptstraße"
        assert join_values(None, "12a") == "12a"

    def test_two_values(self):
        assert join_values("Hauptstraße", "12a") == "Hauptstraße 12a"

    def test_empty_string_skipped(self):
        assert join_values("", "von") == "von"

    def test_nothing_left_is_none(self):
        assert join_values(None, None) is None
        assert join_values("", "") is None
        assert join_values() is None


# ==============================================================================
# 2. Vorrangregeln
# ==============================================================================

class TestCardResult:
    """KVK vor eGK, Feld fuer Feld."""

    def test_success(self, egk, kvk):
        assert CardResult().success is False
        assert CardResult(egk_result=egk).success is True
        assert CardResult(kvk_result=kvk).success is True
        assert CardResult(egk_result=egk, kvk_result=kvk).success is True

    def test_empty_result_has_no_fields(self):
        result = CardResult()
        assert result.nachname is None
        assert result.strasse_hausnummer is None
        assert result.namenszusatz_vorsatzwort is None
        assert result.geschlecht is None

    def test_kvk_takes_precedence(self):
        kvk = KvkResult(kvk_response({0x87: "Müller"}))
        egk = EgkResult(egk_response(pd_xml(nachname="Schmidt")))
        result = CardResult(egk_result=egk, kvk_result=kvk)
        assert result.nachname == "Müller"

    def test_fallback_per_field(self, egk, kvk):
        result = CardResult(egk_result=egk, kvk_result=kvk)

        assert result.versicherten_id == "1234567890"
        assert result.titel == "Prof."
        assert result.vorname == "Hans"
        assert result.geburtsdatum == "01021970"
        assert result.postleitzahl == "80331"
        # nicht auf der KVK -> eGK
        assert result.ort == "Berlin"
        assert result.wohnsitzlaendercode == "D"
        assert result.strasse_hausnummer == "Hauptstraße 12a"
        assert result.namenszusatz_vorsatzwort == "von"

    def test_geschlecht_only_from_egk(self, egk, kvk):
        assert CardResult(kvk_result=kvk).geschlecht is None
        assert CardResult(egk_result=egk, kvk_result=kvk).geschlecht == "W"

    def test_egk_only(self, egk):
        result = CardResult(egk_result=egk)
        assert result.versicherten_id == "A123456780"
        assert result.nachname == "Schmidt"
        assert result.titel == "Dr."

    def test_kvk_empty_value_is_present(self):
        """Ein leerer KVK-Wert ist vorhanden und verdraengt die eGK nicht."""
        kvk = KvkResult(kvk_response({0x86: ""}))
        egk = EgkResult(egk_response(pd_xml(namenszusatz="Freiherr", vorsatzwort="von")))
        assert CardResult(egk_result=egk, kvk_result=kvk).namenszusatz_vorsatzwort == ""

    def test_namenszusatz_vorsatzwort_join(self):
        egk = EgkResult(egk_response(pd_xml(namenszusatz="Freiherr", vorsatzwort="von")))
        assert CardResult(egk_result=egk).namenszusatz_vorsatzwort == "Freiherr von"

    def test_namenszusatz_vorsatzwort_both_empty(self):
        egk = EgkResult(egk_response(pd_xml(namenszusatz="", vorsatzwort="")))
        assert CardResult(egk_result=egk).namenszusatz_vorsatzwort is None

    def test_strasse_hausnummer_join(self):
        egk = EgkResult(egk_response(pd_xml(strasse="Ringweg", hausnummer="")))
        assert CardResult(egk_result=egk).strasse_hausnummer == "Ringweg"

    def test_raw_views_accessible(self, egk, kvk):
        result = CardResult(egk_result=egk, kvk_result=kvk)
        assert result.kvk_result is kvk
        assert result.egk_result is egk
        assert result.egk_result.persoenliche_versichertendaten.cdm_version == "5.2.0"

    def test_str(self, kvk):
        assert str(CardResult()) == "CardResult(nicht erfolgreich)"
        assert str(CardResult(kvk_result=kvk)) == "CardResult(Hans Müller, Quelle=KVK)"


# ==============================================================================
# 3. Spekulatives Auslesen
# ==============================================================================

class TestReadCardResult:
    """Ein Fehler in einer Quelle ist nicht fatal, solange die andere gelingt."""

    def test_nothing_supplied(self):
        assert read_card_result().success is False

    def test_kvk_only(self):
        result = read_card_result(kvk_data=kvk_response({0x87: "Abc"}))
        assert result.success
        assert result.nachname == "Abc"
        assert result.egk_result is None

    def test_failed_kvk_with_good_egk(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = read_card_result(
                kvk_data=bytes([0x87, 0x09]) + b"Abc" + STATUS_OK,
                pd_data=egk_response(pd_xml()),
            )
        assert result.success
        assert result.kvk_result is None
        assert result.nachname == "Schmidt"
        assert "KVK-Daten nicht lesbar" in caplog.text

    def test_failed_egk_with_good_kvk(self):
        result = read_card_result(
            kvk_data=kvk_response({0x87: "Müller"}),
            pd_data=bytes([0x00, 0x10]) + bytes(4),
        )
        assert result.success
        assert result.egk_result is None
        assert result.nachname == "Müller"

    def test_single_source_failed(self):
        result = read_card_result(pd_data=b"\x00\x05broken")
        assert result.success is False

    def test_both_failed(self):
        result = read_card_result(kvk_data=b"", pd_data=b"")
        assert result.success is False
        assert result.nachname is None

    def test_failed_gvd_keeps_pd(self):
        result = read_card_result(pd_data=egk_response(pd_xml()), gvd_data=b"\x00")
        assert result.success
        assert result.egk_result.geschuetzte_versichertendaten is None
        assert result.nachname == "Schmidt"

    def test_pd_and_gvd(self):
        result = read_card_result(
            pd_data=egk_response(pd_xml()),
            gvd_data=egk_response(gvd_xml("<Besondere_Personengruppe>8</Besondere_Personengruppe>")),
        )
        assert result.egk_result.besondere_personengruppe == "8"
