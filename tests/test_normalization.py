"""Unit tests for the normalization layer.

Tests:
- normalize_text canonical form (case, accents, punctuation, whitespace)
- Idempotence and character-set invariants
- Abbreviation and correction lookups
- Table merging from configuration
- MatchableRecord field variants
"""

import re

import pytest

from profsearch.domain.models import SearchableRecord
from profsearch.normalization import (
    COMMON_ABBREVIATIONS,
    COMMON_CORRECTIONS,
    MatchableRecord,
    apply_common_corrections,
    build_table,
    expand_abbreviations,
    normalize_text,
    strip_accents,
)

SAMPLE_TEXTS = [
    "",
    "   ",
    "Economía",
    "Ingeniería",
    "  Ingeniería   Civil! ",
    "ucv-maracay",
    "Dr. José  O'Neil",
    "Ñandú\tSão Paulo\n",
    "Straße 42",
    "UNIVERSIDAD CATÓLICA ANDRÉS BELLO (UCAB)",
]


class TestNormalizeText:
    """Tests for normalize_text."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Economía", "economia"),
            ("Ingeniería", "ingenieria"),
            ("ingenieria", "ingenieria"),
            ("  Ingeniería   Civil! ", "ingenieria civil"),
            ("ucv-maracay", "ucvmaracay"),
            ("Dr. José  O'Neil", "dr jose oneil"),
            ("Ñandú\tSão Paulo\n", "nandu sao paulo"),
            ("Straße 42", "strae 42"),
            ("UNIVERSIDAD CATÓLICA ANDRÉS BELLO (UCAB)", "universidad catolica andres bello ucab"),
        ],
    )
    def test_canonical_form(self, raw, expected):
        """Lowercases, strips accents and punctuation, collapses whitespace."""
        assert normalize_text(raw) == expected

    def test_empty_string(self):
        """Empty input normalizes to empty output."""
        assert normalize_text("") == ""

    def test_none_is_empty(self):
        """Absent fields normalize to the empty string."""
        assert normalize_text(None) == ""

    def test_only_punctuation(self):
        """Text without letters or digits normalizes to nothing."""
        assert normalize_text(" -- !! ?? ") == ""

    def test_accents_stripped_equivalently(self):
        """Accented and unaccented spellings normalize identically."""
        assert normalize_text("Ingeniería") == normalize_text("ingenieria") == "ingenieria"

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_idempotent(self, text):
        """Normalizing twice gives the same result."""
        once = normalize_text(text)
        assert normalize_text(once) == once

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_character_set_invariant(self, text):
        """Only [a-z0-9 ], single spaces, no leading or trailing whitespace."""
        normalized = normalize_text(text)
        assert re.fullmatch(r"[a-z0-9 ]*", normalized)
        assert "  " not in normalized
        assert normalized == normalized.strip()

    def test_deterministic(self):
        """Two normalizations of the same input are identical."""
        assert normalize_text("Simón Bolívar") == normalize_text("Simón Bolívar")


class TestStripAccents:
    """Tests for strip_accents."""

    def test_keeps_case_and_punctuation(self):
        assert strip_accents("Économie, Física!") == "Economie, Fisica!"

    def test_plain_ascii_unchanged(self):
        assert strip_accents("plain text") == "plain text"


class TestCorrections:
    """Tests for apply_common_corrections."""

    def test_unaccented_form_corrected(self):
        assert apply_common_corrections("ingenieria") == "ingeniería"

    def test_lookup_uses_normalized_input(self):
        """Case and accents in the input do not prevent the lookup."""
        assert apply_common_corrections("  MATEMÁTICAS ") == "matemáticas"

    def test_unknown_text_returned_unchanged(self):
        """Misses return the original, unnormalized input."""
        assert apply_common_corrections("Derecho Penal") == "Derecho Penal"

    def test_custom_table(self):
        table = build_table(COMMON_CORRECTIONS, {"psicologia": "psicología"})
        assert apply_common_corrections("Psicologia", table) == "psicología"


class TestAbbreviations:
    """Tests for expand_abbreviations."""

    @pytest.mark.parametrize(
        "abbreviation,expected",
        [
            ("ucab", "universidad católica andrés bello"),
            ("UCAB", "universidad católica andrés bello"),
            (" u.c.a.b ", "universidad católica andrés bello"),
            ("UNIMET", "universidad metropolitana"),
            ("ing", "ingeniería"),
        ],
    )
    def test_known_abbreviation_expanded(self, abbreviation, expected):
        assert expand_abbreviations(abbreviation) == expected

    def test_partial_input_not_expanded(self):
        """Only whole-input abbreviations are expanded."""
        assert expand_abbreviations("profesor ucab") == "profesor ucab"

    def test_unknown_text_returned_unchanged(self):
        assert expand_abbreviations("Universidad Nueva") == "Universidad Nueva"


class TestTables:
    """Tests for the static tables and build_table."""

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            COMMON_ABBREVIATIONS["usm"] = "universidad santa maría"
        with pytest.raises(TypeError):
            COMMON_CORRECTIONS["fisica"] = "fisica"

    def test_table_keys_are_normalized(self):
        for key in list(COMMON_ABBREVIATIONS) + list(COMMON_CORRECTIONS):
            assert normalize_text(key) == key

    def test_build_table_normalizes_extra_keys(self):
        table = build_table(COMMON_ABBREVIATIONS, {"U.S.M.": "universidad santa maría"})
        assert table["usm"] == "universidad santa maría"
        assert "usm" not in COMMON_ABBREVIATIONS

    def test_build_table_extra_wins(self):
        table = build_table(COMMON_ABBREVIATIONS, {"ucv": "universidad central"})
        assert table["ucv"] == "universidad central"
        assert COMMON_ABBREVIATIONS["ucv"] == "universidad central de venezuela"

    def test_build_table_skips_empty_keys(self):
        table = build_table(COMMON_ABBREVIATIONS, {"!!": "nothing"})
        assert "" not in table
        assert len(table) == len(COMMON_ABBREVIATIONS)

    def test_build_table_without_extra(self):
        assert dict(build_table(COMMON_CORRECTIONS)) == dict(COMMON_CORRECTIONS)


class TestMatchableRecord:
    """Tests for MatchableRecord."""

    def test_from_record(self):
        record = SearchableRecord(
            id="t1",
            name="Juan Pérez",
            university="Universidad Católica Andrés Bello",
            department="Ingeniería",
        )
        matchable = MatchableRecord.from_record(record)

        assert matchable.record is record
        assert matchable.fields() == (
            "juan perez",
            "universidad catolica andres bello",
            "ingenieria",
        )

    def test_missing_fields_normalize_to_empty(self):
        record = SearchableRecord(id="t2", name="Juan Perez")
        matchable = MatchableRecord.from_record(record)

        assert matchable.university_normalized == ""
        assert matchable.department_normalized == ""
