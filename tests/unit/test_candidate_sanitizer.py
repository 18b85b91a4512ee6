import re

import pytest

from app.extraction.sanitizer import sanitize_candidate, strip_illegal_chars


class TestStripIllegalChars:
    def test_removes_filesystem_illegal_characters(self) -> None:
        assert strip_illegal_chars('Ma<ri>o: "Rossi" | a/b\\c*?') == "Mario Rossi abc"

    def test_collapses_whitespace(self) -> None:
        assert strip_illegal_chars("  Mario \n  Rossi  ") == "Mario Rossi"


class TestSanitizeCandidate:
    def test_accepts_plain_name(self) -> None:
        assert sanitize_candidate("  Mario   Rossi ") == "Mario Rossi"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Mario Rossi Via Roma 1", "Mario Rossi"),
            ("Mario Rossi Fattura N: 25/02049", "Mario Rossi"),
            ("Mario Rossi P.IVA 01234567890", "Mario Rossi"),
            ("Mario Rossi data 01/02/2025", "Mario Rossi"),
            ("Mario Rossi Codice Fiscale RSSMRA", "Mario Rossi"),
            ("Anna Bianchi telefono 0612345 email a@b.it", "Anna Bianchi"),
        ],
    )
    def test_truncates_at_stop_word(self, raw: str, expected: str) -> None:
        assert sanitize_candidate(raw) == expected

    def test_stop_word_must_be_a_whole_word(self) -> None:
        assert sanitize_candidate("Dott. Vianello Datari") == "Dott. Vianello Datari"

    def test_earliest_stop_word_wins(self) -> None:
        assert sanitize_candidate("Mario Rossi via Roma del 2025") == "Mario Rossi"

    def test_stop_word_at_start_is_not_truncated(self) -> None:
        assert sanitize_candidate("Via Roma Srl") == "Via Roma Srl"

    @pytest.mark.parametrize("raw", ["", "   ", "Ann", "A B", "Bo Fattura 2"])
    def test_rejects_short_results(self, raw: str) -> None:
        assert sanitize_candidate(raw) is None

    @pytest.mark.parametrize("raw", ["25/02050", "12.345.678", "01 - 02 - 2025", "1234"])
    def test_rejects_reference_like_strings(self, raw: str) -> None:
        assert sanitize_candidate(raw) is None

    def test_is_deterministic(self) -> None:
        raw = "Sig.ra Maria De Luca indirizzo Via Po"
        assert {sanitize_candidate(raw) for _ in range(3)} == {"Sig.ra Maria De Luca"}

    @pytest.mark.parametrize(
        "raw",
        ["Mario", "x y z w", "25-02050 Rossi", "a/b/c/d/e", "....a", "Via", "del del del"],
    )
    def test_accepted_values_respect_length_and_content_rules(self, raw: str) -> None:
        result = sanitize_candidate(raw)
        if result is not None:
            assert len(result) >= 4
            assert not re.fullmatch(r"[\d\s/.\-]+", result)
