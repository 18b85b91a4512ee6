import pytest

from app.extraction.models import ExtractedMetadata
from app.naming.resolver import (
    NamingMode,
    build_base_name,
    resolve_collisions,
    safe_filename,
)


class TestBuildBaseNameComposite:
    def test_identifier_reference_and_name(self) -> None:
        metadata = ExtractedMetadata(addressee_name="Mario Rossi", reference_number="25/02049")
        assert build_base_name("25-02050", metadata) == "25-02050 - 25-02049 - Mario Rossi"

    def test_identifier_and_name(self) -> None:
        metadata = ExtractedMetadata(addressee_name="Mario Rossi")
        assert build_base_name("25-02050", metadata) == "25-02050 - Mario Rossi"

    def test_identifier_and_reference(self) -> None:
        metadata = ExtractedMetadata(reference_number="25/02050")
        assert build_base_name("25-02050", metadata) == "25-02050 - 25-02050"

    def test_reference_taken_from_key_is_not_repeated(self) -> None:
        metadata = ExtractedMetadata(addressee_name="Mario Rossi", reference_number="25/02050")
        base = build_base_name("25-02050", metadata, reference_is_fallback=True)
        assert base == "25-02050 - Mario Rossi"

    def test_reference_taken_from_key_alone_gives_bare_identifier(self) -> None:
        metadata = ExtractedMetadata(reference_number="25/02050")
        assert build_base_name("25-02050", metadata, reference_is_fallback=True) == "25-02050"

    def test_bare_identifier(self) -> None:
        assert build_base_name("25-02050", ExtractedMetadata()) == "25-02050"

    def test_name_is_made_filesystem_safe(self) -> None:
        metadata = ExtractedMetadata(addressee_name='Studio "Rossi" S.r.l.')
        assert build_base_name("25-02050", metadata) == '25-02050 - Studio Rossi S.r.l.'


class TestBuildBaseNameNameOnly:
    def test_name_alone(self) -> None:
        metadata = ExtractedMetadata(addressee_name="Mario Rossi", reference_number="25/02049")
        assert build_base_name("25-02050", metadata, NamingMode.NAME_ONLY) == "Mario Rossi"

    def test_identifier_when_no_name(self) -> None:
        metadata = ExtractedMetadata(reference_number="25/02049")
        assert build_base_name("25-02050", metadata, NamingMode.NAME_ONLY) == "25-02050"


class TestSafeFilename:
    def test_strips_illegal_characters(self) -> None:
        assert safe_filename("a:b*c?") == "abc"

    def test_empty_result_gets_placeholder(self) -> None:
        assert safe_filename(' /:*?"<>| ') == "Documento"


class TestResolveCollisions:
    def test_unique_names_untouched(self) -> None:
        assert resolve_collisions(["A", "B"]) == ["A.pdf", "B.pdf"]

    def test_second_duplicate_gets_suffix_2(self) -> None:
        assert resolve_collisions(["Mario Rossi", "Mario Rossi"]) == [
            "Mario Rossi.pdf",
            "Mario Rossi_2.pdf",
        ]

    def test_suffix_increments(self) -> None:
        assert resolve_collisions(["A", "A", "A", "A"]) == ["A.pdf", "A_2.pdf", "A_3.pdf", "A_4.pdf"]

    def test_suffix_skips_names_already_taken(self) -> None:
        assert resolve_collisions(["A_2", "A", "A"]) == ["A_2.pdf", "A.pdf", "A_3.pdf"]

    def test_generated_name_does_not_clash_with_later_literal(self) -> None:
        result = resolve_collisions(["A", "A", "A_2"])
        assert result == ["A.pdf", "A_2.pdf", "A_2_2.pdf"]

    def test_comparison_ignores_case(self) -> None:
        assert resolve_collisions(["Rossi", "ROSSI"]) == ["Rossi.pdf", "ROSSI_2.pdf"]

    def test_names_sanitized_before_comparison(self) -> None:
        assert resolve_collisions(["A/B", "AB"]) == ["AB.pdf", "AB_2.pdf"]

    def test_empty_input(self) -> None:
        assert resolve_collisions([]) == []

    @pytest.mark.parametrize("count", [1, 2, 7, 25])
    def test_never_produces_duplicates(self, count: int) -> None:
        names = ["Mario Rossi", "mario rossi", "Mario Rossi_2"] * count
        result = resolve_collisions(names)
        assert len(result) == len(names)
        assert len({name.casefold() for name in result}) == len(result)

    def test_is_pure(self) -> None:
        names = ["A", "A"]
        assert resolve_collisions(names) == resolve_collisions(names)
        assert names == ["A", "A"]
