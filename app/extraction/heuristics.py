"""Addressee and reference-number heuristics for Italian invoices.

Each addressee heuristic only locates a raw span; deciding whether the span
is an acceptable name is left to the sanitizer.
"""

import re
from abc import ABC, abstractmethod
from typing import ClassVar

from app.grouping.identifier import extract_group_key

_UPPER = "A-ZÀ-ÖØ-Ý"
_LETTERS = "A-Za-zÀ-ÖØ-öø-ÿ"
_NAME_WORD = rf"[{_UPPER}][{_LETTERS}'’.\-]+"


class AddresseeHeuristic(ABC):
    """Locates a candidate addressee span in normalized text."""

    name: ClassVar[str] = ""

    @abstractmethod
    def find(self, text: str) -> str | None:
        """Return the raw captured span, or None when the pattern is absent."""


class InlineIntestatarioHeuristic(AddresseeHeuristic):
    """'Intestatario: Mario Rossi' on one line."""

    name = "intestatario_inline"

    _PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"Intestatario[ \t]*:[ \t]*([^\n]+)", re.IGNORECASE
    )

    def find(self, text: str) -> str | None:
        match = self._PATTERN.search(text)
        return match.group(1) if match else None


class NextLineIntestatarioHeuristic(AddresseeHeuristic):
    """'Intestatario:' at the end of a line, the name on the following one."""

    name = "intestatario_next_line"

    _PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"Intestatario[ \t]*:[ \t]*\n\s*([^\n]+)", re.IGNORECASE
    )

    def find(self, text: str) -> str | None:
        match = self._PATTERN.search(text)
        return match.group(1) if match else None


class TitledNameHeuristic(AddresseeHeuristic):
    """A courtesy title then up to five capitalized words on one line, near the top."""

    name = "titled_name"

    _PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"\b(?i:(Dr\.?|Dott\.?ssa|Dott\.?|Sig\.?ra|Sig\.?r|Spett\.le|Gent\.mo|Egr\.?))"
        rf"\s+({_NAME_WORD}(?:[ \t]+{_NAME_WORD}){{0,4}})"
    )

    def __init__(self, scan_chars: int = 2500) -> None:
        self._scan_chars = scan_chars

    def find(self, text: str) -> str | None:
        match = self._PATTERN.search(text[: self._scan_chars])
        if match is None:
            return None
        return f"{match.group(1)} {match.group(2)}"


def default_heuristics(title_scan_chars: int = 2500) -> list[AddresseeHeuristic]:
    """The addressee cascade, highest priority first."""
    return [
        InlineIntestatarioHeuristic(),
        NextLineIntestatarioHeuristic(),
        TitledNameHeuristic(scan_chars=title_scan_chars),
    ]


_REFERENCE_RE = re.compile(r"Fattura\s*N[°º]?\.?\s*:\s*([0-9]{2}/[0-9]{5})", re.IGNORECASE)


def find_reference_number(text: str) -> str | None:
    """Invoice number such as '25/02049' from 'Fattura N°: 25/02049'."""
    match = _REFERENCE_RE.search(text)
    return match.group(1) if match else None


def reference_from_group_key(group_key: str) -> str | None:
    """'25-02050' -> '25/02050'."""
    key = extract_group_key(group_key)
    return key.replace("-", "/", 1) if key else None
