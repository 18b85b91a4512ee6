"""Output filenames: base name from metadata, then batch-wide disambiguation."""

from collections.abc import Sequence
from enum import Enum

from app.extraction.models import ExtractedMetadata
from app.extraction.sanitizer import strip_illegal_chars

PDF_EXTENSION = ".pdf"
FALLBACK_BASE_NAME = "Documento"
_SEPARATOR = " - "


class NamingMode(str, Enum):
    """COMPOSITE: "<key> - <reference> - <name>". NAME_ONLY: "<name>" or "<key>"."""

    COMPOSITE = "composite"
    NAME_ONLY = "name_only"


def safe_filename(name: str) -> str:
    cleaned = strip_illegal_chars(name)
    return cleaned or FALLBACK_BASE_NAME


def build_base_name(
    group_key: str,
    metadata: ExtractedMetadata,
    mode: NamingMode = NamingMode.COMPOSITE,
    reference_is_fallback: bool = False,
) -> str:
    """Filename stem (no extension) for one group, already filesystem-safe.

    A reference derived from the group key would only repeat the key, so
    it is left out of composite names when ``reference_is_fallback`` is set.
    """
    name = metadata.addressee_name
    if mode is NamingMode.NAME_ONLY:
        return safe_filename(name or group_key)

    parts = [group_key]
    if metadata.reference_number and not reference_is_fallback:
        # "25/02049" would otherwise lose its separator to the illegal-char filter.
        parts.append(metadata.reference_number.replace("/", "-"))
    if name:
        parts.append(name)
    return safe_filename(_SEPARATOR.join(strip_illegal_chars(part) for part in parts))


def resolve_collisions(
    base_names: Sequence[str],
    extension: str = PDF_EXTENSION,
) -> list[str]:
    """Give every base name a unique filename, preserving order.

    The first occurrence keeps "<base><ext>"; later ones get "_2", "_3", ...
    Comparison ignores case so the archive also extracts cleanly on
    case-insensitive filesystems.
    """
    taken: set[str] = set()
    filenames: list[str] = []
    for raw in base_names:
        base = safe_filename(raw)
        candidate = f"{base}{extension}"
        suffix = 2
        while candidate.casefold() in taken:
            candidate = f"{base}_{suffix}{extension}"
            suffix += 1
        taken.add(candidate.casefold())
        filenames.append(candidate)
    return filenames
