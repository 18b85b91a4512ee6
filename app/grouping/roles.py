"""Main/attachment classification and merge ordering inside a group."""

import re
from collections.abc import Iterable

from app.grouping.models import DocumentRole
from app.processor.models import UploadedDocument

ATTACHMENT_MARKER = "allegato"

# Digits that open a group key ("Allegato 25-02050") are not an index.
_ATTACHMENT_INDEX_RE = re.compile(
    r"allegato[\s_.\-]*(?:n[°º.]?[\s_\-]*)?([0-9]+)(?![0-9]*-[0-9])", re.IGNORECASE
)


def is_attachment(filename: str) -> bool:
    return ATTACHMENT_MARKER in filename.casefold()


def classify_role(filename: str) -> DocumentRole:
    """Role implied by the filename alone."""
    return DocumentRole.ATTACHMENT if is_attachment(filename) else DocumentRole.MAIN


def attachment_index(filename: str) -> int | None:
    """Number written after the marker ("Allegato 2" -> 2), if any."""
    match = _ATTACHMENT_INDEX_RE.search(filename)
    return int(match.group(1)) if match else None


def merge_order_key(document: UploadedDocument) -> tuple[int, int, int, str, str]:
    """Unmarked documents first, then attachments by index, then by name."""
    name = document.original_name
    if not is_attachment(name):
        return (0, 0, 0, name.casefold(), name)
    index = attachment_index(name)
    return (1, int(index is None), index or 0, name.casefold(), name)


def order_members(documents: Iterable[UploadedDocument]) -> list[UploadedDocument]:
    return sorted(documents, key=merge_order_key)


def assign_roles(ordered: list[UploadedDocument]) -> tuple[DocumentRole, ...]:
    """The first document in merge order is the main; every other is an attachment."""
    return tuple(
        DocumentRole.MAIN if position == 0 else DocumentRole.ATTACHMENT
        for position in range(len(ordered))
    )
