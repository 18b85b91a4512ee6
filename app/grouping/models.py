from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from app.processor.models import UploadedDocument


class DocumentRole(str, Enum):
    MAIN = "main"
    ATTACHMENT = "attachment"


class GroupingMode(str, Enum):
    """How many members, and of which role, make a group complete.

    STRICT: one main document plus at least one marked attachment.
    LENIENT: any two or more documents; the first in merge order is the main.
    """

    STRICT = "strict"
    LENIENT = "lenient"


@dataclass(frozen=True)
class DocumentGroup:
    """Documents sharing a group key, in merge order, with their roles."""

    key: str
    members: tuple[UploadedDocument, ...]
    roles: tuple[DocumentRole, ...]

    def __post_init__(self) -> None:
        if len(self.members) != len(self.roles):
            raise ValueError("Every group member needs exactly one role")

    @property
    def main(self) -> UploadedDocument:
        return self.members[self.roles.index(DocumentRole.MAIN)]

    @property
    def attachments(self) -> tuple[UploadedDocument, ...]:
        return tuple(
            doc for doc, role in self.assignments() if role is DocumentRole.ATTACHMENT
        )

    def assignments(self) -> Iterator[tuple[UploadedDocument, DocumentRole]]:
        return zip(self.members, self.roles)


@dataclass
class GroupingResult:
    """Partition of one request's uploads."""

    complete: list[DocumentGroup]
    incomplete: list[str]
    unidentified: list[str]
