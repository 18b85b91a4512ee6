from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from pypdf import PdfReader

from app.extraction.models import ExtractionResult
from app.grouping.models import DocumentGroup, DocumentRole
from app.processor.models import UploadedDocument


@dataclass(slots=True)
class LoadedDocument:
    document: UploadedDocument
    role: DocumentRole
    reader: PdfReader
    page_count: int
    text: str = ""


@dataclass(slots=True)
class GroupContext:
    group: DocumentGroup
    loaded: list[LoadedDocument] = field(default_factory=list)
    extraction: ExtractionResult | None = None
    merged_bytes: bytes = b""
    page_count: int = 0
    base_name: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: GroupContext) -> GroupContext:
        raise NotImplementedError
