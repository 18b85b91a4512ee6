from collections.abc import Sequence
from dataclasses import dataclass, field

from pypdf import PdfReader

from app.pdf.document import PdfAssembler
from app.pdf.exceptions import PdfWriteError


@dataclass(frozen=True)
class MergedPdf:
    content: bytes = field(repr=False)
    page_count: int


class MergeEngine:
    """Concatenates the pages of loaded documents, in the order given."""

    def merge(self, readers: Sequence[PdfReader]) -> MergedPdf:
        """Copy every page of every reader into one new PDF.

        Documents without pages contribute nothing; an all-empty input still
        produces a (zero-page) PDF.

        Raises:
            PdfWriteError: if a page cannot be copied or the result serialized.
        """
        assembler = PdfAssembler()
        expected = 0
        for reader in readers:
            pages = assembler.copy_pages(reader)
            expected += len(pages)
            for page in pages:
                assembler.add_page(page)
        if assembler.page_count != expected:
            raise PdfWriteError(
                f"Merged page count {assembler.page_count} != input page count {expected}"
            )
        return MergedPdf(content=assembler.save(), page_count=assembler.page_count)
