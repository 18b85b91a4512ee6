"""Structural PDF access backed by pypdf.

Loading answers "how many pages, and which ones"; authoring copies pages from
loaded documents into a fresh one. Neither side looks at the text layer.
"""

import io
from collections.abc import Iterable

from pypdf import PageObject, PdfReader, PdfWriter

from app.pdf.exceptions import PdfParseError, PdfWriteError


def load_pdf(pdf_bytes: bytes, name: str = "") -> PdfReader:
    """Parse *pdf_bytes* and force the page tree to resolve.

    Raises:
        PdfParseError: if the bytes are not a readable PDF.
    """
    label = name or "document"
    if not pdf_bytes:
        raise PdfParseError(f"{label} is empty")
    try:
        reader = PdfReader(io.BytesIO(pdf_bytes))
        # pypdf is lazy; walking the page tree surfaces broken xref/trailers here.
        len(reader.pages)
    except Exception as exc:
        raise PdfParseError(f"{label} is not a readable PDF: {exc}") from exc
    return reader


class PdfAssembler:
    """Builds a new PDF out of pages copied from loaded documents."""

    def __init__(self) -> None:
        self._writer = PdfWriter()

    @property
    def page_count(self) -> int:
        return len(self._writer.pages)

    def copy_pages(
        self,
        source: PdfReader,
        page_indices: Iterable[int] | None = None,
    ) -> list[PageObject]:
        indices = range(len(source.pages)) if page_indices is None else page_indices
        try:
            return [source.pages[i] for i in indices]
        except Exception as exc:
            raise PdfWriteError(f"Could not copy pages: {exc}") from exc

    def add_page(self, page: PageObject) -> None:
        try:
            self._writer.add_page(page)
        except Exception as exc:
            raise PdfWriteError(f"Could not add page: {exc}") from exc

    def save(self) -> bytes:
        buffer = io.BytesIO()
        try:
            self._writer.write(buffer)
        except Exception as exc:
            raise PdfWriteError(f"Could not serialize merged PDF: {exc}") from exc
        return buffer.getvalue()
