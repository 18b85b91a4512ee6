import io
from collections.abc import Callable

import pytest
from pypdf import PdfWriter
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from app.processor.models import UploadedDocument

MakePdf = Callable[..., bytes]


def build_pdf(pages: int = 1, text: str = "", page_texts: list[str] | None = None) -> bytes:
    """Build a PDF with *pages* pages; *text* goes on the first page.

    page_texts, when given, overrides both and draws one string per page.
    A page count of zero yields a structurally valid, page-less PDF.
    """
    if page_texts is None:
        page_texts = [text] + [""] * (pages - 1) if pages > 0 else []
    if not page_texts:
        buf = io.BytesIO()
        PdfWriter().write(buf)
        return buf.getvalue()

    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    for page_text in page_texts:
        y = 780
        for line in page_text.splitlines():
            c.drawString(72, y, line)
            y -= 16
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def make_pdf() -> MakePdf:
    return build_pdf


@pytest.fixture()
def make_document(make_pdf: MakePdf) -> Callable[..., UploadedDocument]:
    def _make(name: str, pages: int = 1, text: str = "") -> UploadedDocument:
        return UploadedDocument(original_name=name, content=make_pdf(pages=pages, text=text))

    return _make


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Single page with a known line of text."""
    return build_pdf(text="Intestatario: Mario Rossi")


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    return build_pdf(page_texts=["Page one content", "Page two content"])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """A blank page: valid PDF, no text layer."""
    return build_pdf(pages=1)


@pytest.fixture()
def zero_page_pdf_bytes() -> bytes:
    return build_pdf(pages=0)
