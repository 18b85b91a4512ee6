from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    engine: str = ""

    @abstractmethod
    def extract_pages(self, pdf_bytes: bytes) -> list[str]:
        """Extract the plain text of each page, in page order.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            One string per page; pages without a text layer yield "".

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """

    def extract(self, pdf_bytes: bytes) -> str:
        """Extract the whole document text, pages separated by newlines."""
        return "\n".join(self.extract_pages(pdf_bytes)).strip()
