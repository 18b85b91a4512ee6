class PdfError(Exception):
    """Base exception for all PDF collaborator errors."""


class PdfParseError(PdfError):
    """Raised when a document cannot be loaded as a PDF."""


class PdfWriteError(PdfError):
    """Raised when a merged document cannot be assembled or serialized."""


class PdfExtractionError(PdfError):
    """Raised when text cannot be extracted from a loaded PDF."""
