from app.extraction.extractor import MetadataExtractor
from app.extraction.normalizer import normalize_text
from app.extraction.sanitizer import sanitize_candidate, strip_illegal_chars

__all__ = ["MetadataExtractor", "normalize_text", "sanitize_candidate", "strip_illegal_chars"]
