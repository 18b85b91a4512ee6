class ArchiveError(Exception):
    """Base exception for archive assembly errors."""


class DuplicateEntryError(ArchiveError):
    """Raised when an entry name is added twice to the same archive."""
