import io
import zipfile

from app.archive.exceptions import DuplicateEntryError


class ZipArchive:
    """In-memory ZIP of merged outputs, serialized once per request."""

    def __init__(self) -> None:
        self._entries: dict[str, bytes] = {}

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def names(self) -> list[str]:
        return list(self._entries)

    def add_entry(self, name: str, content: bytes) -> None:
        """Queue an entry; names must be unique (see naming.resolve_collisions).

        Raises:
            DuplicateEntryError: if *name* was already added.
        """
        if name in self._entries:
            raise DuplicateEntryError(f"Archive already contains '{name}'")
        self._entries[name] = content

    def serialize(self) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            for name, content in self._entries.items():
                zf.writestr(name, content)
        return buffer.getvalue()
