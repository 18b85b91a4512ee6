from collections.abc import Sequence

from app.grouping.identifier import extract_group_key
from app.grouping.models import DocumentGroup, GroupingMode, GroupingResult
from app.grouping.roles import assign_roles, is_attachment, order_members
from app.logging.logger import Log
from app.processor.models import UploadedDocument


class Grouper:
    """Partitions uploads by group key and keeps the complete groups."""

    def __init__(self, mode: GroupingMode = GroupingMode.STRICT) -> None:
        self._mode = mode

    @property
    def mode(self) -> GroupingMode:
        return self._mode

    def group(self, documents: Sequence[UploadedDocument]) -> GroupingResult:
        buckets: dict[str, list[UploadedDocument]] = {}
        unidentified: list[str] = []

        for document in documents:
            key = extract_group_key(document.original_name)
            if key is None:
                Log.warning(
                    f"No group key in '{document.original_name}', skipping",
                    document=document.original_name,
                )
                unidentified.append(document.original_name)
                continue
            buckets.setdefault(key, []).append(document)

        complete: list[DocumentGroup] = []
        incomplete: list[str] = []
        for key, members in buckets.items():
            ordered = order_members(members)
            if not self.is_complete(ordered):
                Log.info(f"Group {key} is incomplete ({len(ordered)} file(s)), skipping")
                incomplete.append(key)
                continue
            complete.append(
                DocumentGroup(key=key, members=tuple(ordered), roles=assign_roles(ordered))
            )

        Log.info(
            f"Grouped {len(documents)} file(s): {len(complete)} complete, "
            f"{len(incomplete)} incomplete, {len(unidentified)} without key"
        )
        return GroupingResult(
            complete=complete,
            incomplete=incomplete,
            unidentified=unidentified,
        )

    def is_complete(self, members: Sequence[UploadedDocument]) -> bool:
        if self._mode is GroupingMode.LENIENT:
            return len(members) >= 2
        marked = sum(1 for doc in members if is_attachment(doc.original_name))
        return 0 < marked < len(members)
