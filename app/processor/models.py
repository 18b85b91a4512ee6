from dataclasses import dataclass, field


@dataclass(frozen=True)
class UploadedDocument:
    """A PDF received in one merge request."""

    original_name: str
    content: bytes = field(repr=False)


@dataclass(frozen=True)
class MergedOutput:
    """One merged PDF, ready to be added to the archive."""

    filename: str
    content: bytes = field(repr=False)
    page_count: int
    group_key: str


@dataclass(frozen=True)
class GroupFailure:
    """A complete group that could not be merged, and why."""

    group_key: str
    reason: str


@dataclass
class MergeReport:
    """Result of merge_groups for one request."""

    outputs: list[MergedOutput] = field(default_factory=list)
    groups_attempted: int = 0
    failures: list[GroupFailure] = field(default_factory=list)
    skipped_groups: list[str] = field(default_factory=list)
    unidentified: list[str] = field(default_factory=list)

    @property
    def groups_merged(self) -> int:
        return len(self.outputs)
