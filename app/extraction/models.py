from dataclasses import dataclass, field


@dataclass(frozen=True)
class SourceText:
    """Normalized text of one document, labelled for the trace."""

    label: str
    text: str


@dataclass(frozen=True)
class ExtractedMetadata:
    """Naming metadata for one group; None means nothing was found."""

    addressee_name: str | None = None
    reference_number: str | None = None


@dataclass(frozen=True)
class ExtractionAttempt:
    """One heuristic run against one document."""

    source: str
    heuristic: str
    index: int
    fragment: str | None
    accepted: str | None

    @property
    def matched(self) -> bool:
        return self.fragment is not None


@dataclass
class ExtractionResult:
    metadata: ExtractedMetadata
    trace: list[ExtractionAttempt] = field(default_factory=list)
    reference_from_fallback: bool = False
