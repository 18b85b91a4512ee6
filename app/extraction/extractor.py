"""Addressee/reference extraction as a pure function of document text.

The extractor never logs and never raises on a miss: it returns the metadata
together with a trace of every heuristic it tried, and the caller decides
what to log.
"""

from collections.abc import Sequence

from app.extraction.heuristics import (
    AddresseeHeuristic,
    default_heuristics,
    find_reference_number,
    reference_from_group_key,
)
from app.extraction.models import (
    ExtractedMetadata,
    ExtractionAttempt,
    ExtractionResult,
    SourceText,
)
from app.extraction.sanitizer import sanitize_candidate


class MetadataExtractor:
    """Runs the addressee cascade and the reference-number lookup."""

    def __init__(
        self,
        heuristics: Sequence[AddresseeHeuristic] | None = None,
        use_identifier_fallback: bool = True,
    ) -> None:
        self._heuristics = list(heuristics) if heuristics is not None else default_heuristics()
        self._use_identifier_fallback = use_identifier_fallback

    def extract_addressee(
        self,
        text: str,
        source: str = "",
    ) -> tuple[str | None, list[ExtractionAttempt]]:
        """First accepted candidate from the cascade, plus the attempts made."""
        trace: list[ExtractionAttempt] = []
        for index, heuristic in enumerate(self._heuristics, start=1):
            fragment = heuristic.find(text)
            accepted = sanitize_candidate(fragment) if fragment is not None else None
            trace.append(
                ExtractionAttempt(
                    source=source,
                    heuristic=heuristic.name,
                    index=index,
                    fragment=fragment,
                    accepted=accepted,
                )
            )
            if accepted is not None:
                return accepted, trace
        return None, trace

    def extract(
        self,
        group_key: str,
        name_sources: Sequence[SourceText],
        reference_sources: Sequence[SourceText] | None = None,
    ) -> ExtractionResult:
        """Extract naming metadata for one group.

        Args:
            group_key: The group's identifier, used for the reference fallback.
            name_sources: Normalized document texts, searched in order for the
                addressee; the first document with an accepted name wins.
            reference_sources: Texts searched in order for the invoice number;
                defaults to name_sources.

        Returns:
            ExtractionResult; absent values are None, never "".
        """
        trace: list[ExtractionAttempt] = []
        addressee: str | None = None
        for source in name_sources:
            if not source.text:
                continue
            addressee, attempts = self.extract_addressee(source.text, source.label)
            trace.extend(attempts)
            if addressee is not None:
                break

        reference: str | None = None
        for source in reference_sources if reference_sources is not None else name_sources:
            reference = find_reference_number(source.text)
            if reference is not None:
                break

        from_fallback = False
        if reference is None and self._use_identifier_fallback:
            reference = reference_from_group_key(group_key)
            from_fallback = reference is not None

        return ExtractionResult(
            metadata=ExtractedMetadata(addressee_name=addressee, reference_number=reference),
            trace=trace,
            reference_from_fallback=from_fallback,
        )
