from collections.abc import Sequence

from app.config.settings import Settings
from app.extraction.extractor import MetadataExtractor
from app.extraction.heuristics import default_heuristics
from app.grouping.grouper import Grouper
from app.grouping.models import DocumentGroup, GroupingMode
from app.logging.logger import Log
from app.naming.resolver import NamingMode, resolve_collisions
from app.pdf.exceptions import PdfError
from app.pdf.factory import PdfExtractorFactory
from app.processor.exceptions import EmptyResultError, GroupMergeError
from app.processor.merger import MergeEngine
from app.processor.models import GroupFailure, MergedOutput, MergeReport, UploadedDocument
from app.processor.pipeline import GroupContext, PipelineStep
from app.processor.steps import (
    BuildBaseNameStep,
    ExtractMetadataStep,
    ExtractTextStep,
    LoadDocumentsStep,
    MergeDocumentsStep,
)


class Processor:
    """Turns one request's uploads into merged, uniquely named PDFs.

    Pipeline per group: load -> extract text -> extract metadata -> merge -> name.
    Groups run one at a time; filenames are disambiguated once all groups are done.
    """

    def __init__(
        self,
        grouper: Grouper,
        steps: Sequence[PipelineStep],
        fail_fast: bool = False,
    ) -> None:
        self._grouper = grouper
        self._steps = list(steps)
        self._fail_fast = fail_fast

    def merge_groups(self, documents: Sequence[UploadedDocument]) -> MergeReport:
        """Group, merge and name the uploaded documents.

        Raises:
            EmptyResultError: if no group could be merged.
            GroupMergeError: in fail-fast mode, on the first group that fails.
        """
        Log.info(f"Merge request with {len(documents)} file(s)")
        if not documents:
            raise EmptyResultError(EmptyResultError.NO_DOCUMENTS)

        grouping = self._grouper.group(documents)
        report = MergeReport(
            groups_attempted=len(grouping.complete),
            skipped_groups=list(grouping.incomplete),
            unidentified=list(grouping.unidentified),
        )

        merged: list[GroupContext] = []
        for group in grouping.complete:
            context = self._process_group(group, report)
            if context is not None:
                merged.append(context)

        filenames = resolve_collisions([context.base_name for context in merged])
        report.outputs = [
            MergedOutput(
                filename=filename,
                content=context.merged_bytes,
                page_count=context.page_count,
                group_key=context.group.key,
            )
            for filename, context in zip(filenames, merged)
        ]
        for output in report.outputs:
            Log.info(
                f"Result for {output.group_key}: {output.filename}",
                group_key=output.group_key,
            )

        if not report.outputs:
            reason = (
                EmptyResultError.NO_COMPLETE_GROUPS
                if report.groups_attempted == 0
                else EmptyResultError.ALL_GROUPS_FAILED
            )
            Log.error(f"Merge request produced no output ({reason})")
            raise EmptyResultError(reason, report)

        Log.info(
            f"Merged {report.groups_merged}/{report.groups_attempted} group(s), "
            f"{len(report.failures)} failed"
        )
        return report

    def _process_group(self, group: DocumentGroup, report: MergeReport) -> GroupContext | None:
        Log.info(
            f"Working on group {group.key} ({len(group.members)} file(s))",
            group_key=group.key,
        )
        context = GroupContext(group=group)
        try:
            for step in self._steps:
                context = step.run(context)
        except PdfError as exc:
            failure = GroupFailure(group_key=group.key, reason=str(exc))
            Log.warning(f"Group {group.key} dropped: {failure.reason}", group_key=group.key)
            if self._fail_fast:
                raise GroupMergeError(failure) from exc
            report.failures.append(failure)
            return None
        return context


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    extractor = MetadataExtractor(
        heuristics=default_heuristics(settings.title_scan_chars),
        use_identifier_fallback=settings.reference_fallback == "identifier",
    )
    steps: list[PipelineStep] = [
        LoadDocumentsStep(),
        ExtractTextStep(pdf_extractor=PdfExtractorFactory.create(settings)),
        ExtractMetadataStep(
            extractor=extractor,
            attachments_first=settings.name_source_order == "attachment_first",
        ),
        MergeDocumentsStep(merge_engine=MergeEngine()),
        BuildBaseNameStep(naming_mode=NamingMode(settings.naming_mode)),
    ]
    return Processor(
        grouper=Grouper(GroupingMode(settings.grouping_mode)),
        steps=steps,
        fail_fast=settings.fail_fast,
    )
