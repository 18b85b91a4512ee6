from app.extraction.extractor import MetadataExtractor
from app.extraction.models import ExtractionResult, SourceText
from app.extraction.normalizer import normalize_text
from app.grouping.models import DocumentRole
from app.logging.logger import Log
from app.naming.resolver import NamingMode, build_base_name
from app.pdf.base import BasePdfExtractor
from app.pdf.document import load_pdf
from app.pdf.exceptions import PdfExtractionError
from app.processor.merger import MergeEngine
from app.processor.pipeline import GroupContext, LoadedDocument, PipelineStep


class LoadDocumentsStep(PipelineStep):
    def run(self, context: GroupContext) -> GroupContext:
        context.loaded = []
        for document, role in context.group.assignments():
            reader = load_pdf(document.content, document.original_name)
            loaded = LoadedDocument(
                document=document,
                role=role,
                reader=reader,
                page_count=len(reader.pages),
            )
            context.loaded.append(loaded)
            Log.info(
                f"Loaded {role.value} '{document.original_name}' "
                f"({loaded.page_count} page(s)) for group {context.group.key}"
            )
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    def run(self, context: GroupContext) -> GroupContext:
        for loaded in context.loaded:
            name = loaded.document.original_name
            if loaded.page_count == 0:
                loaded.text = ""
                continue
            try:
                raw = self._pdf_extractor.extract(loaded.document.content)
            except PdfExtractionError as exc:
                Log.warning(f"Text extraction failed for '{name}': {exc}", document=name)
                raw = ""
            loaded.text = normalize_text(raw)
            if not loaded.text:
                Log.info(f"No text extracted from '{name}' (scanned PDF?)")
            else:
                Log.debug(f"Extracted {len(loaded.text)} chars from '{name}'")
        return context


class ExtractMetadataStep(PipelineStep):
    def __init__(self, extractor: MetadataExtractor, attachments_first: bool = True) -> None:
        self._extractor = extractor
        self._attachments_first = attachments_first

    def run(self, context: GroupContext) -> GroupContext:
        ordered = sorted(context.loaded, key=lambda item: item.role is not DocumentRole.MAIN)
        main_first = [
            SourceText(label=loaded.document.original_name, text=loaded.text)
            for loaded in ordered
        ]
        if self._attachments_first:
            name_sources = main_first[1:] + main_first[:1]
        else:
            name_sources = main_first

        result = self._extractor.extract(
            context.group.key,
            name_sources=name_sources,
            reference_sources=main_first,
        )
        context.extraction = result
        self._log_result(context.group.key, result)
        return context

    @staticmethod
    def _log_result(group_key: str, result: ExtractionResult) -> None:
        for attempt in result.trace:
            Log.debug(
                f"Group {group_key} [{attempt.source}] heuristic {attempt.index} "
                f"({attempt.heuristic}): fragment={attempt.fragment!r} "
                f"accepted={attempt.accepted!r}"
            )
        metadata = result.metadata
        if metadata.addressee_name is None:
            Log.info(f"Group {group_key}: no addressee found")
        else:
            Log.info(f"Group {group_key}: addressee '{metadata.addressee_name}'")
        if result.reference_from_fallback:
            Log.info(f"Group {group_key}: no invoice number, using '{metadata.reference_number}'")


class MergeDocumentsStep(PipelineStep):
    def __init__(self, merge_engine: MergeEngine) -> None:
        self._merge_engine = merge_engine

    def run(self, context: GroupContext) -> GroupContext:
        merged = self._merge_engine.merge([loaded.reader for loaded in context.loaded])
        context.merged_bytes = merged.content
        context.page_count = merged.page_count
        Log.info(f"Merged group {context.group.key}: {merged.page_count} page(s)")
        return context


class BuildBaseNameStep(PipelineStep):
    def __init__(self, naming_mode: NamingMode = NamingMode.COMPOSITE) -> None:
        self._naming_mode = naming_mode

    def run(self, context: GroupContext) -> GroupContext:
        if context.extraction is None:
            raise ValueError("GroupContext.extraction must be set before naming")
        context.base_name = build_base_name(
            context.group.key,
            context.extraction.metadata,
            self._naming_mode,
            reference_is_fallback=context.extraction.reference_from_fallback,
        )
        return context
