from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status
from starlette.concurrency import run_in_threadpool
from starlette.responses import Response

from app.archive.zip_archive import ZipArchive
from app.config.settings import Settings
from app.logging.logger import Log
from app.processor.exceptions import EmptyResultError, GroupMergeError
from app.processor.models import MergeReport, UploadedDocument
from app.processor.processor import Processor

router = APIRouter()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_processor(request: Request) -> Processor:
    return request.app.state.processor


@router.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "ok"}


@router.post("/api/merge-pdfs")
async def merge_pdfs(
    pdfs: list[UploadFile] | None = File(None),  # noqa: B008
    processor: Processor = Depends(get_processor),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> Response:
    """Merge each main PDF with its attachments and return the results as a ZIP."""
    uploads = pdfs or []
    if not uploads:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="No files uploaded.")

    documents = await _read_uploads(uploads)
    try:
        report = await run_in_threadpool(processor.merge_groups, documents)
    except EmptyResultError as exc:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except GroupMergeError as exc:
        raise HTTPException(422, detail=str(exc)) from exc
    except Exception as exc:
        Log.exception(f"Merge request failed: {exc}")
        raise HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal error while merging the files.",
        ) from exc

    archive = ZipArchive()
    for output in report.outputs:
        archive.add_entry(output.filename, output.content)
    Log.info(f"Done: {report.groups_merged} group(s) merged into {settings.archive_filename}")

    return Response(
        content=archive.serialize(),
        media_type="application/zip",
        headers=_report_headers(report, settings.archive_filename),
    )


async def _read_uploads(uploads: list[UploadFile]) -> list[UploadedDocument]:
    documents: list[UploadedDocument] = []
    try:
        for upload in uploads:
            content = await upload.read()
            documents.append(UploadedDocument(original_name=upload.filename or "", content=content))
    finally:
        for upload in uploads:
            await upload.close()
    return documents


def _report_headers(report: MergeReport, archive_filename: str) -> dict[str, str]:
    headers = {
        "Content-Disposition": f'attachment; filename="{archive_filename}"',
        "X-Groups-Attempted": str(report.groups_attempted),
        "X-Groups-Merged": str(report.groups_merged),
    }
    if report.failures:
        headers["X-Groups-Failed"] = ",".join(f.group_key for f in report.failures)
    return headers
