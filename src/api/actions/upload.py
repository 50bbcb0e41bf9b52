import logging

from fastapi import APIRouter, File, HTTPException, Response, UploadFile
from fastapi.concurrency import run_in_threadpool

from schemas.requests import DOCX_EXTENSION, FormatInput
from services.formatter import run_formatter

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/format-my-project", tags=["Pipeline"])
async def format_my_project(file: UploadFile = File(...)):
    """
    Reformat an uploaded .docx and return it as an attachment.
    """
    try:
        content = await file.read()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to read file: {e}")

    if not content:
        raise HTTPException(status_code=400, detail="File is empty.")

    filename = file.filename or ""
    if not filename.endswith(DOCX_EXTENSION):
        raise HTTPException(status_code=400, detail="Upload .docx only.")

    input_data = FormatInput(docx_bytes=content, filename=filename)

    try:
        # python-docx is blocking, keep it off the event loop
        result = await run_in_threadpool(run_formatter, input_data)
    except Exception as e:
        logger.exception("Formatting failed for %s", filename)
        raise HTTPException(status_code=500, detail=f"Error: {e}")

    report = result.report
    headers = {
        "Content-Disposition": f"attachment; filename={result.filename}",
        "X-Format-Ghost-Lines-Removed": str(report.ghost_lines_removed),
        "X-Format-Sections-Linked": str(report.sections_linked),
        "X-Format-Runtime-Ms": str(result.runtime_ms or 0),
    }
    return Response(
        content=result.content,
        media_type="application/octet-stream",
        headers=headers,
    )
