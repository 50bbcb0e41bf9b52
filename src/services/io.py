"""Service-layer helpers for input/output handling."""

from __future__ import annotations

import io
import logging
import zipfile
from typing import TYPE_CHECKING

from docx import Document

if TYPE_CHECKING:
    from docx.document import Document as DocxDocument

logger = logging.getLogger(__name__)

DEFAULT_MIN_INFLATE_RATIO = 0.001
DEFAULT_INFLATE_GRACE_BYTES = 100 * 1024


def check_archive(
    data: bytes,
    *,
    min_inflate_ratio: float = DEFAULT_MIN_INFLATE_RATIO,
    grace_bytes: int = DEFAULT_INFLATE_GRACE_BYTES,
) -> None:
    """Reject containers that are not zips or that look like zip bombs.

    Entries whose declared size stays under ``grace_bytes`` are not checked;
    small XML parts legitimately compress very well.
    """
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            entries = archive.infolist()
    except zipfile.BadZipFile as exc:
        raise ValueError(f"Not a valid .docx container: {exc}") from exc

    for info in entries:
        if info.file_size <= grace_bytes:
            continue
        ratio = info.compress_size / info.file_size
        if ratio < min_inflate_ratio:
            logger.warning(
                "Rejecting %s: inflate ratio %.6f below %.6f",
                info.filename,
                ratio,
                min_inflate_ratio,
            )
            raise ValueError(
                f"Zip bomb detected: entry {info.filename!r} expands beyond the "
                f"allowed ratio ({ratio:.6f} < {min_inflate_ratio})."
            )


def load_document(data: bytes) -> "DocxDocument":
    return Document(io.BytesIO(data))


def save_document(document: "DocxDocument") -> bytes:
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


__all__ = ["check_archive", "load_document", "save_document"]
