"""Reading and validating uploaded logic analyzer CSV captures."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .core.config import settings
from .core.models import Capture
from .exceptions import UploadValidationError
from .logging import get_logger

logger = get_logger(__name__)

ALLOWED_SUFFIXES: frozenset[str] = frozenset({".csv"})


def _split_fields(line: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in line.split(","))


def parse_capture(text: str) -> Capture:
    """Return a :class:`Capture` for raw CSV ``text``.

    Lines that are blank after stripping are dropped. The first remaining
    line is the header; short rows are kept as-is so the profiler can
    default their missing fields.
    """
    lines = [line for line in text.split("\n") if line.strip()]
    if not lines:
        return Capture()
    header = _split_fields(lines[0])
    rows = tuple(_split_fields(line) for line in lines[1:])
    return Capture(header=header, rows=rows)


def decode_upload(data: bytes) -> str:
    """Decode uploaded bytes as UTF-8, replacing undecodable sequences."""
    return data.decode("utf-8", errors="replace")


def sample_lines(text: str, limit: int) -> tuple[str, int, int]:
    """Return the first ``limit`` raw lines of ``text`` joined again.

    The second and third elements are the number of sampled lines and the
    total line count, used in prompts and log messages.
    """
    lines = text.split("\n")
    count = min(limit, len(lines))
    return "\n".join(lines[:count]), count, len(lines)


def validate_csv_upload(
    file_name: Optional[str],
    size: int,
    *,
    max_bytes: Optional[int] = None,
) -> None:
    """Raise :class:`UploadValidationError` if the upload should be rejected.

    Parameters
    ----------
    file_name:
        Original name of the uploaded file. ``None`` or empty means no file
        was supplied.
    size:
        Upload size in bytes.
    max_bytes:
        Size limit; defaults to ``settings.max_upload_bytes``.
    """
    limit = settings.max_upload_bytes if max_bytes is None else max_bytes
    if not file_name:
        raise UploadValidationError("No CSV file uploaded")
    suffix = Path(file_name).suffix.lower()
    if suffix not in ALLOWED_SUFFIXES:
        logger.warning("Rejected upload %s with suffix %r", file_name, suffix)
        raise UploadValidationError(
            "Only CSV files are allowed",
            context=file_name,
            suggestion="Export the capture from your analyzer software as CSV.",
        )
    if size > limit:
        logger.warning("Rejected upload %s: %d bytes exceeds %d", file_name, size, limit)
        raise UploadValidationError(
            f"File too large. Maximum size is {limit / (1024 * 1024):g}MB.",
            context=file_name,
            suggestion="Trim the capture to fewer samples before uploading.",
        )
