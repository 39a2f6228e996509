from __future__ import annotations

from typing import Protocol

from pulseai.parser import decode_upload, validate_csv_upload
from pulseai.service import analyze_capture, quick_analyze

from .session_state import AppState


class UploadedCSV(Protocol):
    name: str
    size: int

    def getvalue(self) -> bytes: ...


def analyze_upload(uploaded_file: UploadedCSV, state: AppState, *, quick: bool = False) -> None:
    """Run an analysis for ``uploaded_file`` and store it on ``state``."""
    state.analysis_ran = True
    try:
        validate_csv_upload(uploaded_file.name, uploaded_file.size)
        data = uploaded_file.getvalue()
        content = decode_upload(data)
        if quick:
            state.outcome = quick_analyze(content, uploaded_file.name, file_size=len(data))
        else:
            state.outcome = analyze_capture(
                content,
                uploaded_file.name,
                file_size=len(data),
                history=state.history,
            )
    except Exception:
        state.outcome = None
        raise
