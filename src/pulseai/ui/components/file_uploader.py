from __future__ import annotations

import streamlit as st

from pulseai.core.config import settings


def file_uploader(label: str | None = None, key: str = "csv_uploader"):
    """Return an uploaded CSV file object if within size limits."""
    limit_mb = settings.max_upload_bytes / (1024 * 1024)
    label = label or f"Upload a logic analyzer CSV capture (≤ {limit_mb:g} MB)"
    uploaded = st.file_uploader(label, type=["csv"], key=key)
    if uploaded and uploaded.size > settings.max_upload_bytes:
        st.error(f"File exceeds {limit_mb:g} MB limit.")
        return None
    return uploaded
