from __future__ import annotations

from dataclasses import dataclass, field

import streamlit as st

from pulseai.core.models import AnalysisOutcome
from pulseai.history import AnalysisHistory


@dataclass
class AppState:
    outcome: AnalysisOutcome | None = None
    history: AnalysisHistory = field(default_factory=AnalysisHistory)
    analysis_ran: bool = False


def get_state() -> AppState:
    if "ui_state" not in st.session_state:
        st.session_state["ui_state"] = AppState()
    return st.session_state["ui_state"]
