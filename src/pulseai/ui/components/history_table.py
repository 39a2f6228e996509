from __future__ import annotations

import streamlit as st

from pulseai.history import AnalysisHistory


def display_history(history: AnalysisHistory) -> None:
    """Render past analyses and the AI success rate."""
    stats = history.analytics()
    cols = st.columns(3)
    cols[0].metric("Analyses", stats["total_analyses"])
    cols[1].metric("AI analyses", stats["deepseek_analyses"])
    cols[2].metric("AI success rate", f"{stats['success_rate']}%")
    df = history.to_dataframe()
    if df.empty:
        st.write("No analyses yet.")
        return
    st.dataframe(df.drop(columns=["result"]), use_container_width=True)
