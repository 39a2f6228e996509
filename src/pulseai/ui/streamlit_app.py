from __future__ import annotations

import streamlit as st

from pulseai.ui.session_state import get_state
from pulseai.ui.callbacks import analyze_upload
from pulseai.ui.components.file_uploader import file_uploader
from pulseai.ui.components.history_table import display_history


st.set_page_config(page_title="PulseAi")
st.title("PulseAi Logic Analyzer")

state = get_state()

uploaded_file = file_uploader()
output_area = st.empty()

analyze_clicked = st.button("Analyze", disabled=uploaded_file is None)
quick_clicked = st.button("Quick Analyze", disabled=uploaded_file is None)

if uploaded_file and (analyze_clicked or quick_clicked):
    with st.spinner("Analyzing capture…"):
        try:
            analyze_upload(uploaded_file, state, quick=quick_clicked)
        except Exception as exc:
            st.error(f"Error during analysis: {exc}")

report_tab, history_tab = st.tabs(["Report", "History"])
with report_tab:
    if state.outcome is not None:
        st.caption(f"{state.outcome.file_name} · source: {state.outcome.source}")
        st.code(state.outcome.result, language=None)
        st.download_button(
            "Download Report",
            state.outcome.result.encode("utf-8"),
            file_name="pulseai_report.txt",
            mime="text/plain",
        )
    elif uploaded_file is None:
        output_area.write("Upload a CSV capture to begin analysis.")
    elif not state.analysis_ran:
        output_area.write("Click 'Analyze' to see results.")
with history_tab:
    display_history(state.history)

if __name__ == "__main__":  # pragma: no cover
    print("Run this GUI with:  streamlit run src/pulseai/ui/streamlit_app.py")
