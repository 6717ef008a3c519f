"""Streamlit UI for the text summarizer."""
from __future__ import annotations

import streamlit as st

from gpstudio.clients.huggingface import HuggingFaceClient
from gpstudio.config.settings import SETTINGS
from gpstudio.helpers.lifecycle import SubmitOutcome, SummarizationController
from gpstudio.ui.session import get_controller, run

SCREEN = "summarizer"


def render_summarizer() -> None:
    st.header("📝 Text Summarizer")

    if not SETTINGS.has_inference_key:
        st.error("⚠️ No Hugging Face API key configured. Set HUGGING_FACE_API_KEY to summarize text.")
        return

    controller = get_controller(
        SCREEN, lambda: SummarizationController(HuggingFaceClient(SETTINGS))
    )

    text = st.text_area(
        "Paste the text to summarize:",
        value=controller.state.input_value,
        height=240,
        key="summary_input",
    )
    controller.set_input(text)

    if st.button("Summarize", key="summary_submit"):
        with st.spinner("Summarizing..."):
            outcome = run(controller.submit())
        if outcome == SubmitOutcome.SKIPPED:
            st.warning("Please enter some text first.")

    state = controller.state
    if state.error_message:
        st.error(state.error_message)
    elif controller.summary:
        st.markdown("**Summary:**")
        st.write(controller.summary)
        st.caption(f"{len(controller.summary.split())} words · {SETTINGS.summary_model}")
