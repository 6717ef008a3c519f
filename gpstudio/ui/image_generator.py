"""Streamlit UI for the text-to-image generator."""
from __future__ import annotations

import streamlit as st

from gpstudio.clients.huggingface import HuggingFaceClient
from gpstudio.config.settings import SETTINGS
from gpstudio.helpers.lifecycle import ImageGenerationController, SubmitOutcome
from gpstudio.ui.session import get_controller, run

SCREEN = "image_generator"


def render_image_generator() -> None:
    st.header("🖼️ AI Image Generator")

    if not SETTINGS.has_inference_key:
        st.error("⚠️ No Hugging Face API key configured. Set HUGGING_FACE_API_KEY to generate images.")
        return

    controller = get_controller(
        SCREEN, lambda: ImageGenerationController(HuggingFaceClient(SETTINGS))
    )

    prompt = st.text_area(
        "Describe an image to generate:",
        value=controller.state.input_value,
        placeholder="e.g. Astronaut riding a horse",
        key="image_prompt",
    )
    controller.set_input(prompt)

    if st.button("Generate Image", key="image_generate"):
        with st.spinner("Generating..."):
            outcome = run(controller.submit())
        if outcome == SubmitOutcome.SKIPPED:
            st.warning("Please enter a description first.")

    state = controller.state
    if state.error_message:
        st.error(state.error_message)

    image = controller.image
    if image is not None:
        st.markdown("**Generated Image:**")
        st.image(image.data, width="stretch")
        st.caption(f"{image.mime_type} · {image.size_bytes / 1024:.0f} KB · {SETTINGS.image_model}")
