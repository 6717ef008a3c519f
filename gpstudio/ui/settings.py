"""Settings screen: configuration status and saved media."""
from __future__ import annotations

from datetime import datetime

import pandas as pd
import streamlit as st

from gpstudio import __version__
from gpstudio.config.settings import SETTINGS
from gpstudio.helpers.media import MediaLibrary


def render_settings() -> None:
    st.header("⚙️ Settings")

    st.subheader("Configuration")
    col1, col2 = st.columns(2)
    with col1:
        if SETTINGS.has_inference_key:
            st.success("🔑 Hugging Face API key configured")
        else:
            st.error("🔑 Hugging Face API key missing (HUGGING_FACE_API_KEY)")
        st.markdown(f"- **Image model:** `{SETTINGS.image_model}`")
        st.markdown(f"- **Summary model:** `{SETTINGS.summary_model}`")
    with col2:
        st.markdown(f"- **Feed batch size:** {SETTINGS.feed_batch_size}")
        st.markdown(f"- **Feed id range:** 0–{SETTINGS.feed_max_id - 1}")
        st.markdown(
            f"- **Feed retry:** {SETTINGS.feed_max_attempts} attempts, "
            f"{SETTINGS.feed_retry_delay_sec}s apart"
        )

    st.divider()
    st.subheader("Saved photos")
    entries = MediaLibrary(SETTINGS.media_dir).entries()
    if not entries:
        st.info("No photos saved yet. Use the 💾 button on the Photo Feed screen.")
    else:
        df = pd.DataFrame([e.to_dict() for e in entries])
        df["saved_at"] = df["saved_at"].map(lambda ts: datetime.fromtimestamp(ts).strftime("%Y-%m-%d %H:%M"))
        st.dataframe(df, width="stretch", hide_index=True)

    st.divider()
    st.caption(f"GP Studio v{__version__}")
