"""Streamlit UI for the random photo feed.

Lookups, batching and saving live in `helpers.feed`; this module only renders
the feed state and forwards button presses.
"""
from __future__ import annotations

import pandas as pd
import streamlit as st

from gpstudio.artifacts import FeedItem
from gpstudio.clients.picsum import PicsumClient
from gpstudio.config.settings import SETTINGS
from gpstudio.helpers.feed import DownloadOutcome, RandomFeedController
from gpstudio.ui.session import get_controller, run

SCREEN = "photo_feed"
PERMISSION_KEY = "media_permission"


class SessionPermissionGate:
    """Storage permission backed by the opt-in checkbox on this screen."""

    def request(self) -> bool:
        return bool(st.session_state.get(PERMISSION_KEY, False))


def _build_controller() -> RandomFeedController:
    return RandomFeedController.from_settings(
        PicsumClient(SETTINGS), SETTINGS, permissions=SessionPermissionGate()
    )


def _show_download_outcome(outcome: DownloadOutcome) -> None:
    if outcome == DownloadOutcome.SAVED:
        st.success(outcome.message)
    elif outcome == DownloadOutcome.PERMISSION_DENIED:
        st.warning(outcome.message)
    else:
        st.error(outcome.message)


def _render_item(controller: RandomFeedController, item: FeedItem) -> None:
    st.image(item.display_url, width="stretch")
    st.caption(f"📷 {item.author} · {item.width}×{item.height}")
    if st.button("💾 Save", key=f"feed_save_{item.id}"):
        with st.spinner("Saving..."):
            outcome = run(controller.download_item(item))
        _show_download_outcome(outcome)


def render_photo_feed() -> None:
    """Render the photo feed screen."""
    controller = get_controller(SCREEN, _build_controller)

    st.header("📸 Photo Feed")
    st.checkbox(
        "Allow saving photos to the media library",
        key=PERMISSION_KEY,
        help=f"Saved photos go to {SETTINGS.media_dir}",
    )

    state = controller.state
    first_visit = not state.items and state.error_message is None and state.attempts == 0
    if st.button("🔄 Load new photos", key="feed_refresh") or first_visit:
        with st.spinner("Fetching photos..."):
            run(controller.fetch_batch())

    state = controller.state
    if state.error_message:
        st.error(state.error_message)
        if state.attempts > 1:
            st.caption(f"Gave up after {state.attempts} attempts. Press the button to try again.")
        return

    columns = st.columns(min(len(state.items), 3) or 1)
    for index, item in enumerate(state.items):
        with columns[index % len(columns)]:
            _render_item(controller, item)

    with st.expander("Batch details"):
        df = pd.DataFrame([item.to_dict() for item in state.items])
        st.dataframe(df, width="stretch", hide_index=True)
