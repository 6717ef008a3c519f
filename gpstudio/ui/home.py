"""Home screen: a random trivia fact with a refresh button."""
from __future__ import annotations

import streamlit as st

from gpstudio.clients.trivia import TriviaClient
from gpstudio.config.settings import SETTINGS
from gpstudio.helpers.lifecycle import Phase, TriviaController
from gpstudio.ui.session import get_controller, run

SCREEN = "home"


def render_home() -> None:
    controller = get_controller(SCREEN, lambda: TriviaController(TriviaClient(SETTINGS)))

    st.title("🐹 Guinea Pigs")
    st.subheader("Did you know?")

    # Fetch a fact on first render
    refresh = st.button("🔄 New Fact", key="home_refresh")
    if refresh or controller.state.phase == Phase.IDLE:
        with st.spinner("Loading a fact..."):
            run(controller.submit())

    state = controller.state
    if state.error_message:
        st.error(state.error_message)
    elif controller.fact:
        st.info(controller.fact)
