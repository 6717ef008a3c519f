import logging

import streamlit as st

from gpstudio.config.settings import SETTINGS
from gpstudio.ui.home import render_home
from gpstudio.ui.image_generator import render_image_generator
from gpstudio.ui.photo_feed import render_photo_feed
from gpstudio.ui.session import enter_screen
from gpstudio.ui.settings import render_settings
from gpstudio.ui.summarizer import render_summarizer

logging.basicConfig(
    level=SETTINGS.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logging.getLogger("urllib3").setLevel(logging.WARNING)

SCREENS = {
    "Home": ("home", render_home),
    "Image Generator": ("image_generator", render_image_generator),
    "Text Summarizer": ("summarizer", render_summarizer),
    "Photo Feed": ("photo_feed", render_photo_feed),
    "Settings": ("settings", render_settings),
}


def main():
    st.set_page_config(
        page_title="GP Studio",
        page_icon="🐹",
        layout="centered",
        initial_sidebar_state="expanded",
    )

    with st.sidebar:
        st.markdown("### 🐹 GP Studio")
        section = st.selectbox(
            "Screen",
            tuple(SCREENS),
            help="Choose a screen",
        )

    # Route to appropriate section
    screen_id, render = SCREENS[section]
    enter_screen(screen_id)
    render()


if __name__ == "__main__":
    main()
