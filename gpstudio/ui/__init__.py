"""Streamlit screens.

Each module renders one screen from its controller's state and forwards user
actions to it; request handling itself lives in the `helpers` package.
"""
