"""Screen controllers and the small utilities they share.

Nothing here imports Streamlit: controllers can be driven from the UI layer,
from scripts, or from tests.
"""
