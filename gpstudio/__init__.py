"""GP Studio – small Streamlit screens backed by third-party inference APIs.

Each screen issues one outbound request per user action and renders the
result. The shared request lifecycle lives in `gpstudio.helpers`, the HTTP
collaborators in `gpstudio.clients` and the Streamlit pages in `gpstudio.ui`.
"""

__version__ = "0.1.0"
