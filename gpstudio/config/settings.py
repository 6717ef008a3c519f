"""Runtime configuration for GP Studio.

Values come from the environment (optionally via a local `.env` file):
• HUGGING_FACE_API_KEY – bearer credential for the inference router.
• IMAGE_MODEL / SUMMARY_MODEL – model ids served by the router.
• FEED_* – photo feed batch size, id range and retry policy.

Callers receive an `AppSettings` instance explicitly; the module-level
`SETTINGS` singleton is only the default used by the Streamlit entry point.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv  # type: ignore

# Load variables from .env if present
load_dotenv()


@dataclass(frozen=True)
class AppSettings:
    """Immutable container for runtime parameters."""

    # --- Hugging Face inference -------------------------------------------
    huggingface_api_key: str | None = os.getenv("HUGGING_FACE_API_KEY") or None
    inference_base_url: str = os.getenv(
        "HF_INFERENCE_URL", "https://router.huggingface.co/hf-inference/models"
    )
    image_model: str = os.getenv("IMAGE_MODEL", "black-forest-labs/FLUX.1-dev")
    summary_model: str = os.getenv("SUMMARY_MODEL", "facebook/bart-large-cnn")

    # --- Plain GET endpoints ----------------------------------------------
    trivia_url: str = os.getenv("TRIVIA_URL", "http://numbersapi.com/random/trivia?json")
    picsum_base_url: str = os.getenv("PICSUM_BASE_URL", "https://picsum.photos")

    # --- Photo feed ---------------------------------------------------------
    feed_batch_size: int = int(os.getenv("FEED_BATCH_SIZE", "5"))
    feed_max_id: int = int(os.getenv("FEED_MAX_ID", "1084"))
    feed_max_attempts: int = int(os.getenv("FEED_MAX_ATTEMPTS", "2"))
    feed_retry_delay_sec: float = float(os.getenv("FEED_RETRY_DELAY_SEC", "1.5"))
    feed_display_width: int = 400
    feed_display_height: int = 300

    # --- Transport / storage -------------------------------------------------
    request_timeout_sec: float = float(os.getenv("REQUEST_TIMEOUT_SEC", "60"))
    media_dir: Path = Path(os.getenv("MEDIA_DIR", "downloads"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def has_inference_key(self) -> bool:
        return bool(self.huggingface_api_key)


# Singleton used by the UI layer
SETTINGS = AppSettings()


def update_from_kwargs(**overrides) -> AppSettings:
    """Return a new AppSettings with supplied overrides."""

    return replace(SETTINGS, **overrides)
