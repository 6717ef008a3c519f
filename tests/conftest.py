# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Sets deterministic environment variables before gpstudio.config is imported
# (it reads the environment at import time) and provides shared fixtures.
# =============================================================================

import os

os.environ["HUGGING_FACE_API_KEY"] = "test-hf-key"
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

from gpstudio.config.settings import AppSettings


def make_response(status: int = 200, content: bytes = b"", content_type: str = "application/json"):
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status
    response._content = content
    response.headers["Content-Type"] = content_type
    response.url = "https://example.test/"
    return response


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return AppSettings(
        huggingface_api_key="test-hf-key",
        inference_base_url="https://hf.example.test/models",
        image_model="black-forest-labs/FLUX.1-dev",
        summary_model="facebook/bart-large-cnn",
        trivia_url="http://trivia.example.test/random/trivia?json",
        picsum_base_url="https://photos.example.test",
        feed_batch_size=5,
        feed_max_id=1084,
        feed_max_attempts=2,
        feed_retry_delay_sec=1.5,
        request_timeout_sec=5,
        media_dir=tmp_path / "media",
    )


@pytest.fixture(name="make_response")
def make_response_fixture():
    return make_response


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)
