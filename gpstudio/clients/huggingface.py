"""Hugging Face inference router client.

Covers the two models the app uses: a text-to-image model that answers with a
binary image payload, and a summarization model that answers with
``[{"summary_text": ...}]``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

import requests

from gpstudio.artifacts import ImageArtifact, TextArtifact
from gpstudio.config.settings import AppSettings

from .base import ApiClient, DecodeFailure

logger = logging.getLogger(__name__)


class HuggingFaceClient(ApiClient):
    """Bearer-authenticated client for the inference router."""

    def __init__(self, settings: AppSettings, session: requests.Session | None = None):
        if not settings.huggingface_api_key:
            raise ValueError("Hugging Face API key must be provided.")
        super().__init__(settings, session)
        self._api_key = settings.huggingface_api_key

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    def _model_url(self, model: str) -> str:
        return f"{self._settings.inference_base_url.rstrip('/')}/{model}"

    def _query(self, model: str, inputs: str) -> requests.Response:
        payload: Dict[str, Any] = {"inputs": inputs}
        return self._post(self._model_url(model), json=payload)

    # ---------------------------------------------------------------------
    # Public API
    # ---------------------------------------------------------------------

    def generate_image(self, prompt: str) -> ImageArtifact:
        """Return the image generated for *prompt*."""
        response = self._query(self._settings.image_model, prompt)

        mime_type = response.headers.get("Content-Type", "").split(";")[0].strip()
        if not mime_type.startswith("image/"):
            # The router reports model errors (e.g. still loading) as JSON bodies
            raise DecodeFailure(f"Expected an image payload, got {mime_type or 'no content type'}")
        if not response.content:
            raise DecodeFailure("Image payload is empty")

        logger.info(f"Generated image ({len(response.content)} bytes, {mime_type})")
        return ImageArtifact(data=response.content, mime_type=mime_type)

    def summarize(self, text: str) -> TextArtifact:
        """Return the summary of *text*."""
        response = self._query(self._settings.summary_model, text)
        data = self._json(response)

        try:
            summary = data[0]["summary_text"]
        except (IndexError, KeyError, TypeError) as exc:
            raise DecodeFailure(f"Unexpected summarization payload: {data!r}") from exc
        if not isinstance(summary, str):
            raise DecodeFailure("summary_text is not a string")

        return TextArtifact(text=summary.strip())
