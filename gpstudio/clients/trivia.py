from __future__ import annotations

from gpstudio.artifacts import TextArtifact

from .base import ApiClient, DecodeFailure


class TriviaClient(ApiClient):
    """Plain GET client for the random number trivia endpoint."""

    def random_fact(self) -> TextArtifact:
        data = self._json(self._get(self._settings.trivia_url))
        text = data.get("text") if isinstance(data, dict) else None
        if not isinstance(text, str) or not text.strip():
            raise DecodeFailure("Trivia payload has no 'text' field")
        return TextArtifact(text=text)
