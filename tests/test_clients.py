# =============================================================================
# tests/test_clients.py - HTTP client tests
# =============================================================================
# Sessions are MagicMocks returning real requests.Response objects, so the
# clients' status and payload handling runs unmodified.
# =============================================================================

from __future__ import annotations

import json
from dataclasses import replace

import pytest
import requests

from gpstudio.artifacts import FeedItem, ImageArtifact, TextArtifact
from gpstudio.clients import (
    DecodeFailure,
    HuggingFaceClient,
    PicsumClient,
    TransportFailure,
    TriviaClient,
)


# =============================================================================
# HuggingFaceClient
# =============================================================================

class TestHuggingFaceClient:

    def test_requires_api_key(self, settings, session):
        with pytest.raises(ValueError, match="API key"):
            HuggingFaceClient(replace(settings, huggingface_api_key=None), session)

    def test_generate_image_posts_inputs_with_bearer(self, settings, session, make_response):
        session.request.return_value = make_response(content=b"\x89PNG-bytes", content_type="image/png")
        client = HuggingFaceClient(settings, session)

        artifact = client.generate_image("Astronaut riding a horse")

        assert artifact == ImageArtifact(data=b"\x89PNG-bytes", mime_type="image/png")
        args, kwargs = session.request.call_args
        assert args == ("POST", "https://hf.example.test/models/black-forest-labs/FLUX.1-dev")
        assert kwargs["json"] == {"inputs": "Astronaut riding a horse"}
        assert kwargs["headers"]["Authorization"] == "Bearer test-hf-key"
        assert kwargs["timeout"] == 5

    def test_generate_image_rejects_json_body(self, settings, session, make_response):
        session.request.return_value = make_response(
            content=json.dumps({"error": "Model is loading"}).encode()
        )
        client = HuggingFaceClient(settings, session)

        with pytest.raises(DecodeFailure):
            client.generate_image("a cat")

    def test_generate_image_rejects_empty_image(self, settings, session, make_response):
        session.request.return_value = make_response(content=b"", content_type="image/jpeg")

        with pytest.raises(DecodeFailure):
            HuggingFaceClient(settings, session).generate_image("a cat")

    def test_non_success_status_is_transport_failure(self, settings, session, make_response):
        session.request.return_value = make_response(status=503, content=b"{}")

        with pytest.raises(TransportFailure) as excinfo:
            HuggingFaceClient(settings, session).generate_image("a cat")

        assert excinfo.value.status_code == 503

    def test_network_error_is_transport_failure(self, settings, session):
        session.request.side_effect = requests.ConnectionError("unreachable")

        with pytest.raises(TransportFailure):
            HuggingFaceClient(settings, session).summarize("long text")

    def test_summarize_extracts_summary_text(self, settings, session, make_response):
        session.request.return_value = make_response(
            content=json.dumps([{"summary_text": " A short summary. "}]).encode()
        )

        artifact = HuggingFaceClient(settings, session).summarize("long text")

        assert artifact == TextArtifact(text="A short summary.")
        args, _ = session.request.call_args
        assert args[1].endswith("/facebook/bart-large-cnn")

    @pytest.mark.parametrize(
        "body",
        [b"[]", b'{"summary_text": "not a list"}', b'[{"text": "wrong key"}]', b"not json"],
    )
    def test_summarize_malformed_payload(self, settings, session, make_response, body):
        session.request.return_value = make_response(content=body)

        with pytest.raises(DecodeFailure):
            HuggingFaceClient(settings, session).summarize("long text")


# =============================================================================
# TriviaClient
# =============================================================================

class TestTriviaClient:

    def test_random_fact(self, settings, session, make_response):
        session.request.return_value = make_response(
            content=json.dumps({"text": "42 is the answer.", "number": 42}).encode()
        )

        artifact = TriviaClient(settings, session).random_fact()

        assert artifact.text == "42 is the answer."
        args, kwargs = session.request.call_args
        assert args == ("GET", settings.trivia_url)
        assert "Authorization" not in kwargs["headers"]

    def test_missing_text_field(self, settings, session, make_response):
        session.request.return_value = make_response(content=b'{"number": 7}')

        with pytest.raises(DecodeFailure):
            TriviaClient(settings, session).random_fact()


# =============================================================================
# PicsumClient
# =============================================================================

class TestPicsumClient:

    def test_fetch_item_derives_urls(self, settings, session, make_response):
        session.request.return_value = make_response(
            content=json.dumps({"id": "10", "author": "Paul Jarvis", "width": 2500, "height": 1667}).encode()
        )

        item = PicsumClient(settings, session).fetch_item(10)

        assert item == FeedItem(
            id=10,
            display_url="https://photos.example.test/id/10/400/300",
            download_url="https://photos.example.test/id/10/2500/1667",
            author="Paul Jarvis",
            width=2500,
            height=1667,
        )
        args, _ = session.request.call_args
        assert args == ("GET", "https://photos.example.test/id/10/info")

    def test_fetch_item_missing_field(self, settings, session, make_response):
        session.request.return_value = make_response(content=b'{"author": "x"}')

        with pytest.raises(DecodeFailure):
            PicsumClient(settings, session).fetch_item(3)

    def test_unknown_id_is_transport_failure(self, settings, session, make_response):
        session.request.return_value = make_response(status=404, content=b"Image does not exist")

        with pytest.raises(TransportFailure):
            PicsumClient(settings, session).fetch_item(86)

    def test_download_returns_bytes(self, settings, session, make_response):
        session.request.return_value = make_response(content=b"jpeg-bytes", content_type="image/jpeg")

        assert PicsumClient(settings, session).download("https://photos.example.test/id/1/10/10") == b"jpeg-bytes"
