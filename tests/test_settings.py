from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from gpstudio.config.settings import SETTINGS, AppSettings, update_from_kwargs


class TestAppSettings:

    def test_key_loaded_from_environment(self):
        # conftest sets HUGGING_FACE_API_KEY before import
        assert SETTINGS.has_inference_key

    def test_defaults(self):
        settings = AppSettings(huggingface_api_key=None)

        assert settings.feed_batch_size == 5
        assert settings.feed_max_id == 1084
        assert settings.feed_retry_delay_sec == 1.5
        assert not settings.has_inference_key

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            SETTINGS.feed_batch_size = 10  # type: ignore[misc]

    def test_update_from_kwargs_returns_copy(self):
        updated = update_from_kwargs(feed_batch_size=8)

        assert updated.feed_batch_size == 8
        assert updated is not SETTINGS
        assert updated.image_model == SETTINGS.image_model
