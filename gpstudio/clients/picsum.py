"""Stock photo client (Lorem Picsum).

`/id/{id}/info` answers with the photo metadata; image URLs are derived from
the id and a requested resolution.
"""

from __future__ import annotations

import logging

from gpstudio.artifacts import FeedItem

from .base import ApiClient, DecodeFailure

logger = logging.getLogger(__name__)


class PicsumClient(ApiClient):

    def _url(self, path: str) -> str:
        return f"{self._settings.picsum_base_url.rstrip('/')}/{path.lstrip('/')}"

    def image_url(self, photo_id: int, width: int, height: int) -> str:
        return self._url(f"id/{photo_id}/{width}/{height}")

    def fetch_item(self, photo_id: int) -> FeedItem:
        """Resolve metadata for *photo_id* plus its display and download URLs."""
        data = self._json(self._get(self._url(f"id/{photo_id}/info")))

        try:
            author = str(data["author"])
            width = int(data["width"])
            height = int(data["height"])
        except (KeyError, TypeError, ValueError) as exc:
            raise DecodeFailure(f"Unexpected photo info for id {photo_id}: {data!r}") from exc

        return FeedItem(
            id=photo_id,
            display_url=self.image_url(
                photo_id, self._settings.feed_display_width, self._settings.feed_display_height
            ),
            download_url=self.image_url(photo_id, width, height),
            author=author,
            width=width,
            height=height,
        )

    def download(self, url: str) -> bytes:
        """Return the raw bytes behind *url*."""
        response = self._get(url)
        if not response.content:
            raise DecodeFailure(f"Empty download from {url}")
        logger.debug(f"Downloaded {len(response.content)} bytes from {url}")
        return response.content
