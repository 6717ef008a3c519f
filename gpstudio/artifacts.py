"""Decoded results of one outbound call."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any, Dict, Union


@dataclass(frozen=True)
class TextArtifact:
    """Plain text result (trivia fact, summary)."""
    text: str


@dataclass(frozen=True)
class ImageArtifact:
    """Binary image payload as returned by the inference router."""
    data: bytes
    mime_type: str = "image/jpeg"

    @property
    def data_uri(self) -> str:
        """Return the image as a displayable base64 data URI."""
        encoded = base64.b64encode(self.data).decode("utf-8")
        return f"data:{self.mime_type};base64,{encoded}"

    @property
    def size_bytes(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class FeedItem:
    """One stock photo in the random feed."""
    id: int
    display_url: str
    download_url: str
    author: str
    width: int
    height: int

    @property
    def filename(self) -> str:
        return f"picsum_{self.id}_{self.width}x{self.height}.jpg"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for tabular display."""
        return {
            "id": self.id,
            "author": self.author,
            "width": self.width,
            "height": self.height,
            "display_url": self.display_url,
            "download_url": self.download_url,
        }


Artifact = Union[TextArtifact, ImageArtifact, FeedItem]
