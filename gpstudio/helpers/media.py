"""Local media library standing in for the device photo gallery.

Downloaded photos are written under a root directory and registered in a JSON
media index (``index.json``) so the settings screen can list them.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Protocol

logger = logging.getLogger(__name__)

INDEX_FILE = "index.json"


class MediaError(Exception):
    """Base class for media library failures."""


class PermissionDenied(MediaError):
    """The user refused storage access."""


class PersistenceFailure(MediaError):
    """Writing the file or the media index failed."""


class PermissionGate(Protocol):
    def request(self) -> bool:
        """Return True when the app may write to the media library."""


@dataclass
class StaticPermissionGate:
    """Permission gate whose answer is decided up front (e.g. by a UI toggle)."""
    granted: bool = False
    requests: int = 0

    def request(self) -> bool:
        self.requests += 1
        return self.granted


def ensure_permission(gate: PermissionGate) -> None:
    """Ask *gate* for storage access, raising PermissionDenied on refusal."""
    if not gate.request():
        raise PermissionDenied("Storage permission was not granted")


@dataclass
class MediaEntry:
    filename: str
    source_url: str = ""
    author: str = ""
    size_bytes: int = 0
    saved_at: float = field(default_factory=time.time)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filename": self.filename,
            "source_url": self.source_url,
            "author": self.author,
            "size_bytes": self.size_bytes,
            "saved_at": self.saved_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MediaEntry":
        return cls(
            filename=data["filename"],
            source_url=data.get("source_url", ""),
            author=data.get("author", ""),
            size_bytes=data.get("size_bytes", 0),
            saved_at=data.get("saved_at", time.time()),
        )


class MediaLibrary:
    """Directory of saved photos plus its index."""

    def __init__(self, root: Path | str):
        self.root = Path(root)

    @property
    def index_path(self) -> Path:
        return self.root / INDEX_FILE

    def _read_index(self) -> List[MediaEntry]:
        """Parse the index strictly; a missing index is empty, a damaged one is an error."""
        if not self.index_path.exists():
            return []
        try:
            raw = json.loads(self.index_path.read_text())
            items = raw["items"] if isinstance(raw, dict) else None
            if not isinstance(items, list) or not all(
                isinstance(item, dict) and "filename" in item for item in items
            ):
                raise ValueError("unexpected index layout")
            return [MediaEntry.from_dict(item) for item in items]
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise PersistenceFailure(f"Media index {self.index_path} is unreadable: {e}") from e

    def entries(self) -> List[MediaEntry]:
        """Return registered media, oldest first."""
        try:
            return self._read_index()
        except PersistenceFailure as e:
            logger.warning(f"Failed to read media index: {e}")
            return []

    def save(self, filename: str, data: bytes, *, source_url: str = "", author: str = "") -> Path:
        """Write *data* as *filename* and register it in the index.

        The file is removed again when registration fails, so the directory
        never holds a newly saved photo the index does not know about.
        """
        target = self.root / Path(filename).name
        entry = MediaEntry(
            filename=target.name, source_url=source_url, author=author, size_bytes=len(data)
        )

        try:
            self.root.mkdir(parents=True, exist_ok=True)
            existed = target.exists()
            target.write_bytes(data)
        except OSError as e:
            logger.warning(f"Failed to save {target}: {e}")
            raise PersistenceFailure(f"Could not save {target.name}: {e}") from e

        try:
            self._register(entry)
        except PersistenceFailure as e:
            self._discard(target, existed, e)
            raise
        except OSError as e:
            self._discard(target, existed, e)
            raise PersistenceFailure(f"Could not register {target.name}: {e}") from e

        logger.info(f"Saved {target} ({len(data)} bytes)")
        return target

    def _register(self, entry: MediaEntry) -> None:
        items = [e for e in self._read_index() if e.filename != entry.filename]
        items.append(entry)
        state = {"items": [e.to_dict() for e in items], "last_updated": time.time()}

        # Write next to the index and swap it in so a failed write never truncates it
        fd, tmp_name = tempfile.mkstemp(dir=self.root, prefix=".index-", suffix=".json")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(state, f, indent=2)
            os.replace(tmp_name, self.index_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _discard(self, target: Path, existed: bool, error: Exception) -> None:
        logger.warning(f"Failed to register {target}: {error}")
        if not existed:
            target.unlink(missing_ok=True)
