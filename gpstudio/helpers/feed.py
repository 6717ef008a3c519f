"""Random photo feed.

A batch is `batch_size` photos keyed by ids sampled without replacement from
``[0, max_id)``. All lookups run concurrently and the batch is published only
when every one of them succeeded; a failed batch is retried according to the
controller's `RetryPolicy` and then settles empty with an error message.
"""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple

from gpstudio.artifacts import FeedItem
from gpstudio.clients.base import RequestFailure
from gpstudio.clients.picsum import PicsumClient
from gpstudio.config.settings import AppSettings

from .lifecycle import SubmitOutcome
from .media import MediaLibrary, PermissionDenied, PermissionGate, PersistenceFailure, ensure_permission
from .retry import RetryPolicy
from .sampling import generate_sample_ids

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeedState:
    items: Tuple[FeedItem, ...] = ()
    is_loading: bool = False
    error_message: Optional[str] = None
    attempts: int = 0


class DownloadOutcome(Enum):
    SAVED = "Photo saved to your library."
    PERMISSION_DENIED = "Permission required to save photos."
    FAILED = "Failed to save photo."

    @property
    def message(self) -> str:
        return self.value


class RandomFeedController:
    """Fetch, publish and download fixed-size batches of random photos."""

    failure_message = "Failed to load photos."

    def __init__(
        self,
        client: PicsumClient,
        *,
        batch_size: int = 5,
        max_id: int = 1084,
        retry_policy: RetryPolicy | None = None,
        library: MediaLibrary | None = None,
        permissions: PermissionGate | None = None,
        rng: random.Random | None = None,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ):
        if batch_size > max_id:
            raise ValueError(f"batch_size ({batch_size}) cannot exceed max_id ({max_id})")

        self._client = client
        self.batch_size = batch_size
        self.max_id = max_id
        self.retry_policy = retry_policy or RetryPolicy()
        self._library = library
        self._permissions = permissions
        self._rng = rng
        self._sleep = sleep

        self._state = FeedState()
        self._generation = 0
        self._disposed = False

    @classmethod
    def from_settings(
        cls,
        client: PicsumClient,
        settings: AppSettings,
        *,
        permissions: PermissionGate | None = None,
    ) -> "RandomFeedController":
        return cls(
            client,
            batch_size=settings.feed_batch_size,
            max_id=settings.feed_max_id,
            retry_policy=RetryPolicy(
                max_attempts=settings.feed_max_attempts, delay=settings.feed_retry_delay_sec
            ),
            library=MediaLibrary(settings.media_dir),
            permissions=permissions,
        )

    @property
    def state(self) -> FeedState:
        return self._state

    # ---------------------------------------------------------------------
    # Batch fetch
    # ---------------------------------------------------------------------

    async def fetch_batch(self) -> SubmitOutcome:
        """Load a new batch, retrying once (per policy) before giving up."""
        if self._disposed or self._state.is_loading:
            return SubmitOutcome.REJECTED

        token = self._generation
        self._state = replace(self._state, is_loading=True, error_message=None, attempts=0)
        attempts = 0

        async def attempt() -> Tuple[FeedItem, ...]:
            nonlocal attempts
            attempts += 1
            ids = generate_sample_ids(self.batch_size, self.max_id, self._rng)
            return await self._resolve(ids)

        try:
            items = await self.retry_policy.call(
                attempt, retry_on=(RequestFailure,), sleep=self._sleep
            )
        except RequestFailure as exc:
            logger.warning(f"Feed batch failed after {attempts} attempt(s): {exc}")
            return self._settle(token, (), self.failure_message, attempts)
        except BaseException:
            self._settle(token, (), self.failure_message, attempts)
            raise

        logger.info(f"Loaded feed batch {[item.id for item in items]}")
        return self._settle(token, items, None, attempts)

    async def _resolve(self, ids: Sequence[int]) -> Tuple[FeedItem, ...]:
        results = await asyncio.gather(
            *(asyncio.to_thread(self._client.fetch_item, photo_id) for photo_id in ids),
            return_exceptions=True,
        )

        failures: List[BaseException] = [r for r in results if isinstance(r, BaseException)]
        if failures:
            logger.warning(f"{len(failures)}/{len(ids)} photo lookups failed")
            raise failures[0]
        return tuple(results)  # type: ignore[arg-type]

    def _settle(
        self, token: int, items: Tuple[FeedItem, ...], error: Optional[str], attempts: int
    ) -> SubmitOutcome:
        if self._disposed or token != self._generation:
            logger.debug("Feed: discarding settlement after dispose")
            return SubmitOutcome.DISCARDED

        self._state = FeedState(items=items, is_loading=False, error_message=error, attempts=attempts)
        return SubmitOutcome.SUCCEEDED if error is None else SubmitOutcome.FAILED

    # ---------------------------------------------------------------------
    # Download
    # ---------------------------------------------------------------------

    async def download_item(self, item: FeedItem) -> DownloadOutcome:
        """Save *item* at full resolution into the media library."""
        if self._library is None or self._permissions is None:
            raise RuntimeError("Feed controller has no media library or permission gate configured")

        try:
            await asyncio.to_thread(ensure_permission, self._permissions)
        except PermissionDenied:
            logger.info(f"Download of photo {item.id} blocked: permission denied")
            return DownloadOutcome.PERMISSION_DENIED

        try:
            data = await asyncio.to_thread(self._client.download, item.download_url)
            await asyncio.to_thread(
                self._library.save,
                item.filename,
                data,
                source_url=item.download_url,
                author=item.author,
            )
        except (RequestFailure, PersistenceFailure) as exc:
            logger.warning(f"Download of photo {item.id} failed: {exc}")
            return DownloadOutcome.FAILED

        return DownloadOutcome.SAVED

    def dispose(self) -> None:
        self._disposed = True
        self._generation += 1
