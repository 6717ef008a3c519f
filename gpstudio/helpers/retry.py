"""Bounded fixed-delay retry."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """Run an operation at most `max_attempts` times, `delay` seconds apart."""

    max_attempts: int = 2
    delay: float = 1.5

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.delay < 0:
            raise ValueError("delay must be non-negative")

    async def call(
        self,
        operation: Callable[[], Awaitable[T]],
        *,
        retry_on: Tuple[Type[BaseException], ...] = (Exception,),
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
        on_retry: Optional[Callable[[int, BaseException], None]] = None,
    ) -> T:
        """Await *operation* until it succeeds or attempts run out.

        Only exceptions listed in *retry_on* are retried; the last one is
        re-raised once the policy is exhausted.
        """
        for attempt in range(1, self.max_attempts + 1):
            try:
                return await operation()
            except retry_on as exc:
                if attempt == self.max_attempts:
                    raise
                logger.warning(
                    f"Attempt {attempt}/{self.max_attempts} failed: {exc}; retrying in {self.delay}s"
                )
                if on_retry is not None:
                    on_retry(attempt, exc)
                await sleep(self.delay)

        # Unreachable: the loop either returns or raises
        raise RuntimeError("Retry loop exited without a result")
