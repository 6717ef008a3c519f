from __future__ import annotations

import asyncio

import pytest

from gpstudio.helpers.retry import RetryPolicy


class Flaky:
    """Async callable that fails a fixed number of times before succeeding."""

    def __init__(self, failures: int, exc: type[Exception] = ConnectionError):
        self.failures = failures
        self.exc = exc
        self.calls = 0

    async def __call__(self) -> str:
        self.calls += 1
        if self.calls <= self.failures:
            raise self.exc(f"failure {self.calls}")
        return "ok"


def _recording_sleep():
    delays = []

    async def sleep(delay: float) -> None:
        delays.append(delay)

    return sleep, delays


class TestRetryPolicy:

    def test_first_attempt_success_does_not_sleep(self):
        sleep, delays = _recording_sleep()
        op = Flaky(0)

        result = asyncio.run(RetryPolicy(max_attempts=2, delay=1.5).call(op, sleep=sleep))

        assert result == "ok"
        assert op.calls == 1
        assert delays == []

    def test_recovers_on_second_attempt(self):
        sleep, delays = _recording_sleep()
        op = Flaky(1)

        result = asyncio.run(RetryPolicy(max_attempts=2, delay=1.5).call(op, sleep=sleep))

        assert result == "ok"
        assert op.calls == 2
        assert delays == [1.5]

    def test_exhausted_policy_reraises_last_failure(self):
        sleep, delays = _recording_sleep()
        op = Flaky(5)

        with pytest.raises(ConnectionError, match="failure 2"):
            asyncio.run(RetryPolicy(max_attempts=2, delay=0.5).call(op, sleep=sleep))

        assert op.calls == 2
        assert delays == [0.5]

    def test_non_retryable_error_propagates_immediately(self):
        sleep, delays = _recording_sleep()
        op = Flaky(1, exc=KeyError)

        with pytest.raises(KeyError):
            asyncio.run(
                RetryPolicy(max_attempts=3, delay=1).call(
                    op, retry_on=(ConnectionError,), sleep=sleep
                )
            )

        assert op.calls == 1
        assert delays == []

    def test_on_retry_callback(self):
        sleep, _ = _recording_sleep()
        seen = []

        asyncio.run(
            RetryPolicy(max_attempts=3, delay=0).call(
                Flaky(2), sleep=sleep, on_retry=lambda attempt, exc: seen.append(attempt)
            )
        )

        assert seen == [1, 2]

    @pytest.mark.parametrize("kwargs", [{"max_attempts": 0}, {"delay": -1}])
    def test_invalid_policy(self, kwargs):
        with pytest.raises(ValueError):
            RetryPolicy(**kwargs)
