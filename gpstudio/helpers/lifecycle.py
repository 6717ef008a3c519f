"""Request lifecycle shared by every single-call screen.

A controller owns the view state of one screen instance (input text, loading
flag, result or error) and drives exactly one outbound call per `submit()`.

Policies:
- empty (whitespace-only) input is skipped without touching state;
- a submit while another is in flight is rejected, never queued;
- transport and decode failures collapse into one user-visible message and
  clear the previous result;
- after `dispose()` any late settlement is discarded.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Optional

from gpstudio.artifacts import Artifact, ImageArtifact, TextArtifact
from gpstudio.clients.base import RequestFailure
from gpstudio.clients.huggingface import HuggingFaceClient
from gpstudio.clients.trivia import TriviaClient

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class SubmitOutcome(Enum):
    SKIPPED = "skipped"  # empty input
    REJECTED = "rejected"  # already loading, or screen disposed
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    DISCARDED = "discarded"  # settled after the screen went away


@dataclass(frozen=True)
class ScreenState:
    """Snapshot of one screen's view state."""
    input_value: str = ""
    is_loading: bool = False
    result: Optional[Artifact] = None
    error_message: Optional[str] = None

    @property
    def phase(self) -> Phase:
        if self.is_loading:
            return Phase.LOADING
        if self.error_message is not None:
            return Phase.ERROR
        if self.result is not None:
            return Phase.SUCCESS
        return Phase.IDLE


Listener = Callable[[ScreenState], None]


class RequestLifecycleController:
    """Drive one outbound call per submit and publish the resulting state.

    *fetch* is a blocking callable taking the current input and returning the
    decoded artifact; it runs in a worker thread so the event loop stays free.
    """

    failure_message = "Operation failed."
    requires_input = True

    def __init__(
        self,
        fetch: Callable[[str], Artifact],
        *,
        failure_message: str | None = None,
        requires_input: bool | None = None,
    ):
        self._fetch = fetch
        if failure_message is not None:
            self.failure_message = failure_message
        if requires_input is not None:
            self.requires_input = requires_input

        self._state = ScreenState()
        self._generation = 0
        self._disposed = False
        self._listeners: List[Listener] = []

    # ---------------------------------------------------------------------
    # State access
    # ---------------------------------------------------------------------

    @property
    def state(self) -> ScreenState:
        return self._state

    @property
    def disposed(self) -> bool:
        return self._disposed

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _publish(self, state: ScreenState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    # ---------------------------------------------------------------------
    # Operations
    # ---------------------------------------------------------------------

    def set_input(self, text: str) -> None:
        if text != self._state.input_value:
            self._publish(replace(self._state, input_value=text))

    async def submit(self) -> SubmitOutcome:
        """Issue the outbound call for the current input and settle once."""
        text = self._state.input_value
        if self.requires_input and not text.strip():
            return SubmitOutcome.SKIPPED
        if self._disposed or self._state.is_loading:
            logger.debug("Submit rejected: request already in flight or screen disposed")
            return SubmitOutcome.REJECTED

        token = self._generation
        self._publish(replace(self._state, is_loading=True, error_message=None))

        try:
            artifact = await asyncio.to_thread(self._fetch, text)
        except RequestFailure as exc:
            logger.warning(f"{type(self).__name__} request failed: {exc}")
            return self._settle(token, None, self.failure_message)
        except BaseException:
            self._settle(token, None, self.failure_message)
            raise

        return self._settle(token, artifact, None)

    def _settle(self, token: int, result: Optional[Artifact], error: Optional[str]) -> SubmitOutcome:
        if self._disposed or token != self._generation:
            logger.debug(f"{type(self).__name__}: discarding settlement after dispose")
            return SubmitOutcome.DISCARDED

        self._publish(
            replace(self._state, is_loading=False, result=result, error_message=error)
        )
        return SubmitOutcome.SUCCEEDED if error is None else SubmitOutcome.FAILED

    def dispose(self) -> None:
        """Detach from the screen; pending settlements become no-ops."""
        self._disposed = True
        self._generation += 1
        self._listeners.clear()


# ---------------------------------------------------------------------------
# Screen controllers
# ---------------------------------------------------------------------------

class ImageGenerationController(RequestLifecycleController):
    failure_message = "Failed to generate image."

    def __init__(self, client: HuggingFaceClient):
        super().__init__(client.generate_image)

    @property
    def image(self) -> ImageArtifact | None:
        result = self.state.result
        return result if isinstance(result, ImageArtifact) else None


class SummarizationController(RequestLifecycleController):
    failure_message = "Failed to summarize text."

    def __init__(self, client: HuggingFaceClient):
        super().__init__(client.summarize)

    @property
    def summary(self) -> str | None:
        result = self.state.result
        return result.text if isinstance(result, TextArtifact) else None


class TriviaController(RequestLifecycleController):
    """Home screen fact; takes no input."""

    failure_message = "Failed to load a trivia fact."
    requires_input = False

    def __init__(self, client: TriviaClient):
        super().__init__(lambda _text: client.random_fact())

    @property
    def fact(self) -> str | None:
        result = self.state.result
        return result.text if isinstance(result, TextArtifact) else None
