"""Per-screen controller bookkeeping in `st.session_state`.

Only the active screen keeps a controller. Switching screens disposes the
previous one so a request it still has in flight cannot write into a screen
that is gone, and the next visit starts from a fresh instance.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Coroutine, Dict, TypeVar

import streamlit as st

logger = logging.getLogger(__name__)

T = TypeVar("T")

_CONTROLLERS_KEY = "screen_controllers"
_ACTIVE_KEY = "active_screen"


def _controllers() -> Dict[str, Any]:
    if _CONTROLLERS_KEY not in st.session_state:
        st.session_state[_CONTROLLERS_KEY] = {}
    return st.session_state[_CONTROLLERS_KEY]


def enter_screen(name: str) -> None:
    """Record *name* as the visible screen, disposing whatever was shown before."""
    previous = st.session_state.get(_ACTIVE_KEY)
    if previous is not None and previous != name:
        controller = _controllers().pop(previous, None)
        if controller is not None:
            controller.dispose()
            logger.debug(f"Disposed controller for screen {previous!r}")
    st.session_state[_ACTIVE_KEY] = name


def get_controller(name: str, factory: Callable[[], T]) -> T:
    """Return the controller of screen *name*, creating it on first use."""
    controllers = _controllers()
    if name not in controllers:
        controllers[name] = factory()
    return controllers[name]


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Drive a controller coroutine to completion from the script thread."""
    return asyncio.run(coro)
