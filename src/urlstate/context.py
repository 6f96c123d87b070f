"""Navigation contexts and the swappable process-wide default."""

import logging
from typing import Optional

from .backends.base import NavigationBackend
from .backends.memory import MemoryHistoryBackend
from .navigator import URLNavigator
from .params import URLParams

logger = logging.getLogger(__name__)


class NavigationContext:
    """
    One backend with the parameter store and navigator that act on it.

    The store and navigator are created lazily, the store from the
    backend's location at first use.
    """

    def __init__(self, backend: NavigationBackend) -> None:
        self.backend = backend
        self._params: Optional[URLParams] = None
        self._navigator: Optional[URLNavigator] = None

    @property
    def params(self) -> URLParams:
        if self._params is None:
            self._params = URLParams(backend=self.backend)
        return self._params

    @property
    def navigator(self) -> URLNavigator:
        if self._navigator is None:
            self._navigator = URLNavigator(backend=self.backend, params=self.params)
        return self._navigator


_default_context: Optional[NavigationContext] = None


def get_default_context() -> NavigationContext:
    """Return the default context, creating a memory-backed one on first use."""
    global _default_context
    if _default_context is None:
        _default_context = NavigationContext(MemoryHistoryBackend())
        logger.debug(f"Created default context at {_default_context.backend.location.href}")
    return _default_context


def set_default_context(context: NavigationContext) -> Optional[NavigationContext]:
    """Install *context* as the default. Returns the previous default, if any."""
    global _default_context
    previous = _default_context
    _default_context = context
    return previous


def reset_default_context() -> None:
    """Drop the default context; the next use builds a fresh one."""
    global _default_context
    _default_context = None
