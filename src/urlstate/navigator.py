"""History navigation with URL change listeners."""

import logging
from typing import TYPE_CHECKING, Iterable, Optional
from urllib.parse import urlunsplit

from .listeners import ListenerRegistry
from .params import URLParams
from .types import Listener, ParamEntries
from .utils.url_utils import format_url, parse_absolute_url

if TYPE_CHECKING:
    from .backends.base import NavigationBackend

logger = logging.getLogger(__name__)


class URLNavigator:
    """
    Navigates a backend's history and notifies listeners of address changes.

    Listeners fire synchronously after push(), replace() and the parameter
    helpers built on replace(), and again whenever the backend reports a
    back/forward traversal. The wrapped URLParams is reloaded from the new
    location before listeners run. Hard navigations (navigate_to,
    redirect_to) load a new document and fire nothing.

    Args:
        search: Initial query string for the wrapped URLParams
        hash: Initial fragment for the wrapped URLParams
        backend: Platform to drive. None uses the default context's backend.
        params: Existing URLParams to wrap instead of building one
    """

    def __init__(
        self,
        search: Optional[str] = None,
        hash: Optional[str] = None,
        *,
        backend: Optional["NavigationBackend"] = None,
        params: Optional[URLParams] = None,
    ) -> None:
        if params is None:
            params = URLParams(search, hash, backend=backend)
        self.params = params
        self.backend = backend if backend is not None else params.backend
        self._listeners = ListenerRegistry()

        self.backend.subscribe(self._on_popstate)

    # History traversal

    def go(self, delta: int) -> None:
        """Move through history; positive goes forward, negative goes back."""
        self.backend.go(delta)

    def go_forward(self) -> None:
        self.go(1)

    def go_back(self) -> None:
        self.go(-1)

    # Navigation

    def navigate_to(self, url: str, replace: bool = False) -> None:
        """
        Load *url* as a new document.

        Args:
            url: Target address
            replace: Replace the current history entry instead of pushing one
        """
        logger.info(f"Navigating to {url} (replace={replace})")
        if replace:
            self.backend.replace_location(url)
        else:
            self.backend.assign(url)

    def push(self, url: str) -> None:
        """Add a history entry for *url* without reloading, then notify listeners."""
        self.backend.push_state(url)
        self.params.refresh()
        self._trigger_listeners()

    def replace(self, url: str) -> None:
        """Rewrite the current history entry without reloading, then notify listeners."""
        self.backend.replace_state(url)
        self.params.refresh()
        self._trigger_listeners()

    def redirect_to(
        self,
        base_url: str,
        preserve_search: bool = True,
        preserve_hash: bool = True,
    ) -> None:
        """
        Load *base_url*, optionally carrying over the current parameters.

        Args:
            base_url: Absolute address to load
            preserve_search: Replace its query with the current search params
            preserve_hash: Replace its fragment with the current hash path and params

        Raises:
            InvalidURLError: if *base_url* is not a valid absolute URL
        """
        parts = parse_absolute_url(format_url(base_url))

        if preserve_search:
            parts = parts._replace(query=self.params.to_string_search())

        if preserve_hash:
            parts = parts._replace(fragment=self.params.fragment()[1:])

        url = urlunsplit(parts)
        logger.info(f"Redirecting to {url}")
        self.backend.replace_location(url)

    # Parameter helpers

    def add_query_params(self, params: ParamEntries) -> None:
        """Append query parameters and replace the current entry."""
        self.params.add(params)
        self.replace(self._with_search())

    def remove_query_params(self, keys: Iterable[str]) -> None:
        """Delete query parameters and replace the current entry."""
        self.params.remove(keys)
        self.replace(self._with_search())

    def set_hash(self, hash: str) -> None:
        """Set the hash path and replace the current entry."""
        self.params.set_hash(hash)
        self.replace(self._with_fragment())

    def clear_hash(self) -> None:
        """Clear the hash path and replace the current entry."""
        self.params.remove_hash()
        self.replace(self._with_fragment())

    def _with_search(self) -> str:
        location = self.backend.location
        search = self.params.to_string_search()
        search_part = f"?{search}" if search else ""
        return f"{location.pathname}{search_part}{location.hash}"

    def _with_fragment(self) -> str:
        location = self.backend.location
        return f"{location.pathname}{location.search}{self.params.fragment()}"

    # Listeners

    def add_listener(self, listener: Listener, once: bool = False) -> None:
        """
        Register a callback for address changes.

        Args:
            listener: Called with no arguments after each change
            once: Remove the listener after its first call
        """
        self._listeners.add(listener, once)

    def remove_listener(self, listener: Listener) -> None:
        """Remove every registration of *listener*."""
        self._listeners.remove(listener)

    def remove_all_listeners(self) -> None:
        self._listeners.clear()

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _on_popstate(self) -> None:
        logger.debug(f"History traversal to {self.backend.location.href}")
        self.params.refresh()
        self._trigger_listeners()

    def _trigger_listeners(self) -> None:
        self._listeners.trigger()
