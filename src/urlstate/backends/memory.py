"""In-process session history, modelled on a browser tab."""

import logging
from typing import Any, List, Optional, Tuple
from urllib.parse import urljoin

from ..config import settings
from ..exceptions import CrossOriginError
from ..models.location import HistoryEntry, Location
from ..types import PopStateCallback
from .base import NavigationBackend

logger = logging.getLogger(__name__)


class MemoryHistoryBackend(NavigationBackend):
    """
    Session history kept in memory.

    Each entry remembers the document that created it. Traversing to an
    entry of another document counts as a document load and fires no
    popstate; traversing within one document queues a popstate event.

    Args:
        initial_url: Starting address. Defaults to settings.INITIAL_URL.
        auto_dispatch: Deliver popstate events as soon as go() steps.
            When False they wait for dispatch_pending(), like a browser
            delivering them on a later task. Defaults to
            settings.AUTO_DISPATCH_POPSTATE.

    Raises:
        InvalidURLError: if the starting address is not an absolute URL
    """

    def __init__(
        self,
        initial_url: Optional[str] = None,
        auto_dispatch: Optional[bool] = None,
    ) -> None:
        location = Location.from_url(initial_url or settings.INITIAL_URL)
        self._location = location
        self._next_document = 1
        self._document = self._new_document()
        self._entries: List[HistoryEntry] = [
            HistoryEntry(url=location.href, document=self._document)
        ]
        self._index = 0
        self._subscribers: List[PopStateCallback] = []
        self._pending_popstate = 0
        self.auto_dispatch = (
            settings.AUTO_DISPATCH_POPSTATE if auto_dispatch is None else auto_dispatch
        )
        self.document_loads = 1

        logger.debug(f"Initialized memory history at {location.href}")

    def _new_document(self) -> int:
        document = self._next_document
        self._next_document += 1
        return document

    def _resolve(self, url: str) -> Location:
        return Location.from_url(urljoin(self._location.href, url))

    def _load_document(self, location: Location) -> None:
        self._document = self._new_document()
        self._location = location
        self.document_loads += 1

    def _require_same_origin(self, location: Location) -> None:
        if location.origin != self._location.origin:
            raise CrossOriginError(self._location.origin, location.origin)

    def _push(self, entry: HistoryEntry) -> None:
        del self._entries[self._index + 1:]
        self._entries.append(entry)
        self._index = len(self._entries) - 1

    @property
    def location(self) -> Location:
        return self._location

    @property
    def entries(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    @property
    def index(self) -> int:
        return self._index

    @property
    def state(self) -> Optional[Any]:
        """State object of the current entry."""
        return self._entries[self._index].state

    @property
    def pending_events(self) -> int:
        return self._pending_popstate

    def assign(self, url: str) -> None:
        location = self._resolve(url)
        self._load_document(location)
        self._push(HistoryEntry(url=location.href, document=self._document))
        logger.debug(f"Loaded {location.href} (new entry)")

    def replace_location(self, url: str) -> None:
        location = self._resolve(url)
        self._load_document(location)
        self._entries[self._index] = HistoryEntry(url=location.href, document=self._document)
        logger.debug(f"Loaded {location.href} (replaced entry)")

    def push_state(self, url: str, state: Optional[Any] = None) -> None:
        location = self._resolve(url)
        self._require_same_origin(location)
        self._location = location
        self._push(HistoryEntry(url=location.href, state=state, document=self._document))
        logger.debug(f"Pushed state {location.href}")

    def replace_state(self, url: str, state: Optional[Any] = None) -> None:
        location = self._resolve(url)
        self._require_same_origin(location)
        self._location = location
        self._entries[self._index] = HistoryEntry(
            url=location.href, state=state, document=self._document
        )
        logger.debug(f"Replaced state {location.href}")

    def go(self, delta: int) -> None:
        if delta == 0:
            self._load_document(self._location)
            self._entries[self._index] = self._entries[self._index].model_copy(
                update={"document": self._document}
            )
            logger.debug(f"Reloaded {self._location.href}")
            return

        target = self._index + delta
        if target < 0 or target >= len(self._entries):
            logger.debug(f"Ignoring history step {delta:+d} from index {self._index}")
            return

        entry = self._entries[target]
        self._index = target
        location = Location.from_url(entry.url)
        if entry.document != self._document:
            self._location = location
            self._document = entry.document
            self.document_loads += 1
            logger.debug(f"Traversed to {entry.url} (document load)")
            return

        self._location = location
        self._pending_popstate += 1
        logger.debug(f"Traversed to {entry.url}")
        if self.auto_dispatch:
            self.dispatch_pending()

    def subscribe(self, callback: PopStateCallback) -> None:
        self._subscribers.append(callback)

    def dispatch_pending(self) -> int:
        """Deliver queued popstate events. Returns how many were delivered."""
        delivered = 0
        while self._pending_popstate:
            self._pending_popstate -= 1
            delivered += 1
            for callback in list(self._subscribers):
                callback()
        return delivered
