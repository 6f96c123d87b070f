"""Abstract base class for navigation backends."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..models.location import Location
from ..types import PopStateCallback


class NavigationBackend(ABC):
    """
    Abstract interface to an address bar and its session history.

    Implementations can wrap different platforms:
    - An in-process history stack (MemoryHistoryBackend)
    - A real browser driven through a bridge
    - Other future backends

    Soft navigations (push_state/replace_state) change the address without
    a document load. Hard navigations (assign/replace_location) load a new
    document. Neither kind notifies popstate subscribers; only stepping
    through history with go() does.
    """

    @property
    @abstractmethod
    def location(self) -> Location:
        """Current address."""

    @abstractmethod
    def assign(self, url: str) -> None:
        """
        Load *url* as a new document, pushing a history entry.

        Args:
            url: Absolute or relative address, resolved against the current one
        """

    @abstractmethod
    def replace_location(self, url: str) -> None:
        """Load *url* as a new document in place of the current entry."""

    @abstractmethod
    def push_state(self, url: str, state: Optional[Any] = None) -> None:
        """
        Add a history entry for *url* without loading a document.

        Raises:
            CrossOriginError: if *url* resolves to a different origin
        """

    @abstractmethod
    def replace_state(self, url: str, state: Optional[Any] = None) -> None:
        """Rewrite the current history entry without loading a document."""

    @abstractmethod
    def go(self, delta: int) -> None:
        """
        Step through session history.

        Args:
            delta: Number of entries to move; negative goes back. 0 reloads.
        """

    @abstractmethod
    def subscribe(self, callback: PopStateCallback) -> None:
        """Call *callback* whenever history traversal changes the address."""
