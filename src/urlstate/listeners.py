"""URL change listener registry.

Triggering follows a snapshot-then-apply protocol:

1. The live registry is copied into an immutable snapshot.
2. Every snapshot entry is invoked in registration order, synchronously
   and without error isolation: a raising listener aborts the rest and
   the exception propagates.
3. Once invocation ends, ``once`` entries that were invoked are dropped
   from the live registry.

Consequences callers can rely on:

- A listener added during a trigger first runs on the next trigger.
- A listener removed during a trigger still runs in that trigger if it
  was in the snapshot, and never afterwards.
- Entries are matched by entry identity, so a callback removed and re-added
  during a trigger is a new entry: it neither runs in that trigger nor
  gets dropped by the ``once`` cleanup of the old entry.
"""

import logging
from typing import List, Tuple

from .types import Listener

logger = logging.getLogger(__name__)


class ListenerEntry:
    """A registered callback and whether it fires only once."""

    __slots__ = ("callback", "once", "fired")

    def __init__(self, callback: Listener, once: bool = False) -> None:
        self.callback = callback
        self.once = once
        self.fired = False

    def __repr__(self) -> str:
        return f"ListenerEntry({self.callback!r}, once={self.once})"


class ListenerRegistry:
    """Ordered collection of URL change listeners."""

    def __init__(self) -> None:
        self._entries: List[ListenerEntry] = []

    def add(self, callback: Listener, once: bool = False) -> ListenerEntry:
        entry = ListenerEntry(callback, once)
        self._entries.append(entry)
        return entry

    def remove(self, callback: Listener) -> int:
        """Remove every entry whose callback equals *callback*.

        Returns:
            Number of entries removed
        """
        kept = [entry for entry in self._entries if entry.callback != callback]
        removed = len(self._entries) - len(kept)
        self._entries = kept
        return removed

    def clear(self) -> None:
        self._entries = []

    def snapshot(self) -> Tuple[ListenerEntry, ...]:
        return tuple(self._entries)

    def trigger(self) -> int:
        """
        Invoke every registered listener once.

        Returns:
            Number of listeners invoked
        """
        snapshot = self.snapshot()
        invoked: List[ListenerEntry] = []
        logger.debug(f"Triggering {len(snapshot)} URL listener(s)")

        try:
            for entry in snapshot:
                if entry.once and entry.fired:
                    continue
                entry.fired = True
                invoked.append(entry)
                entry.callback()
        finally:
            spent = {id(entry) for entry in invoked if entry.once}
            if spent:
                self._entries = [entry for entry in self._entries if id(entry) not in spent]

        return len(invoked)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)
