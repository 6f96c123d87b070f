"""Query-string and hash-fragment parameter state.

``URLParams`` keeps two independent multimaps: one for the query string
and one for the parameters that follow ``?`` inside the hash fragment.
It also keeps the bare hash path in front of them, e.g. for
``/page?tab=1#/section?open=2``:

- search params: ``tab=1``
- hash path: ``#/section``
- hash params: ``open=2``
"""

import logging
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional, Tuple

from .encoding import parse_query_pairs, serialize_query_pairs
from .models.params import coerce_scalar
from .types import ParamEntries, UpdateEntries

if TYPE_CHECKING:
    from .backends.base import NavigationBackend

logger = logging.getLogger(__name__)


class QueryParams:
    """
    Mutable ordered multimap of query parameters.

    Behaves like WHATWG ``URLSearchParams``: pairs are kept in one ordered
    list, so repeated keys keep their insertion order and serialization
    keeps the relative order of different keys.
    """

    def __init__(self, query: str = "") -> None:
        self._pairs: List[Tuple[str, str]] = parse_query_pairs(query)

    def get(self, key: str) -> Optional[str]:
        """Return the first value for *key*, or None if missing."""
        for name, value in self._pairs:
            if name == key:
                return value
        return None

    def get_all(self, key: str) -> List[str]:
        """Return all values for *key* in insertion order."""
        return [value for name, value in self._pairs if name == key]

    def append(self, key: str, value: str) -> None:
        self._pairs.append((key, value))

    def set(self, key: str, value: str) -> None:
        """Replace every value of *key* with *value*.

        The pair stays at the position of the key's first occurrence.
        """
        pairs: List[Tuple[str, str]] = []
        replaced = False
        for name, existing in self._pairs:
            if name != key:
                pairs.append((name, existing))
            elif not replaced:
                pairs.append((key, value))
                replaced = True
        if not replaced:
            pairs.append((key, value))
        self._pairs = pairs

    def delete(self, key: str) -> None:
        self._pairs = [(name, value) for name, value in self._pairs if name != key]

    def clear(self) -> None:
        self._pairs = []

    def items(self) -> List[Tuple[str, str]]:
        """Return every ``(key, value)`` pair in order."""
        return list(self._pairs)

    def keys(self) -> List[str]:
        """Return distinct keys in first-seen order."""
        return list(dict.fromkeys(name for name, _ in self._pairs))

    def to_dict(self) -> Dict[str, List[str]]:
        """Return ``{key: [values...]}`` in first-seen key order."""
        grouped: Dict[str, List[str]] = {}
        for name, value in self._pairs:
            grouped.setdefault(name, []).append(value)
        return grouped

    def copy(self) -> "QueryParams":
        clone = QueryParams()
        clone._pairs = list(self._pairs)
        return clone

    def to_string(self) -> str:
        """Serialize as ``key=value&key=value`` without a leading ``?``."""
        return serialize_query_pairs(self._pairs)

    def __contains__(self, key: object) -> bool:
        return any(name == key for name, _ in self._pairs)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryParams):
            return NotImplemented
        return self._pairs == other._pairs

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"QueryParams({self.to_string()!r})"


def _normalize_hash(fragment: str) -> str:
    if not fragment or fragment.startswith("#"):
        return fragment
    return f"#{fragment}"


def _add(params: QueryParams, entries: ParamEntries) -> None:
    for key, value in entries.items():
        params.append(key, coerce_scalar(value))


def _update(params: QueryParams, entries: UpdateEntries) -> None:
    for key, value in entries.items():
        if value is None:
            params.delete(key)
        else:
            params.set(key, coerce_scalar(value))


def _remove(params: QueryParams, keys: Iterable[str]) -> None:
    if isinstance(keys, str):
        keys = [keys]
    for key in keys:
        params.delete(key)


class URLParams:
    """
    Query-string and hash parameter store for one address.

    Args:
        search: Query string such as ``"?type=detail&id=5"``. None reads
            the backend's current location.
        hash: Fragment such as ``"#/section?param=value"``. None reads the
            backend's current location.
        backend: Platform the store reads its location from and applies
            changes to. None uses the default context's backend.
        pathname: Path used by ``to_string()``. None reads the backend's
            current pathname each time.
    """

    def __init__(
        self,
        search: Optional[str] = None,
        hash: Optional[str] = None,
        *,
        backend: Optional["NavigationBackend"] = None,
        pathname: Optional[str] = None,
    ) -> None:
        self._backend = backend
        self._pathname = pathname

        if search is None or hash is None:
            location = self.backend.location
            search = location.search if search is None else search
            hash = location.hash if hash is None else hash

        self._load(search, hash)

    def _load(self, search: str, hash: str) -> None:
        hash_path, _, hash_query = hash.partition("?")
        self.search_params = QueryParams(search)
        self.hash_params = QueryParams(hash_query)
        self._hash = _normalize_hash(hash_path)

    @property
    def backend(self) -> "NavigationBackend":
        """Backend this store reads from and applies to."""
        if self._backend is None:
            from .context import get_default_context

            self._backend = get_default_context().backend
        return self._backend

    @property
    def pathname(self) -> str:
        if self._pathname is not None:
            return self._pathname
        return self.backend.location.pathname

    # Search parameters

    def get(self, key: str) -> Optional[str]:
        """Return the first value of a query parameter, or None."""
        return self.search_params.get(key)

    def get_all(self, key: str) -> List[str]:
        """Return every value of a query parameter; [] when unset."""
        return self.search_params.get_all(key)

    def add(self, params: ParamEntries) -> None:
        """Append one value per entry, keeping any existing values."""
        _add(self.search_params, params)

    def update(self, params: UpdateEntries) -> None:
        """Set each key to a single value; a None value deletes the key."""
        _update(self.search_params, params)

    def remove(self, keys: Iterable[str]) -> None:
        """Delete each key and all its values; missing keys are ignored."""
        _remove(self.search_params, keys)

    def remove_all(self) -> None:
        self.search_params.clear()

    # Hash parameters

    def get_from_hash(self, key: str) -> Optional[str]:
        return self.hash_params.get(key)

    def get_all_from_hash(self, key: str) -> List[str]:
        return self.hash_params.get_all(key)

    def add_to_hash(self, params: ParamEntries) -> None:
        _add(self.hash_params, params)

    def update_in_hash(self, params: UpdateEntries) -> None:
        _update(self.hash_params, params)

    def remove_from_hash(self, keys: Iterable[str]) -> None:
        _remove(self.hash_params, keys)

    def remove_all_from_hash(self) -> None:
        self.hash_params.clear()

    # Hash path

    def get_hash(self) -> str:
        """Return the hash path (without hash parameters)."""
        return self._hash

    def set_hash(self, hash: str) -> None:
        """
        Set the hash path, adding the leading ``#`` if missing.

        Anything after the first ``?`` is appended to the hash parameters,
        so the path itself never holds a ``?``.
        """
        hash_path, separator, hash_query = hash.partition("?")
        self._hash = hash_path if hash_path.startswith("#") else f"#{hash_path}"
        if separator:
            for key, value in parse_query_pairs(hash_query):
                self.hash_params.append(key, value)

    def remove_hash(self) -> None:
        """Clear the hash path. Hash parameters are kept."""
        self._hash = ""

    # Serialization

    def to_string_search(self) -> str:
        return self.search_params.to_string()

    def to_string_hash(self) -> str:
        return self.hash_params.to_string()

    def fragment(self) -> str:
        """
        Return the full fragment: hash path plus ``?`` and hash params.

        A bare ``#`` is emitted when hash params exist without a hash path,
        so they stay inside the fragment.
        """
        hash_string = self.to_string_hash()
        if not hash_string:
            return self._hash
        return f"{self._hash or '#'}?{hash_string}"

    def to_string(self) -> str:
        """Return ``pathname[?search][fragment]`` as a relative address."""
        search_string = self.to_string_search()
        search_part = f"?{search_string}" if search_string else ""
        return f"{self.pathname}{search_part}{self.fragment()}"

    def apply(self) -> None:
        """Write the current state to the address bar without notifying listeners."""
        url = self.to_string()
        logger.debug(f"Applying parameters: {url}")
        self.backend.replace_state(url)

    def refresh(self) -> None:
        """Reload both namespaces from the backend's current location."""
        location = self.backend.location
        self._load(location.search, location.hash)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"URLParams(search={self.to_string_search()!r}, "
            f"hash={self.fragment()!r})"
        )
