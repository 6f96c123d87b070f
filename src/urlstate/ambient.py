"""Module-level shortcuts that act on the default navigation context.

Every caller shares the default context's parameters and listeners, so
keys used here form one process-wide namespace. Parameter mutators apply
their change to the address immediately, without notifying listeners;
push() and replace() notify the default navigator's listeners.
"""

from typing import Iterable, List, Optional

from .context import get_default_context
from .navigator import URLNavigator
from .params import URLParams
from .types import ParamEntries, UpdateEntries


def _params() -> URLParams:
    return get_default_context().params


def _navigator() -> URLNavigator:
    return get_default_context().navigator


# Parameters

def get(key: str) -> Optional[str]:
    return _params().get(key)


def get_all(key: str) -> List[str]:
    return _params().get_all(key)


def get_from_hash(key: str) -> Optional[str]:
    return _params().get_from_hash(key)


def get_all_from_hash(key: str) -> List[str]:
    return _params().get_all_from_hash(key)


def add(params: ParamEntries) -> None:
    store = _params()
    store.add(params)
    store.apply()


def add_to_hash(params: ParamEntries) -> None:
    store = _params()
    store.add_to_hash(params)
    store.apply()


def update(params: UpdateEntries) -> None:
    store = _params()
    store.update(params)
    store.apply()


def update_in_hash(params: UpdateEntries) -> None:
    store = _params()
    store.update_in_hash(params)
    store.apply()


def remove(keys: Iterable[str]) -> None:
    store = _params()
    store.remove(keys)
    store.apply()


def remove_from_hash(keys: Iterable[str]) -> None:
    store = _params()
    store.remove_from_hash(keys)
    store.apply()


def remove_all() -> None:
    store = _params()
    store.remove_all()
    store.apply()


def remove_all_from_hash() -> None:
    store = _params()
    store.remove_all_from_hash()
    store.apply()


def get_hash() -> str:
    return _params().get_hash()


def set_hash(hash: str) -> None:
    store = _params()
    store.set_hash(hash)
    store.apply()


def remove_hash() -> None:
    store = _params()
    store.remove_hash()
    store.apply()


# Navigation

def go(delta: int) -> None:
    _navigator().go(delta)


def go_forward() -> None:
    _navigator().go_forward()


def go_back() -> None:
    _navigator().go_back()


def navigate_to(url: str, replace: bool = False) -> None:
    _navigator().navigate_to(url, replace)


def push(url: str) -> None:
    _navigator().push(url)


def replace(url: str) -> None:
    _navigator().replace(url)
