"""urlstate - query-string and hash-parameter state with history navigation."""

from .backends import MemoryHistoryBackend, NavigationBackend
from .context import (
    NavigationContext,
    get_default_context,
    reset_default_context,
    set_default_context,
)
from .exceptions import CrossOriginError, InvalidURLError, URLStateError
from .listeners import ListenerEntry, ListenerRegistry
from .models import HistoryEntry, Location, ParamLeaf, ParamNode, ParamValue
from .navigator import URLNavigator
from .nested import parse_nested_params, stringify_nested_params
from .params import QueryParams, URLParams

__version__ = "0.1.0"

__all__ = [
    "CrossOriginError",
    "HistoryEntry",
    "InvalidURLError",
    "ListenerEntry",
    "ListenerRegistry",
    "Location",
    "MemoryHistoryBackend",
    "NavigationBackend",
    "NavigationContext",
    "ParamLeaf",
    "ParamNode",
    "ParamValue",
    "QueryParams",
    "URLNavigator",
    "URLParams",
    "URLStateError",
    "get_default_context",
    "parse_nested_params",
    "reset_default_context",
    "set_default_context",
    "stringify_nested_params",
]
