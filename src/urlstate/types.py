"""Common type definitions for urlstate.

This module provides aliases and TypedDict definitions for the values
that flow between the parameter store, the navigator and the helpers.
"""

from typing import Callable, Dict, List, Mapping, Optional, TypedDict, Union

# A single parameter value before it is coerced to its string form
Scalar = Union[str, int, float, bool]

# Entries accepted by add()/add_to_hash()
ParamEntries = Mapping[str, Optional[Scalar]]

# Entries accepted by update()/update_in_hash(); None deletes the key
UpdateEntries = Mapping[str, Optional[Scalar]]

# URL change listener registered on a URLNavigator
Listener = Callable[[], None]

# Popstate subscriber registered on a NavigationBackend
PopStateCallback = Callable[[], None]


class URLSummaryDict(TypedDict):
    """Breakdown of an address into its two parameter namespaces."""
    origin: str
    pathname: str
    search_params: Dict[str, List[str]]
    hash_path: str
    hash_params: Dict[str, List[str]]
