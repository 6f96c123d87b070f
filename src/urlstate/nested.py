"""Nested bracket-key query strings.

Converts between flat keys such as ``foo[bar]=baz&foo[qux]=quux`` and
``ParamNode`` trees::

    >>> parse_nested_params("foo[bar]=baz&foo[qux]=quux").to_python()
    {'foo': {'bar': 'baz', 'qux': 'quux'}}
    >>> stringify_nested_params({"foo": {"bar": "baz", "qux": "quux"}})
    'foo[bar]=baz&foo[qux]=quux'
"""

import re
from typing import Any, List, Mapping, Optional, Union

from .encoding import encode_url_component, parse_query_pairs
from .models.params import ParamLeaf, ParamNode

_KEY_DELIMITERS = re.compile(r"[\[\]]")


def _key_segments(key: str) -> List[str]:
    # Empty segments ("a[]", "[b]") are dropped, never read as array indices
    return [segment for segment in _KEY_DELIMITERS.split(key) if segment]


def parse_nested_params(query: str) -> ParamNode:
    """
    Parse a query string with bracket keys into a tree.

    Writes that collide at one path (``a=1&a[b]=2``) overwrite each other;
    the last write wins.
    """
    root = ParamNode()

    for key, value in parse_query_pairs(query):
        segments = _key_segments(key)
        if not segments:
            continue

        node = root
        for segment in segments[:-1]:
            child = node.children.get(segment)
            if not isinstance(child, ParamNode):
                child = ParamNode()
                node.children[segment] = child
            node = child
        node.children[segments[-1]] = ParamLeaf(value=value)

    return root


def stringify_nested_params(
    tree: Union[ParamNode, Mapping[str, Any]],
    prefix: Optional[str] = None,
) -> str:
    """
    Flatten a tree into ``key[child]=value`` pairs joined by ``&``.

    Args:
        tree: A ParamNode, or plain nested mappings
        prefix: Key path the tree sits under; used when recursing

    Returns:
        Query string without a leading ``?``
    """
    node = tree if isinstance(tree, ParamNode) else ParamNode.from_python(tree)
    parts: List[str] = []

    for key, child in node.children.items():
        full_key = f"{prefix}[{key}]" if prefix else key
        if isinstance(child, ParamNode):
            nested = stringify_nested_params(child, full_key)
            if nested:
                parts.append(nested)
        else:
            encoded_key = encode_url_component(full_key, extra_safe="[]")
            parts.append(f"{encoded_key}={encode_url_component(child.value)}")

    return "&".join(parts)
