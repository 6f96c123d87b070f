"""Percent-encoding helpers for URL components and query strings.

Two families live here:

- component codecs with JavaScript ``encodeURIComponent`` /
  ``decodeURIComponent`` semantics, plus "safe" variants that never raise
- query-string codecs with application/x-www-form-urlencoded semantics
  (``+`` for space), used by the parameter store and the nested codec
"""

import logging
import re
from typing import Iterable, List, Tuple
from urllib.parse import parse_qsl, quote, quote_plus, unquote, urlencode

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone besides letters, digits and "_.-~"
_COMPONENT_SAFE = "!*'()"

# A "%" that does not start a two-digit hex escape
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def encode_url_component(component: str, extra_safe: str = "") -> str:
    """Percent-encode *component* the way ``encodeURIComponent`` does."""
    return quote(component, safe=_COMPONENT_SAFE + extra_safe)


def decode_url_component(component: str) -> str:
    """
    Decode a percent-encoded component.

    Raises:
        ValueError: if *component* holds a malformed escape or the
            escapes do not decode to valid UTF-8
    """
    if _MALFORMED_ESCAPE.search(component):
        raise ValueError(f"Malformed percent-escape in {component!r}")
    return unquote(component, errors="strict")


def decode_url_component_safe(component: str) -> str:
    """
    Decode a URL component, falling back to the input on failure.

    Example:
        decode_url_component_safe("%E4%BD%A0") -> "你"
        decode_url_component_safe("%") -> "%"
    """
    try:
        return decode_url_component(component)
    except ValueError:
        logger.debug(f"Could not decode URL component {component!r}, returning it unchanged")
        return component


def encode_url_component_safe(component: str) -> str:
    """Form-style encode: ``!'()`` are escaped and spaces become ``+``."""
    return quote_plus(component, safe="*")


def encode_query_param(value: str) -> str:
    """Encode a single query parameter value."""
    return encode_url_component(value)


def decode_query_param(value: str) -> str:
    """Decode a single query parameter value (strict)."""
    return decode_url_component(value)


def parse_query_pairs(query: str) -> List[Tuple[str, str]]:
    """
    Split a query string into ordered ``(key, value)`` pairs.

    A single leading ``?`` is ignored, blank values are kept, ``+`` decodes
    to a space and malformed escapes are kept literally.
    """
    if query.startswith("?"):
        query = query[1:]
    if not query:
        return []
    return parse_qsl(query, keep_blank_values=True)


def serialize_query_pairs(pairs: Iterable[Tuple[str, str]]) -> str:
    """Serialize ``(key, value)`` pairs as ``key=value&key=value``."""
    return urlencode(list(pairs), safe="*")
