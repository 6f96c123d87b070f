"""URL helpers: validation, formatting, paths, comparison, UTM tags and navigation shortcuts."""

import logging
import re
from typing import TYPE_CHECKING, Dict, Mapping, Optional, Union
from urllib.parse import SplitResult, urlsplit, urlunsplit

from ..config import settings
from ..encoding import parse_query_pairs, serialize_query_pairs
from ..exceptions import CrossOriginError, InvalidURLError
from ..models.params import coerce_scalar
from ..params import QueryParams
from ..types import Scalar, URLSummaryDict

if TYPE_CHECKING:
    from ..backends.base import NavigationBackend
    from ..models.location import Location

logger = logging.getLogger(__name__)

# Schemes with a host and a hierarchical path, with their default ports
_SPECIAL_SCHEMES: Dict[str, Optional[int]] = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
    "file": None,
}

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_EDGE_SLASHES = re.compile(r"^/+|/+$")
_JAVASCRIPT_SCHEME = re.compile(r"javascript:", re.IGNORECASE)

URLLike = Union[str, SplitResult]


def parse_absolute_url(url: str) -> SplitResult:
    """
    Split an absolute URL, validating it the way a browser URL parser would.

    Raises:
        InvalidURLError: if the scheme is missing, a web scheme has no host,
            the host contains whitespace or the port is not a valid number
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidURLError(str(url), detail="empty URL")

    candidate = url.strip()
    try:
        parts = urlsplit(candidate)
        parts.port  # raises ValueError for a malformed port
    except ValueError as e:
        raise InvalidURLError(url, detail=str(e)) from e

    if not parts.scheme or not _SCHEME.match(parts.scheme):
        raise InvalidURLError(url, detail="missing scheme")

    scheme = parts.scheme.lower()
    if scheme in _SPECIAL_SCHEMES and scheme != "file":
        if not parts.hostname or re.search(r"\s", parts.netloc):
            raise InvalidURLError(url, detail="missing or invalid host")

    return parts


def _split(url: URLLike) -> SplitResult:
    return url if isinstance(url, SplitResult) else parse_absolute_url(url)


def _host_port(parts: SplitResult) -> str:
    host = (parts.hostname or "").lower()
    if ":" in host:
        host = f"[{host}]"
    port = parts.port
    if port is not None and port != _SPECIAL_SCHEMES.get(parts.scheme.lower()):
        return f"{host}:{port}"
    return host


def url_origin(url: URLLike) -> str:
    """
    Return ``scheme://host[:port]`` with default ports dropped.

    Opaque schemes (mailto:, data:, file:) have the origin ``"null"``.
    """
    parts = _split(url)
    scheme = parts.scheme.lower()
    if scheme not in _SPECIAL_SCHEMES or scheme == "file":
        return "null"
    return f"{scheme}://{_host_port(parts)}"


def format_url(url: str) -> str:
    """
    Normalize an absolute URL.

    Lowercases scheme and host, drops default ports and gives web URLs a
    ``/`` path when it is empty.

    Raises:
        InvalidURLError: if *url* is not a valid absolute URL
    """
    parts = parse_absolute_url(url)
    scheme = parts.scheme.lower()
    netloc = parts.netloc
    if scheme in _SPECIAL_SCHEMES and parts.netloc:
        userinfo = parts.netloc.rpartition("@")[0]
        netloc = f"{userinfo}@{_host_port(parts)}" if userinfo else _host_port(parts)
    path = parts.path
    if not path and scheme in _SPECIAL_SCHEMES:
        path = "/"
    return urlunsplit((scheme, netloc, path, parts.query, parts.fragment))


def is_valid_url(url: str) -> bool:
    try:
        parse_absolute_url(url)
    except InvalidURLError:
        return False
    return True


def is_url_secure(url: str) -> bool:
    """Return True if *url* uses https. Unparseable URLs are reported insecure."""
    try:
        parts = parse_absolute_url(url)
    except InvalidURLError as e:
        logger.warning(f"Invalid URL passed to is_url_secure: {url!r} ({e.detail})")
        return False
    return parts.scheme.lower() == "https"


def sanitize_url(url: str) -> str:
    """Strip embedded ``javascript:`` schemes (case-insensitive)."""
    return _JAVASCRIPT_SCHEME.sub("", url)


def ensure_trailing_slash(url: str) -> str:
    return url if url.endswith("/") else f"{url}/"


def join_url_paths(*paths: str) -> str:
    """
    Join path parts with single slashes.

    Example:
        join_url_paths("/api/", "/v1/", "users") -> "api/v1/users"
    """
    return "/".join(_EDGE_SLASHES.sub("", path) for path in paths)


def get_relative_path(from_url: str, to_url: str) -> str:
    """
    Return the relative reference that leads from *from_url* to *to_url*.

    The last segment of *from_url* is treated as a document, so the path is
    relative to its directory, as a browser resolves links:

        get_relative_path("https://x.test/a/b", "https://x.test/a/c") -> "c"
        get_relative_path("https://x.test/a/b/", "https://x.test/c") -> "../../c"
        get_relative_path("https://x.test/a/b", "https://x.test/a/") -> "./"

    Raises:
        InvalidURLError: if either URL is invalid
        CrossOriginError: if the URLs have different origins
    """
    source = parse_absolute_url(from_url)
    target = parse_absolute_url(to_url)

    source_origin = url_origin(source)
    target_origin = url_origin(target)
    if source_origin != target_origin:
        raise CrossOriginError(source_origin, target_origin)

    source_dirs = [part for part in source.path.split("/")[:-1] if part]
    target_parts = [part for part in target.path.split("/") if part]

    common = 0
    limit = min(len(source_dirs), len(target_parts))
    while common < limit and source_dirs[common] == target_parts[common]:
        common += 1

    up_levels = len(source_dirs) - common
    relative = "../" * up_levels + "/".join(target_parts[common:])
    if target_parts[common:] and target.path.endswith("/"):
        relative += "/"
    return relative or "./"


def build_url(
    base_url: str,
    path: str = "",
    params: Optional[Mapping[str, Scalar]] = None,
) -> str:
    """
    Build an absolute URL from a base, an optional path and extra params.

    Params are appended after any query the base URL already has.
    """
    parts = parse_absolute_url(format_url(base_url))
    if path:
        parts = parts._replace(path=path if path.startswith("/") else f"/{path}")
    return urlunsplit(_append_params(parts, params))


def _append_params(parts: SplitResult, params: Optional[Mapping[str, Scalar]]) -> SplitResult:
    if not params:
        return parts
    query = QueryParams(parts.query)
    for key, value in params.items():
        query.append(key, coerce_scalar(value))
    return parts._replace(query=query.to_string())


def _compose_url(
    base_url: str,
    params: Optional[Mapping[str, Scalar]],
    hash: Optional[str],
) -> str:
    parts = _append_params(parse_absolute_url(format_url(base_url)), params)
    if hash:
        parts = parts._replace(fragment=hash[1:] if hash.startswith("#") else hash)
    return urlunsplit(parts)


def _current_backend(backend: Optional["NavigationBackend"]) -> "NavigationBackend":
    if backend is not None:
        return backend
    from ..context import get_default_context

    return get_default_context().backend


def redirect_to(
    base_url: str,
    params: Optional[Mapping[str, Scalar]] = None,
    hash: Optional[str] = None,
    *,
    backend: Optional["NavigationBackend"] = None,
) -> str:
    """
    Load *base_url* as a new document, with extra query params and a fragment.

    Params are appended after the base URL's own query; a non-empty *hash*
    replaces its fragment. No navigator listeners are notified.

    Returns:
        The address that was loaded

    Raises:
        InvalidURLError: if *base_url* is not a valid absolute URL
    """
    url = _compose_url(base_url, params, hash)
    logger.info(f"Redirecting to {url}")
    _current_backend(backend).assign(url)
    return url


def push_state(
    base_url: str,
    params: Optional[Mapping[str, Scalar]] = None,
    hash: Optional[str] = None,
    *,
    backend: Optional["NavigationBackend"] = None,
) -> str:
    """Like redirect_to(), but adds a history entry without loading a document."""
    url = _compose_url(base_url, params, hash)
    _current_backend(backend).push_state(url)
    return url


def replace_state(
    base_url: str,
    params: Optional[Mapping[str, Scalar]] = None,
    hash: Optional[str] = None,
    *,
    backend: Optional["NavigationBackend"] = None,
) -> str:
    """Like redirect_to(), but rewrites the current history entry in place."""
    url = _compose_url(base_url, params, hash)
    _current_backend(backend).replace_state(url)
    return url


def compare_urls(url1: str, url2: str) -> bool:
    """Compare origin and path, ignoring query and fragment."""
    first = parse_absolute_url(format_url(url1))
    second = parse_absolute_url(format_url(url2))
    return (url_origin(first), first.path) == (url_origin(second), second.path)


def compare_url_params(url1: str, url2: str) -> bool:
    """Compare the canonical form of two query strings, order included."""
    first = serialize_query_pairs(parse_query_pairs(parse_absolute_url(url1).query))
    second = serialize_query_pairs(parse_query_pairs(parse_absolute_url(url2).query))
    return first == second


def add_utm_parameters(base_url: str, utm_params: Mapping[str, str]) -> str:
    """Set marketing parameters on *base_url*, replacing existing values."""
    parts = parse_absolute_url(format_url(base_url))
    query = QueryParams(parts.query)
    for key, value in utm_params.items():
        query.set(key, value)
    return urlunsplit(parts._replace(query=query.to_string()))


def strip_utm_parameters(url: str) -> str:
    """Remove every key listed in settings.UTM_KEYS from *url*'s query."""
    parts = parse_absolute_url(format_url(url))
    query = QueryParams(parts.query)
    for key in settings.UTM_KEYS:
        query.delete(key)
    return urlunsplit(parts._replace(query=query.to_string()))


def serialize_query_params(params: Mapping[str, Scalar]) -> str:
    return serialize_query_pairs((key, coerce_scalar(value)) for key, value in params.items())


def serialize_hash_params(params: Mapping[str, Scalar]) -> str:
    return serialize_query_params(params)


def _current_location(location: Optional["Location"]) -> "Location":
    if location is not None:
        return location
    from ..context import get_default_context

    return get_default_context().backend.location


def get_query_params(location: Optional["Location"] = None) -> Dict[str, str]:
    """Return the current query parameters; the last value of a repeated key wins."""
    return dict(parse_query_pairs(_current_location(location).search))


def get_hash_params(location: Optional["Location"] = None) -> Dict[str, str]:
    """Return the parameters after ``?`` in the current hash; last value wins."""
    _, _, hash_query = _current_location(location).hash.partition("?")
    return dict(parse_query_pairs(hash_query))


def is_valid_query_param(key: str, location: Optional["Location"] = None) -> bool:
    """Return True if *key* is present in the current query string."""
    return key in QueryParams(_current_location(location).search)


def analyze_url(url: str) -> URLSummaryDict:
    """Break *url* down into its path and its two parameter namespaces."""
    parts = parse_absolute_url(format_url(url))
    hash_path, _, hash_query = parts.fragment.partition("?")
    return {
        "origin": url_origin(parts),
        "pathname": parts.path,
        "search_params": QueryParams(parts.query).to_dict(),
        "hash_path": f"#{hash_path}" if hash_path else "",
        "hash_params": QueryParams(hash_query).to_dict(),
    }
