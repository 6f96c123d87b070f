"""Tests for the query-string and hash parameter store."""

from urlstate.backends.memory import MemoryHistoryBackend
from urlstate.params import QueryParams, URLParams


def make_store(search="?a=1&a=2&b=3", hash="#/sec?x=1"):
    return URLParams(search, hash, pathname="/page")


def test_get_returns_first_value_and_get_all_keeps_order():
    """Repeated keys keep insertion order; get() returns the first."""
    store = make_store()
    store.add({"a": 3})

    assert store.get("a") == "1"
    assert store.get_all("a") == ["1", "2", "3"]


def test_get_missing_key_is_absent():
    store = make_store()
    assert store.get("missing") is None
    assert store.get_all("missing") == []


def test_add_appends_without_overwriting():
    store = make_store(search="", hash="")
    store.add({"tag": "red"})
    store.add({"tag": "blue", "page": 2})

    assert store.get_all("tag") == ["red", "blue"]
    assert store.to_string_search() == "tag=red&tag=blue&page=2"


def test_add_coerces_scalars():
    """Numbers become str(), booleans lowercase, None an empty value."""
    store = make_store(search="", hash="")
    store.add({"n": 1.5, "flag": True, "off": False, "empty": None})

    assert store.get("n") == "1.5"
    assert store.get("flag") == "true"
    assert store.get("off") == "false"
    assert store.get("empty") == ""


def test_update_replaces_with_single_value_in_place():
    """update() collapses a key to one value at its first position."""
    store = make_store()
    store.update({"a": "x"})

    assert store.get_all("a") == ["x"]
    assert store.to_string_search() == "a=x&b=3"


def test_update_with_none_deletes_key():
    store = make_store()
    store.update({"a": None, "c": 4})

    assert store.get("a") is None
    assert store.get_all("a") == []
    assert store.get("c") == "4"


def test_remove_ignores_missing_keys():
    store = make_store()
    store.remove(["a", "missing"])

    assert store.to_string_search() == "b=3"


def test_remove_all_clears_only_search_namespace():
    store = make_store()
    store.remove_all()

    assert store.to_string_search() == ""
    assert store.get_from_hash("x") == "1"


def test_namespaces_are_independent():
    """The same key in search and hash params are unrelated."""
    store = URLParams("?id=1", "#view?id=2", pathname="/")

    store.update_in_hash({"id": 9})

    assert store.get("id") == "1"
    assert store.get_from_hash("id") == "9"
    assert store.get_from_hash("missing") is None


def test_hash_parameter_operations():
    store = make_store()
    store.add_to_hash({"x": 2, "y": "a b"})
    assert store.get_all_from_hash("x") == ["1", "2"]
    assert store.to_string_hash() == "x=1&x=2&y=a+b"

    store.remove_from_hash(["x"])
    assert store.to_string_hash() == "y=a+b"

    store.remove_all_from_hash()
    assert store.to_string_hash() == ""
    assert store.get("a") == "1"


def test_set_hash_adds_leading_hash():
    store = make_store()
    store.set_hash("top")
    assert store.get_hash() == "#top"

    store.set_hash("#bottom")
    assert store.get_hash() == "#bottom"


def test_remove_hash_keeps_hash_params():
    """Only the hash path is cleared; hash params stay in the fragment."""
    store = make_store()
    store.remove_hash()

    assert store.get_hash() == ""
    assert store.get_from_hash("x") == "1"
    assert store.fragment() == "#?x=1"


def test_constructor_normalizes_hash_without_marker():
    store = URLParams("", "section?x=1", pathname="/")

    assert store.get_hash() == "#section"
    assert store.get_from_hash("x") == "1"


def test_to_string_assembles_relative_address():
    store = make_store()
    assert store.to_string() == "/page?a=1&a=2&b=3#/sec?x=1"
    assert str(store) == store.to_string()


def test_to_string_omits_empty_parts():
    store = URLParams("", "", pathname="/page")
    assert store.to_string() == "/page"

    store.add_to_hash({"x": 1})
    assert store.to_string() == "/page#?x=1"


def test_search_serialization_round_trips():
    """Rebuilding a store from its serialized search keeps every pair in order."""
    store = URLParams("", "", pathname="/")
    store.add({"q": "a b&c", "tag": "x"})
    store.add({"tag": "y=z", "emoji": "✓"})

    rebuilt = URLParams(store.to_string_search(), "", pathname="/")

    assert rebuilt.search_params.items() == store.search_params.items()
    assert rebuilt.to_string_search() == store.to_string_search()


def test_set_hash_moves_query_part_into_hash_params():
    store = URLParams("", "", pathname="/")
    store.set_hash("#view?tab=1")
    store.add_to_hash({"x": "2"})

    assert store.get_hash() == "#view"
    assert store.get_from_hash("tab") == "1"
    assert store.fragment() == "#view?tab=1&x=2"


def test_full_serialization_round_trips_both_namespaces():
    """A store rebuilt from to_string() has the same search, hash path and hash params."""
    store = URLParams("", "", pathname="/")
    store.add({"q": "a b", "tag": "x"})
    store.set_hash("view?tab=1")
    store.add_to_hash({"x": "2", "note": "a?b"})

    path, _, rest = store.to_string().partition("?")
    search, _, fragment = rest.partition("#")
    rebuilt = URLParams(search, f"#{fragment}", pathname=path)

    assert rebuilt.search_params.items() == store.search_params.items()
    assert rebuilt.get_hash() == store.get_hash() == "#view"
    assert rebuilt.hash_params.items() == store.hash_params.items()
    assert rebuilt.to_string() == store.to_string()


def test_reads_location_from_backend():
    backend = MemoryHistoryBackend("http://localhost/list?page=2#/detail?id=7")
    store = URLParams(backend=backend)

    assert store.get("page") == "2"
    assert store.get_hash() == "#/detail"
    assert store.get_from_hash("id") == "7"
    assert store.to_string() == "/list?page=2#/detail?id=7"


def test_apply_replaces_current_entry():
    backend = MemoryHistoryBackend("http://localhost/list?page=2#/detail?id=7")
    store = URLParams(backend=backend)

    store.update({"page": 3})
    store.apply()

    assert backend.location.href == "http://localhost/list?page=3#/detail?id=7"
    assert len(backend.entries) == 1
    assert backend.document_loads == 1


def test_refresh_reloads_from_location():
    backend = MemoryHistoryBackend("http://localhost/list?page=2")
    store = URLParams(backend=backend)
    store.add({"draft": 1})

    backend.replace_state("/list?page=5#top")
    store.refresh()

    assert store.get("page") == "5"
    assert store.get("draft") is None
    assert store.get_hash() == "#top"


def test_store_without_backend_uses_default_context():
    from urlstate.context import get_default_context

    store = URLParams("?a=1", "")

    assert store.backend is get_default_context().backend


def test_query_params_set_keeps_first_position():
    params = QueryParams("a=1&b=2&a=3")
    params.set("a", "9")

    assert params.to_string() == "a=9&b=2"
    assert params.keys() == ["a", "b"]
    assert "b" in params
    assert len(params) == 2


def test_query_params_parses_blank_values():
    params = QueryParams("?a=&b")

    assert params.get("a") == ""
    assert params.get("b") == ""
    assert params.to_dict() == {"a": [""], "b": [""]}
