"""Tests for the in-memory session history backend."""

from unittest.mock import MagicMock

import pytest

from urlstate.backends.memory import MemoryHistoryBackend
from urlstate.exceptions import CrossOriginError, InvalidURLError


def test_initial_state(backend):
    assert backend.location.href == "http://localhost/list"
    assert backend.location.pathname == "/list"
    assert backend.index == 0
    assert len(backend.entries) == 1
    assert backend.document_loads == 1


def test_invalid_initial_url_raises():
    with pytest.raises(InvalidURLError):
        MemoryHistoryBackend("not a url")


def test_push_state_resolves_relative_url(backend):
    backend.push_state("detail?id=5#top", state={"id": 5})

    assert backend.location.href == "http://localhost/detail?id=5#top"
    assert backend.location.search == "?id=5"
    assert backend.location.hash == "#top"
    assert backend.state == {"id": 5}
    assert backend.index == 1
    assert backend.document_loads == 1


def test_push_state_rejects_other_origin(backend):
    with pytest.raises(CrossOriginError):
        backend.push_state("https://elsewhere.test/")

    assert backend.location.href == "http://localhost/list"
    assert len(backend.entries) == 1


def test_replace_state_rewrites_current_entry(backend):
    backend.replace_state("?page=2")

    assert backend.location.href == "http://localhost/list?page=2"
    assert len(backend.entries) == 1


def test_go_back_fires_popstate(backend):
    subscriber = MagicMock()
    backend.subscribe(subscriber)
    backend.push_state("/a")

    backend.go(-1)

    subscriber.assert_called_once()
    assert backend.location.href == "http://localhost/list"
    assert backend.index == 0


def test_go_out_of_range_is_ignored(backend):
    subscriber = MagicMock()
    backend.subscribe(subscriber)

    backend.go(-1)
    backend.go(3)

    subscriber.assert_not_called()
    assert backend.index == 0


def test_popstate_waits_for_dispatch_when_auto_dispatch_disabled():
    backend = MemoryHistoryBackend("http://localhost/", auto_dispatch=False)
    subscriber = MagicMock()
    backend.subscribe(subscriber)
    backend.push_state("/a")
    backend.push_state("/b")

    backend.go(-1)
    backend.go(-1)
    subscriber.assert_not_called()
    assert backend.pending_events == 2

    assert backend.dispatch_pending() == 2
    assert subscriber.call_count == 2
    assert backend.pending_events == 0


def test_push_after_going_back_drops_forward_entries(backend):
    backend.push_state("/a")
    backend.push_state("/b")
    backend.go(-2)

    backend.push_state("/c")

    assert [entry.url for entry in backend.entries] == [
        "http://localhost/list",
        "http://localhost/c",
    ]


def test_assign_loads_document_and_pushes_entry(backend):
    backend.assign("https://other.test/page")

    assert backend.location.origin == "https://other.test"
    assert len(backend.entries) == 2
    assert backend.document_loads == 2


def test_replace_location_loads_document_in_place(backend):
    backend.replace_location("/other")

    assert backend.location.href == "http://localhost/other"
    assert len(backend.entries) == 1
    assert backend.document_loads == 2


def test_traversal_across_documents_loads_instead_of_popstate(backend):
    subscriber = MagicMock()
    backend.subscribe(subscriber)
    backend.assign("/next")

    backend.go(-1)

    subscriber.assert_not_called()
    assert backend.location.href == "http://localhost/list"
    assert backend.document_loads == 3


def test_go_zero_reloads(backend):
    subscriber = MagicMock()
    backend.subscribe(subscriber)

    backend.go(0)

    subscriber.assert_not_called()
    assert backend.document_loads == 2
