"""Tests for percent-encoding helpers."""

import pytest

from urlstate.encoding import (
    decode_url_component,
    decode_url_component_safe,
    encode_url_component,
    encode_url_component_safe,
    parse_query_pairs,
    serialize_query_pairs,
)


def test_decode_safe_returns_malformed_input_unchanged():
    assert decode_url_component_safe("%") == "%"
    assert decode_url_component_safe("100%") == "100%"
    assert decode_url_component_safe("%E0%A4%A") == "%E0%A4%A"


def test_decode_safe_returns_invalid_utf8_unchanged():
    assert decode_url_component_safe("%FF") == "%FF"


def test_decode_safe_decodes_valid_input():
    assert decode_url_component_safe("%E4%BD%A0%20ok") == "你 ok"


def test_decode_strict_raises_on_malformed_input():
    with pytest.raises(ValueError):
        decode_url_component("%")


def test_encode_component_matches_encode_uri_component():
    assert encode_url_component("a b&c/d") == "a%20b%26c%2Fd"
    assert encode_url_component("!*'()~-_.") == "!*'()~-_."


def test_encode_safe_uses_form_style():
    assert encode_url_component_safe("a b!'()*") == "a+b%21%27%28%29*"


def test_parse_query_pairs_keeps_blanks_and_order():
    assert parse_query_pairs("?a=1&b=&c&a=2") == [
        ("a", "1"),
        ("b", ""),
        ("c", ""),
        ("a", "2"),
    ]
    assert parse_query_pairs("") == []
    assert parse_query_pairs("?") == []


def test_serialize_query_pairs():
    assert serialize_query_pairs([("a", "x y"), ("b", "1&2")]) == "a=x+y&b=1%262"
