# topmark:header:start
#
#   project      : YamlCraft
#   file         : test_wrappers.py
#   file_relpath : tests/encoding/test_wrappers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for document markers, anchors and aliases."""

from __future__ import annotations

from tests.conftest import load_yaml
from yamlcraft.encoding import (
    EncoderState,
    alias,
    anchor,
    document,
    int_,
    list_,
    record,
    render,
    string,
)


def test_document_wraps_scalar() -> None:
    """Document markers surround the inner text on their own lines."""
    assert render(2, document(string("hi"))) == "---\nhi\n..."


def test_document_wraps_block_mapping() -> None:
    """The inner node renders exactly as it would standalone."""
    enc = record([("foo", int_(42)), ("bar", list_(int_, [1, 2]))])
    assert render(2, document(enc)) == "---\n" + render(2, enc) + "\n..."
    assert load_yaml(render(2, document(enc))) == {"foo": 42, "bar": [1, 2]}


def test_document_in_flow_style() -> None:
    """Document markers also wrap flow output."""
    assert render(0, document(list_(int_, [1]))) == "---\n[1]\n..."


def test_anchor_on_scalar() -> None:
    """An anchored scalar reads ``&name value``."""
    assert render(2, anchor("a", int_, 1)) == "&a 1"


def test_anchor_as_mapping_value() -> None:
    """After a key, the anchor gets the inline separator."""
    enc = record([("k", anchor("a", int_, 1))])
    assert render(2, enc) == "k: &a 1"
    assert render(0, enc) == "{k: &a 1}"


def test_anchor_on_block_mapping() -> None:
    """A block value starts on the line after its anchor."""
    enc = anchor("base", lambda pairs: record(pairs), [("x", int_(1)), ("y", int_(2))])
    assert render(2, enc) == "&base\nx: 1\ny: 2"
    nested = record([("k", enc)])
    assert render(2, nested) == "k: &base\n  x: 1\n  y: 2"


def test_anchor_on_flow_sequence() -> None:
    """Flow values follow the anchor after one space."""
    assert render(0, anchor("s", lambda xs: list_(int_, xs), [1, 2])) == "&s [1, 2]"


def test_alias_text() -> None:
    """Aliases render as ``*name`` and get the inline separator after a key."""
    assert render(2, alias("a")) == "*a"
    assert alias("a")(EncoderState(6, 3, in_mapping=True)) == " *a"


def test_anchor_and_alias_round_trip() -> None:
    """A loader resolves the alias to the anchored value."""
    enc = record(
        [
            ("base", anchor("b", lambda pairs: record(pairs), [("x", int_(1))])),
            ("copy", alias("b")),
            ("items", list_(lambda e: e, [anchor("n", int_, 7), alias("n")])),
        ]
    )
    for indent in (0, 2, 4):
        assert load_yaml(render(indent, enc)) == {
            "base": {"x": 1},
            "copy": {"x": 1},
            "items": [7, 7],
        }


def test_alias_is_not_validated() -> None:
    """The engine renders aliases to unknown anchors without complaint."""
    assert render(2, record([("k", alias("missing"))])) == "k: *missing"


def test_document_around_simple_mapping() -> None:
    """A one-entry mapping inside a document."""
    enc = document(record([("hello", string("world"))]))
    assert render(2, enc) == "---\nhello: world\n..."
