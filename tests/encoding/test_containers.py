# topmark:header:start
#
#   project      : YamlCraft
#   file         : test_containers.py
#   file_relpath : tests/encoding/test_containers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for sequence and mapping encoders across flow and block layouts."""

from __future__ import annotations

from tests.conftest import load_yaml, parametrize
from yamlcraft.encoding import (
    Encoder,
    EncoderState,
    dict_,
    float_,
    int_,
    list_,
    record,
    render,
    string,
)


def _ident(encoder: Encoder) -> Encoder:
    return encoder


def test_empty_containers_are_inline_at_any_indent() -> None:
    """Empty sequences and mappings always render as ``[]`` / ``{}``."""
    for indent in (0, 2, 4):
        assert render(indent, list_(int_, [])) == "[]"
        assert render(indent, record([])) == "{}"


def test_empty_containers_as_mapping_values() -> None:
    """Empty containers behave like scalars after a key."""
    enc = record([("a", list_(int_, [])), ("b", record([]))])
    assert render(2, enc) == "a: []\nb: {}"


def test_flow_sequence() -> None:
    """Indent 0 renders sequences in flow style."""
    assert render(0, list_(int_, [1, 2, 3])) == "[1, 2, 3]"


def test_block_sequence() -> None:
    """Indent 2 puts one item per line."""
    assert render(2, list_(int_, [1, 2, 3])) == "- 1\n- 2\n- 3"


def test_block_sequence_pads_wider_indent() -> None:
    """Wider indentation pads after the dash so items align to the width."""
    assert render(4, list_(int_, [1, 2])) == "-   1\n-   2"


def test_flow_mapping() -> None:
    """Indent 0 renders mappings in flow style."""
    enc = record([("foo", int_(42)), ("bar", string("x"))])
    assert render(0, enc) == "{foo: 42, bar: x}"


def test_block_mapping_with_nested_sequence() -> None:
    """A block sequence under a key starts on the next line, indented."""
    enc = record([("foo", int_(42)), ("bar", list_(int_, [1, 2]))])
    assert render(2, enc) == "foo: 42\nbar:\n  - 1\n  - 2"


def test_nested_mapping_indentation() -> None:
    """Each nesting level adds exactly ``indent`` columns."""
    enc = record([("a", record([("b", record([("c", int_(1))]))]))])
    assert render(2, enc) == "a:\n  b:\n    c: 1"
    assert render(3, enc) == "a:\n   b:\n      c: 1"


def test_mapping_inside_sequence() -> None:
    """A mapping item starts after the dash; following entries align with it."""
    enc = list_(_ident, [record([("a", int_(1)), ("b", int_(2))])])
    assert render(2, enc) == "- a: 1\n  b: 2"
    assert render(4, enc) == "-   a: 1\n    b: 2"


def test_sequence_inside_sequence() -> None:
    """Nested block sequences render compactly after the outer dash."""
    enc = list_(lambda items: list_(int_, items), [[1, 2], [3]])
    assert render(2, enc) == "- - 1\n  - 2\n- - 3"
    assert load_yaml(render(2, enc)) == [[1, 2], [3]]


def test_mapping_sequence_mapping() -> None:
    """Sequences of mappings under a key keep their alignment."""
    enc = record(
        [
            ("items", list_(_ident, [record([("b", int_(1)), ("c", int_(2))])])),
        ]
    )
    assert render(2, enc) == "items:\n  - b: 1\n    c: 2"
    assert load_yaml(render(2, enc)) == {"items": [{"b": 1, "c": 2}]}


def test_nested_flow_collections() -> None:
    """Flow style nests recursively on a single line."""
    enc = record([("a", list_(_ident, [record([("b", int_(1))]), list_(int_, [])]))])
    assert render(0, enc) == "{a: [{b: 1}, []]}"


def test_record_preserves_pair_order() -> None:
    """Entries are emitted exactly in the given order."""
    enc = record([("z", int_(1)), ("a", int_(2)), ("m", int_(3))])
    assert render(2, enc) == "z: 1\na: 2\nm: 3"


def test_record_allows_duplicate_keys() -> None:
    """Duplicate keys are emitted as given; no de-duplication happens."""
    enc = record([("k", int_(1)), ("k", int_(2))])
    assert render(0, enc) == "{k: 1, k: 2}"


def test_dict_uses_key_function_and_iteration_order() -> None:
    """`dict_` stringifies keys and follows the mapping's iteration order."""
    enc = dict_(str, int_, {3: 30, 1: 10})
    assert render(2, enc) == "3: 30\n1: 10"


def test_containers_accept_one_shot_iterators() -> None:
    """Inputs are materialized at construction, so rendering twice is stable."""
    enc = list_(int_, iter([1, 2]))
    assert render(0, enc) == "[1, 2]"
    assert render(0, enc) == "[1, 2]"


def test_same_encoder_renders_with_different_widths() -> None:
    """An encoder tree is reusable across indentation widths."""
    enc = record([("a", list_(int_, [1]))])
    assert render(0, enc) == "{a: [1]}"
    assert render(2, enc) == "a:\n  - 1"
    assert render(4, enc) == "a:\n    -   1"


def test_block_container_as_mapping_value_starts_on_new_line() -> None:
    """A block container rendered as a mapping value begins with newline + column."""
    enc = list_(int_, [1])
    assert enc(EncoderState(4, 2, in_mapping=True)) == "\n    - 1"


@parametrize("indent", [2, 3, 4])
def test_block_rendering_loads_back(indent: int) -> None:
    """Block output of a mixed tree reads back as the same structure."""
    enc = record(
        [
            ("name", string("demo")),
            ("ports", list_(int_, [80, 443])),
            ("env", record([("debug", string("on_demand")), ("level", int_(3))])),
            ("matrix", list_(lambda r: list_(int_, r), [[1, 2], [3, 4]])),
        ]
    )
    assert load_yaml(render(indent, enc)) == {
        "name": "demo",
        "ports": [80, 443],
        "env": {"debug": "on_demand", "level": 3},
        "matrix": [[1, 2], [3, 4]],
    }


def test_mapping_with_int_and_float() -> None:
    """Scalar values follow their key after one space."""
    enc = record([("foo", int_(42)), ("bar", float_(3.14))])
    assert render(2, enc) == "foo: 42\nbar: 3.14"
