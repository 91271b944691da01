# topmark:header:start
#
#   project      : YamlCraft
#   file         : test_escaping.py
#   file_relpath : tests/encoding/test_escaping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the string escaping helpers."""

from __future__ import annotations

from tests.conftest import load_yaml, parametrize
from yamlcraft.encoding import (
    double_quote,
    escape_key,
    escape_multiline_scalar,
    escape_scalar,
    needs_quoting,
    quote,
)


@parametrize("text", ["hello", "a b c", "", "x*y", "100%"])
def test_escape_scalar_leaves_clean_text_unchanged(text: str) -> None:
    """Text without a leading indicator or double quote passes through."""
    assert escape_scalar(text) == text


@parametrize(
    "text, expected",
    [
        ("*ref", "\\*ref"),
        ("!tag", "\\!tag"),
        ("&anchor", "\\&anchor"),
    ],
)
def test_escape_scalar_neutralizes_leading_indicator(text: str, expected: str) -> None:
    """A leading ``*``, ``!`` or ``&`` gets a backslash."""
    assert escape_scalar(text) == expected


def test_escape_scalar_escapes_double_quotes() -> None:
    """Every double quote is backslash-escaped."""
    assert escape_scalar('say "hi" "twice"') == 'say \\"hi\\" \\"twice\\"'


def test_quote_wraps_without_escaping() -> None:
    """`quote` only adds the surrounding double quotes."""
    assert quote("a b") == '"a b"'


def test_escape_multiline_scalar() -> None:
    """Quotes are escaped line by line; newlines are preserved."""
    assert escape_multiline_scalar('line "1"\nline 2\n"3"') == 'line \\"1\\"\nline 2\n\\"3\\"'


def test_escape_multiline_scalar_identity_on_clean_text() -> None:
    """Clean multi-line text is returned unchanged."""
    assert escape_multiline_scalar("a\nb\n") == "a\nb\n"


@parametrize(
    "key, expected",
    [
        ("simple", "simple"),
        ("with space", '"with space"'),
        ("a:b", '"a:b"'),
        ("", ""),
    ],
)
def test_escape_key(key: str, expected: str) -> None:
    """Keys containing ``:`` or a space are quoted."""
    assert escape_key(key) == expected


@parametrize(
    "text",
    [
        "",
        " lead",
        "trail ",
        "null",
        "~",
        "yes",
        "Off",
        "true",
        "123",
        "-5",
        "+1",
        "1.5",
        ".5",
        ".inf",
        "-.INF",
        ".NaN",
        "0x1F",
        "2024-01-02",
        "1:30",
        "- item",
        "? q",
        "#comment",
        "a: b",
        "a #b",
        "[x]",
        "{x}",
        "a,b",
        "&anchor",
        "*alias",
        "!tag",
        "|",
        ">",
        "'single'",
        '"double"',
        "%percent",
        "@at",
        "`tick`",
        "...",
        "---",
        "<<",
        "=",
        "tab\there",
        "new\nline",
        "nbsp\xa0",
        "bell\x07",
        "bom\ufeff",
    ],
)
def test_needs_quoting_true(text: str) -> None:
    """Text a loader would misread, or that breaks syntax, needs quotes."""
    assert needs_quoting(text)


@parametrize("text", ["hello", "hello world", "a-b", "x_1", "nan", "inf", "caf\u00e9", "a.b"])
def test_needs_quoting_false(text: str) -> None:
    """Ordinary words stay plain."""
    assert not needs_quoting(text)


@parametrize(
    "text, expected",
    [
        ("plain", '"plain"'),
        ('q"uote', '"q\\"uote"'),
        ("back\\slash", '"back\\\\slash"'),
        ("tab\t", '"tab\\t"'),
        ("nl\n", '"nl\\n"'),
        ("nul\0", '"nul\\0"'),
        ("del\x7f", '"del\\x7F"'),
        ("sep\u2028", '"sep\\L"'),
    ],
)
def test_double_quote_escapes(text: str, expected: str) -> None:
    """Special and non-printable characters become escape sequences."""
    assert double_quote(text) == expected


@parametrize(
    "text",
    [
        "",
        "null",
        "a: b",
        'q"',
        "back\\",
        "\t\n\r",
        "\x00\x1b\x7f",
        "\u2028\u2029\ufeff",
        "\U0001f600",
    ],
)
def test_double_quote_loads_back(text: str) -> None:
    """A YAML loader reads a double-quoted scalar back to the original text."""
    assert load_yaml(double_quote(text)) == text
