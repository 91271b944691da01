# topmark:header:start
#
#   project      : YamlCraft
#   file         : escaping.py
#   file_relpath : src/yamlcraft/encoding/escaping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Stateless string transforms applied before building string scalars.

The `string` primitive emits its text verbatim. Callers that hold arbitrary text
run it through these helpers first:

- `escape_scalar`: neutralize a leading alias/tag/anchor indicator (``*``,
  ``!``, ``&``) with a backslash and backslash-escape embedded double quotes.
  Text that has neither is returned unchanged.
- `escape_multiline_scalar`: escape double quotes line by line and rejoin with
  ``\n``; no block scalar indicator is introduced.
- `escape_key`: quote mapping keys containing ``:`` or a space.
- `quote`: surround text with double quotes.

`needs_quoting` and `double_quote` implement the stricter rules used when
projecting native Python values (see `yamlcraft.encoding.projection`): they decide
whether text survives as a plain scalar and otherwise produce a fully escaped
double-quoted scalar.
"""

from __future__ import annotations

import re
from typing import Final

# Indicators that change the meaning of a scalar when they lead it
SCALAR_INDICATORS: Final[tuple[str, ...]] = ("*", "!", "&")

# Characters that force quoting when a key contains them
KEY_SPECIAL_CHARS: Final[tuple[str, ...]] = (":", " ")

# Characters that may not start a plain scalar
_LEADING_INDICATORS: Final[frozenset[str]] = frozenset("-?:,[]{}#&*!|>'\"%@`")

# Characters that may not appear anywhere in a plain scalar (block or flow)
_FORBIDDEN_PLAIN_CHARS: Final[frozenset[str]] = frozenset(":#,[]{}\"'")

# YAML 1.1 spellings that resolve to null, bool, merge or value tags
_RESERVED_WORDS: Final[frozenset[str]] = frozenset(
    {
        "~",
        "null",
        "Null",
        "NULL",
        "y",
        "Y",
        "yes",
        "Yes",
        "YES",
        "n",
        "N",
        "no",
        "No",
        "NO",
        "true",
        "True",
        "TRUE",
        "false",
        "False",
        "FALSE",
        "on",
        "On",
        "ON",
        "off",
        "Off",
        "OFF",
        "<<",
        "=",
    }
)

# Anything an int/float/timestamp resolver could claim
_NUMERIC_LIKE: Final[re.Pattern[str]] = re.compile(
    r"^[-+]?(?:\.?[0-9_]|\.(?:inf|nan)$)",
    re.IGNORECASE,
)

# Characters YAML allows literally in a stream
_PRINTABLE: Final[re.Pattern[str]] = re.compile(
    "^[\x09\x0a\x0d\x20-\x7e\x85\xa0-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]*$"
)

_DOUBLE_QUOTED_ESCAPES: Final[dict[str, str]] = {
    "\\": "\\\\",
    '"': '\\"',
    "\0": "\\0",
    "\x07": "\\a",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\x0b": "\\v",
    "\f": "\\f",
    "\r": "\\r",
    "\x1b": "\\e",
    "\x85": "\\N",
    "\u2028": "\\L",
    "\u2029": "\\P",
    "\ufeff": "\\uFEFF",
}


def quote(text: str) -> str:
    """Surround ``text`` with YAML double quotes (no escaping)."""
    return f'"{text}"'


def escape_scalar(text: str) -> str:
    """Escape a single-line string before it becomes a scalar.

    A leading ``*``, ``!`` or ``&`` is prefixed with a backslash so it is not read
    as an alias, tag or anchor indicator; embedded double quotes are
    backslash-escaped. Text free of both is returned unchanged.

    Args:
        text (str): The raw single-line text.

    Returns:
        str: The escaped text (not yet quoted).
    """
    if text.startswith(SCALAR_INDICATORS):
        text = "\\" + text
    return text.replace('"', '\\"')


def escape_multiline_scalar(text: str) -> str:
    """Escape double quotes on each line of a multi-line string.

    Lines are rejoined with ``\\n``; the newlines themselves pass through
    literally.
    """
    return "\n".join(line.replace('"', '\\"') for line in text.split("\n"))


def escape_key(text: str) -> str:
    """Quote a mapping key that contains ``:`` or a space; return others unchanged."""
    if any(ch in text for ch in KEY_SPECIAL_CHARS):
        return quote(text)
    return text


def needs_quoting(text: str) -> bool:
    """Return True if ``text`` cannot be emitted as a plain scalar.

    The check is conservative: it rejects anything that a YAML 1.1 loader could
    read back as a different value or type, or that would break flow or block
    syntax.

    Args:
        text (str): Candidate scalar text.

    Returns:
        bool: True when the text must be double-quoted.
    """
    if not text or text != text.strip(" "):
        return True
    if text[0] in _LEADING_INDICATORS or text.startswith("..."):
        return True
    if text in _RESERVED_WORDS or _NUMERIC_LIKE.match(text):
        return True
    for ch in text:
        if ch in _FORBIDDEN_PLAIN_CHARS or ch in _DOUBLE_QUOTED_ESCAPES:
            return True
        if ch != " " and ch.isspace():
            return True
    return _PRINTABLE.match(text) is None


def _escape_char(ch: str) -> str:
    escaped: str | None = _DOUBLE_QUOTED_ESCAPES.get(ch)
    if escaped is not None:
        return escaped
    if _PRINTABLE.match(ch):
        return ch
    code: int = ord(ch)
    if code <= 0xFF:
        return f"\\x{code:02X}"
    if code <= 0xFFFF:
        return f"\\u{code:04X}"
    return f"\\U{code:08X}"


def double_quote(text: str) -> str:
    """Return ``text`` as a fully escaped YAML double-quoted scalar.

    Backslashes, double quotes, control characters, the Unicode line separators
    and any character YAML does not allow literally are written as escape
    sequences, so a YAML loader reads back exactly ``text``.
    """
    return quote("".join(_escape_char(ch) for ch in text))
