"""Character classes — which Unicode characters each field may contain.

Every class is expressed with Unicode property escapes (``\\p{...}``) from
the ``regex`` module rather than hand-written code point ranges, so the
admissible sets follow the Unicode database shipped with ``regex``:

    section_char = XID_Continue | ' ' | '-'
    name_char    = XID_Continue | Punctuation | '/' '+' '.' '-' '%' ' ' '[' ']'
    value_char   = Punctuation | Format | Number | Mark | Grapheme_Base
"""

from __future__ import annotations

import regex


class CharClass:
    """A named set of admissible characters for one field of a line."""

    __slots__ = ("name", "pattern", "_char", "_run")

    def __init__(self, name: str, pattern: str) -> None:
        self.name = name
        self.pattern = pattern
        self._char = regex.compile(pattern)
        self._run = regex.compile(pattern + "*")

    def __repr__(self) -> str:
        return f"CharClass({self.name!r}, {self.pattern!r})"

    def contains(self, ch: str) -> bool:
        """Return True if the single character *ch* belongs to this class."""
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return self._char.fullmatch(ch) is not None

    def matches(self, text: str, allow_empty: bool = False) -> bool:
        """Return True if every character of *text* belongs to this class."""
        if not text:
            return allow_empty
        return self._run.fullmatch(text) is not None

    def first_invalid(self, text: str) -> int | None:
        """Index of the first character of *text* outside the class, or None."""
        end = self._run.match(text).end()
        return None if end == len(text) else end


SECTION_CHARS = CharClass("section", r"[\p{XID_Continue} \-]")

NAME_CHARS = CharClass("name", r"[\p{XID_Continue}\p{P}/+.\-% \[\]]")

VALUE_CHARS = CharClass(
    "value",
    r"[\p{P}\p{Cf}\p{N}\p{M}\p{Grapheme_Base}]",
)


def is_section_char(ch: str) -> bool:
    return SECTION_CHARS.contains(ch)


def is_name_char(ch: str) -> bool:
    return NAME_CHARS.contains(ch)


def is_value_char(ch: str) -> bool:
    return VALUE_CHARS.contains(ch)


def describe_char(ch: str) -> str:
    """Render *ch* for diagnostics, e.g. ``U+0009 '\\t'``."""
    return f"U+{ord(ch):04X} {ch!r}"
