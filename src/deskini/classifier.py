"""Line classifier: splits input into lines and recognizes each one.

Productions are tried in a fixed order, each against the whole line:

    section  = '[' section_char+ ']'
    property = name_char+ '=' value_char*
    comment  = '#' name_char*

A blank line yields no entry. Anything else is a ParseError.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .charclass import NAME_CHARS, SECTION_CHARS, VALUE_CHARS, CharClass, describe_char
from .entries import Comment, Entry, Property, Section
from .errors import ParseError

_NEWLINE_RE = re.compile(r"\r\n|\r|\n")

PRODUCTIONS: tuple[str, ...] = ("section", "property", "comment")


# ---------------------------------------------------------------------------
# Line splitting
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Line:
    number: int       # 1-based
    offset: int       # character offset of the first character in the input
    text: str         # without the terminator
    terminated: bool  # False only for trailing content at end of input


def split_lines(text: str) -> list[Line]:
    """Split *text* at ``\\r\\n``, ``\\r`` or ``\\n``.

    An input ending in a terminator does not produce a trailing empty line;
    content after the last terminator is returned with ``terminated=False``.
    """
    lines: list[Line] = []
    start = 0
    for number, m in enumerate(_NEWLINE_RE.finditer(text), 1):
        lines.append(Line(number, start, text[start:m.start()], True))
        start = m.end()
    if start < len(text):
        lines.append(Line(len(lines) + 1, start, text[start:], False))
    return lines


# ---------------------------------------------------------------------------
# Productions
#
# Each matcher returns (entry, None) on success or (None, reason) on failure.
# ---------------------------------------------------------------------------

def _reject(cls: CharClass, text: str, base_column: int) -> str | None:
    """Describe the first character of *text* outside *cls*, if any."""
    idx = cls.first_invalid(text)
    if idx is None:
        return None
    return f"{describe_char(text[idx])} not allowed in {cls.name} at column {base_column + idx}"


class _HeaderWithTrailer(Exception):
    """A complete ``[name]`` header followed by more text on the same line.

    Once the header has matched the line must end, so it is not re-tried
    as a property or comment.
    """


def _match_section(text: str) -> tuple[Section | None, str | None]:
    if not text.startswith("["):
        return None, "does not start with '['"
    rest = text[1:]
    end = SECTION_CHARS.first_invalid(rest)
    if end is None:
        return None, "missing closing ']'"
    if rest[end] != "]":
        return None, _reject(SECTION_CHARS, rest, 2)
    if end == 0:
        return None, "empty section name"
    if end + 2 < len(text):
        raise _HeaderWithTrailer(f"expected line terminator after ']' at column {end + 3}")
    return Section(rest[:end]), None


def _match_property(text: str) -> tuple[Property | None, str | None]:
    name, sep, value = text.partition("=")
    if not sep:
        return None, "no '='"
    if not name:
        return None, "empty property name"
    reason = _reject(NAME_CHARS, name, 1) or _reject(VALUE_CHARS, value, len(name) + 2)
    if reason:
        return None, reason
    return Property(name, value), None


def _match_comment(text: str) -> tuple[Comment | None, str | None]:
    if not text.startswith("#"):
        return None, "does not start with '#'"
    body = text[1:]
    reason = _reject(NAME_CHARS, body, 2)
    if reason:
        return None, reason
    return Comment(body), None


_MATCHERS = (
    ("section", _match_section),
    ("property", _match_property),
    ("comment", _match_comment),
)


# ---------------------------------------------------------------------------
# classify_line
# ---------------------------------------------------------------------------

def classify_line(line: Line) -> Entry | None:
    """Return the entry for *line*, or None if it is blank.

    Raises ParseError naming every production that was attempted. A line
    that opens with a complete section header stops at ``section``.
    """
    if not line.text:
        return None

    reasons: dict[str, str] = {}
    for name, matcher in _MATCHERS:
        try:
            entry, reason = matcher(line.text)
        except _HeaderWithTrailer as exc:
            reasons[name] = str(exc)
            raise ParseError(line.number, line.offset, line.text, (name,), reasons) from None
        if entry is not None:
            return entry
        reasons[name] = reason

    raise ParseError(line.number, line.offset, line.text, PRODUCTIONS, reasons)
