"""Document builder: the public parse entry points."""

from __future__ import annotations

import logging

from .classifier import classify_line, split_lines
from .document import Document
from .entries import Entry
from .errors import EncodingError, ParseError

logger = logging.getLogger(__name__)


def parse(text: str) -> Document:
    """Parse *text* into a Document.

    Every line must be a section header, a property, a comment or blank,
    and every line, the last one included, must end with a line terminator.
    The first offending line raises ParseError and nothing is returned.
    """
    entries: list[Entry] = []
    lines = split_lines(text)

    for line in lines:
        try:
            entry = classify_line(line)
        except ParseError as exc:
            logger.debug("Rejected line %d: %s", line.number, exc.reasons)
            raise
        if not line.terminated:
            raise ParseError(
                line.number,
                line.offset,
                line.text,
                ("newline",),
                {"newline": "input ends without a line terminator"},
            )
        if entry is not None:
            entries.append(entry)

    logger.debug("Parsed %d lines into %d entries", len(lines), len(entries))
    return Document(tuple(entries))


def parse_bytes(data: bytes) -> Document:
    """Decode *data* as UTF-8 and parse it."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EncodingError(
            f"invalid UTF-8 at byte {exc.start}: {exc.reason}"
        ) from exc
    return parse(text)
