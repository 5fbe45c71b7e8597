"""Exception types for deskini."""

from __future__ import annotations


class DeskiniError(Exception):
    """Base class for all deskini errors."""


class ParseError(DeskiniError):
    """A line matched none of the section / property / comment productions.

    Parsing is all-or-nothing, so a single ParseError rejects the whole input.
    """

    def __init__(
        self,
        line: int,
        offset: int,
        text: str,
        attempted: tuple[str, ...],
        reasons: dict[str, str] | None = None,
    ) -> None:
        self.line = line
        self.offset = offset
        self.text = text
        self.attempted = attempted
        self.reasons = dict(reasons or {})
        super().__init__(self._format())

    def _format(self) -> str:
        tried = ", ".join(self.attempted)
        msg = f"line {self.line} (offset {self.offset}): expected {tried}: {self.text!r}"
        details = "; ".join(f"{k}: {v}" for k, v in self.reasons.items())
        if details:
            msg += f" ({details})"
        return msg


class EncodingError(DeskiniError):
    """Input bytes are not valid UTF-8."""
