"""Entry types produced by the parser — one per non-blank line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Section:
    """``[name]`` — a section header. Brackets are not part of *name*."""

    name: str

    def __str__(self) -> str:
        return f"[{self.name}]"


@dataclass(frozen=True, slots=True)
class Property:
    """``name=value`` — split on the first ``=`` only."""

    name: str
    value: str

    def __str__(self) -> str:
        return f"{self.name}={self.value}"


@dataclass(frozen=True, slots=True)
class Comment:
    text: str  # everything after the leading '#', kept verbatim

    def __str__(self) -> str:
        return f"#{self.text}"


Entry = Union[Section, Property, Comment]
