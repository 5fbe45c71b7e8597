"""Document — the ordered result of parsing one input buffer."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .entries import Comment, Entry, Property, Section


@dataclass(frozen=True, slots=True)
class Document:
    """Immutable, flat sequence of entries in source line order.

    Sections do not own the properties that follow them; see
    :func:`deskini.grouping.group_sections` for folding into groups.
    """

    entries: tuple[Entry, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable but always store a tuple
        if not isinstance(self.entries, tuple):
            object.__setattr__(self, "entries", tuple(self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __getitem__(self, index: int | slice) -> Entry | Document:
        # Slices stay Documents
        if isinstance(index, slice):
            return Document(self.entries[index])
        return self.entries[index]

    def __bool__(self) -> bool:
        return bool(self.entries)

    # -- Convenience views ----------------------------------------------

    @property
    def sections(self) -> tuple[Section, ...]:
        return tuple(e for e in self.entries if isinstance(e, Section))

    @property
    def properties(self) -> tuple[Property, ...]:
        return tuple(e for e in self.entries if isinstance(e, Property))

    @property
    def comments(self) -> tuple[Comment, ...]:
        return tuple(e for e in self.entries if isinstance(e, Comment))
