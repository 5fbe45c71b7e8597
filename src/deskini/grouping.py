"""Folding a flat Document into section groups.

The parser never nests properties under sections. Callers that want groups
fold the entry stream here and choose what a repeated section header means.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .document import Document
from .entries import Property, Section


class RepeatPolicy(Enum):
    MERGE = "merge"   # concatenate every occurrence, keep first position
    FIRST = "first"   # ignore later occurrences
    LAST = "last"     # later occurrence replaces earlier ones


@dataclass(slots=True)
class SectionGroup:
    name: str | None  # None = properties before the first header
    properties: list[Property] = field(default_factory=list)

    def get(self, name: str) -> str | None:
        """Value of the first property called *name*, or None."""
        for prop in self.properties:
            if prop.name == name:
                return prop.value
        return None


def _runs(document: Document) -> list[SectionGroup]:
    """One group per header occurrence, in source order. Comments are dropped."""
    runs: list[SectionGroup] = []
    current: SectionGroup | None = None
    for entry in document:
        if isinstance(entry, Section):
            current = SectionGroup(entry.name)
            runs.append(current)
        elif isinstance(entry, Property):
            if current is None:
                current = SectionGroup(None)
                runs.append(current)
            current.properties.append(entry)
    return runs


def group_sections(
    document: Document,
    policy: RepeatPolicy = RepeatPolicy.MERGE,
) -> list[SectionGroup]:
    """Fold *document* into section groups according to *policy*.

    Property order inside a group follows the source; no key is ever
    deduplicated.
    """
    runs = _runs(document)

    if policy is RepeatPolicy.MERGE:
        merged: dict[str | None, SectionGroup] = {}
        for run in runs:
            if run.name in merged:
                merged[run.name].properties.extend(run.properties)
            else:
                merged[run.name] = run
        return list(merged.values())

    if policy is RepeatPolicy.FIRST:
        seen: set[str | None] = set()
        result: list[SectionGroup] = []
        for run in runs:
            if run.name not in seen:
                seen.add(run.name)
                result.append(run)
        return result

    if policy is RepeatPolicy.LAST:
        last_index = {run.name: i for i, run in enumerate(runs)}
        return [run for i, run in enumerate(runs) if last_index[run.name] == i]

    raise ValueError(f"unknown repeat policy: {policy!r}")


def find_property(document: Document, section: str | None, name: str) -> str | None:
    """First value of *name* under any header called *section* (first match wins)."""
    current: str | None = None
    for entry in document:
        if isinstance(entry, Section):
            current = entry.name
        elif isinstance(entry, Property) and current == section and entry.name == name:
            return entry.value
    return None
