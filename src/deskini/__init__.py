"""deskini — parser for the desktop-entry / association-list INI format."""

from .charclass import (
    NAME_CHARS,
    SECTION_CHARS,
    VALUE_CHARS,
    CharClass,
    is_name_char,
    is_section_char,
    is_value_char,
)
from .document import Document
from .entries import Comment, Entry, Property, Section
from .errors import DeskiniError, EncodingError, ParseError
from .grouping import RepeatPolicy, SectionGroup, find_property, group_sections
from .parser import parse, parse_bytes

__all__ = [
    "parse",
    "parse_bytes",
    "Document",
    "Entry",
    "Section",
    "Property",
    "Comment",
    "DeskiniError",
    "ParseError",
    "EncodingError",
    "RepeatPolicy",
    "SectionGroup",
    "group_sections",
    "find_property",
    "CharClass",
    "SECTION_CHARS",
    "NAME_CHARS",
    "VALUE_CHARS",
    "is_section_char",
    "is_name_char",
    "is_value_char",
]
