"""Tests for folding a Document into section groups."""

import pytest

from deskini import RepeatPolicy, find_property, group_sections, parse


TEXT = (
    "top=0\n"
    "[A]\n"
    "x=1\n"
    "# ignored\n"
    "[B]\n"
    "y=2\n"
    "[A]\n"
    "x=3\n"
    "z=4\n"
)


def _names(groups):
    return [g.name for g in groups]


def _props(group):
    return [(p.name, p.value) for p in group.properties]


# ---------------------------------------------------------------------------
# group_sections
# ---------------------------------------------------------------------------

def test_merge_is_default():
    groups = group_sections(parse(TEXT))
    assert _names(groups) == [None, "A", "B"]
    assert _props(groups[1]) == [("x", "1"), ("x", "3"), ("z", "4")]


def test_properties_before_first_header():
    groups = group_sections(parse(TEXT))
    assert groups[0].name is None
    assert _props(groups[0]) == [("top", "0")]


def test_first_policy():
    groups = group_sections(parse(TEXT), RepeatPolicy.FIRST)
    assert _names(groups) == [None, "A", "B"]
    assert _props(groups[1]) == [("x", "1")]


def test_last_policy():
    groups = group_sections(parse(TEXT), RepeatPolicy.LAST)
    assert _names(groups) == [None, "B", "A"]
    assert _props(groups[2]) == [("x", "3"), ("z", "4")]


def test_empty_section_kept():
    groups = group_sections(parse("[Empty]\n[Full]\na=1\n"))
    assert _names(groups) == ["Empty", "Full"]
    assert groups[0].properties == []


def test_empty_document():
    assert group_sections(parse("")) == []


def test_grouping_does_not_touch_document():
    doc = parse(TEXT)
    before = list(doc)
    group_sections(doc)
    group_sections(doc, RepeatPolicy.LAST)
    assert list(doc) == before


def test_unknown_policy():
    with pytest.raises(ValueError):
        group_sections(parse(TEXT), "merge")


def test_group_get_first_match():
    groups = group_sections(parse(TEXT))
    assert groups[1].get("x") == "1"
    assert groups[1].get("missing") is None


# ---------------------------------------------------------------------------
# find_property
# ---------------------------------------------------------------------------

def test_find_property_first_match_wins():
    assert find_property(parse(TEXT), "A", "x") == "1"


def test_find_property_in_repeated_section():
    assert find_property(parse(TEXT), "A", "z") == "4"


def test_find_property_before_header():
    assert find_property(parse(TEXT), None, "top") == "0"


def test_find_property_missing():
    assert find_property(parse(TEXT), "B", "x") is None
    assert find_property(parse(TEXT), "C", "x") is None
