#!/usr/bin/env python3
"""
Tests for pulling citations out of TSK cross-reference HTML.
"""

import pytest

from sword_reader.crossrefs import parse_cross_references
from sword_reader.errors import InvalidInputError


def test_semicolon_groups_are_flattened_in_order():
    markup = "<scripRef>Gen 1:1; Gen 1:2</scripRef><br><scripRef>Exod 3:14</scripRef>"

    assert parse_cross_references(markup) == ["Gen 1:1", "Gen 1:2", "Exod 3:14"]


def test_duplicates_are_kept():
    markup = "<scripRef>Ps 23:1</scripRef><br><scripRef>John 10:11; Ps 23:1</scripRef>"

    assert parse_cross_references(markup) == ["Ps 23:1", "John 10:11", "Ps 23:1"]


def test_empty_pieces_and_whitespace_are_dropped():
    markup = "<scripRef> Gen 1:1 ;; ; </scripRef><scripRef>  </scripRef>"

    assert parse_cross_references(markup) == ["Gen 1:1"]


def test_unclosed_tag_does_not_repeat_nested_citations():
    markup = "<scripRef>Gen 1:1<scripRef>Exod 3:14</scripRef>"

    assert parse_cross_references(markup) == ["Gen 1:1", "Exod 3:14"]


def test_formatting_inside_a_tag_is_kept():
    markup = "<scripRef><i>Gen</i> 1:1; Exod 3:14</scripRef>"

    assert parse_cross_references(markup) == ["Gen 1:1", "Exod 3:14"]


def test_text_outside_tags_is_ignored():
    markup = (
        "<b>beginning</b> Joh 1:1-3<br>"
        "<scripRef>Heb 1:10</scripRef> God <i>created</i><br />"
        "<scriptref>Isa 40:28</scriptref>"
    )

    assert parse_cross_references(markup) == ["Heb 1:10"]


def test_lower_case_tags_match():
    assert parse_cross_references("<scripref>Rev 22:13</scripref>") == ["Rev 22:13"]


def test_entities_are_decoded():
    assert parse_cross_references("<scripRef>Gen 1:1&nbsp;</scripRef>") == ["Gen 1:1"]


@pytest.mark.parametrize("markup", ["", "no references here", "<br><br/>"])
def test_no_tags_gives_empty_list(markup):
    assert parse_cross_references(markup) == []


def test_non_text_input_is_rejected():
    with pytest.raises(InvalidInputError):
        parse_cross_references(None)
