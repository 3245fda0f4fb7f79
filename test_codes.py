#!/usr/bin/env python3
"""
Tests for Strong's code normalization and namespace helpers.
"""

import pytest

from sword_reader import codes
from sword_reader.codes import to_canonical, to_wire_form
from sword_reader.errors import InvalidCodeError, UnknownNamespaceError


def test_to_canonical_strips_leading_zeros():
    assert to_canonical("00430") == 430
    assert to_canonical("07225") == 7225
    assert to_canonical("000001") == 1


def test_to_canonical_trims_whitespace():
    assert to_canonical("  2316\t") == 2316


def test_to_canonical_accepts_ints():
    assert to_canonical(430) == 430
    assert to_canonical(99999) == 99999


@pytest.mark.parametrize("raw", ["0", "00000", "", "   ", "abc", "12a", "-5", "123456", "4 30", "+7"])
def test_to_canonical_rejects_bad_strings(raw):
    with pytest.raises(InvalidCodeError):
        to_canonical(raw)


@pytest.mark.parametrize("raw", [0, -1, 100000, True, None, 4.0])
def test_to_canonical_rejects_bad_values(raw):
    with pytest.raises(InvalidCodeError):
        to_canonical(raw)


def test_invalid_code_error_is_a_value_error():
    with pytest.raises(ValueError):
        to_canonical("x")


def test_to_wire_form_pads_to_five():
    assert to_wire_form(430) == "00430"
    assert to_wire_form("7") == "00007"
    assert to_wire_form(99999) == "99999"
    assert to_wire_form("00157") == "00157"


def test_to_wire_form_rejects_invalid_codes():
    with pytest.raises(InvalidCodeError):
        to_wire_form(0)


def test_every_code_survives_a_wire_round_trip():
    for code in range(1, codes.MAX_CODE + 1):
        assert to_canonical(to_wire_form(code)) == code


def test_namespace_prefixes():
    assert codes.display_prefix(codes.HEBREW) == "H"
    assert codes.display_prefix(codes.GREEK) == "G"
    assert codes.display_prefix("aramaic") == "A"
    assert codes.namespace_for_prefix("H") == codes.HEBREW
    assert codes.namespace_for_prefix("g") == codes.GREEK
    assert codes.label(codes.HEBREW, 430) == "H430"


def test_companion_modules():
    assert codes.companion_namespace(codes.HEBREW) == codes.GREEK
    assert codes.companion_namespace(codes.GREEK) == codes.HEBREW
    assert codes.pair_module(codes.HEBREW) == "HebrewGreek"
    assert codes.pair_module(codes.GREEK) == "GreekHebrew"
    assert codes.lexicon_module(codes.GREEK) == "StrongsGreek"


def test_unknown_namespace_has_no_companion():
    with pytest.raises(UnknownNamespaceError):
        codes.companion_namespace("Latin")
    with pytest.raises(UnknownNamespaceError):
        codes.lexicon_module("Latin")
