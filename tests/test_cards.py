"""Tests for card codes and hand parsing."""

import pytest

from brave_chain.engine.cards import (
    CardKind,
    Position,
    REAL_POSITIONS,
    format_hand,
    position_for_index,
    to_hand,
    translate,
)
from brave_chain.errors import InvalidCardCode, InvalidLength, ParseError

A, B, Q = CardKind.ARTS, CardKind.BUSTER, CardKind.QUICK


def test_translate_codes():
    assert translate("a") is A
    assert translate("b") is B
    assert translate("q") is Q


def test_to_hand_keeps_order():
    assert to_hand("bqa") == (B, Q, A)


def test_uppercase_parses_like_lowercase():
    assert to_hand("ABQ") == to_hand("abq") == (A, B, Q)
    assert to_hand("aBq") == (A, B, Q)


def test_invalid_code_names_first_bad_character():
    with pytest.raises(InvalidCardCode) as exc:
        to_hand("xyz")
    assert exc.value.code == "x"
    assert str(exc.value) == "Expected a/b/q. Found 'x'."


def test_invalid_code_after_valid_cards():
    with pytest.raises(InvalidCardCode) as exc:
        to_hand("abz")
    assert exc.value.code == "z"


def test_short_query_is_invalid_length():
    with pytest.raises(InvalidLength) as exc:
        to_hand("ab")
    assert exc.value.length == 2
    assert exc.value.query == "ab"
    assert str(exc.value) == 'Expected 3 cards. Found 2 in "ab".'


@pytest.mark.parametrize("query", ["", "abqa", "bbbbbb"])
def test_wrong_lengths(query):
    with pytest.raises(InvalidLength) as exc:
        to_hand(query)
    assert exc.value.length == len(query)


def test_length_checked_before_codes():
    with pytest.raises(InvalidLength):
        to_hand("xy")


def test_parse_errors_are_value_errors():
    assert issubclass(ParseError, ValueError)
    assert issubclass(InvalidLength, ParseError)
    assert issubclass(InvalidCardCode, ParseError)


def test_position_for_index():
    assert [position_for_index(i) for i in range(3)] == list(REAL_POSITIONS)
    assert Position.EXTRA not in REAL_POSITIONS
    with pytest.raises(IndexError):
        position_for_index(3)


def test_format_hand():
    assert format_hand((B, A, Q)) == "BAQ"
    assert str(Q) == "Q"
