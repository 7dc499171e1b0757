"""Tests for the vowel-group syllable heuristic."""

import pytest

from strata import count_syllables


@pytest.mark.parametrize("word,expected", [
    ("hello", 2),
    ("make", 1),
    ("the", 1),
    ("rhythm", 1),
    ("beautiful", 3),
    ("queue", 1),
    ("Yellow", 2),
    ("area", 2),
    ("understanding", 4),
])
def test_counts(word, expected):
    assert count_syllables(word) == expected


def test_trailing_punctuation_keeps_e():
    assert count_syllables("make.") == 2


def test_floor_of_one():
    assert count_syllables("") == 1
    assert count_syllables("psst") == 1
    assert count_syllables("42") == 1
