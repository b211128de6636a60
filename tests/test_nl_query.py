"""
Tests for natural language query translation
"""
import re

import pytest

from string_analyzer.errors import QueryParseError
from string_analyzer.nl_query import RULES, Rule, parse_natural_language_query, translate


@pytest.mark.parametrize("query,expected", [
    ("all single word palindromic strings", {"word_count": 1, "is_palindrome": True}),
    ("strings longer than 10 characters", {"min_length": 11}),
    ("strings with the first vowel", {"contains_character": "a"}),
    ("strings containing the letter z", {"contains_character": "z"}),
    ("palindromic strings that contain the first vowel", {"is_palindrome": True, "contains_character": "a"}),
    ("one word strings", {"word_count": 1}),
    ("double word strings", {"word_count": 2}),
    ("strings with more than 4 characters", {"min_length": 5}),
    ("strings shorter than 5 characters", {"max_length": 4}),
    ("strings with less than 3 characters", {"max_length": 2}),
    ("strings of at least 6 characters", {"min_length": 6}),
    ("strings with letter q", {"contains_character": "q"}),
    ("strings that contains x", {"contains_character": "x"}),
    ("strings containing the fourth vowel", {"contains_character": "o"}),
    ("xyz", {}),
    ("", {}),
])
def test_translate(query, expected):
    assert translate(query) == expected


def test_translate_is_case_insensitive():
    assert translate("PALINDROMES Longer Than 3") == {"is_palindrome": True, "min_length": 4}


def test_later_word_count_rule_wins():
    assert translate("single word or two word strings") == {"word_count": 2}


def test_at_least_overrides_longer_than():
    assert translate("longer than 10 and at least 3 characters") == {"min_length": 3}


def test_length_bounds_combine():
    assert translate("longer than 2 and shorter than 9") == {"min_length": 3, "max_length": 8}


def test_letter_phrase_beats_trailing_letter():
    assert translate("with the letter b and contains c") == {"contains_character": "b"}


def test_trailing_letter_needs_end_of_query():
    assert translate("strings containing k only") == {}


def test_vowel_ordinal_overrides_letter():
    assert translate("containing the letter b and the second vowel") == {"contains_character": "e"}


def test_last_vowel_ordinal_in_rule_order_wins():
    assert translate("fifth vowel or first vowel") == {"contains_character": "u"}


def test_rules_are_ordered():
    names = [rule.name for rule in RULES]

    assert names[:8] == [
        "palindrome", "single_word", "two_words", "longer_than",
        "shorter_than", "at_least", "letter", "trailing_letter",
    ]
    assert names[8:] == ["first_vowel", "second_vowel", "third_vowel", "fourth_vowel", "fifth_vowel"]


def test_translate_with_custom_rules():
    rules = list(RULES) + [
        Rule(
            name="three_words",
            pattern=re.compile(r"three word"),
            produce=lambda m: {"word_count": 3},
        )
    ]

    assert translate("single word or three word strings", rules=rules) == {"word_count": 3}
    assert translate("three word strings") == {}


def test_parse_natural_language_query_rejects_unparseable():
    with pytest.raises(QueryParseError):
        parse_natural_language_query("show me something nice")


def test_parse_natural_language_query_returns_filters():
    assert parse_natural_language_query("palindromes") == {"is_palindrome": True}


def test_trailing_letter_rejects_trailing_newline():
    assert translate("strings containing x\n") == {}
