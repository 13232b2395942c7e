"""
Unit tests for natural language query translation.
"""

import pytest

from string_analyzer.services.nl_parser import RULES, parse_natural_language_query


def parse(query):
    return parse_natural_language_query(query).applied()


class TestParseNaturalLanguageQuery:
    """Test cases for parse_natural_language_query."""

    def test_single_word_palindromes(self):
        assert parse("all single word palindromic strings") == {
            "is_palindrome": True,
            "word_count": 1,
        }

    def test_longer_than(self):
        assert parse("strings longer than 3") == {"min_length": 4}

    def test_shorter_than(self):
        assert parse("strings shorter than 10 characters") == {"max_length": 9}

    def test_shorter_than_zero_gives_negative_bound(self):
        assert parse("strings shorter than 0") == {"max_length": -1}

    @pytest.mark.parametrize("query", [
        "non-palindrome strings",
        "strings that are not palindromes",
        "strings that are not a palindrome",
        "NON PALINDROMIC words",
    ])
    def test_negated_palindrome(self, query):
        assert parse(query) == {"is_palindrome": False}

    def test_empty_query_matches_everything(self):
        assert parse("") == {}
        assert parse("   ") == {}

    def test_contains_letter(self):
        assert parse("strings containing the letter z") == {"contains_character": "z"}
        assert parse("words that contain letter Q") == {"contains_character": "q"}

    def test_first_vowel(self):
        assert parse("palindromic strings that contain the first vowel") == {
            "is_palindrome": True,
            "contains_character": "a",
        }

    def test_explicit_letter_wins_over_first_vowel(self):
        assert parse("containing the letter e, the first vowel")["contains_character"] == "e"

    def test_numeric_word_count(self):
        assert parse("strings with 2 words") == {"word_count": 2}
        assert parse("3-word strings") == {"word_count": 3}

    def test_length_in_words_is_not_a_word_count(self):
        assert parse("strings longer than 3 words") == {"min_length": 4}

    def test_rules_combine(self):
        assert parse("single word palindromes longer than 3") == {
            "is_palindrome": True,
            "min_length": 4,
            "word_count": 1,
        }

    def test_conflicting_bounds_are_returned_as_is(self):
        assert parse("longer than 10 and shorter than 5") == {
            "min_length": 11,
            "max_length": 4,
        }

    def test_unrecognized_query_falls_back_to_substring(self):
        assert parse("  Hello World ") == {"value_contains": "hello world"}

    def test_rules_are_named_and_ordered(self):
        names = [rule.name for rule in RULES]
        assert names.index("not_palindrome") < names.index("palindrome")
        assert names.index("contains_letter") < names.index("first_vowel")
