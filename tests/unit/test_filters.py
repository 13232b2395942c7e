"""
Unit tests for the filter engine.
"""

import pytest

from string_analyzer.errors import InvalidFilterError
from string_analyzer.schemas.string import FilterSpec
from string_analyzer.services.filters import apply_filters, find_conflicts, validate_filters


def values(records):
    return [record.value for record in records]


class TestApplyFilters:
    """Test cases for apply_filters."""

    def test_empty_spec_matches_everything(self, records):
        assert apply_filters(FilterSpec(), records) == records

    def test_exact_length_bounds_are_inclusive(self, records):
        result = apply_filters(FilterSpec(min_length=5, max_length=5), records)
        assert values(result) == ["hello", "level", "abcde"]

    def test_length_filter_independent_of_order(self, records):
        spec = FilterSpec(min_length=5, max_length=5)
        forward = set(values(apply_filters(spec, records)))
        backward = set(values(apply_filters(spec, list(reversed(records)))))
        assert forward == backward == {"hello", "level", "abcde"}

    def test_palindrome_filter(self, records):
        assert values(apply_filters(FilterSpec(is_palindrome=True), records)) == [
            "racecar", "level", "noon",
        ]
        assert "racecar" not in values(apply_filters(FilterSpec(is_palindrome=False), records))

    def test_word_count_is_exact(self, records):
        assert values(apply_filters(FilterSpec(word_count=2), records)) == ["hello world"]

    def test_contains_character_is_case_insensitive(self, records):
        assert values(apply_filters(FilterSpec(contains_character="M"), records)) == ["A man a plan"]

    def test_value_contains_is_case_insensitive(self, records):
        assert values(apply_filters(FilterSpec(value_contains="HELLO"), records)) == [
            "hello", "hello world",
        ]

    def test_filters_combine_with_and(self, records):
        spec = FilterSpec(is_palindrome=True, word_count=1, min_length=5)
        assert values(apply_filters(spec, records)) == ["racecar", "level"]

    def test_min_above_max_yields_empty_result(self, records):
        assert apply_filters(FilterSpec(min_length=10, max_length=3), records) == []


class TestValidation:
    """Test cases for malformed and conflicting filters."""

    @pytest.mark.parametrize("spec", [
        FilterSpec(min_length=-1),
        FilterSpec(max_length=-1),
        FilterSpec(word_count=-2),
        FilterSpec(contains_character="ab"),
        FilterSpec(contains_character=""),
        FilterSpec(value_contains=""),
    ])
    def test_malformed_spec_is_rejected(self, spec, records):
        with pytest.raises(InvalidFilterError):
            apply_filters(spec, records)

    def test_valid_spec_passes(self):
        validate_filters(FilterSpec(min_length=0, max_length=0, contains_character="z"))

    def test_find_conflicts(self):
        assert find_conflicts(FilterSpec(min_length=4, max_length=9)) == []
        assert find_conflicts(FilterSpec(min_length=11, max_length=4)) == [
            "min_length cannot be greater than max_length",
        ]
        assert find_conflicts(FilterSpec(max_length=-1)) == ["max_length cannot be negative"]

    def test_applied_echoes_only_set_filters(self):
        spec = FilterSpec(is_palindrome=False, word_count=1)
        assert spec.applied() == {"is_palindrome": False, "word_count": 1}
        assert FilterSpec().is_empty()
