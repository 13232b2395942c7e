"""
Rule-based translation of free-text queries into a FilterSpec.

This is pattern matching over a handful of known phrases, not language
understanding. Each rule looks for one phrase and sets the filter it implies.
Rules run in order and combine, so "single word palindromes longer than 3"
sets three filters. Earlier rules win when two rules target the same filter.
A query that no rule recognizes becomes a plain substring search.
"""

import logging
import re
from typing import Any, Callable, Dict, Tuple

from string_analyzer.schemas.string import FilterSpec

logger = logging.getLogger(__name__)

Filters = Dict[str, Any]


class Rule:
    def __init__(self, name: str, pattern: str, setter: Callable[[re.Match, Filters], None]):
        self.name = name
        self.pattern = re.compile(pattern)
        self.setter = setter

    def apply(self, query: str, filters: Filters) -> bool:
        """Set this rule's filter if the query mentions it. Returns True on match."""
        match = self.pattern.search(query)
        if not match:
            return False
        self.setter(match, filters)
        return True

    def __repr__(self):
        return f"Rule({self.name!r})"


RULES: Tuple[Rule, ...] = (
    # "non-palindrome", "not palindromic", "not a palindrome"
    Rule(
        "not_palindrome",
        r"\b(?:non|not)(?:\s+a)?[\s-]*palindrom",
        lambda m, f: f.setdefault("is_palindrome", False),
    ),
    Rule(
        "palindrome",
        r"palindrom",
        lambda m, f: f.setdefault("is_palindrome", True),
    ),
    Rule(
        "single_word",
        r"\b(?:single|one)[\s-]word\b",
        lambda m, f: f.setdefault("word_count", 1),
    ),
    # "2 words", "3-word strings" (but not "longer than 3 words")
    Rule(
        "word_count",
        r"(?<!than )\b(\d+)[\s-]words?\b",
        lambda m, f: f.setdefault("word_count", int(m.group(1))),
    ),
    Rule(
        "longer_than",
        r"longer than (\d+)",
        lambda m, f: f.setdefault("min_length", int(m.group(1)) + 1),
    ),
    Rule(
        "shorter_than",
        r"shorter than (\d+)",
        lambda m, f: f.setdefault("max_length", int(m.group(1)) - 1),
    ),
    Rule(
        "contains_letter",
        r"contain(?:s|ing)?(?: the)? (?:letter|character) (\w)",
        lambda m, f: f.setdefault("contains_character", m.group(1)),
    ),
    Rule(
        "first_vowel",
        r"first vowel",
        lambda m, f: f.setdefault("contains_character", "a"),
    ),
)


def parse_natural_language_query(query: str) -> FilterSpec:
    """
    Parse natural language query into filter parameters
    Examples:
    - "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
    - "strings longer than 10 characters" -> {min_length: 11}
    - "strings containing the letter z" -> {contains_character: "z"}
    - "hello world" -> {value_contains: "hello world"}
    """
    query = query.strip().lower()
    if not query:
        return FilterSpec()

    filters: Filters = {}
    matched = [rule.name for rule in RULES if rule.apply(query, filters)]

    if not matched:
        filters["value_contains"] = query

    logger.debug(f"Query {query!r} matched rules {matched} -> {filters}")
    return FilterSpec(**filters)
