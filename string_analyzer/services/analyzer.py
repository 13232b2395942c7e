import hashlib
from collections import Counter
from datetime import datetime, timezone
from typing import Dict

from string_analyzer.models.string import StringProperties, StringRecord


def normalize(text: str) -> str:
    """
    Normalized form used for hashing, palindrome and uniqueness checks.
    Trimmed and case-folded, so "Racecar " and "racecar" are the same string.
    """
    return text.strip().casefold()


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of the normalized string"""
    return hashlib.sha256(normalize(text).encode("utf-8")).hexdigest()


def is_palindrome(text: str) -> bool:
    """Check if string is palindrome (case-insensitive, spaces significant)"""
    normalized = normalize(text)
    return normalized == normalized[::-1]


def count_unique_characters(text: str) -> int:
    """Count distinct characters of the normalized string"""
    return len(set(normalize(text)))


def count_words(text: str) -> int:
    """Count words separated by whitespace"""
    return len(text.split())


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character, in order of first appearance"""
    return dict(Counter(text))


def analyze_string(value: str) -> StringRecord:
    """Analyze a string and return a record with all computed properties"""
    value = value.strip()
    sha256_hash = compute_sha256(value)

    return StringRecord(
        id=sha256_hash,
        value=value,
        properties=StringProperties(
            length=len(value),
            is_palindrome=is_palindrome(value),
            unique_characters=count_unique_characters(value),
            word_count=count_words(value),
            sha256_hash=sha256_hash,
            character_frequency_map=get_character_frequency(value),
        ),
        created_at=datetime.now(timezone.utc),
    )
