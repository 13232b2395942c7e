from typing import Iterable, List

from string_analyzer.errors import InvalidFilterError
from string_analyzer.models.string import StringRecord
from string_analyzer.schemas.string import FilterSpec


def validate_filters(spec: FilterSpec) -> None:
    """Reject malformed filters instead of silently ignoring them"""
    for name in ("min_length", "max_length", "word_count"):
        bound = getattr(spec, name)
        if bound is not None and bound < 0:
            raise InvalidFilterError(f"'{name}' must be a non-negative integer")

    if spec.contains_character is not None and len(spec.contains_character) != 1:
        raise InvalidFilterError("'contains_character' must be exactly one character")

    if spec.value_contains is not None and not spec.value_contains:
        raise InvalidFilterError("'value_contains' must not be empty")


def find_conflicts(spec: FilterSpec) -> List[str]:
    """Describe filters that can never match anything together"""
    conflicts = []
    if spec.max_length is not None and spec.max_length < 0:
        conflicts.append("max_length cannot be negative")
    if (
        spec.min_length is not None
        and spec.max_length is not None
        and spec.min_length > spec.max_length
    ):
        conflicts.append("min_length cannot be greater than max_length")
    return conflicts


def matches(spec: FilterSpec, record: StringRecord) -> bool:
    props = record.properties

    if spec.is_palindrome is not None and props.is_palindrome != spec.is_palindrome:
        return False

    if spec.min_length is not None and props.length < spec.min_length:
        return False

    if spec.max_length is not None and props.length > spec.max_length:
        return False

    if spec.word_count is not None and props.word_count != spec.word_count:
        return False

    value = record.value.casefold()

    if spec.contains_character is not None and spec.contains_character.casefold() not in value:
        return False

    if spec.value_contains is not None and spec.value_contains.casefold() not in value:
        return False

    return True


def apply_filters(spec: FilterSpec, records: Iterable[StringRecord]) -> List[StringRecord]:
    """
    Keep the records matching every filter in ``spec``, preserving input order.
    A min_length above max_length is applied as given and matches nothing.
    """
    validate_filters(spec)
    return [record for record in records if matches(spec, record)]
