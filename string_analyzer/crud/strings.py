import logging
from typing import Any, List, Tuple

from string_analyzer.database import StringStore
from string_analyzer.errors import ConflictingFiltersError, InvalidInputError
from string_analyzer.models.string import StringRecord
from string_analyzer.schemas.string import FilterSpec
from string_analyzer.services.analyzer import analyze_string, compute_sha256
from string_analyzer.services.filters import apply_filters, find_conflicts
from string_analyzer.services.nl_parser import parse_natural_language_query

logger = logging.getLogger(__name__)


def create_string(store: StringStore, value: Any) -> StringRecord:
    """Analyze and store a new string"""
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError("Invalid request body or missing 'value' field")
    return store.insert(analyze_string(value))


def get_string(store: StringStore, value: str) -> StringRecord:
    """Get string analysis by value (any case/whitespace variant)"""
    return store.get(compute_sha256(value))


def list_strings(store: StringStore, spec: FilterSpec) -> List[StringRecord]:
    """Get all strings with optional filters"""
    if spec.is_empty():
        return store.list_all()
    return apply_filters(spec, store.list_all())


def filter_by_natural_language(store: StringStore, query: Any) -> Tuple[List[StringRecord], FilterSpec]:
    """Translate a free-text query into filters and apply them"""
    if not isinstance(query, str) or not query.strip():
        raise InvalidInputError("Missing or invalid 'query' parameter")

    spec = parse_natural_language_query(query)
    conflicts = find_conflicts(spec)
    if conflicts:
        raise ConflictingFiltersError(
            "Query parsed but resulted in conflicting filters: " + "; ".join(conflicts)
        )

    logger.info(f"Interpreted {query!r} as {spec.applied()}")
    return apply_filters(spec, store.list_all()), spec


def delete_string(store: StringStore, value: str) -> None:
    """Delete string analysis by value"""
    store.delete(compute_sha256(value))
