from fastapi import APIRouter, Depends, Query, status
from typing import Optional
import logging

from string_analyzer.database import StringStore, get_store
from string_analyzer.models.string import StringRecord
from string_analyzer.schemas.string import (
    FilterSpec,
    InterpretedQuery,
    NaturalLanguageResponse,
    StringCreate,
    StringListResponse,
)
from string_analyzer.crud import strings as crud

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/strings", response_model=StringRecord, status_code=status.HTTP_201_CREATED)
def create_string(string_data: StringCreate, store: StringStore = Depends(get_store)):
    """
    Analyze and store a string.
    Returns 409 if the same (case-insensitive) string already exists.
    """
    return crud.create_string(store, string_data.value)


@router.get("/strings", response_model=StringListResponse)
def get_all_strings(
    is_palindrome: Optional[bool] = Query(None),
    min_length: Optional[int] = Query(None, description="Minimum length (inclusive)"),
    max_length: Optional[int] = Query(None, description="Maximum length (inclusive)"),
    word_count: Optional[int] = Query(None, description="Exact word count"),
    contains_character: Optional[str] = Query(None, description="Single character to look for"),
    value_contains: Optional[str] = Query(None, description="Case-insensitive substring"),
    store: StringStore = Depends(get_store),
):
    """
    Get all strings with optional filtering.
    """
    spec = FilterSpec(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character,
        value_contains=value_contains,
    )
    strings = crud.list_strings(store, spec)
    return StringListResponse(
        data=strings,
        count=len(strings),
        filters_applied=spec.applied(),
    )


# Declared before /strings/{string_value:path} so it is not captured as a value
@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query"),
    store: StringStore = Depends(get_store),
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    strings, spec = crud.filter_by_natural_language(store, query)
    return NaturalLanguageResponse(
        data=strings,
        count=len(strings),
        interpreted_query=InterpretedQuery(original=query, parsed_filters=spec.applied()),
    )


@router.get("/strings/{string_value:path}", response_model=StringRecord)
def get_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    return crud.get_string(store, string_value)


@router.delete("/strings/{string_value:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    crud.delete_string(store, string_value)
    return None
