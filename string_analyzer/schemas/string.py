from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from string_analyzer.models.string import StringRecord


class StringCreate(BaseModel):
    value: str = Field(..., description="String to analyze")


class FilterSpec(BaseModel):
    """
    Optional predicates over stored strings.
    A field left as None places no constraint on the result.
    """

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None
    value_contains: Optional[str] = None

    def applied(self) -> Dict[str, Any]:
        """Only the filters that are actually set, in field order"""
        return self.model_dump(exclude_none=True)

    def is_empty(self) -> bool:
        return not self.applied()


class StringListResponse(BaseModel):
    data: List[StringRecord]
    count: int
    filters_applied: Dict[str, Any]


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringRecord]
    count: int
    interpreted_query: InterpretedQuery
