from pydantic import BaseModel, Field
from typing import Any, Dict, List

from string_analyzer.models import StringRecord


class StringCreate(BaseModel):
    value: str = Field(..., min_length=1, description="String to analyze")


class StringListResponse(BaseModel):
    data: List[StringRecord]
    count: int
    filters_applied: Dict[str, Any] = Field(default_factory=dict)


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringRecord]
    count: int
    interpreted_query: InterpretedQuery
