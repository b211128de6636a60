from fastapi import APIRouter, Depends, Query, Response, status
from typing import Optional
import logging

from string_analyzer.errors import NotFoundError, ValidationError
from string_analyzer.filters import apply_filters, parse_filter_params
from string_analyzer.models import StringRecord
from string_analyzer.nl_query import parse_natural_language_query
from string_analyzer.schemas import NaturalLanguageResponse, StringCreate, StringListResponse
from string_analyzer.store import StringStore, get_store
from string_analyzer.utils import analyze_string

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/strings", response_model=StringRecord, status_code=status.HTTP_201_CREATED)
async def create_string(
    string_data: StringCreate,
    store: StringStore = Depends(get_store)
):
    """
    Analyze and store a string.
    Returns 409 if string already exists.
    """
    properties = analyze_string(string_data.value)
    return store.add(string_data.value, properties)


@router.get("/strings", response_model=StringListResponse)
async def get_all_strings(
    is_palindrome: Optional[str] = Query(None, description="Filter by palindrome (true/false)"),
    min_length: Optional[str] = Query(None, description="Minimum string length"),
    max_length: Optional[str] = Query(None, description="Maximum string length"),
    word_count: Optional[str] = Query(None, description="Exact word count"),
    contains_character: Optional[str] = Query(None, description="Single character the string must contain"),
    store: StringStore = Depends(get_store)
):
    """
    Get all strings with optional filtering.
    Returns 400 for invalid filter values.
    """
    filters = parse_filter_params({
        "is_palindrome": is_palindrome,
        "min_length": min_length,
        "max_length": max_length,
        "word_count": word_count,
        "contains_character": contains_character,
    })
    strings, filters_applied = apply_filters(store.get_all(), filters)

    return StringListResponse(
        data=strings,
        count=len(strings),
        filters_applied=filters_applied
    )


@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
async def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query"),
    store: StringStore = Depends(get_store)
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    if not query:
        raise ValidationError("Query parameter is required")

    filters = parse_natural_language_query(query)
    strings, _ = apply_filters(store.get_all(), filters)

    return NaturalLanguageResponse(
        data=strings,
        count=len(strings),
        interpreted_query={
            "original": query,
            "parsed_filters": filters
        }
    )


@router.get("/strings/{string_value}", response_model=StringRecord)
async def get_string(
    string_value: str,
    store: StringStore = Depends(get_store)
):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    record = store.get_by_value(string_value)
    if record is None:
        raise NotFoundError()
    return record


@router.delete("/strings/{string_value}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_string(
    string_value: str,
    store: StringStore = Depends(get_store)
):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    if not store.delete_by_value(string_value):
        raise NotFoundError()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
