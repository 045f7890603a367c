from fastapi import APIRouter, Depends, Query, Response, status
from typing import Optional
import logging

from string_analyzer import crud
from string_analyzer.database import JsonFileStore, get_store
from string_analyzer.models import StringRecord
from string_analyzer.nl_parser import parse_natural_language_query
from string_analyzer.schemas import (
    InterpretedQuery,
    NaturalLanguageResponse,
    StringCreate,
    StringListResponse,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/strings", response_model=StringRecord, status_code=status.HTTP_201_CREATED)
def create_string(string_data: StringCreate, store: JsonFileStore = Depends(get_store)):
    """
    Analyze and store a string.
    Returns 409 if string already exists.
    """
    return crud.create_string_record(store, string_data.value)


@router.get("/strings", response_model=StringListResponse)
def get_all_strings(
    is_palindrome: Optional[str] = Query(None, description="Filter by palindrome (true/false)"),
    min_length: Optional[int] = Query(None, ge=0, description="Minimum string length"),
    max_length: Optional[int] = Query(None, ge=0, description="Maximum string length"),
    word_count: Optional[int] = Query(None, ge=0, description="Exact word count"),
    contains_character: Optional[str] = Query(
        None, min_length=1, max_length=1, description="Strings containing this character"
    ),
    store: JsonFileStore = Depends(get_store),
):
    """
    Get all strings with optional filtering, newest first.
    """
    filters = crud.build_filter_set(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character,
    )
    data = crud.list_string_records(store, filters)

    return StringListResponse(
        data=data,
        count=len(data),
        filters_applied=filters.applied(),
    )


@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
def filter_by_natural_language(
    query: str = Query(..., description="Natural language query, e.g. 'all single word palindromic strings'"),
    store: JsonFileStore = Depends(get_store),
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    filters = parse_natural_language_query(query)
    data = crud.list_string_records(store, filters)

    return NaturalLanguageResponse(
        data=data,
        count=len(data),
        interpreted_query=InterpretedQuery(
            original=query,
            parsed_filters=filters.applied(),
        ),
    )


@router.get("/strings/{string_value:path}", response_model=StringRecord)
def get_string(string_value: str, store: JsonFileStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    return crud.get_string_record(store, string_value)


@router.delete("/strings/{string_value:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, store: JsonFileStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    crud.delete_string_record(store, string_value)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
