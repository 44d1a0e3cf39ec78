from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from datetime import datetime, timezone
from typing import Optional
import logging

from string_analyzer.database import get_db
from string_analyzer.crud.string_record import StringRecordStore
from string_analyzer.exceptions import DuplicateContent, InvalidFilterValue, NotFound, UnparsableQuery
from string_analyzer.schemas.string_record import (
    InterpretedQuery,
    NaturalLanguageResponse,
    StringCreate,
    StringListResponse,
    StringRecord,
)
from string_analyzer.services.analyzer import analyze, compute_sha256
from string_analyzer.services.filters import FilterSpec, evaluate
from string_analyzer.services.nl_query import translate

router = APIRouter()
logger = logging.getLogger(__name__)


def get_store(db: Session = Depends(get_db)) -> StringRecordStore:
    return StringRecordStore(db)


@router.post("/strings", response_model=StringRecord, status_code=status.HTTP_201_CREATED)
def create_string(string_data: StringCreate, store: StringRecordStore = Depends(get_store)):
    """
    Analyze and store a string.
    Returns 409 if the string already exists.
    """
    properties = analyze(string_data.value)
    string_id = properties.sha256_hash
    created_at = datetime.now(timezone.utc)

    if not store.insert_if_absent(string_id, string_data.value, properties, created_at):
        raise DuplicateContent(string_id)

    return StringRecord(
        id=string_id,
        value=string_data.value,
        properties=properties,
        created_at=created_at,
    )


@router.get("/strings", response_model=StringListResponse)
def get_all_strings(
    is_palindrome: Optional[str] = Query(None, description="true/false (or 1/0)"),
    min_length: Optional[str] = Query(None, description="Minimum string length"),
    max_length: Optional[str] = Query(None, description="Maximum string length"),
    word_count: Optional[str] = Query(None, description="Exact word count"),
    contains_character: Optional[str] = Query(None, description="A single character the string must contain"),
    store: StringRecordStore = Depends(get_store),
):
    """
    Get all strings with optional filtering, newest first.
    """
    try:
        filters = FilterSpec.parse({
            "is_palindrome": is_palindrome,
            "min_length": min_length,
            "max_length": max_length,
            "word_count": word_count,
            "contains_character": contains_character,
        })
    except InvalidFilterValue as e:
        logger.info(f"Rejected filters: {e.errors}")
        raise

    strings = evaluate(store.scan(), filters)
    return StringListResponse(data=strings, count=len(strings), filters_applied=filters.applied())


@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query, e.g. 'all single word palindromic strings'"),
    store: StringRecordStore = Depends(get_store),
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    if not query:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Query parameter 'query' is required"
        )

    try:
        filters = translate(query)
    except UnparsableQuery:
        logger.info(f"Unable to parse natural language query: {query!r}")
        raise

    strings = evaluate(store.scan(), filters)
    return NaturalLanguageResponse(
        data=strings,
        count=len(strings),
        interpreted_query=InterpretedQuery(original=query, parsed_filters=filters.applied()),
    )


@router.get("/strings/{string_value}", response_model=StringRecord)
def get_string(string_value: str, store: StringRecordStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if the string doesn't exist.
    """
    string_id = compute_sha256(string_value)
    record = store.get(string_id)
    if record is None:
        raise NotFound(string_id)
    return record


@router.delete("/strings/{string_value}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, store: StringRecordStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if the string doesn't exist.
    """
    string_id = compute_sha256(string_value)
    if not store.delete(string_id):
        raise NotFound(string_id)
    return None
