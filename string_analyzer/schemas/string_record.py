from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, List
from datetime import datetime, timezone


class StringCreate(BaseModel):
    value: str = Field(..., description="String to analyze")

    @field_validator("value")
    @classmethod
    def encodable_as_utf8(cls, v: str) -> str:
        """Lone surrogates are not Unicode scalar values and cannot be hashed"""
        try:
            v.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("value must be valid Unicode text")
        return v


class StringProperties(BaseModel):
    """Properties computed once from a string's value."""
    model_config = ConfigDict(frozen=True)

    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    value: str
    properties: StringProperties
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """SQLite hands back naive datetimes; every stored timestamp is UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


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


class UserProfile(BaseModel):
    email: str
    name: str
    stack: str


class ProfileResponse(BaseModel):
    status: str = "success"
    user: UserProfile
    timestamp: datetime
    fact: str
