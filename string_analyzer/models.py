from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StringProperties(BaseModel):
    model_config = ConfigDict(frozen=True)

    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=64, max_length=64)  # SHA-256 hex
    value: str
    properties: StringProperties
    created_at: datetime


class FilterSet(BaseModel):
    """Optional predicates over record properties, ANDed together"""

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    @field_validator("contains_character")
    @classmethod
    def single_character(cls, v):
        if v is not None and len(v) != 1:
            raise ValueError("contains_character must be a single character")
        return v

    def applied(self) -> dict:
        """Only the filters that were actually set"""
        return self.model_dump(exclude_none=True)

    def has_conflict(self) -> bool:
        return (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        )
