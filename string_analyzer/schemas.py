from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List

from string_analyzer.models import StringRecord


class StringCreate(BaseModel):
    value: str = Field(..., description="String to analyze")

    @field_validator('value')
    @classmethod
    def encodable_value(cls, v):
        """Reject lone surrogates, which have no UTF-8 encoding"""
        try:
            v.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("value must contain only valid Unicode characters")
        return v


class StringListResponse(BaseModel):
    data: List[StringRecord]
    count: int
    filters_applied: Dict[str, Any] = {}


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringRecord]
    count: int
    interpreted_query: InterpretedQuery
