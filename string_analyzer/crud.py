import logging
from typing import Iterable, List, Optional, Union

from pydantic import ValidationError

from string_analyzer.database import JsonFileStore
from string_analyzer.errors import ConflictingFilters, InvalidInput, NotFound
from string_analyzer.models import FilterSet, StringRecord
from string_analyzer.utils import build_record, compute_sha256

logger = logging.getLogger(__name__)


def _record_id(value: str) -> str:
    # lone surrogates have no UTF-8 encoding
    try:
        return compute_sha256(value)
    except UnicodeEncodeError as e:
        raise InvalidInput('"value" must contain only valid Unicode characters') from e


def _parse_bool(value: Union[bool, str, None], name: str) -> Optional[bool]:
    if value is None or isinstance(value, bool):
        return value
    low = str(value).lower()
    if low not in ("true", "false"):
        raise InvalidInput(f"{name} must be true or false")
    return low == "true"


def create_string_record(store: JsonFileStore, value: str) -> StringRecord:
    """Analyze a string and store it; AlreadyExists if it is stored already"""
    if not isinstance(value, str):
        raise InvalidInput('"value" must be a string')
    _record_id(value)

    record = build_record(value)
    store.insert(record)
    logger.info(f"Stored string {record.id}")
    return record


def get_string_record(store: JsonFileStore, value: str) -> StringRecord:
    """Get string analysis by original value"""
    record = store.find(_record_id(value))
    if record is None:
        raise NotFound()
    return record


def delete_string_record(store: JsonFileStore, value: str) -> None:
    """Delete string analysis by original value"""
    record_id = _record_id(value)
    if not store.remove(record_id):
        raise NotFound()
    logger.info(f"Deleted string {record_id}")


def build_filter_set(
    is_palindrome: Union[bool, str, None] = None,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    word_count: Optional[int] = None,
    contains_character: Optional[str] = None,
) -> FilterSet:
    """Validate structured filters and check that the length bounds agree"""
    try:
        filters = FilterSet(
            is_palindrome=_parse_bool(is_palindrome, "is_palindrome"),
            min_length=min_length,
            max_length=max_length,
            word_count=word_count,
            contains_character=contains_character,
        )
    except ValidationError as e:
        raise InvalidInput(e.errors()[0]["msg"]) from e

    if filters.has_conflict():
        raise ConflictingFilters("min_length cannot be greater than max_length")
    return filters


def matches(record: StringRecord, filters: FilterSet) -> bool:
    """True if every filter that is set agrees with the record's properties"""
    props = record.properties

    if filters.is_palindrome is not None and props.is_palindrome != filters.is_palindrome:
        return False
    if filters.min_length is not None and props.length < filters.min_length:
        return False
    if filters.max_length is not None and props.length > filters.max_length:
        return False
    if filters.word_count is not None and props.word_count != filters.word_count:
        return False
    if filters.contains_character is not None:
        if props.character_frequency_map.get(filters.contains_character, 0) <= 0:
            return False
    return True


def filter_records(records: Iterable[StringRecord], filters: FilterSet) -> List[StringRecord]:
    """Matching records, newest first"""
    selected = [r for r in records if matches(r, filters)]
    return sorted(selected, key=lambda r: r.created_at, reverse=True)


def list_string_records(store: JsonFileStore, filters: Optional[FilterSet] = None) -> List[StringRecord]:
    """Get all strings with optional filters"""
    return filter_records(store.list_all(), filters or FilterSet())
