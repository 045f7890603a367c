import hashlib
from collections import Counter
from datetime import datetime, timezone
from typing import Dict, Optional

from string_analyzer.models import StringProperties, StringRecord


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hex digest of the UTF-8 bytes of a string"""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def count_length(text: str) -> int:
    """Number of Unicode code points"""
    return len(text)


def is_palindrome(text: str) -> bool:
    """
    Case-insensitive palindrome check over code points.

    Spaces and punctuation are compared like any other character,
    so "race a car" is not a palindrome. The empty string is.
    """
    chars = list(text.lower())
    i, j = 0, len(chars) - 1
    while i < j:
        if chars[i] != chars[j]:
            return False
        i += 1
        j -= 1
    return True


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character (case-sensitive)"""
    return dict(Counter(text))


def count_unique_characters(text: str) -> int:
    """Count distinct characters in string"""
    return len(get_character_frequency(text))


def count_words(text: str) -> int:
    """Count words separated by runs of whitespace"""
    return len(text.strip().split())


def analyze_string(value: str) -> StringProperties:
    """Analyze a string and return all computed properties"""
    sha256_hash = compute_sha256(value)

    return StringProperties(
        length=count_length(value),
        is_palindrome=is_palindrome(value),
        unique_characters=count_unique_characters(value),
        word_count=count_words(value),
        sha256_hash=sha256_hash,
        character_frequency_map=get_character_frequency(value),
    )


def build_record(value: str, created_at: Optional[datetime] = None) -> StringRecord:
    """Wrap the analysis of `value` into a record keyed by its content hash"""
    properties = analyze_string(value)
    return StringRecord(
        id=properties.sha256_hash,
        value=value,
        properties=properties,
        created_at=created_at or datetime.now(timezone.utc),
    )
