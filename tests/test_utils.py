"""Tests for the hashing, metrics and analyzer functions."""

import hashlib
from datetime import datetime, timezone

import pytest

from string_analyzer.utils import (
    analyze_string,
    build_record,
    compute_sha256,
    count_length,
    count_unique_characters,
    count_words,
    get_character_frequency,
    is_palindrome,
)


class TestHashing:

    def test_known_digest(self):
        assert compute_sha256("hello") == (
            "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        )

    def test_digest_is_utf8_bytes_without_normalization(self):
        value = " Café "
        assert compute_sha256(value) == hashlib.sha256(value.encode("utf-8")).hexdigest()
        assert compute_sha256(value) != compute_sha256(value.strip())
        assert compute_sha256("Abc") != compute_sha256("abc")

    def test_digest_is_fixed_length_hex(self):
        digest = compute_sha256("")
        assert len(digest) == 64
        int(digest, 16)


class TestMetrics:

    def test_length_counts_code_points(self):
        assert count_length("") == 0
        assert count_length("abc") == 3
        # astral-plane character is a single code point
        assert count_length("\U0001F600a") == 2

    def test_frequency_map_is_case_sensitive(self):
        assert get_character_frequency("hello") == {"h": 1, "e": 1, "l": 2, "o": 1}
        assert get_character_frequency("aA") == {"a": 1, "A": 1}
        assert get_character_frequency("") == {}

    def test_unique_characters(self):
        assert count_unique_characters("hello") == 4
        assert count_unique_characters("aA") == 2
        assert count_unique_characters("") == 0

    @pytest.mark.parametrize("value", ["abc", "hello", "a b", "", "\U0001F600\U0001F600"])
    def test_length_equals_unique_iff_all_distinct(self, value):
        all_distinct = len(set(value)) == len(value)
        assert (count_length(value) == count_unique_characters(value)) == all_distinct

    @pytest.mark.parametrize("value, expected", [
        ("", 0),
        ("   ", 0),
        ("\t\n ", 0),
        ("hello", 1),
        ("a  b   c", 3),
        ("  leading and trailing  ", 3),
        ("tabs\tand\nnewlines", 3),
    ])
    def test_word_count(self, value, expected):
        assert count_words(value) == expected

    @pytest.mark.parametrize("value, expected", [
        ("", True),
        ("a", True),
        ("Racecar", True),
        ("madam", True),
        ("race a car", False),
        ("A man, a plan, a canal: Panama", False),
        ("ab ba", True),
        ("hello", False),
    ])
    def test_palindrome(self, value, expected):
        assert is_palindrome(value) is expected


class TestAnalyzer:

    def test_analyze_string(self):
        props = analyze_string("Level up")
        assert props.length == 8
        assert props.is_palindrome is False
        assert props.unique_characters == 7
        assert props.word_count == 2
        assert props.sha256_hash == compute_sha256("Level up")
        assert props.character_frequency_map["e"] == 2

    def test_analyze_is_deterministic(self):
        assert analyze_string("same input") == analyze_string("same input")

    def test_build_record_uses_hash_as_id(self):
        created = datetime(2025, 1, 1, tzinfo=timezone.utc)
        record = build_record("noon", created_at=created)
        assert record.id == record.properties.sha256_hash == compute_sha256("noon")
        assert record.value == "noon"
        assert record.created_at == created
        assert record.properties.is_palindrome is True

    def test_build_record_keeps_value_verbatim(self):
        record = build_record("  Mixed Case  ")
        assert record.value == "  Mixed Case  "
        assert record.created_at.tzinfo is not None
