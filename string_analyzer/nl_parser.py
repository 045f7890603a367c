"""
Natural language query parsing.

Queries are matched against a fixed, ordered list of rules. Each rule is a
regular expression plus an effect that writes into the accumulated filters.
Rules are independent of each other; the character-containment rules use
setdefault so the first one that matches wins.

Examples:
- "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
- "strings longer than 10 characters" -> {min_length: 11}
- "strings containing the letter z" -> {contains_character: "z"}
"""

import logging
import re
from typing import Callable, Dict, List, NamedTuple

from string_analyzer.errors import ConflictingFilters, InvalidQuery
from string_analyzer.models import FilterSet

logger = logging.getLogger(__name__)


class Rule(NamedTuple):
    name: str
    pattern: "re.Pattern"
    effect: Callable[["re.Match", Dict], None]


def _set_palindrome(match, filters):
    filters["is_palindrome"] = True


def _set_single_word(match, filters):
    filters["word_count"] = 1


def _set_longer_than(match, filters):
    filters["min_length"] = int(match.group(1)) + 1


def _set_at_least(match, filters):
    # only ever raises the floor set by an earlier rule
    filters["min_length"] = max(filters.get("min_length", 0), int(match.group(1)))


def _set_shorter_than(match, filters):
    filters["max_length"] = int(match.group(1)) - 1


def _contains(group: int = 1, fixed: str = None):
    def effect(match, filters):
        filters.setdefault("contains_character", fixed or match.group(group))
    return effect


RULES: List[Rule] = [
    Rule("palindrome", re.compile(r"\bpalindromic\b|\bpalindrome\b"), _set_palindrome),
    Rule("single_word", re.compile(r"\bsingle word\b|\bone word\b"), _set_single_word),
    Rule("longer_than", re.compile(r"longer than (\d+)"), _set_longer_than),
    Rule("at_least", re.compile(r"at least (\d+)"), _set_at_least),
    Rule("shorter_than", re.compile(r"shorter than (\d+)"), _set_shorter_than),
    # character containment, in priority order
    Rule("contains_letter", re.compile(r"contain(?:s|ing)? the letter (\w)"), _contains()),
    Rule("containing_char", re.compile(r"containing ([a-z0-9])"), _contains()),
    Rule("quoted_char", re.compile(r"(['\"])([^'\"])\1"), _contains(group=2)),
    Rule("first_vowel", re.compile(r"first vowel"), _contains(fixed="a")),
]


def parse_natural_language_query(query: str) -> FilterSet:
    """
    Parse natural language query into a FilterSet.

    Raises:
        InvalidQuery: empty input or no rule matched
        ConflictingFilters: resulting min_length > max_length
    """
    if not isinstance(query, str) or not query.strip():
        raise InvalidQuery("query must be a non-empty string")

    text = query.lower().strip()
    filters: Dict = {}

    for rule in RULES:
        match = rule.pattern.search(text)
        if match:
            rule.effect(match, filters)
            logger.debug(f"Rule '{rule.name}' matched: {filters}")

    if not filters:
        logger.info(f"Unable to parse natural language query: {query!r}")
        raise InvalidQuery()

    parsed = FilterSet(**filters)
    if parsed.has_conflict():
        raise ConflictingFilters(
            "Parsed filters are conflicting (min_length > max_length)"
        )

    return parsed
