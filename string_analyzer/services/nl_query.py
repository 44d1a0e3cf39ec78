"""
Rule-based translation of natural language queries into structured filters.

Examples:
- "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
- "strings longer than 10 characters" -> {min_length: 11}
- "strings containing the letter z" -> {contains_character: "z"}

Every rule is checked against the same lower-cased query, in order, and may
set one or more filters. A later rule can see what earlier rules already set.
"""
import re
from typing import Any, Callable, Dict, List, NamedTuple

from string_analyzer.exceptions import UnparsableQuery
from string_analyzer.services.filters import FilterSpec

Filters = Dict[str, Any]


class QueryRule(NamedTuple):
    name: str
    pattern: re.Pattern
    apply: Callable[[re.Match, Filters], Filters]


def _single_word_palindrome(match: re.Match, filters: Filters) -> Filters:
    return {**filters, "word_count": 1, "is_palindrome": True}


def _longer_than(match: re.Match, filters: Filters) -> Filters:
    # strictly longer than N
    return {**filters, "min_length": int(match.group(1)) + 1}


def _contains_letter(match: re.Match, filters: Filters) -> Filters:
    return {**filters, "contains_character": match.group(1)}


def _palindromic(match: re.Match, filters: Filters) -> Filters:
    if "is_palindrome" in filters:
        return filters
    return {**filters, "is_palindrome": True}


RULES: List[QueryRule] = [
    QueryRule(
        "single_word_palindrome",
        re.compile(r"single word palindromic|single-word palindromic|single word palindrome"),
        _single_word_palindrome,
    ),
    QueryRule("longer_than", re.compile(r"strings longer than (\d+)"), _longer_than),
    QueryRule("contains_letter", re.compile(r"contain(?:s|ing)? the letter (\w)"), _contains_letter),
    QueryRule("palindromic", re.compile(r"\bpalindromic\b"), _palindromic),
]


def parse_natural_language_query(query: str, rules: List[QueryRule] = RULES) -> Filters:
    """Fold the query through the rules, returning the raw filters that fired"""
    text = query.lower()
    filters: Filters = {}
    for rule in rules:
        match = rule.pattern.search(text)
        if match:
            filters = rule.apply(match, filters)
    return filters


def translate(query: str) -> FilterSpec:
    """Translate a natural language query; raises UnparsableQuery when no rule fires"""
    try:
        filters = parse_natural_language_query(query)
    except ValueError as exc:
        # numbers past the int conversion limit
        raise UnparsableQuery(query) from exc
    if not filters:
        raise UnparsableQuery(query)
    return FilterSpec.parse(filters)
