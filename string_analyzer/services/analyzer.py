import hashlib
from collections import Counter
from typing import Dict

from string_analyzer.schemas.string_record import StringProperties


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of the raw UTF-8 bytes of a string"""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def normalize_for_palindrome(text: str) -> str:
    """Keep only Unicode letters and decimal digits, lower-cased"""
    kept = "".join(ch for ch in text if ch.isalpha() or ch.isdecimal())
    return kept.lower()


def is_palindrome(text: str) -> bool:
    """Check if string is a palindrome, ignoring case, punctuation and spacing.

    A string with no letters or digits at all is not a palindrome.
    """
    normalized = normalize_for_palindrome(text)
    return bool(normalized) and normalized == normalized[::-1]


def count_unique_characters(text: str) -> int:
    """Count distinct code points in string"""
    return len(set(text))


def count_words(text: str) -> int:
    """Count whitespace-separated words"""
    return len(text.split())


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each code point"""
    return dict(Counter(text))


def analyze(value: str) -> StringProperties:
    """Analyze a string and return all computed properties"""
    return StringProperties(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=count_unique_characters(value),
        word_count=count_words(value),
        sha256_hash=compute_sha256(value),
        character_frequency_map=get_character_frequency(value),
    )
