import hashlib

from string_analyzer.services.analyzer import (
    analyze,
    compute_sha256,
    count_words,
    is_palindrome,
    normalize_for_palindrome,
)


def test_hash_is_sha256_of_raw_utf8_bytes():
    value = "Hello, Wörld!"
    assert compute_sha256(value) == hashlib.sha256(value.encode("utf-8")).hexdigest()
    assert analyze(value).sha256_hash == compute_sha256(value)


def test_analyze_is_deterministic():
    assert analyze("some text") == analyze("some text")


def test_hash_is_sensitive_to_case_and_punctuation():
    assert analyze("Racecar").sha256_hash != analyze("racecar").sha256_hash
    assert analyze("racecar!").sha256_hash != analyze("racecar").sha256_hash


def test_empty_string():
    props = analyze("")
    assert props.length == 0
    assert props.word_count == 0
    assert props.is_palindrome is False
    assert props.unique_characters == 0
    assert props.character_frequency_map == {}


def test_racecar():
    props = analyze("racecar")
    assert props.is_palindrome is True
    assert props.unique_characters == 4
    assert props.length == 7
    assert props.word_count == 1
    assert props.character_frequency_map == {"r": 2, "a": 2, "c": 2, "e": 1}


def test_sentence_palindrome_ignores_case_spacing_and_punctuation():
    props = analyze("A man a plan a canal Panama")
    assert props.is_palindrome is True
    assert props.word_count == 7
    assert analyze("A man, a plan, a canal: Panama!").is_palindrome is True


def test_no_letters_or_digits_is_not_a_palindrome():
    assert is_palindrome("   ") is False
    assert is_palindrome("!?!") is False


def test_non_palindrome():
    assert analyze("hello world").is_palindrome is False


def test_unicode_code_points():
    props = analyze("été")
    assert props.length == 3
    assert props.unique_characters == 2
    assert props.character_frequency_map == {"é": 2, "t": 1}
    assert props.is_palindrome is True


def test_only_decimal_digits_survive_normalization():
    assert normalize_for_palindrome("x²①٣y") == "x٣y"
    assert is_palindrome("1²") is True


def test_digits_count_toward_palindromes():
    assert is_palindrome("12 321") is True
    assert is_palindrome("123") is False


def test_normalization_lowercases_after_stripping():
    assert normalize_for_palindrome("No 'x' in Nixon") == "noxinnixon"


def test_word_count_collapses_whitespace_runs():
    assert count_words("  hello \t\n  world  ") == 2
    assert count_words(" \t\n ") == 0


def test_frequency_map_counts_raw_characters():
    props = analyze("Aa a")
    assert props.character_frequency_map == {"A": 1, "a": 2, " ": 1}
    assert props.unique_characters == 3
