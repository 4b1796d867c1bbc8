# tests/test_models.py
import hashlib

import pytest
from models import analyze_string, sha256_hex


@pytest.mark.parametrize("value", ["", "a", "hello world", "ñandú", "  spaced  "])
def test_length_and_hash(value):
    record = analyze_string(value)
    assert record.properties.length == len(value)
    assert record.id == hashlib.sha256(value.encode("utf-8")).hexdigest()
    assert record.id == record.properties.sha256_hash
    assert analyze_string(value).id == record.id


def test_palindrome_lowercases_only():
    assert analyze_string("Level").properties.is_palindrome is True
    assert analyze_string("level ").properties.is_palindrome is False
    assert analyze_string("A man a plan").properties.is_palindrome is False
    assert analyze_string("").properties.is_palindrome is True


def test_word_count():
    assert analyze_string("").properties.word_count == 0
    assert analyze_string("   ").properties.word_count == 0
    assert analyze_string("a b  c").properties.word_count == 3
    assert analyze_string("\tone\n").properties.word_count == 1


def test_unique_characters_and_frequency_are_case_sensitive():
    props = analyze_string("Aa a!").properties
    assert props.unique_characters == 4
    assert props.character_frequency_map == {"A": 1, "a": 2, " ": 1, "!": 1}


def test_created_at_is_utc():
    record = analyze_string("x")
    assert record.created_at.tzinfo is not None


def test_lone_surrogate_still_hashes():
    record = analyze_string("\ud800")
    assert record.properties.length == 1
    assert record.id == hashlib.sha256(b"\xed\xa0\x80").hexdigest()


def test_sha256_hex_known_value():
    assert sha256_hex("abc") == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
