# tests/test_filters.py
import pytest
from errors import InvalidPredicateError, ValidationError
from filters import StringFilters, apply_filters, parse_filter_params
from models import analyze_string

RECORDS = [analyze_string(v) for v in ["a", "abc", "Level", "hello world", "abcdefg"]]


def values(records):
    return [r.value for r in records]


def test_empty_filters_return_everything():
    filtered, applied = apply_filters(RECORDS, StringFilters())
    assert filtered == RECORDS
    assert applied == {}


def test_length_range():
    filtered, applied = apply_filters(RECORDS, StringFilters(min_length=3, max_length=5))
    assert values(filtered) == ["abc", "Level"]
    assert applied == {"min_length": 3, "max_length": 5}


def test_palindrome_and_word_count():
    filtered, _ = apply_filters(RECORDS, StringFilters(is_palindrome=True, word_count=1))
    assert values(filtered) == ["a", "Level"]


def test_contains_character_is_case_insensitive():
    filtered, _ = apply_filters(RECORDS, StringFilters(contains_character="l"))
    assert values(filtered) == ["Level", "hello world"]


def test_parse_filter_params_types():
    filters = parse_filter_params(
        is_palindrome="false", min_length="-1", max_length="10",
        word_count="2", contains_character="Z",
    )
    assert filters.applied() == {
        "is_palindrome": False,
        "min_length": -1,
        "max_length": 10,
        "word_count": 2,
        "contains_character": "z",
    }


def test_parse_filter_params_skips_missing():
    assert parse_filter_params().applied() == {}


@pytest.mark.parametrize("kwargs,predicate", [
    ({"is_palindrome": "True"}, "is_palindrome"),
    ({"min_length": "3.0"}, "min_length"),
    ({"max_length": " 4"}, "max_length"),
    ({"word_count": "two"}, "word_count"),
    ({"min_length": "5\n"}, "min_length"),
    ({"word_count": "٥"}, "word_count"),
    ({"contains_character": ""}, "contains_character"),
])
def test_parse_filter_params_rejects_malformed(kwargs, predicate):
    with pytest.raises(InvalidPredicateError) as excinfo:
        parse_filter_params(**kwargs)
    assert excinfo.value.predicate == predicate
    assert isinstance(excinfo.value, ValidationError)
