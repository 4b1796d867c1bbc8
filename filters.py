import logging
import re
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel

from errors import InvalidPredicateError
from models import AnalyzedString

logger = logging.getLogger(__name__)

INTEGER_RE = re.compile(r"-?[0-9]+")


class StringFilters(BaseModel):
    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def applied(self) -> Dict[str, Any]:
        """Only the predicates that were actually supplied."""
        return self.model_dump(exclude_none=True)


# --- Parsing of raw query values ---

def parse_bool(name: str, raw: str) -> bool:
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise InvalidPredicateError(name, f"Invalid value for {name} (true|false expected)")


def parse_int(name: str, raw: str) -> int:
    if not INTEGER_RE.fullmatch(raw):
        raise InvalidPredicateError(name, f"Invalid {name} value")
    return int(raw)


def parse_char(name: str, raw: str) -> str:
    if len(raw) != 1:
        raise InvalidPredicateError(name, f"{name} must be a single character")
    return raw.lower()


def parse_filter_params(
    is_palindrome: Optional[str] = None,
    min_length: Optional[str] = None,
    max_length: Optional[str] = None,
    word_count: Optional[str] = None,
    contains_character: Optional[str] = None,
) -> StringFilters:
    """Turn raw query-string values into typed filters.

    Raises InvalidPredicateError naming the first malformed predicate.
    """
    filters = StringFilters()
    if is_palindrome is not None:
        filters.is_palindrome = parse_bool("is_palindrome", is_palindrome)
    if min_length is not None:
        filters.min_length = parse_int("min_length", min_length)
    if max_length is not None:
        filters.max_length = parse_int("max_length", max_length)
    if word_count is not None:
        filters.word_count = parse_int("word_count", word_count)
    if contains_character is not None:
        filters.contains_character = parse_char("contains_character", contains_character)
    return filters


# --- Matching ---

def matches(record: AnalyzedString, filters: StringFilters) -> bool:
    p = record.properties
    if filters.is_palindrome is not None and p.is_palindrome != filters.is_palindrome:
        return False
    if filters.min_length is not None and p.length < filters.min_length:
        return False
    if filters.max_length is not None and p.length > filters.max_length:
        return False
    if filters.word_count is not None and p.word_count != filters.word_count:
        return False
    if (
        filters.contains_character is not None
        and filters.contains_character.lower() not in record.value.lower()
    ):
        return False
    return True


def apply_filters(
    records: Iterable[AnalyzedString], filters: StringFilters
) -> Tuple[List[AnalyzedString], Dict[str, Any]]:
    filtered = [r for r in records if matches(r, filters)]
    applied = filters.applied()
    logger.debug("Filters %s matched %d strings", applied, len(filtered))
    return filtered, applied
