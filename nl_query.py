import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from errors import InterpretationError, SemanticConflictError
from filters import StringFilters, apply_filters
from models import AnalyzedString

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeuristicRule:
    """One pattern mapped to one filter key."""

    name: str
    key: str
    pattern: "re.Pattern[str]"
    extract: Callable[["re.Match[str]"], Any]

    def evaluate(self, query: str) -> Optional[Any]:
        m = self.pattern.search(query)
        if m is None:
            return None
        return self.extract(m)


_LENGTH_EXACT = re.compile(r"length (?:equal|equals|exactly) (\d+)")

# Evaluated top to bottom; the first rule to set a key wins, so the explicit
# letter rule must stay ahead of the "first vowel" fallback.
RULES: List[HeuristicRule] = [
    HeuristicRule(
        "palindrome", "is_palindrome",
        re.compile(r"\bpalindrom(?:e|ic)\b"), lambda m: True,
    ),
    HeuristicRule(
        "single_word", "word_count",
        re.compile(r"\b(?:single|one) word\b"), lambda m: 1,
    ),
    HeuristicRule(
        "word_count", "word_count",
        re.compile(r"\b(\d+) words?\b"), lambda m: int(m.group(1)),
    ),
    HeuristicRule(
        "longer_than", "min_length",
        re.compile(r"longer than (\d+)(?: characters)?"), lambda m: int(m.group(1)) + 1,
    ),
    HeuristicRule(
        "length_exact_min", "min_length", _LENGTH_EXACT, lambda m: int(m.group(1)),
    ),
    HeuristicRule(
        "length_exact_max", "max_length", _LENGTH_EXACT, lambda m: int(m.group(1)),
    ),
    HeuristicRule(
        "shorter_than", "max_length",
        re.compile(r"shorter than (\d+)"), lambda m: int(m.group(1)) - 1,
    ),
    # also hits words ending in "letter", e.g. "newsletter x"
    HeuristicRule(
        "letter", "contains_character",
        re.compile(r"(?:letter|character) ([a-z])"), lambda m: m.group(1),
    ),
    HeuristicRule(
        "first_vowel", "contains_character",
        re.compile(r"\bfirst vowel\b"), lambda m: "a",
    ),
]


def interpret_query(query: Optional[str], rules: Iterable[HeuristicRule] = RULES) -> StringFilters:
    """Translate a free-text query into structured filters.

    Raises InterpretationError when nothing in the query is recognised and
    SemanticConflictError when the parsed filters contradict each other.
    """
    if query is None or not query.strip():
        raise InterpretationError("A valid 'query' parameter is required")

    q = query.lower()
    parsed: Dict[str, Any] = {}
    for rule in rules:
        if rule.key in parsed:
            continue
        value = rule.evaluate(q)
        if value is not None:
            parsed[rule.key] = value

    if not parsed:
        logger.warning("Could not interpret query %r", query)
        raise InterpretationError("Unable to parse natural language query")

    filters = StringFilters(**parsed)
    if (
        filters.min_length is not None
        and filters.max_length is not None
        and filters.min_length > filters.max_length
    ):
        logger.warning("Query %r produced conflicting filters %s", query, parsed)
        raise SemanticConflictError("Query parsed but resulted in conflicting filters")
    return filters


def filter_by_natural_language(
    records: Iterable[AnalyzedString], query: Optional[str]
) -> Tuple[List[AnalyzedString], Dict[str, Any]]:
    filters = interpret_query(query)
    filtered, parsed_filters = apply_filters(records, filters)
    return filtered, {"original": query, "parsed_filters": parsed_filters}
