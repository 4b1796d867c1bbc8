from typing import Dict
from datetime import datetime, timezone
from sqlmodel import SQLModel, Field
import hashlib
from collections import Counter


def sha256_hex(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8", "surrogatepass")).hexdigest()


def is_palindrome(value: str) -> bool:
    """Case-insensitive check; whitespace and punctuation are significant."""
    lowered = value.lower()
    return lowered == lowered[::-1]


def count_words(value: str) -> int:
    return len(value.split())


class StringProperties(SQLModel):
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class AnalyzedString(SQLModel):
    id: str
    value: str
    properties: StringProperties
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


def analyze_string(value: str) -> AnalyzedString:
    sha = sha256_hex(value)
    props = StringProperties(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=len(set(value)),
        word_count=count_words(value),
        sha256_hash=sha,
        character_frequency_map=dict(Counter(value)),
    )
    return AnalyzedString(id=sha, value=value, properties=props)
