"""
Relevance scoring for content fields.

A field's score is the sum of three passes, each scaled by the field's boost:
  * exact:  the whole term appears in the text            -> 10
  * words:  every (search word, text word) pair where the
            text word contains a search word of 3+ chars   -> 3 per pair
  * fuzzy:  (opt-in) the letters of a 4+ char search word
            appear in order anywhere in the text            -> 1 per word
"""
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from content_search.services.query_service import SearchQuery

EXACT_WEIGHT = 10
WORD_WEIGHT = 3
FUZZY_WEIGHT = 1

MIN_WORD_LENGTH = 3
MIN_FUZZY_WORD_LENGTH = 4


def field_text(value: Any) -> str | None:
    """Render a raw entity value as searchable text, or None if it has none."""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return " ".join(v for v in value if isinstance(v, str))
    if isinstance(value, Mapping):
        return " ".join(v for v in value.values() if isinstance(v, str))
    return None


def text_at(*keys: str) -> Callable[[Mapping[str, Any]], str | None]:
    """Accessor for a (possibly nested) entity value, rendered with field_text."""

    def extract(entity: Mapping[str, Any]) -> str | None:
        value: Any = entity
        for key in keys:
            if not isinstance(value, Mapping):
                return None
            value = value.get(key)
        return field_text(value)

    return extract


@dataclass(frozen=True)
class SearchableField:
    name: str
    boost: int
    extract: Callable[[Mapping[str, Any]], str | None]


def _fuzzy_pattern(word: str) -> re.Pattern:
    return re.compile(".*".join(re.escape(ch) for ch in word), re.IGNORECASE | re.DOTALL)


def score_text(text: str | None, boost: int, query: SearchQuery) -> int:
    if not text:
        return 0
    lower_text = text.lower()
    score = 0

    if query.term in lower_text:
        score += EXACT_WEIGHT * boost

    search_words = query.words
    text_words = lower_text.split()
    for search_word in search_words:
        if len(search_word) < MIN_WORD_LENGTH:
            continue
        for text_word in text_words:
            if search_word in text_word:
                score += WORD_WEIGHT * boost

    if query.fuzzy:
        for search_word in search_words:
            if len(search_word) >= MIN_FUZZY_WORD_LENGTH and _fuzzy_pattern(search_word).search(text):
                score += FUZZY_WEIGHT * boost

    return score


def score_entity(entity: Mapping[str, Any], fields: tuple[SearchableField, ...], query: SearchQuery) -> int:
    return sum(score_text(f.extract(entity), f.boost, query) for f in fields)


def highlighted_fields(entity: Mapping[str, Any], fields: tuple[SearchableField, ...], query: SearchQuery) -> list[str]:
    """Names of the fields that match the query on their own."""
    return [f.name for f in fields if score_text(f.extract(entity), 1, query) > 0]
