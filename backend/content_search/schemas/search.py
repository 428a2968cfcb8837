from typing import Any

from pydantic import BaseModel


class SearchResult(BaseModel):
    id: str
    domain: str
    title: str
    description: str
    url: str
    score: int
    metadata: dict[str, Any]
    highlighted_fields: list[str]


class SearchStats(BaseModel):
    total_results: int
    by_domain: dict[str, int]
    avg_score: int
    search_term: str
    search_type: str
    fuzzy_enabled: bool


class SearchQueryEcho(BaseModel):
    term: str
    type: str
    fuzzy: bool
    limit: int


class SearchData(BaseModel):
    results: list[SearchResult]
    stats: SearchStats
    query: SearchQueryEcho
    degraded: list[str] = []


class SearchResponse(BaseModel):
    success: bool
    data: SearchData | None = None
    error: str | None = None
    message: str | None = None
