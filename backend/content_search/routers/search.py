import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from content_search.dependencies import get_search_engine, require_admin_token
from content_search.schemas.search import (
    SearchData,
    SearchQueryEcho,
    SearchResponse,
    SearchResult,
    SearchStats,
)
from content_search.services.query_service import InvalidQuery, normalize_query
from content_search.services.search_service import SearchEngine, SearchOutcome

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/search",
    tags=["search"],
    dependencies=[Depends(require_admin_token)],
)


def _error(status_code: int, code: str, message: str) -> JSONResponse:
    body = SearchResponse(success=False, error=code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _to_response(outcome: SearchOutcome) -> SearchResponse:
    query = outcome.query
    return SearchResponse(
        success=True,
        data=SearchData(
            results=[
                SearchResult(
                    id=r.id,
                    domain=r.domain.value,
                    title=r.title,
                    description=r.description,
                    url=r.url,
                    score=r.score,
                    metadata=r.metadata,
                    highlighted_fields=r.highlighted_fields,
                )
                for r in outcome.results
            ],
            stats=SearchStats(
                total_results=outcome.stats.total_results,
                by_domain={d.value: n for d, n in outcome.stats.by_domain.items()},
                avg_score=outcome.stats.avg_score,
                search_term=query.raw_term,
                search_type=query.domain_filter,
                fuzzy_enabled=query.fuzzy,
            ),
            query=SearchQueryEcho(
                term=query.raw_term,
                type=query.domain_filter,
                fuzzy=query.fuzzy,
                limit=query.limit,
            ),
            degraded=[d.value for d in outcome.degraded],
        ),
    )


@router.get("", response_model=SearchResponse)
async def search(
    q: str | None = Query(None),
    type_: str | None = Query(None, alias="type"),
    limit: str | None = Query(None),
    fuzzy: str | None = Query(None),
    engine: SearchEngine = Depends(get_search_engine),
):
    # Validation errors use the same envelope as every other response,
    # so parameters are parsed here rather than by FastAPI.
    try:
        query = normalize_query(q, type_=type_, limit=limit, fuzzy=fuzzy)
    except InvalidQuery as exc:
        return _error(400, "INVALID_QUERY", str(exc))

    try:
        outcome = await engine.search(query)
    except Exception as exc:
        logger.error("Search request failed: %s", exc)
        return _error(500, "INTERNAL_ERROR", "Failed to perform search.")

    # error/message only appear on failures.
    body = _to_response(outcome)
    return JSONResponse(content=body.model_dump(mode="json", exclude={"error", "message"}))
