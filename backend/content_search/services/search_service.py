"""
Federated search across the site's content domains.

Adapters are queried concurrently; their candidates are joined in adapter
registration order, ranked by score (stable, so ties keep that order),
truncated to the query limit, then highlighted and summarized.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from content_search.adapters import DomainAdapter, ScoredCandidate
from content_search.services.audit_service import AuditSink, LoggingAuditSink
from content_search.services.query_service import Domain, SearchQuery
from content_search.services.scoring_service import highlighted_fields

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    total_results: int
    by_domain: dict[Domain, int]
    avg_score: int


@dataclass
class SearchOutcome:
    query: SearchQuery
    results: list[ScoredCandidate]
    stats: SearchStats
    degraded: list[Domain] = field(default_factory=list)


def rank(candidates: Sequence[ScoredCandidate], limit: int) -> list[ScoredCandidate]:
    # sorted() is stable: equal scores keep emission order.
    return sorted(candidates, key=lambda c: -c.score)[:max(limit, 0)]


def compile_stats(results: Sequence[ScoredCandidate]) -> SearchStats:
    by_domain = {domain: 0 for domain in Domain}
    for result in results:
        by_domain[result.domain] += 1
    avg_score = round(sum(r.score for r in results) / len(results)) if results else 0
    return SearchStats(total_results=len(results), by_domain=by_domain, avg_score=avg_score)


class SearchEngine:
    def __init__(self, adapters: Sequence[DomainAdapter], audit: AuditSink | None = None):
        self.adapters = list(adapters)
        self.audit = audit or LoggingAuditSink()

    async def search(self, query: SearchQuery) -> SearchOutcome:
        try:
            outcome = await self._run(query)
        except Exception as exc:
            logger.exception("Search failed for %r", query.raw_term)
            self._emit(self.audit.search_failed, query, exc)
            raise
        self._emit(self.audit.search_performed, query, len(outcome.results))
        return outcome

    async def _run(self, query: SearchQuery) -> SearchOutcome:
        selected = [adapter for adapter in self.adapters if adapter.handles(query)]
        tasks = [asyncio.create_task(adapter.fetch_candidates(query)) for adapter in selected]
        try:
            outcomes = await asyncio.gather(*tasks)
        except BaseException:
            # One failed or the request was cancelled: stop the rest before re-raising.
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        candidates: list[ScoredCandidate] = []
        degraded: list[Domain] = []
        for outcome in outcomes:
            candidates.extend(outcome.candidates)
            degraded.extend(failure.domain for failure in outcome.failures)

        if degraded:
            logger.info(
                "Search degraded: %d domain(s) unavailable (%s)",
                len(degraded), ", ".join(d.value for d in degraded),
            )

        results = rank(candidates, query.limit)
        fields_by_domain = {
            domain: adapter.fields_for(domain) for adapter in selected for domain in adapter.domains
        }
        for result in results:
            result.highlighted_fields = highlighted_fields(
                result.raw_entity, fields_by_domain[result.domain], query
            )

        return SearchOutcome(
            query=query,
            results=results,
            stats=compile_stats(results),
            degraded=degraded,
        )

    def _emit(self, event: Callable, *args) -> None:
        try:
            event(*args)
        except Exception as exc:
            logger.warning("Audit sink failed: %s", exc)
