"""
Shared machinery for content-domain search adapters.

An adapter is configured with one DomainSpec per domain it serves: the
weighted field table used for scoring and a function shaping a raw entity
into the public result fields. Adapters differ only in that data.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from content_search.services.content_repository import ContentRepository
from content_search.services.query_service import Domain, SearchQuery
from content_search.services.scoring_service import SearchableField, score_entity

logger = logging.getLogger(__name__)


@dataclass
class ResultFields:
    title: str
    description: str
    url: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class ScoredCandidate:
    id: str
    domain: Domain
    score: int
    title: str
    description: str
    url: str
    metadata: dict[str, Any]
    raw_entity: Mapping[str, Any]
    highlighted_fields: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DomainSpec:
    domain: Domain
    fields: tuple[SearchableField, ...]
    shape: Callable[[Mapping[str, Any]], ResultFields]
    entity_id: Callable[[Mapping[str, Any]], str] = lambda e: str(e.get("id", ""))


class SourceUnavailable(Exception):
    """A domain's repository could not be read; the domain contributes nothing."""

    def __init__(self, domain: Domain, cause: BaseException):
        super().__init__(f"{domain.value}: {cause!r}")
        self.domain = domain
        self.cause = cause


@dataclass
class AdapterOutcome:
    """Candidates from one adapter plus the domains it could not read."""

    candidates: list[ScoredCandidate] = field(default_factory=list)
    failures: list[SourceUnavailable] = field(default_factory=list)


class DomainAdapter:
    def __init__(
        self,
        name: str,
        specs: tuple[DomainSpec, ...],
        repository: ContentRepository,
        timeout: float | None = None,
    ):
        self.name = name
        self.specs = specs
        self.repository = repository
        self.timeout = timeout

    @property
    def domains(self) -> frozenset[Domain]:
        return frozenset(spec.domain for spec in self.specs)

    def handles(self, query: SearchQuery) -> bool:
        return bool(self.domains & query.allowed_domains)

    def fields_for(self, domain: Domain) -> tuple[SearchableField, ...]:
        for spec in self.specs:
            if spec.domain is domain:
                return spec.fields
        return ()

    async def fetch_candidates(self, query: SearchQuery) -> AdapterOutcome:
        outcome = AdapterOutcome()
        for spec in self.specs:
            if not query.allows(spec.domain):
                continue
            try:
                entities = await self._fetch(spec.domain)
            except Exception as exc:
                failure = SourceUnavailable(spec.domain, exc)
                logger.warning("Source %s unavailable: %s", self.name, failure)
                outcome.failures.append(failure)
                continue
            outcome.candidates.extend(self._score(spec, entities, query))
        return outcome

    async def _fetch(self, domain: Domain) -> list[dict[str, Any]]:
        return await asyncio.wait_for(
            asyncio.to_thread(self.repository.fetch_all, domain),
            timeout=self.timeout,
        )

    def _score(self, spec: DomainSpec, entities: list[dict[str, Any]], query: SearchQuery) -> list[ScoredCandidate]:
        candidates = []
        for entity in entities:
            score = score_entity(entity, spec.fields, query)
            if score <= 0:
                continue
            shaped = spec.shape(entity)
            candidates.append(ScoredCandidate(
                id=spec.entity_id(entity),
                domain=spec.domain,
                score=score,
                title=shaped.title,
                description=shaped.description,
                url=shaped.url,
                metadata=shaped.metadata,
                raw_entity=entity,
            ))
        return candidates


def text(entity: Mapping[str, Any], key: str, default: str = "") -> str:
    value = entity.get(key)
    return value if isinstance(value, str) and value else default
