from content_search.adapters import careers, newsletter, pages, portfolio
from content_search.adapters.base import AdapterOutcome, DomainAdapter, ScoredCandidate, SourceUnavailable
from content_search.services.content_repository import ContentRepository

# Registration order is the tie-break order for equal scores.
ADAPTER_BUILDERS = (pages.build, portfolio.build, careers.build, newsletter.build)


def build_default_adapters(repository: ContentRepository, timeout: float | None = None) -> list[DomainAdapter]:
    return [build(repository, timeout) for build in ADAPTER_BUILDERS]


__all__ = [
    "AdapterOutcome",
    "DomainAdapter",
    "ScoredCandidate",
    "SourceUnavailable",
    "build_default_adapters",
]
