import logging
from typing import Protocol

from content_search.services.query_service import SearchQuery

audit_logger = logging.getLogger("content_search.audit")


class AuditSink(Protocol):
    def search_performed(self, query: SearchQuery, result_count: int) -> None: ...

    def search_failed(self, query: SearchQuery | None, error: BaseException) -> None: ...


class LoggingAuditSink:
    """Writes audit events as structured log records."""

    def search_performed(self, query: SearchQuery, result_count: int) -> None:
        audit_logger.info(
            'Search performed: "%s"', query.raw_term,
            extra={
                "search_term": query.raw_term,
                "search_type": query.domain_filter,
                "results_count": result_count,
                "fuzzy_enabled": query.fuzzy,
            },
        )

    def search_failed(self, query: SearchQuery | None, error: BaseException) -> None:
        audit_logger.error(
            "Failed to perform search: %s", error,
            extra={"search_term": query.raw_term if query else None},
        )
