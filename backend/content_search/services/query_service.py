"""
Turns raw request parameters into a validated SearchQuery.
This is the only place where user input is rejected.
"""
from dataclasses import dataclass
from enum import Enum

from content_search.config import settings


class Domain(str, Enum):
    PAGE = "page"
    PORTFOLIO_PROJECT = "portfolio-project"
    PORTFOLIO_CATEGORY = "portfolio-category"
    CAREER_JOB = "career-job"
    CAREER_DEPARTMENT = "career-department"
    NEWSLETTER_ARTICLE = "newsletter-article"
    NEWSLETTER_AUTHOR = "newsletter-author"
    NEWSLETTER_CATEGORY = "newsletter-category"


ALL = "all"

# Group names accepted by the admin UI's `type` selector.
DOMAIN_GROUPS: dict[str, frozenset[Domain]] = {
    "pages": frozenset({Domain.PAGE}),
    "portfolio": frozenset({Domain.PORTFOLIO_PROJECT, Domain.PORTFOLIO_CATEGORY}),
    "careers": frozenset({Domain.CAREER_JOB, Domain.CAREER_DEPARTMENT}),
    "newsletter": frozenset({
        Domain.NEWSLETTER_ARTICLE,
        Domain.NEWSLETTER_AUTHOR,
        Domain.NEWSLETTER_CATEGORY,
    }),
}


class InvalidQuery(ValueError):
    """Raised for search requests that must be rejected before any source is read."""


@dataclass(frozen=True)
class SearchQuery:
    term: str  # trimmed, lowercased
    raw_term: str  # as sent, echoed back to the caller
    domain_filter: str = ALL
    limit: int = 50
    fuzzy: bool = False

    @property
    def words(self) -> list[str]:
        return self.term.split()

    @property
    def allowed_domains(self) -> frozenset[Domain]:
        return resolve_domain_filter(self.domain_filter)

    def allows(self, domain: Domain) -> bool:
        return domain in self.allowed_domains


def resolve_domain_filter(value: str) -> frozenset[Domain]:
    if value == ALL:
        return frozenset(Domain)
    if value in DOMAIN_GROUPS:
        return DOMAIN_GROUPS[value]
    try:
        return frozenset({Domain(value)})
    except ValueError:
        raise InvalidQuery(f"Unknown search type '{value}'.") from None


def _parse_limit(value: str | int | None) -> int:
    if value is None or value == "":
        return settings.default_limit
    try:
        limit = int(value)
    except (TypeError, ValueError):
        raise InvalidQuery("Search limit must be an integer.") from None
    # A non-positive limit yields an empty result list rather than an error.
    return min(max(limit, 0), settings.max_limit)


def _parse_flag(value: str | bool | None) -> bool:
    if isinstance(value, bool):
        return value
    return (value or "").strip().lower() in ("true", "1")


def normalize_query(
    q: str | None,
    type_: str | None = None,
    limit: str | int | None = None,
    fuzzy: str | bool | None = None,
) -> SearchQuery:
    raw_term = q or ""
    term = raw_term.strip()
    if len(term) < settings.min_term_length:
        raise InvalidQuery(
            f"Search query must be at least {settings.min_term_length} characters long."
        )

    domain_filter = (type_ or ALL).strip().lower() or ALL
    resolve_domain_filter(domain_filter)

    return SearchQuery(
        term=term.lower(),
        raw_term=raw_term,
        domain_filter=domain_filter,
        limit=_parse_limit(limit),
        fuzzy=_parse_flag(fuzzy),
    )
