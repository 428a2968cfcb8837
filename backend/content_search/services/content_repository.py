"""
Read access to the JSON content store.

Each domain lives in a document under `settings.content_path`:
static pages are one file each (their `page_info` block is the entity),
the other domains share one `content.json` per section.
"""
import logging
from pathlib import Path
from typing import Any, Protocol

from content_search.config import settings
from content_search.services.query_service import Domain
from content_search.utils.filesystem import content_file, read_json

logger = logging.getLogger(__name__)


class RepositoryError(Exception):
    """A content domain could not be read."""


class ContentRepository(Protocol):
    def fetch_all(self, domain: Domain) -> list[dict[str, Any]]: ...


# domain -> (settings attribute naming the section file, collection key)
_SECTION_COLLECTIONS: dict[Domain, tuple[str, str]] = {
    Domain.PORTFOLIO_PROJECT: ("portfolio_file", "projects"),
    Domain.PORTFOLIO_CATEGORY: ("portfolio_file", "categories"),
    Domain.CAREER_JOB: ("careers_file", "job_postings"),
    Domain.CAREER_DEPARTMENT: ("careers_file", "departments"),
    Domain.NEWSLETTER_ARTICLE: ("newsletter_file", "articles"),
    Domain.NEWSLETTER_AUTHOR: ("newsletter_file", "authors"),
    Domain.NEWSLETTER_CATEGORY: ("newsletter_file", "categories"),
}


class JsonContentRepository:
    def __init__(self, content_path: Path | None = None):
        self.content_path = content_path or settings.content_path

    def fetch_all(self, domain: Domain) -> list[dict[str, Any]]:
        if domain is Domain.PAGE:
            return self._fetch_pages()
        file_attr, key = _SECTION_COLLECTIONS[domain]
        data = self._load(getattr(settings, file_attr))
        if not isinstance(data, dict):
            raise RepositoryError(f"{domain.value}: section document is not an object")
        items = data.get(key) or []
        if not isinstance(items, list):
            raise RepositoryError(f"{domain.value}: '{key}' is not a list")
        return [item for item in items if isinstance(item, dict)]

    def _fetch_pages(self) -> list[dict[str, Any]]:
        pages = []
        for name in settings.page_files:
            try:
                data = self._load(name)
            except RepositoryError as exc:
                # One unreadable page does not hide the others.
                logger.debug("Skipping page %s: %s", name, exc)
                continue
            info = data.get("page_info") if isinstance(data, dict) else None
            if isinstance(info, dict):
                pages.append({**info, "_file": name})
        return pages

    def _load(self, relative: str) -> Any:
        try:
            return read_json(content_file(relative, self.content_path))
        except (OSError, ValueError) as exc:
            raise RepositoryError(f"Cannot read {relative}: {exc}") from exc
