from content_search.adapters.base import DomainAdapter, DomainSpec, ResultFields, text
from content_search.services.content_repository import ContentRepository
from content_search.services.query_service import Domain
from content_search.services.scoring_service import SearchableField, text_at


def _page_id(page) -> str:
    return str(page.get("_file", "")).removesuffix(".json")


def _shape_page(page) -> ResultFields:
    return ResultFields(
        title=text(page, "title", "Página"),
        description=text(page, "description") or text(page, "meta_description"),
        url="/" + _page_id(page).removeprefix("pages/"),
        metadata={"type": "static_page", "file": page.get("_file")},
    )


PAGE = DomainSpec(
    domain=Domain.PAGE,
    fields=(
        SearchableField("title", 3, text_at("title")),
        SearchableField("description", 2, text_at("description")),
        SearchableField("meta_description", 1, text_at("meta_description")),
    ),
    shape=_shape_page,
    entity_id=_page_id,
)


def build(repository: ContentRepository, timeout: float | None = None) -> DomainAdapter:
    return DomainAdapter("pages", (PAGE,), repository, timeout)
