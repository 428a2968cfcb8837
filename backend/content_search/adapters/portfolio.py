from content_search.adapters.base import DomainAdapter, DomainSpec, ResultFields, text
from content_search.services.content_repository import ContentRepository
from content_search.services.query_service import Domain
from content_search.services.scoring_service import SearchableField, text_at


def _shape_project(project) -> ResultFields:
    return ResultFields(
        title=text(project, "title"),
        description=text(project, "description"),
        url=f"/portfolio/{project.get('slug', '')}",
        metadata={
            "category": project.get("category"),
            "status": project.get("status"),
            "client": project.get("client"),
            "location": project.get("location"),
        },
    )


def _shape_category(category) -> ResultFields:
    return ResultFields(
        title=text(category, "name"),
        description=text(category, "description"),
        url=f"/portfolio/category/{category.get('slug', '')}",
        metadata={
            "projects_count": category.get("projects_count"),
            "color": category.get("color"),
        },
    )


PROJECT = DomainSpec(
    domain=Domain.PORTFOLIO_PROJECT,
    fields=(
        SearchableField("title", 3, text_at("title")),
        SearchableField("description", 2, text_at("description")),
        SearchableField("location", 1, text_at("location")),
        SearchableField("client", 1, text_at("client")),
        SearchableField("tags", 1, text_at("tags")),
    ),
    shape=_shape_project,
)

CATEGORY = DomainSpec(
    domain=Domain.PORTFOLIO_CATEGORY,
    fields=(
        SearchableField("name", 3, text_at("name")),
        SearchableField("description", 2, text_at("description")),
    ),
    shape=_shape_category,
)


def build(repository: ContentRepository, timeout: float | None = None) -> DomainAdapter:
    return DomainAdapter("portfolio", (PROJECT, CATEGORY), repository, timeout)
