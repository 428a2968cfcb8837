from content_search.adapters.base import DomainAdapter, DomainSpec, ResultFields, text
from content_search.services.content_repository import ContentRepository
from content_search.services.query_service import Domain
from content_search.services.scoring_service import SearchableField, text_at


def _shape_article(article) -> ResultFields:
    return ResultFields(
        title=text(article, "title"),
        description=text(article, "excerpt"),
        url=f"/blog/{article.get('slug', '')}",
        metadata={
            "category": article.get("category"),
            "author_id": article.get("author_id"),
            "published_date": article.get("published_date"),
            "featured": article.get("featured"),
            "reading_time": article.get("reading_time"),
        },
    )


def _shape_author(author) -> ResultFields:
    return ResultFields(
        title=text(author, "name"),
        description=f"{text(author, 'role')} - {text(author, 'bio')}",
        url=f"/blog/author/{author.get('id', '')}",
        metadata={
            "role": author.get("role"),
            "articles_count": author.get("articles_count"),
            "featured": author.get("featured"),
            "specializations": author.get("specializations"),
        },
    )


def _shape_category(category) -> ResultFields:
    return ResultFields(
        title=text(category, "name"),
        description=text(category, "description"),
        url=f"/blog/category/{category.get('slug', '')}",
        metadata={
            "articles_count": category.get("articles_count"),
            "featured": category.get("featured"),
            "color": category.get("color"),
        },
    )


ARTICLE = DomainSpec(
    domain=Domain.NEWSLETTER_ARTICLE,
    fields=(
        SearchableField("title", 3, text_at("title")),
        SearchableField("excerpt", 2, text_at("excerpt")),
        SearchableField("content", 1, text_at("content")),
        SearchableField("tags", 1, text_at("tags")),
    ),
    shape=_shape_article,
)

AUTHOR = DomainSpec(
    domain=Domain.NEWSLETTER_AUTHOR,
    fields=(
        SearchableField("name", 3, text_at("name")),
        SearchableField("role", 2, text_at("role")),
        SearchableField("bio", 1, text_at("bio")),
        SearchableField("specializations", 1, text_at("specializations")),
    ),
    shape=_shape_author,
)

CATEGORY = DomainSpec(
    domain=Domain.NEWSLETTER_CATEGORY,
    fields=(
        SearchableField("name", 3, text_at("name")),
        SearchableField("description", 2, text_at("description")),
    ),
    shape=_shape_category,
)


def build(repository: ContentRepository, timeout: float | None = None) -> DomainAdapter:
    return DomainAdapter("newsletter", (ARTICLE, AUTHOR, CATEGORY), repository, timeout)
