from content_search.adapters.base import DomainAdapter, DomainSpec, ResultFields, text
from content_search.services.content_repository import ContentRepository
from content_search.services.query_service import Domain
from content_search.services.scoring_service import SearchableField, text_at


def _shape_job(job) -> ResultFields:
    return ResultFields(
        title=text(job, "title"),
        description=text(job, "short_description"),
        url=f"/careers/job/{job.get('slug', '')}",
        metadata={
            "department": job.get("department"),
            "level": job.get("level"),
            "type": job.get("type"),
            "status": job.get("status"),
            "location": job.get("location"),
            "featured": job.get("featured"),
            "urgent": job.get("urgent"),
        },
    )


def _shape_department(dept) -> ResultFields:
    return ResultFields(
        title=text(dept, "name"),
        description=text(dept, "description"),
        url=f"/careers/department/{dept.get('slug', '')}",
        metadata={
            "open_positions": dept.get("open_positions"),
            "total_employees": dept.get("total_employees"),
            "featured": dept.get("featured"),
        },
    )


JOB = DomainSpec(
    domain=Domain.CAREER_JOB,
    fields=(
        SearchableField("title", 3, text_at("title")),
        SearchableField("short_description", 2, text_at("short_description")),
        SearchableField("full_description", 1, text_at("full_description")),
        SearchableField("department", 2, text_at("department")),
        SearchableField("location.city", 1, text_at("location", "city")),
        SearchableField("requirements.essential", 1, text_at("requirements", "essential")),
        SearchableField("tags", 1, text_at("tags")),
    ),
    shape=_shape_job,
)

DEPARTMENT = DomainSpec(
    domain=Domain.CAREER_DEPARTMENT,
    fields=(
        SearchableField("name", 3, text_at("name")),
        SearchableField("description", 2, text_at("description")),
        SearchableField("detailed_description", 1, text_at("detailed_description")),
        SearchableField("required_skills", 1, text_at("required_skills")),
    ),
    shape=_shape_department,
)


def build(repository: ContentRepository, timeout: float | None = None) -> DomainAdapter:
    return DomainAdapter("careers", (JOB, DEPARTMENT), repository, timeout)
