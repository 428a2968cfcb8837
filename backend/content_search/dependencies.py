import secrets

from fastapi import Header, HTTPException

from content_search.adapters import build_default_adapters
from content_search.config import settings
from content_search.services.content_repository import JsonContentRepository
from content_search.services.search_service import SearchEngine


async def require_admin_token(authorization: str | None = Header(None)):
    if settings.admin_token is None:
        return None
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing bearer token")
    token = authorization[7:]
    if not secrets.compare_digest(token, settings.admin_token):
        raise HTTPException(status_code=401, detail="Invalid token")
    return token


def get_search_engine() -> SearchEngine:
    repository = JsonContentRepository(settings.content_path)
    return SearchEngine(build_default_adapters(repository, settings.adapter_timeout_seconds))
