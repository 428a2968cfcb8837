import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from content_search.config import settings
from content_search.routers import search

logger = logging.getLogger("content_search")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: a missing content store is not fatal, every domain will just come back empty.
    if settings.content_path.is_dir():
        logger.info("Serving content from %s", settings.content_path)
    else:
        logger.warning("Content store %s does not exist; searches will return no results.", settings.content_path)
    yield


app = FastAPI(
    title="Content Search",
    description="Federated relevance search over the site's pages, portfolio, careers and newsletter content",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://127.0.0.1:3000",
        "http://localhost:3000",
    ],
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(search.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}


def run():
    import uvicorn

    uvicorn.run("content_search.main:app", host=settings.host, port=settings.port)
