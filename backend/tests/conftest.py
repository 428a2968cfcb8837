import json
import time
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from content_search.config import settings
from content_search.main import app
from content_search.services.content_repository import RepositoryError


PAGE = {
    "page_info": {
        "title": "Nuestros Servicios",
        "description": "servicios de construcción",
        "meta_description": "Conoce nuestros servicios",
    }
}

PORTFOLIO = {
    "projects": [
        {
            "id": "proj-1",
            "title": "Torre Azul",
            "slug": "torre-azul",
            "description": "Edificio de oficinas",
            "client": "Grupo Andino",
            "location": "Lima",
            "category": "oficinas",
            "status": "completed",
            "tags": ["construcción", "lima"],
        }
    ],
    "categories": [
        {
            "id": "cat-1",
            "name": "Oficinas",
            "slug": "oficinas",
            "description": "Proyectos corporativos",
            "projects_count": 4,
            "color": "#0044aa",
        }
    ],
}

CAREERS = {
    "job_postings": [
        {
            "id": "job-1",
            "title": "Ingeniero de Obra",
            "slug": "ingeniero-obra",
            "short_description": "Supervisión de obras",
            "full_description": "Responsable de la supervisión diaria en obra",
            "department": "Ingeniería",
            "location": {"city": "Lima", "region": "Lima"},
            "requirements": {"essential": ["AutoCAD", "liderazgo"]},
            "tags": ["obra", "supervisión"],
            "level": "senior",
            "type": "full-time",
            "status": "active",
            "featured": True,
            "urgent": False,
        }
    ],
    "departments": [
        {
            "id": "dept-1",
            "name": "Ingeniería",
            "slug": "ingenieria",
            "description": "Equipo técnico",
            "detailed_description": "Diseño y supervisión de proyectos",
            "required_skills": ["AutoCAD", "BIM"],
            "open_positions": 2,
            "total_employees": 30,
            "featured": False,
        }
    ],
}

NEWSLETTER = {
    "articles": [
        {
            "id": "art-1",
            "title": "Tendencias en construcción sostenible",
            "slug": "tendencias-construccion",
            "excerpt": "Materiales y procesos",
            "content": "La construcción sostenible reduce costos",
            "tags": ["sostenibilidad"],
            "category": "industria",
            "author_id": "auth-1",
            "published_date": "2024-03-01",
            "featured": True,
            "reading_time": 5,
        }
    ],
    "authors": [
        {
            "id": "auth-1",
            "name": "Ana Torres",
            "role": "Arquitecta",
            "bio": "Especialista en diseño bioclimático",
            "specializations": ["BIM", "sostenibilidad"],
            "articles_count": 12,
            "featured": True,
        }
    ],
    "categories": [
        {
            "id": "ncat-1",
            "name": "Industria",
            "slug": "industria",
            "description": "Noticias del sector",
            "articles_count": 8,
            "featured": False,
            "color": "#aa4400",
        }
    ],
}


def _write_json(path: Path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


@pytest.fixture
def content_store(tmp_path):
    root = tmp_path / "content"
    _write_json(root / "pages" / "about-historia.json", PAGE)
    _write_json(root / "dynamic-content" / "portfolio" / "content.json", PORTFOLIO)
    _write_json(root / "dynamic-content" / "careers" / "content.json", CAREERS)
    _write_json(root / "dynamic-content" / "newsletter" / "content.json", NEWSLETTER)
    return root


@pytest.fixture
def client(content_store):
    original_content_path = settings.content_path
    settings.content_path = content_store
    c = TestClient(app)
    yield c
    settings.content_path = original_content_path


class FakeRepository:
    """In-memory repository; domains listed in `failing` raise on every read."""

    def __init__(self, data=None, failing=(), delays=None):
        self.data = data or {}
        self.failing = set(failing)
        self.delays = delays or {}
        self.calls = []

    def fetch_all(self, domain):
        self.calls.append(domain)
        if domain in self.delays:
            time.sleep(self.delays[domain])
        if domain in self.failing:
            raise RepositoryError(f"{domain.value} is down")
        return [dict(entity) for entity in self.data.get(domain, [])]


class RecordingAuditSink:
    def __init__(self):
        self.performed = []
        self.failed = []

    def search_performed(self, query, result_count):
        self.performed.append((query.raw_term, query.domain_filter, result_count, query.fuzzy))

    def search_failed(self, query, error):
        self.failed.append((query.raw_term if query else None, error))


@pytest.fixture
def repository_factory():
    return FakeRepository


@pytest.fixture
def audit_sink():
    return RecordingAuditSink()
