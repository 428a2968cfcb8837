import json
from pathlib import Path
from typing import Any

from content_search.config import settings


def content_file(relative: str, content_path: Path | None = None) -> Path:
    root = (content_path or settings.content_path).resolve()
    path = (root / relative).resolve()
    # Configured names must stay inside the content store.
    if root not in path.parents:
        raise ValueError(f"Content file outside content store: {relative}")
    return path


def read_json(path: Path) -> Any:
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)
