from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol

from .models.project import EstimateRequest


class ProjectRepository(Protocol):
    def get(self, path: str | Path) -> EstimateRequest:
        ...


class LocalProjectRepository:
    def __init__(self, *, base_path: Path | None = None) -> None:
        self._base_path = base_path or Path.cwd()

    def get(self, path: str | Path) -> EstimateRequest:
        file_path = self._base_path / Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Project setup not found: {file_path}")
        with file_path.open("r", encoding="utf-8") as fp:
            data = json.load(fp)
        return EstimateRequest.model_validate(data)


__all__ = ["LocalProjectRepository", "ProjectRepository"]
