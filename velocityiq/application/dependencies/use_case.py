"""Dependency use case - list files, pair neighbours within each folder."""

import random

import structlog

from velocityiq.application.dependencies.dto import DependencyResponse
from velocityiq.domain.ports.sources import FileTreePort
from velocityiq.domain.services.dependency_heuristic import suggest_dependencies

log = structlog.get_logger()


class DependencyUseCase:
    """Suggests dependencies from folder co-location.

    A fresh random.Random(seed) is created per call, so a fixed seed gives the
    same confidences on every request.
    """

    def __init__(self, files: FileTreePort, seed: int | None = None) -> None:
        self._files = files
        self._seed = seed

    async def execute(self) -> DependencyResponse:
        files = await self._files.list_files()
        dependencies = suggest_dependencies(files, random.Random(self._seed))
        log.info("dependencies_suggested", files=len(files), dependencies=len(dependencies))
        return DependencyResponse(count=len(dependencies), dependencies=dependencies)
