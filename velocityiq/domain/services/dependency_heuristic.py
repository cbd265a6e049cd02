"""Dependency suggestions from folder co-location.

Placeholder heuristic: neighbouring files in the same folder are linked and
given a random confidence. No import graph is analysed.
"""

import random
from collections.abc import Iterable

from velocityiq.domain.entities.issue import FileEntry
from velocityiq.domain.entities.tech_debt import Dependency, TaskRef
from velocityiq.domain.services.formatting import sequential_id
from velocityiq.domain.services.grouping import group_by_folder

ID_PREFIX = "DEP"
MIN_CONFIDENCE = 75
MAX_CONFIDENCE = 94


def _task_ref(path: str) -> TaskRef:
    return TaskRef(id=path, title=path)


def suggest_dependencies(files: Iterable[FileEntry], rng: random.Random) -> list[Dependency]:
    """Link each consecutive pair of files within every folder holding two or more files."""
    dependencies: list[Dependency] = []
    for folder, paths in group_by_folder(files).items():
        for source, target in zip(paths, paths[1:]):
            dependencies.append(
                Dependency(
                    id=sequential_id(ID_PREFIX, len(dependencies) + 1),
                    source=_task_ref(source),
                    target=_task_ref(target),
                    confidence=rng.randint(MIN_CONFIDENCE, MAX_CONFIDENCE),
                    reasons=[
                        f"Files belong to same module: {folder}",
                        "Shared directory structure",
                    ],
                    shared_files=[source, target],
                )
            )
    return dependencies
