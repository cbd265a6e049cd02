"""Grouping stage - partition issues by component and files by folder."""

from collections.abc import Iterable

from velocityiq.domain.entities.issue import FileEntry, Issue

ROOT_FOLDER = "root"


def group_by_component(issues: Iterable[Issue]) -> dict[str, list[Issue]]:
    """Group issues by component key.

    Groups appear in first-seen order; issues keep their order inside a group.
    """
    groups: dict[str, list[Issue]] = {}
    for issue in issues:
        groups.setdefault(issue.component, []).append(issue)
    return groups


def folder_of(path: str) -> str:
    """Parent folder of a path; paths without a directory belong to "root"."""
    if "/" not in path:
        return ROOT_FOLDER
    return "/".join(path.split("/")[:-1])


def group_by_folder(files: Iterable[FileEntry]) -> dict[str, list[str]]:
    """Group file locations by parent folder, preserving listing order."""
    folders: dict[str, list[str]] = {}
    for entry in files:
        location = entry.location
        folders.setdefault(folder_of(location), []).append(location)
    return folders
