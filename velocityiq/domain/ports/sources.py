"""Source Ports - interfaces for code-quality and source-control data."""

from typing import Protocol

from velocityiq.domain.entities.issue import FileEntry, Issue


class IssueSourcePort(Protocol):
    """Provider of unresolved static-analysis issues for the configured project."""

    async def search_issues(self) -> list[Issue]:
        """Fetch one page of unresolved issues."""
        ...


class FileTreePort(Protocol):
    """Provider of file entries for the dependency heuristic."""

    async def list_files(self) -> list[FileEntry]:
        """Fetch one page of file entries."""
        ...
