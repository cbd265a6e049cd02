"""Test doubles and builders shared across test modules."""

from datetime import datetime, timedelta, timezone

import httpx

from velocityiq.domain.entities.issue import FileEntry, Issue

NOW = datetime(2026, 1, 10, 12, 0, tzinfo=timezone.utc)


def make_issue(
    component: str = "proj:src/a.ts",
    type: str = "BUG",
    debt: str | None = None,
    age: timedelta = timedelta(minutes=5),
) -> Issue:
    """Issue created `age` before NOW, built through the payload schema."""
    return Issue.model_validate(
        {
            "component": component,
            "type": type,
            "debt": debt,
            "creationDate": (NOW - age).isoformat(),
        }
    )


class FakeIssueSource:
    """IssueSourcePort returning canned issues."""

    def __init__(self, issues: list[Issue] | None = None, error: Exception | None = None):
        self.issues = issues or []
        self.error = error
        self.calls = 0

    async def search_issues(self) -> list[Issue]:
        self.calls += 1
        if self.error:
            raise self.error
        return list(self.issues)


class FakeFileTree:
    """FileTreePort returning canned file entries."""

    def __init__(self, paths: list[str] | None = None, error: Exception | None = None):
        self.files = [FileEntry(name=p.split("/")[-1], path=p) for p in paths or []]
        self.error = error

    async def list_files(self) -> list[FileEntry]:
        if self.error:
            raise self.error
        return list(self.files)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, status_code: int = 200, json: object = None):
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(status_code, json=json if json is not None else {})

        super().__init__(handler)
