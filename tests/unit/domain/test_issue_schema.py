"""Boundary schema tests for Issue and FileEntry payloads."""

from datetime import datetime, timezone

from velocityiq.domain.entities.issue import FileEntry, Issue


def test_sonarqube_payload():
    issue = Issue.model_validate(
        {
            "key": "AX-1",
            "component": "proj:src/a.ts",
            "type": "BUG",
            "debt": "5min",
            "creationDate": "2026-01-10T11:55:00+0000",
        }
    )
    assert issue.component == "proj:src/a.ts"
    assert issue.debt == "5min"
    assert issue.creation_date == datetime(2026, 1, 10, 11, 55, tzinfo=timezone.utc)


def test_z_suffix_and_naive_dates_are_utc():
    assert Issue.model_validate({"creationDate": "2026-01-10T11:55:00Z"}).creation_date.tzinfo is not None
    naive = Issue.model_validate({"creationDate": "2026-01-10T11:55:00"}).creation_date
    assert naive == datetime(2026, 1, 10, 11, 55, tzinfo=timezone.utc)


def test_bad_fields_are_coerced():
    issue = Issue.model_validate({"component": None, "debt": 15, "creationDate": "yesterday"})
    assert issue.component == "Unknown"
    assert issue.debt == "15"
    assert issue.creation_date is None
    assert issue.type == ""


def test_null_type_and_numeric_component_are_coerced():
    issue = Issue.model_validate({"component": "p:a/b.ts", "type": None, "debt": "5min"})
    assert issue.type == ""
    assert issue.debt == "5min"

    numeric = Issue.model_validate({"component": 42, "type": "BUG"})
    assert numeric.component == "42"
    assert numeric.type == "BUG"
    assert Issue.model_validate({"type": 7}).type == "7"


def test_file_entry_location():
    assert FileEntry(name="a.ts", path="src/a.ts").location == "src/a.ts"
    assert FileEntry(name="a.ts").location == "a.ts"
    assert FileEntry.model_validate({"name": "src", "path": "src", "type": "dir"}).is_file is False
