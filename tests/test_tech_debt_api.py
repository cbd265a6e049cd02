"""Tech-debt endpoint integration tests."""

from datetime import timedelta

import httpx
import pytest

from tests.helpers import NOW, FakeIssueSource, RecordingTransport, make_issue
from velocityiq.api.dependencies import get_tech_debt_use_case
from velocityiq.application.tech_debt import TechDebtUseCase
from velocityiq.domain.ports.config import SonarQubeConfig
from velocityiq.infrastructure.sonarqube.client import SonarQubeClient
from velocityiq.main import app


def _use(use_case: TechDebtUseCase) -> None:
    app.dependency_overrides[get_tech_debt_use_case] = lambda: use_case


@pytest.mark.asyncio
async def test_scores_two_bug_file(api_client):
    _use(
        TechDebtUseCase(
            issues=FakeIssueSource(
                [
                    make_issue(component="a/X.ts", type="BUG", debt="10"),
                    make_issue(component="a/X.ts", type="BUG", debt="20"),
                ]
            ),
            clock=lambda: NOW,
        )
    )

    resp = await api_client.get("/api/tech-debt")

    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert data["count"] == 1
    assert data["items"][0] == {
        "id": "TD-001",
        "module": "A",
        "riskScore": 1.7,
        "codeQuality": 9.0,
        "changeFrequency": 1.0,
        "businessPriority": "P2",
        "bugCount": 2,
        "filesAffected": ["a/X.ts"],
        "lastUpdated": "5 minutes ago",
        "complexity": 15,
        "duplication": 0,
    }


@pytest.mark.asyncio
async def test_zero_issues(api_client):
    _use(TechDebtUseCase(issues=FakeIssueSource([]), clock=lambda: NOW))
    resp = await api_client.get("/api/tech-debt")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "count": 0, "items": []}


@pytest.mark.asyncio
async def test_missing_project_key_returns_400_without_network_call(api_client):
    transport = RecordingTransport(json={"issues": []})
    client = SonarQubeClient(
        SonarQubeConfig(url="https://sonar.example.com", token="tok", project_key=None),
        client=httpx.AsyncClient(transport=transport),
    )
    _use(TechDebtUseCase(issues=client))

    resp = await api_client.get("/api/tech-debt")

    assert resp.status_code == 400
    data = resp.json()
    assert data["success"] is False
    assert data["error"] == "SonarQube not configured"
    assert data["missing"] == {"url": False, "token": False, "projectKey": True}
    assert transport.requests == []


@pytest.mark.asyncio
async def test_upstream_status_returns_500_with_message(api_client):
    transport = RecordingTransport(status_code=503)
    client = SonarQubeClient(
        SonarQubeConfig(url="https://sonar.example.com", token="tok", project_key="shop"),
        client=httpx.AsyncClient(transport=transport),
    )
    _use(TechDebtUseCase(issues=client))

    resp = await api_client.get("/api/tech-debt")

    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "SonarQube issues API error: 503"}
    assert len(transport.requests) == 1


@pytest.mark.asyncio
async def test_unexpected_error_returns_500(api_client):
    _use(TechDebtUseCase(issues=FakeIssueSource(error=RuntimeError("parse failure"))))
    resp = await api_client.get("/api/tech-debt")
    assert resp.status_code == 500
    assert resp.json()["error"] == "parse failure"


@pytest.mark.asyncio
async def test_items_ranked_by_risk(api_client):
    issues = [make_issue(component="p:calm/a.ts", type="CODE_SMELL", age=timedelta(days=2))] + [
        make_issue(component="p:hot-spot/b.ts", type="VULNERABILITY") for _ in range(3)
    ]
    _use(TechDebtUseCase(issues=FakeIssueSource(issues), clock=lambda: NOW))

    items = (await api_client.get("/api/tech-debt")).json()["items"]

    assert [i["module"] for i in items] == ["Hot Spot", "Calm"]
    assert [i["id"] for i in items] == ["TD-002", "TD-001"]
    assert items[1]["lastUpdated"] == "2 days ago"
