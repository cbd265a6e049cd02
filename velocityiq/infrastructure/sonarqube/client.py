"""SonarQube adapter - implements IssueSourcePort and FileTreePort."""

import logging

import httpx

from velocityiq.domain.entities.issue import FileEntry, Issue
from velocityiq.domain.errors import ConfigurationError
from velocityiq.domain.ports.config import SonarQubeConfig
from velocityiq.infrastructure.services.http_pool import get_json

logger = logging.getLogger(__name__)

SERVICE = "SonarQube"
MEASURE_KEYS = (
    "bugs",
    "vulnerabilities",
    "code_smells",
    "coverage",
    "duplicated_lines_density",
    "complexity",
)


class SonarQubeClient:
    """Read-only SonarQube Web API client.

    Every call checks configuration first and raises ConfigurationError
    without touching the network when url, token or project key is missing.
    """

    def __init__(self, config: SonarQubeConfig, client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        self._client = client

    @property
    def config(self) -> SonarQubeConfig:
        return self._config

    def _require_config(self) -> None:
        if not self._config.is_configured:
            raise ConfigurationError("SonarQube not configured", missing=self._config.missing())

    def _url(self, path: str) -> str:
        return f"{(self._config.url or '').rstrip('/')}{path}"

    def _headers(self) -> dict:
        return {"Authorization": f"Bearer {self._config.token}"}

    def _with_organization(self, params: dict) -> dict:
        if self._config.organization:
            params["organization"] = self._config.organization
        return params

    async def _get(self, path: str, params: dict, label: str) -> dict:
        data = await get_json(
            self._url(path),
            service=SERVICE,
            params=params,
            headers=self._headers(),
            timeout=self._config.timeout,
            client=self._client,
            error_label=label,
        )
        return data if isinstance(data, dict) else {}

    async def search_issues(self) -> list[Issue]:
        """Fetch one page of unresolved issues for the project."""
        self._require_config()
        params = self._with_organization(
            {
                "componentKeys": self._config.project_key,
                "resolved": "false",
                "ps": self._config.page_size,
            }
        )
        data = await self._get("/api/issues/search", params, "SonarQube issues API")
        raw_issues = data.get("issues") or []
        logger.debug("Fetched %d of %s issues for %s", len(raw_issues), data.get("total"), self._config.project_key)
        return [Issue.model_validate(raw) for raw in raw_issues]

    async def list_files(self) -> list[FileEntry]:
        """Fetch one page of file components from the project's component tree."""
        self._require_config()
        params = {
            "component": self._config.project_key,
            "qualifiers": "FIL",
            "ps": self._config.page_size,
        }
        data = await self._get("/api/components/tree", params, "SonarQube components API")
        components = data.get("components") or []
        return [
            FileEntry(name=c.get("name") or "", path=c.get("path"), type="file")
            for c in components
            if isinstance(c, dict)
        ]

    async def project_measures(self) -> dict:
        """Fetch project-level measures; used to verify the connection."""
        self._require_config()
        params = self._with_organization(
            {
                "component": self._config.project_key,
                "metricKeys": ",".join(MEASURE_KEYS),
            }
        )
        data = await self._get("/api/measures/component", params, "SonarQube measures API")
        return data.get("component") or {}
