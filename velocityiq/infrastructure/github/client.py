"""GitHub adapter - repository contents as a FileTreePort."""

import logging

import httpx

from velocityiq.domain.entities.issue import FileEntry
from velocityiq.domain.errors import ConfigurationError
from velocityiq.domain.ports.config import GitHubConfig
from velocityiq.infrastructure.services.http_pool import get_json

logger = logging.getLogger(__name__)

SERVICE = "GitHub"
MAX_FILES = 500


class GitHubClient:
    """Lists files of one repository directory through the contents API."""

    def __init__(self, config: GitHubConfig, client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        self._client = client

    def _require_config(self) -> None:
        if not self._config.is_configured:
            raise ConfigurationError("GitHub repository not configured", missing=self._config.missing())

    def _contents_url(self) -> str:
        base = self._config.api_url.rstrip("/")
        url = f"{base}/repos/{self._config.owner}/{self._config.repo}/contents"
        path = self._config.path.strip("/")
        return f"{url}/{path}" if path else url

    async def list_files(self) -> list[FileEntry]:
        """Fetch file entries (directories skipped), at most MAX_FILES."""
        self._require_config()
        data = await get_json(
            self._contents_url(),
            service=SERVICE,
            headers={
                "Authorization": f"Bearer {self._config.token}",
                "Accept": "application/vnd.github+json",
            },
            timeout=self._config.timeout,
            client=self._client,
            error_label="GitHub contents API",
        )
        if not isinstance(data, list):
            # A file path instead of a directory returns a single object
            data = [data] if isinstance(data, dict) else []
        entries = [FileEntry.model_validate(item) for item in data if isinstance(item, dict)]
        files = [e for e in entries if e.is_file]
        logger.debug("Listed %d files (%d entries) in %s/%s", len(files), len(entries), self._config.owner, self._config.repo)
        return files[:MAX_FILES]
