"""Configuration models for every config section."""

from pydantic import BaseModel, ConfigDict


def _blank(value: str | None) -> bool:
    return not value or not value.strip()


class SonarQubeConfig(BaseModel):
    """SonarQube (or SonarCloud) connection."""

    url: str | None = None
    token: str | None = None
    project_key: str | None = None
    organization: str | None = None  # Required by SonarCloud, optional for self-hosted
    page_size: int = 500
    timeout: float = 30.0

    model_config = ConfigDict(extra="ignore")

    def missing(self) -> dict[str, bool]:
        """Required fields and whether each is absent."""
        return {
            "url": _blank(self.url),
            "token": _blank(self.token),
            "projectKey": _blank(self.project_key),
        }

    @property
    def is_configured(self) -> bool:
        return not any(self.missing().values())


class GitHubConfig(BaseModel):
    """GitHub repository used as a file source."""

    api_url: str = "https://api.github.com"
    owner: str | None = None
    repo: str | None = None
    token: str | None = None
    path: str = ""  # Directory to list; empty = repository root
    timeout: float = 30.0

    model_config = ConfigDict(extra="ignore")

    def missing(self) -> dict[str, bool]:
        """Required fields and whether each is absent."""
        return {
            "owner": _blank(self.owner),
            "repo": _blank(self.repo),
            "token": _blank(self.token),
        }

    @property
    def is_configured(self) -> bool:
        return not any(self.missing().values())


class DependenciesConfig(BaseModel):
    """Dependency suggestion settings."""

    file_source: str = "sonarqube"  # "sonarqube" | "github"
    # Fixed seed makes confidence values reproducible. None = fresh randomness per request.
    confidence_seed: int | None = None


class SecurityConfig(BaseModel):
    """Security settings."""

    rate_limit_requests_per_minute: int = 60
    cors_origins: list[str] = ["http://localhost:3000"]


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False  # Auto-reload on code changes (development only)


class AppConfig(BaseModel):
    """Full application configuration."""

    server: ServerConfig = ServerConfig()
    sonarqube: SonarQubeConfig = SonarQubeConfig()
    github: GitHubConfig = GitHubConfig()
    dependencies: DependenciesConfig = DependenciesConfig()
    security: SecurityConfig = SecurityConfig()
    log_level: str = "INFO"
    # Log file: path relative to cwd or absolute. Empty = only stdout. Rotation when file exceeds max_mb.
    log_file: str = ""
    log_rotation_max_mb: int = 5
    log_rotation_backups: int = 3

