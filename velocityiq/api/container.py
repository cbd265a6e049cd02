"""Dependency Injection Container - centralized service management."""

from functools import cached_property

from velocityiq.application.dependencies import DependencyUseCase
from velocityiq.application.tech_debt import TechDebtUseCase
from velocityiq.domain.ports.config import AppConfig
from velocityiq.domain.ports.sources import FileTreePort, IssueSourcePort
from velocityiq.infrastructure.config import load_config
from velocityiq.infrastructure.github.client import GitHubClient
from velocityiq.infrastructure.sonarqube.client import SonarQubeClient

FILE_SOURCES = ("sonarqube", "github")


class Container:
    """Dependency Injection Container with lazy initialization.

    All dependencies are created on first access and cached. Clients hold no
    per-request state; HTTP connections come from the shared pool.

    Usage:
        container = Container()
        tech_debt = container.tech_debt_use_case
    """

    def __init__(self, config: AppConfig | None = None):
        """Initialize container with optional config override."""
        self._config_override = config

    @cached_property
    def config(self) -> AppConfig:
        """Application configuration."""
        if self._config_override is not None:
            return self._config_override
        return load_config()

    @cached_property
    def sonarqube(self) -> SonarQubeClient:
        return SonarQubeClient(self.config.sonarqube)

    @cached_property
    def github(self) -> GitHubClient:
        return GitHubClient(self.config.github)

    @property
    def dependency_source_name(self) -> str:
        source = self.config.dependencies.file_source
        return source if source in FILE_SOURCES else "sonarqube"

    @cached_property
    def issue_source(self) -> IssueSourcePort:
        return self.sonarqube

    @cached_property
    def file_source(self) -> FileTreePort:
        """File tree for dependency suggestions, selected by dependencies.file_source."""
        if self.dependency_source_name == "github":
            return self.github
        return self.sonarqube

    @cached_property
    def tech_debt_use_case(self) -> TechDebtUseCase:
        return TechDebtUseCase(issues=self.issue_source)

    @cached_property
    def dependency_use_case(self) -> DependencyUseCase:
        return DependencyUseCase(
            files=self.file_source,
            seed=self.config.dependencies.confidence_seed,
        )

    def reset(self) -> None:
        """Reset all cached instances (useful for testing)."""
        for attr in list(self.__dict__.keys()):
            if not attr.startswith("_"):
                delattr(self, attr)


# Global container instance
_container: Container | None = None


def get_container() -> Container:
    """Get or create global container instance."""
    global _container
    if _container is None:
        _container = Container()
    return _container


def reset_container() -> None:
    """Reset global container (for testing)."""
    global _container
    if _container:
        _container.reset()
    _container = None
