"""Tests for the DI container wiring."""

from velocityiq.api.container import Container
from velocityiq.domain.ports.config import AppConfig, DependenciesConfig
from velocityiq.infrastructure.github.client import GitHubClient
from velocityiq.infrastructure.sonarqube.client import SonarQubeClient


def test_sonarqube_is_default_file_source():
    container = Container(config=AppConfig())
    assert isinstance(container.file_source, SonarQubeClient)
    assert container.issue_source is container.sonarqube


def test_github_file_source():
    container = Container(config=AppConfig(dependencies=DependenciesConfig(file_source="github")))
    assert isinstance(container.file_source, GitHubClient)
    assert container.dependency_source_name == "github"


def test_unknown_file_source_falls_back_to_sonarqube():
    container = Container(config=AppConfig(dependencies=DependenciesConfig(file_source="gitlab")))
    assert container.dependency_source_name == "sonarqube"


def test_reset_drops_cached_instances():
    container = Container(config=AppConfig())
    first = container.tech_debt_use_case
    container.reset()
    assert container.tech_debt_use_case is not first
