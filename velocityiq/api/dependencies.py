"""FastAPI dependencies - resolved from the DI container."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from velocityiq.api.container import get_container
from velocityiq.application.dependencies import DependencyUseCase
from velocityiq.application.tech_debt import TechDebtUseCase
from velocityiq.domain.ports.config import AppConfig
from velocityiq.infrastructure.sonarqube.client import SonarQubeClient

limiter = Limiter(key_func=get_remote_address)


def api_rate_limit() -> str:
    """Per-client limit for /api routes, from security.rate_limit_requests_per_minute."""
    return f"{get_container().config.security.rate_limit_requests_per_minute}/minute"


def get_config() -> AppConfig:
    return get_container().config


def get_sonarqube_client() -> SonarQubeClient:
    return get_container().sonarqube


def get_tech_debt_use_case() -> TechDebtUseCase:
    return get_container().tech_debt_use_case


def get_dependency_use_case() -> DependencyUseCase:
    return get_container().dependency_use_case
