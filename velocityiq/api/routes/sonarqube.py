"""SonarQube API - connection check against project measures."""

import structlog
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from velocityiq.api.dependencies import api_rate_limit, get_sonarqube_client, limiter
from velocityiq.api.errors import configuration_error_response, failure_response
from velocityiq.domain.entities.tech_debt import CamelModel
from velocityiq.domain.errors import ConfigurationError
from velocityiq.infrastructure.sonarqube.client import SonarQubeClient

log = structlog.get_logger()

router = APIRouter(prefix="/api/sonarqube", tags=["sonarqube"])


class Measure(BaseModel):
    """Single project measure."""

    metric: str
    value: str | None = None


class ConnectionStatus(CamelModel):
    """Result of a successful connection check."""

    success: bool = True
    connected: bool = True
    project_key: str
    organization: str | None = None
    project_name: str | None = None
    metrics: list[Measure]


@router.get("/test")
@limiter.limit(api_rate_limit)
async def test_connection(
    request: Request,
    client: SonarQubeClient = Depends(get_sonarqube_client),
):
    """Verify credentials by reading bugs, vulnerabilities, coverage and related measures."""
    try:
        component = await client.project_measures()
    except ConfigurationError as e:
        return configuration_error_response(e, connected=False)
    except Exception as e:
        log.exception("sonarqube_connection_failed")
        return failure_response(e, connected=False)

    status = ConnectionStatus(
        project_key=client.config.project_key or "",
        organization=client.config.organization or None,
        project_name=component.get("name"),
        metrics=[Measure.model_validate(m) for m in component.get("measures") or []],
    )
    log.info("sonarqube_connected", project=status.project_key, measures=len(status.metrics))
    return status.model_dump(by_alias=True)
