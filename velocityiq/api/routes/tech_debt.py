"""Tech-debt API - risk-ranked files from unresolved code-quality issues."""

import structlog
from fastapi import APIRouter, Depends, Request

from velocityiq.api.dependencies import api_rate_limit, get_tech_debt_use_case, limiter
from velocityiq.api.errors import configuration_error_response, failure_response
from velocityiq.application.tech_debt import TechDebtUseCase
from velocityiq.domain.errors import ConfigurationError

log = structlog.get_logger()

router = APIRouter(prefix="/api", tags=["tech-debt"])


@router.get("/tech-debt")
@limiter.limit(api_rate_limit)
async def get_tech_debt(
    request: Request,
    use_case: TechDebtUseCase = Depends(get_tech_debt_use_case),
):
    """Score every file with unresolved issues and rank by descending risk.

    200: {success, count, items}. 400 when SonarQube is not configured,
    500 with the underlying message on any upstream or processing failure.
    """
    try:
        result = await use_case.execute()
    except ConfigurationError as e:
        log.warning("tech_debt_not_configured", missing=e.missing)
        return configuration_error_response(e)
    except Exception as e:
        log.exception("tech_debt_failed")
        return failure_response(e)
    return result.model_dump(by_alias=True, mode="json")
