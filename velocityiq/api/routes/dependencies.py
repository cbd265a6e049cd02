"""Dependencies API - suggested links between co-located files."""

import structlog
from fastapi import APIRouter, Depends, Request

from velocityiq.api.dependencies import api_rate_limit, get_dependency_use_case, limiter
from velocityiq.api.errors import configuration_error_response, failure_response
from velocityiq.application.dependencies import DependencyUseCase
from velocityiq.domain.errors import ConfigurationError

log = structlog.get_logger()

router = APIRouter(prefix="/api", tags=["dependencies"])


@router.get("/dependencies")
@limiter.limit(api_rate_limit)
async def get_dependencies(
    request: Request,
    use_case: DependencyUseCase = Depends(get_dependency_use_case),
):
    """Suggest a dependency for each neighbouring pair of files in a folder."""
    try:
        result = await use_case.execute()
    except ConfigurationError as e:
        log.warning("dependencies_not_configured", missing=e.missing)
        return configuration_error_response(e)
    except Exception as e:
        log.exception("dependencies_failed")
        return failure_response(e)
    return result.model_dump(by_alias=True, mode="json")
