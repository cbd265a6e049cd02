"""Error payloads shared by the API routes."""

from fastapi.responses import JSONResponse

from velocityiq.domain.errors import ConfigurationError


def configuration_error_response(error: ConfigurationError, **extra: object) -> JSONResponse:
    """400: required settings are missing. No network call was made."""
    return JSONResponse(
        status_code=400,
        content={"success": False, **extra, "error": str(error), "missing": error.missing},
    )


def failure_response(error: Exception, **extra: object) -> JSONResponse:
    """500: upstream or processing failure, message passed through as-is."""
    return JSONResponse(
        status_code=500,
        content={"success": False, **extra, "error": str(error)},
    )
