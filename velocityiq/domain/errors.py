"""Domain errors raised by adapters and mapped to HTTP responses by the API layer."""


class VelocityIQError(Exception):
    """Base error for VelocityIQ."""


class ConfigurationError(VelocityIQError):
    """Required settings are absent. Raised before any network call."""

    def __init__(self, message: str, missing: dict[str, bool] | None = None) -> None:
        super().__init__(message)
        self.missing = missing or {}


class UpstreamError(VelocityIQError):
    """External service returned a non-success status or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
