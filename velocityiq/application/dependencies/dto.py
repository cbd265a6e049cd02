"""Dependency suggestion DTOs."""

from velocityiq.domain.entities.tech_debt import CamelModel, Dependency


class DependencyResponse(CamelModel):
    """Suggested dependencies between co-located files."""

    success: bool = True
    count: int
    dependencies: list[Dependency]
