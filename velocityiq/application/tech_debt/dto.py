"""Tech-debt DTOs."""

from velocityiq.domain.entities.tech_debt import CamelModel, TechDebtItem


class TechDebtResponse(CamelModel):
    """Ranked tech-debt items for the configured project."""

    success: bool = True
    count: int
    items: list[TechDebtItem]
