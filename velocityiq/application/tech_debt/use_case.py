"""Tech-debt use case - fetch issues, score components, rank by risk."""

from collections.abc import Callable
from datetime import datetime, timezone

import structlog

from velocityiq.application.tech_debt.dto import TechDebtResponse
from velocityiq.domain.ports.sources import IssueSourcePort
from velocityiq.domain.services.tech_debt import build_tech_debt_items

log = structlog.get_logger()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TechDebtUseCase:
    """Recomputes the tech-debt ranking from scratch on every call."""

    def __init__(
        self,
        issues: IssueSourcePort,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._issues = issues
        self._clock = clock

    async def execute(self) -> TechDebtResponse:
        """Fetch unresolved issues and return items sorted by descending risk.

        ConfigurationError and UpstreamError from the source propagate unchanged.
        """
        issues = await self._issues.search_issues()
        items = build_tech_debt_items(issues, now=self._clock())
        log.info(
            "tech_debt_scored",
            issues=len(issues),
            items=len(items),
            top_risk=items[0].risk_score if items else None,
        )
        return TechDebtResponse(count=len(items), items=items)
