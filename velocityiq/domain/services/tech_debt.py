"""Tech-debt engine: group issues, score each file, rank by risk.

Pure function of the issues and the reference time; no I/O.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime

from velocityiq.domain.entities.issue import Issue
from velocityiq.domain.entities.tech_debt import TechDebtItem
from velocityiq.domain.services.formatting import (
    file_name_from_component,
    format_module_name,
    module_from_path,
    round_half_up,
    round_to,
    sequential_id,
    time_ago,
)
from velocityiq.domain.services.grouping import group_by_component
from velocityiq.domain.services.risk_scoring import calculate_risk_score, derive_metrics

ID_PREFIX = "TD"


def latest_creation_date(issues: Sequence[Issue]) -> datetime | None:
    dates = [i.creation_date for i in issues if i.creation_date is not None]
    return max(dates) if dates else None


def score_component(item_id: str, component: str, issues: Sequence[Issue], now: datetime) -> TechDebtItem:
    """Build the tech-debt item for one component group."""
    file_name = file_name_from_component(component)
    metrics = derive_metrics(issues)
    risk = calculate_risk_score(
        metrics.code_quality,
        metrics.change_frequency,
        metrics.priority,
        metrics.bugs,
    )
    return TechDebtItem(
        id=item_id,
        module=format_module_name(module_from_path(file_name)),
        risk_score=round_to(risk),
        code_quality=round_to(metrics.code_quality),
        change_frequency=round_to(metrics.change_frequency),
        business_priority=metrics.priority,
        bug_count=metrics.bug_count,
        files_affected=[file_name],
        last_updated=time_ago(latest_creation_date(issues), now),
        complexity=round_half_up(metrics.avg_complexity),
        duplication=metrics.duplication,
    )


def rank_by_risk(items: Iterable[TechDebtItem]) -> list[TechDebtItem]:
    """Highest risk first; equal scores keep their incoming order."""
    return sorted(items, key=lambda item: item.risk_score, reverse=True)


def build_tech_debt_items(issues: Iterable[Issue], now: datetime) -> list[TechDebtItem]:
    """Score every component and rank the results.

    Ids follow grouping order and are assigned before ranking, so TD-001 is the
    first component seen, not necessarily the riskiest.
    """
    groups = group_by_component(issues)
    items = [
        score_component(sequential_id(ID_PREFIX, number), component, component_issues, now)
        for number, (component, component_issues) in enumerate(groups.items(), start=1)
    ]
    return rank_by_risk(items)
