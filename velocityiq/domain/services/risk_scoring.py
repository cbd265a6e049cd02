"""Metric derivation and risk scoring for one component group.

All scores live on a 0..10 scale. The risk score is a weighted sum:

    10 * (0.4 * qualityRisk + 0.2 * changeRisk + 0.2 * bugRisk + 0.2 * priorityWeight / 3)
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from velocityiq.domain.entities.issue import Issue, IssueType
from velocityiq.domain.entities.tech_debt import BusinessPriority

QUALITY_WEIGHT = 0.4
CHANGE_WEIGHT = 0.2
BUG_WEIGHT = 0.2
PRIORITY_WEIGHT = 0.2

# Penalty per issue subtracted from a perfect code-quality score of 10
BUG_PENALTY = 0.5
VULNERABILITY_PENALTY = 0.8
CODE_SMELL_PENALTY = 0.2

CHANGE_FREQUENCY_PER_ISSUE = 0.5
DUPLICATION_PER_SMELL = 2

_PRIORITY_WEIGHTS = {
    BusinessPriority.P0: 3,
    BusinessPriority.P1: 2,
    BusinessPriority.P2: 1,
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class ComponentMetrics:
    """Unrounded metrics derived from one component's issues."""

    issue_count: int
    bugs: int
    vulnerabilities: int
    code_smells: int
    avg_complexity: float
    code_quality: float
    change_frequency: float
    priority: BusinessPriority
    duplication: int

    @property
    def bug_count(self) -> int:
        """Bugs plus vulnerabilities, as shown on the dashboard."""
        return self.bugs + self.vulnerabilities


def parse_debt_minutes(debt: str | None) -> int:
    """Leading integer of a debt estimate ("5min" -> 5, "1h 30min" -> 1); 0 if none."""
    if not debt:
        return 0
    match = _LEADING_INT.match(debt)
    return int(match.group(1)) if match else 0


def code_quality_score(bugs: int, vulnerabilities: int, code_smells: int) -> float:
    penalty = bugs * BUG_PENALTY + vulnerabilities * VULNERABILITY_PENALTY + code_smells * CODE_SMELL_PENALTY
    return max(0.0, 10 - penalty)


def change_frequency_score(issue_count: int) -> float:
    """Churn proxy: half a point per issue, capped at 10."""
    return min(10.0, issue_count * CHANGE_FREQUENCY_PER_ISSUE)


def classify_priority(bugs: int, vulnerabilities: int) -> BusinessPriority:
    """Any vulnerability forces P0, regardless of the bug count."""
    if bugs > 5 or vulnerabilities > 0:
        return BusinessPriority.P0
    if bugs > 2:
        return BusinessPriority.P1
    return BusinessPriority.P2


def priority_weight(priority: BusinessPriority) -> int:
    return _PRIORITY_WEIGHTS[priority]


def calculate_risk_score(
    code_quality: float,
    change_frequency: float,
    priority: BusinessPriority,
    bug_count: int,
) -> float:
    """Weighted 0..10 risk score. bug_count is the number of bugs only."""
    quality_risk = (10 - code_quality) / 10
    change_risk = change_frequency / 10
    bug_risk = min(1.0, bug_count / 10)
    return (
        quality_risk * QUALITY_WEIGHT
        + change_risk * CHANGE_WEIGHT
        + bug_risk * BUG_WEIGHT
        + priority_weight(priority) * PRIORITY_WEIGHT / 3
    ) * 10


def derive_metrics(issues: Sequence[Issue]) -> ComponentMetrics:
    """Count issue types and derive quality, churn, complexity and duplication."""
    bugs = sum(1 for i in issues if i.type == IssueType.BUG.value)
    vulnerabilities = sum(1 for i in issues if i.type == IssueType.VULNERABILITY.value)
    code_smells = sum(1 for i in issues if i.type == IssueType.CODE_SMELL.value)
    total_debt = sum(parse_debt_minutes(i.debt) for i in issues)

    return ComponentMetrics(
        issue_count=len(issues),
        bugs=bugs,
        vulnerabilities=vulnerabilities,
        code_smells=code_smells,
        avg_complexity=total_debt / max(1, len(issues)),
        code_quality=code_quality_score(bugs, vulnerabilities, code_smells),
        change_frequency=change_frequency_score(len(issues)),
        priority=classify_priority(bugs, vulnerabilities),
        duplication=min(100, code_smells * DUPLICATION_PER_SMELL),
    )
