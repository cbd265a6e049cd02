"""Output entities: technical-debt items and suggested dependencies."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BusinessPriority(str, Enum):
    """Coarse urgency bucket derived from bug and vulnerability counts."""

    P0 = "P0"
    P1 = "P1"
    P2 = "P2"


class CamelModel(BaseModel):
    """Base for payloads serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TechDebtItem(CamelModel):
    """Risk-scored file. One item per component group."""

    id: str
    module: str
    risk_score: float
    code_quality: float
    change_frequency: float
    business_priority: BusinessPriority
    bug_count: int
    files_affected: list[str]
    last_updated: str
    complexity: int
    duplication: int


class TaskRef(CamelModel):
    """Endpoint of a suggested dependency."""

    id: str
    title: str
    assignee: str = "Auto-detected"
    status: str = "Active"


class Dependency(CamelModel):
    """Suggested dependency between two files of the same folder."""

    id: str
    source: TaskRef
    target: TaskRef
    type: Literal["suggested"] = "suggested"
    status: Literal["pending"] = "pending"
    confidence: int
    reasons: list[str]
    detected_date: str = "Just now"
    shared_files: list[str]
