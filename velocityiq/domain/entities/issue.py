"""Input schemas for third-party payloads (code-quality issues, file entries)."""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

UNKNOWN_COMPONENT = "Unknown"


class IssueType(str, Enum):
    """Issue types the scoring engine counts."""

    BUG = "BUG"
    VULNERABILITY = "VULNERABILITY"
    CODE_SMELL = "CODE_SMELL"


class Issue(BaseModel):
    """Unresolved static-analysis issue as returned by the issues search API.

    Other issue types (e.g. SECURITY_HOTSPOT) are kept: they count towards the
    group size but not towards any of the typed counters.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    component: str = UNKNOWN_COMPONENT
    type: str = ""
    debt: str | None = None
    creation_date: datetime | None = Field(default=None, alias="creationDate")

    @field_validator("component", mode="before")
    @classmethod
    def _default_component(cls, value: object) -> str:
        if value is None or (isinstance(value, str) and not value.strip()):
            return UNKNOWN_COMPONENT
        return value if isinstance(value, str) else str(value)

    @field_validator("type", mode="before")
    @classmethod
    def _type_as_text(cls, value: object) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("debt", mode="before")
    @classmethod
    def _debt_as_text(cls, value: object) -> object:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("creation_date", mode="before")
    @classmethod
    def _parse_creation_date(cls, value: object) -> datetime | None:
        if isinstance(value, datetime):
            return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
        if not isinstance(value, str) or not value.strip():
            return None
        return _parse_timestamp(value.strip())


class FileEntry(BaseModel):
    """File entry from a component tree or repository contents listing."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    path: str | None = None
    type: str = "file"

    @property
    def location(self) -> str:
        """Path used by the dependency heuristic: path when present, else name."""
        return self.path or self.name

    @property
    def is_file(self) -> bool:
        return self.type == "file"


def _parse_timestamp(raw: str) -> datetime | None:
    """Parse ISO 8601 timestamps, including SonarQube's `+0000` offsets."""
    text = raw
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    elif len(text) > 5 and text[-5] in "+-" and text[-4:].isdigit() and ":" not in text[-5:]:
        text = f"{text[:-2]}:{text[-2:]}"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
