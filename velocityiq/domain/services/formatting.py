"""Formatting helpers: module names, relative time, ids, dashboard rounding."""

import math
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

UNKNOWN_TIME = "unknown"


def file_name_from_component(component: str) -> str:
    """Strip the project key prefix from a component key ("proj:src/a.ts" -> "src/a.ts")."""
    return component.split(":")[-1] or component


def module_from_path(file_name: str) -> str:
    """Parent directory name when the path has one, else the file name itself."""
    parts = file_name.split("/")
    return parts[-2] if len(parts) > 1 else parts[0]


def format_module_name(name: str) -> str:
    """Replace - and _ with spaces and upper-case the first letter of each word."""
    words = name.replace("-", " ").replace("_", " ").split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def time_ago(moment: datetime | None, now: datetime) -> str:
    """Relative time bucket using floor division at every step."""
    if moment is None:
        return UNKNOWN_TIME
    diff_ms = math.floor((now - moment).total_seconds() * 1000)
    minutes = diff_ms // 60_000
    hours = minutes // 60
    days = hours // 24

    if minutes < 60:
        return f"{minutes} minutes ago"
    if hours < 24:
        return f"{hours} hours ago"
    if days == 1:
        return "1 day ago"
    return f"{days} days ago"


def sequential_id(prefix: str, number: int) -> str:
    """Zero-padded sequential id, e.g. TD-001."""
    return f"{prefix}-{number:03d}"


def round_to(value: float, digits: int = 1) -> float:
    """Round the exact binary value half-up, matching the dashboard's toFixed output."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_half_up(value: float) -> int:
    """Nearest integer; .5 goes towards positive infinity."""
    return math.floor(value + 0.5)
