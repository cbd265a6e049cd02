"""Formatting helper unit tests."""

from datetime import timedelta

import pytest

from tests.helpers import NOW
from velocityiq.domain.services.formatting import (
    file_name_from_component,
    format_module_name,
    module_from_path,
    round_half_up,
    round_to,
    sequential_id,
    time_ago,
)


class TestModuleNames:
    """Component key -> file name -> module name."""

    def test_strips_project_key(self):
        assert file_name_from_component("proj:src/api/user.ts") == "src/api/user.ts"
        assert file_name_from_component("src/api/user.ts") == "src/api/user.ts"
        assert file_name_from_component("proj:") == "proj:"

    def test_module_is_parent_directory(self):
        assert module_from_path("src/api/user.ts") == "api"
        assert module_from_path("a/X.ts") == "a"
        assert module_from_path("README.md") == "README.md"

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("a", "A"),
            ("user-service", "User Service"),
            ("data_access", "Data Access"),
            ("camelCase", "CamelCase"),
            ("README.md", "README.md"),
        ],
    )
    def test_format_module_name(self, raw, expected):
        assert format_module_name(raw) == expected


class TestTimeAgo:
    """Relative time buckets, floor division throughout."""

    @pytest.mark.parametrize(
        "age,expected",
        [
            (timedelta(seconds=30), "0 minutes ago"),
            (timedelta(minutes=5), "5 minutes ago"),
            (timedelta(minutes=59, seconds=59), "59 minutes ago"),
            (timedelta(minutes=60), "1 hours ago"),
            (timedelta(hours=23, minutes=59), "23 hours ago"),
            (timedelta(hours=24), "1 day ago"),
            (timedelta(hours=47), "1 day ago"),
            (timedelta(hours=48), "2 days ago"),
            (timedelta(days=30, hours=5), "30 days ago"),
        ],
    )
    def test_buckets(self, age, expected):
        assert time_ago(NOW - age, NOW) == expected

    def test_missing_date(self):
        assert time_ago(None, NOW) == "unknown"


class TestRounding:
    """Rounding matches the dashboard (toFixed / Math.round)."""

    def test_round_to_one_decimal(self):
        assert round_to(1.6666667) == 1.7
        assert round_to(0.25) == 0.3
        assert round_to(1.45) == 1.4  # binary value is just below 1.45
        assert round_to(9.0) == 9.0

    def test_round_half_up(self):
        assert round_half_up(7.5) == 8
        assert round_half_up(2.5) == 3
        assert round_half_up(2.4999) == 2
        assert round_half_up(-2.5) == -2


def test_sequential_id():
    assert sequential_id("TD", 1) == "TD-001"
    assert sequential_id("DEP", 42) == "DEP-042"
    assert sequential_id("TD", 1234) == "TD-1234"
