# This test file checks that every tooltip key referenced by the dashboard exists.
# It exists so metric and chart explanations do not silently regress during UI changes.

from __future__ import annotations

import re
from pathlib import Path

from src.dashboard_user.tooltips import TOOLTIPS

DASHBOARD_DIR = Path(__file__).resolve().parents[2] / "src" / "dashboard_user"
TOOLTIP_REFERENCE_RE = re.compile(r"""tooltips\[["']([a-z_]+)["']\]""")


def _referenced_keys() -> set[str]:
    keys: set[str] = set()
    for path in DASHBOARD_DIR.rglob("*.py"):
        keys.update(TOOLTIP_REFERENCE_RE.findall(path.read_text(encoding="utf-8")))
    return keys


def test_required_tooltip_keys_exist() -> None:
    required_keys = {
        "occupancy_rate_card",
        "adr_card",
        "revpar_card",
        "expected_revenue_card",
        "revenue_by_month_chart",
        "weekday_occupancy_chart",
        "calendar_heatmap",
        "strategy_selector",
        "recommendation_table",
        "competitor_position_card",
        "enrichment_progress",
        "quick_suggestion",
    }

    missing_keys = required_keys.difference(TOOLTIPS.keys())
    assert not missing_keys

    for key in required_keys:
        assert isinstance(TOOLTIPS[key], str)
        assert TOOLTIPS[key].strip()


def test_every_referenced_tooltip_is_defined() -> None:
    referenced = _referenced_keys()

    assert referenced
    assert not referenced.difference(TOOLTIPS.keys())
