"""Tests for the report display numbers."""

import math

import pytest

from worklog.model.report import ActivityReport
from worklog.service.report_view import (
    average_hours_per_day,
    build_report_view,
    project_bar_fraction,
    tag_emphasis,
)


def make_report(**fields: object) -> ActivityReport:
    """Build an activity report with empty defaults."""
    report: ActivityReport = {
        "period_start": "2024-03-01",
        "period_end": "2024-03-31",
        "total_entries": 0,
        "total_hours": 0.0,
        "projects_summary": [],
        "tags_summary": [],
        "activity_types": {},
        "daily_breakdown": {},
        "monthly_details": [],
    }
    report.update(fields)  # type: ignore[typeddict-item]
    return report


def test_tag_emphasis_grows_and_caps() -> None:
    """Emphasis grows two units per use up to the cap."""
    assert tag_emphasis(0) == 10
    assert tag_emphasis(1) == 12
    assert tag_emphasis(2) == 14
    assert tag_emphasis(3) == 16
    assert tag_emphasis(50) == 16
    assert tag_emphasis(2, base=8, per_unit=3, cap=20) == 14


def test_average_hours_per_day() -> None:
    """Hours are spread over the days with entries."""
    report = make_report(
        total_hours=9.0, daily_breakdown={"2024-03-01": 4.0, "2024-03-02": 5.0}
    )
    assert average_hours_per_day(report) == pytest.approx(4.5)
    assert average_hours_per_day(make_report()) == 0.0


def test_project_bar_fraction_with_no_hours() -> None:
    """Nothing logged gives empty bars instead of a division error."""
    project = {"name": "Core", "entries": 2, "hours": 0.0, "color": "#000"}
    assert project_bar_fraction(project, 0.0) == 0.0  # type: ignore[arg-type]
    assert project_bar_fraction(project, math.nan) == 0.0  # type: ignore[arg-type]


def test_build_report_view_orders_and_scales() -> None:
    """Projects, tags and activity types are sorted for display."""
    report = make_report(
        total_entries=4,
        total_hours=8.0,
        projects_summary=[
            {"name": "Claims", "entries": 1, "hours": 2.0, "color": "#ffc107"},
            {"name": "Core", "entries": 3, "hours": 6.0, "color": "#6c757d"},
        ],
        tags_summary=[
            {"name": "api", "count": 1, "color": "#111111"},
            {"name": "bug", "count": 3, "color": "#dc3545"},
            {"name": "alpha", "count": 1, "color": "#222222"},
        ],
        activity_types={"meeting": 1, "development": 3},
        daily_breakdown={"2024-03-01": 8.0},
    )

    view = build_report_view(report)

    assert [bar["name"] for bar in view["project_bars"]] == ["Core", "Claims"]
    assert view["project_bars"][0]["fraction"] == pytest.approx(0.75)
    assert [item["name"] for item in view["tag_cloud"]] == ["bug", "alpha", "api"]
    assert view["tag_cloud"][0]["emphasis"] == 16
    assert view["tag_cloud"][1]["emphasis"] == 12
    assert view["activity_types"] == [
        {"entry_type": "development", "count": 3},
        {"entry_type": "meeting", "count": 1},
    ]
    assert view["average_hours_per_day"] == pytest.approx(8.0)


def test_empty_report_view_has_only_finite_numbers() -> None:
    """An empty report renders zeros, never NaN or infinity."""
    report = make_report(
        projects_summary=[
            {"name": "Core", "entries": 1, "hours": 0.0, "color": "#6c757d"}
        ]
    )
    view = build_report_view(report)

    numbers = [view["total_hours"], view["average_hours_per_day"]]
    numbers += [bar["fraction"] for bar in view["project_bars"]]
    assert all(math.isfinite(number) for number in numbers)
    assert view["project_bars"][0]["fraction"] == 0.0


def test_build_report_view_leaves_report_untouched() -> None:
    """Building the view does not reorder the report."""
    projects = [
        {"name": "B", "entries": 1, "hours": 1.0, "color": "#000"},
        {"name": "A", "entries": 1, "hours": 2.0, "color": "#000"},
    ]
    report = make_report(total_hours=3.0, projects_summary=projects)
    build_report_view(report)
    assert [project["name"] for project in report["projects_summary"]] == ["B", "A"]
