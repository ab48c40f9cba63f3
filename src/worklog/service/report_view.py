# SPDX-License-Identifier: MIT

import math

from worklog.model.report import (
    ActivityReport,
    ActivityTypeRow,
    ProjectBar,
    ProjectSummary,
    ReportView,
    TagCloudItem,
)

TAG_EMPHASIS_BASE = 10
TAG_EMPHASIS_PER_UNIT = 2
TAG_EMPHASIS_MAX = 16


def _finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def average_hours_per_day(report: ActivityReport) -> float:
    """Total hours spread over the days that have breakdown data, 0 without any."""
    days = len(report["daily_breakdown"])
    if days == 0:
        return 0.0
    return _finite_or_zero(report["total_hours"] / max(1, days))


def project_bar_fraction(project: ProjectSummary, total_hours: float) -> float:
    """Share of ``total_hours`` spent on ``project``, 0 when nothing was logged."""
    if total_hours == 0 or not math.isfinite(total_hours):
        return 0.0
    return _finite_or_zero(project["hours"] / total_hours)


def tag_emphasis(
    count: int,
    base: int = TAG_EMPHASIS_BASE,
    per_unit: int = TAG_EMPHASIS_PER_UNIT,
    cap: int = TAG_EMPHASIS_MAX,
) -> int:
    return min(cap, base + count * per_unit)


def build_report_view(
    report: ActivityReport,
    emphasis_base: int = TAG_EMPHASIS_BASE,
    emphasis_per_unit: int = TAG_EMPHASIS_PER_UNIT,
    emphasis_max: int = TAG_EMPHASIS_MAX,
) -> ReportView:
    """
    Derive the display numbers for an activity report.

    Projects are ordered by hours, tags by count and activity types by count,
    each descending with the name as tie breaker. The report itself is not
    modified.
    """
    total_hours = report["total_hours"]

    project_bars: list[ProjectBar] = [
        {
            "name": project["name"],
            "entries": project["entries"],
            "hours": project["hours"],
            "color": project["color"],
            "fraction": project_bar_fraction(project, total_hours),
        }
        for project in sorted(
            report["projects_summary"], key=lambda p: (-p["hours"], p["name"])
        )
    ]

    tag_cloud: list[TagCloudItem] = [
        {
            "name": tag["name"],
            "count": tag["count"],
            "color": tag["color"],
            "emphasis": tag_emphasis(
                tag["count"], emphasis_base, emphasis_per_unit, emphasis_max
            ),
        }
        for tag in sorted(report["tags_summary"], key=lambda t: (-t["count"], t["name"]))
    ]

    activity_types: list[ActivityTypeRow] = [
        {"entry_type": entry_type, "count": count}
        for entry_type, count in sorted(
            report["activity_types"].items(), key=lambda item: (-item[1], item[0])
        )
    ]

    return {
        "period_start": report["period_start"],
        "period_end": report["period_end"],
        "total_entries": report["total_entries"],
        "total_hours": _finite_or_zero(total_hours),
        "average_hours_per_day": average_hours_per_day(report),
        "project_bars": project_bars,
        "tag_cloud": tag_cloud,
        "activity_types": activity_types,
        "monthly_details": list(report.get("monthly_details", [])),
    }
