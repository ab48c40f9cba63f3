# SPDX-License-Identifier: MIT

import math
from typing import Optional

import structlog

from worklog.errors import ReportRangeError
from worklog.model.catalog import CatalogItem
from worklog.model.entry import Entry
from worklog.model.report import (
    ActivityReport,
    MonthlyDetail,
    ProjectSummary,
    TagSummary,
)
from worklog.template.catalog import DEFAULT_PROJECT_COLOR, DEFAULT_TAG_COLOR
from worklog.time import month_of_date_str

logger = structlog.get_logger()


def _parse_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        return 0.0
    # "nan" and "inf" parse as floats but are not durations
    return number if math.isfinite(number) else 0.0


def parse_duration(duration: Optional[str]) -> float:
    """
    Convert a free-form duration into hours.

    "3h" and "2.5h" read the number before the "h", "2h30" adds the minutes
    after it, and a bare number is taken as hours. Anything else counts as 0.
    """
    if duration is None:
        return 0.0

    duration = duration.strip().lower()

    if duration.endswith("h"):
        return _parse_float(duration[:-1])
    if "h" in duration:
        hours, _, minutes = duration.partition("h")
        return _parse_float(hours) + _parse_float(minutes) / 60.0
    return _parse_float(duration)


def generate_activity_report(
    entries_by_date: dict[str, list[Entry]],
    start_date: str,
    end_date: str,
    projects: Optional[list[CatalogItem]] = None,
    tags: Optional[list[CatalogItem]] = None,
) -> ActivityReport:
    """
    Aggregate journal entries dated within [start_date, end_date].

    Dates are compared as 'YYYY-MM-DD' strings. Project and tag colors come
    from the catalog when the name is known there.
    """
    if start_date > end_date:
        raise ReportRangeError(
            f"Report start {start_date} is after report end {end_date}"
        )

    project_colors = {item["name"]: item["color"] for item in projects or []}
    tag_colors = {item["name"]: item["color"] for item in tags or []}

    total_entries = 0
    total_hours = 0.0
    projects_map: dict[str, ProjectSummary] = {}
    tags_map: dict[str, int] = {}
    activity_types: dict[str, int] = {}
    daily_breakdown: dict[str, float] = {}
    monthly_map: dict[str, MonthlyDetail] = {}

    for date in sorted(entries_by_date):
        if not (start_date <= date <= end_date):
            continue

        for entry in entries_by_date[date]:
            hours = parse_duration(entry["duration"])
            total_entries += 1
            total_hours += hours

            project_summary = projects_map.setdefault(
                entry["project"],
                {
                    "name": entry["project"],
                    "entries": 0,
                    "hours": 0.0,
                    "color": project_colors.get(
                        entry["project"], DEFAULT_PROJECT_COLOR
                    ),
                },
            )
            project_summary["entries"] += 1
            project_summary["hours"] += hours

            for tag in entry["tags"]:
                tags_map[tag] = tags_map.get(tag, 0) + 1

            activity_types[entry["entry_type"]] = (
                activity_types.get(entry["entry_type"], 0) + 1
            )

            daily_breakdown[date] = daily_breakdown.get(date, 0.0) + hours

            month = month_of_date_str(date)
            monthly_detail = monthly_map.setdefault(
                month, {"month": month, "entries": 0, "hours": 0.0}
            )
            monthly_detail["entries"] += 1
            monthly_detail["hours"] += hours

    tags_summary: list[TagSummary] = [
        {"name": name, "count": count, "color": tag_colors.get(name, DEFAULT_TAG_COLOR)}
        for name, count in tags_map.items()
    ]

    logger.debug(
        "activity report generated",
        start=start_date,
        end=end_date,
        entries=total_entries,
    )

    return {
        "period_start": start_date,
        "period_end": end_date,
        "total_entries": total_entries,
        "total_hours": total_hours,
        "projects_summary": list(projects_map.values()),
        "tags_summary": tags_summary,
        "activity_types": activity_types,
        "daily_breakdown": daily_breakdown,
        "monthly_details": [monthly_map[month] for month in sorted(monthly_map)],
    }
