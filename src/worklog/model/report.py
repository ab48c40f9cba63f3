# SPDX-License-Identifier: MIT

from typing import TypedDict


class ProjectSummary(TypedDict):
    name: str
    entries: int
    hours: float
    color: str


class TagSummary(TypedDict):
    name: str
    count: int
    color: str


class MonthlyDetail(TypedDict):
    month: str  # YYYY-MM
    entries: int
    hours: float


class ActivityReport(TypedDict):
    period_start: str
    period_end: str
    total_entries: int
    total_hours: float
    projects_summary: list[ProjectSummary]
    tags_summary: list[TagSummary]
    activity_types: dict[str, int]
    daily_breakdown: dict[str, float]
    monthly_details: list[MonthlyDetail]


class ProjectBar(TypedDict):
    name: str
    entries: int
    hours: float
    color: str
    fraction: float  # 0.0 - 1.0 of total hours


class TagCloudItem(TypedDict):
    name: str
    count: int
    color: str
    emphasis: int  # font size in px


class ActivityTypeRow(TypedDict):
    entry_type: str
    count: int


class ReportView(TypedDict):
    period_start: str
    period_end: str
    total_entries: int
    total_hours: float
    average_hours_per_day: float
    project_bars: list[ProjectBar]
    tag_cloud: list[TagCloudItem]
    activity_types: list[ActivityTypeRow]
    monthly_details: list[MonthlyDetail]
