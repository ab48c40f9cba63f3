# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from worklog.model.report import ReportView
from worklog.view.util import format_hours, format_percent
from worklog.view.views.header import header

BAR_WIDTH = 30


def _bar(fraction: float, color: str) -> Text:
    filled = round(max(0.0, min(1.0, fraction)) * BAR_WIDTH)
    bar = Text("█" * filled, style=color)
    bar.append("░" * (BAR_WIDTH - filled), style="grey35")
    return bar


def activity_report_view(report_view: ReportView) -> None:
    header(
        f"activity report {report_view['period_start']} to {report_view['period_end']}"
    )
    console = Console()

    summary_table = Table(box=box.SIMPLE)
    summary_table.add_column("total entries")
    summary_table.add_column("total hours")
    summary_table.add_column("average / day")
    summary_table.add_row(
        str(report_view["total_entries"]),
        format_hours(report_view["total_hours"]),
        format_hours(report_view["average_hours_per_day"]),
    )
    console.print(summary_table)

    if len(report_view["project_bars"]) > 0:
        projects_table = Table(box=box.SIMPLE, title="projects")
        projects_table.add_column("project")
        projects_table.add_column("entries")
        projects_table.add_column("hours")
        projects_table.add_column("share")
        projects_table.add_column("")
        for bar in report_view["project_bars"]:
            projects_table.add_row(
                Text(bar["name"], style=bar["color"]),
                str(bar["entries"]),
                format_hours(bar["hours"]),
                format_percent(bar["fraction"]),
                _bar(bar["fraction"], bar["color"]),
            )
        console.print(projects_table)

    if len(report_view["tag_cloud"]) > 0:
        # Terminal text has one size, so emphasis maps to bold above the base size
        cloud = Text()
        for item in report_view["tag_cloud"]:
            style = item["color"]
            if item["emphasis"] >= 14:
                style = f"bold {style}"
            cloud.append(f"#{item['name']} ({item['count']})", style=style)
            cloud.append("  ")
        console.print(Text(" tags", style="bold"))
        console.print(cloud)
        console.print()

    if len(report_view["activity_types"]) > 0:
        types_table = Table(box=box.SIMPLE, title="activity types")
        types_table.add_column("type")
        types_table.add_column("count")
        for row in report_view["activity_types"]:
            types_table.add_row(row["entry_type"], str(row["count"]))
        console.print(types_table)

    if len(report_view["monthly_details"]) > 0:
        monthly_table = Table(box=box.SIMPLE, title="months")
        monthly_table.add_column("month")
        monthly_table.add_column("entries")
        monthly_table.add_column("hours")
        for detail in report_view["monthly_details"]:
            monthly_table.add_row(
                detail["month"], str(detail["entries"]), format_hours(detail["hours"])
            )
        console.print(monthly_table)
