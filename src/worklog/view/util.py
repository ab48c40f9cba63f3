# SPDX-License-Identifier: MIT

from typing import Optional

from worklog.model.entry import Link, TicketRef


def format_tags(tags: Optional[list[str]]) -> str:
    """Format a list of tags as a space separated string of #tags."""
    if tags is None or len(tags) == 0:
        return ""
    return " ".join(f"#{tag}" for tag in tags)


def format_links(links: list[Link]) -> str:
    formatted = []
    for link in links:
        if link["text"] and link["url"]:
            formatted.append(f"[link={link['url']}]{link['text']}[/link]")
        else:
            formatted.append(link["text"] or link["url"])
    return "\n".join(item for item in formatted if item)


def format_ticket_refs(ticket_refs: list[TicketRef]) -> str:
    return ", ".join(ref["key"] for ref in ticket_refs)


def format_hours(hours: float) -> str:
    return f"{hours:.1f}h"


def format_percent(fraction: float) -> str:
    return f"{fraction * 100:.0f}%"
