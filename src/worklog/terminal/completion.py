# SPDX-License-Identifier: MIT

from worklog.repository.catalog import PROJECT_REPO, TAG_REPO
from worklog.repository.configuration import CONFIGURATION_REPO
from worklog.repository.ticket import TICKET_REPO


def complete_tag(incomplete: str) -> list[str]:
    """Return list of available tags for shell completion."""
    return [tag for tag in TAG_REPO.get_names() if tag.startswith(incomplete)]


def complete_project(incomplete: str) -> list[str]:
    """Return list of available projects for shell completion."""
    return [
        project for project in PROJECT_REPO.get_names() if project.startswith(incomplete)
    ]


def complete_entry_type(incomplete: str) -> list[str]:
    entry_types = CONFIGURATION_REPO.get_config()["entry_types"]
    return [
        entry_type for entry_type in entry_types if entry_type.startswith(incomplete)
    ]


def complete_ticket(incomplete: str) -> list[str]:
    return [
        ticket["key"]
        for ticket in TICKET_REPO.get_tickets()
        if ticket["key"].startswith(incomplete.upper())
    ]
