# SPDX-License-Identifier: MIT

from worklog.model.catalog import CatalogItem
from worklog.time import now_utc

DEFAULT_PROJECT_COLOR = "#007bff"
DEFAULT_TAG_COLOR = "#6c757d"

DEFAULT_PROJECTS = [
    ("Mandate", "Mandate management", "#28a745"),
    ("Instance", "Meeting management", "#007bff"),
    ("Claims", "Claims handling", "#ffc107"),
    ("Negotiation", "Negotiation module", "#17a2b8"),
    ("Core", "Technical infrastructure", "#6c757d"),
    ("Training", "Training and technology watch", "#e83e8c"),
    ("Maintenance", "Maintenance and fixes", "#fd7e14"),
]

DEFAULT_TAGS = [
    ("bug", "Bug fixes", "#dc3545"),
    ("feature", "New feature", "#28a745"),
    ("refactor", "Code refactoring", "#6f42c1"),
    ("test", "Tests and QA", "#20c997"),
    ("documentation", "Documentation", "#0dcaf0"),
    ("release", "Release preparation", "#fd7e14"),
    ("meeting", "Meetings and discussions", "#6c757d"),
    ("review", "Code review", "#e83e8c"),
    ("performance", "Performance tuning", "#ffc107"),
    ("security", "Security", "#dc3545"),
    ("deployment", "Deployment", "#198754"),
    ("research", "Research and proofs of concept", "#0d6efd"),
    ("maintenance", "Technical maintenance", "#fd7e14"),
    ("support", "User support", "#6610f2"),
    ("planning", "Planning and estimation", "#6f42c1"),
]


def get_catalog_item_template(id: int, name: str, color: str) -> CatalogItem:
    now = now_utc()
    return {
        "id": id,
        "name": name,
        "description": None,
        "color": color,
        "active": True,
        "created": now,
        "updated": now,
    }


def get_default_catalog(defaults: list[tuple[str, str, str]]) -> list[CatalogItem]:
    items = []
    for index, (name, description, color) in enumerate(defaults, start=1):
        item = get_catalog_item_template(index, name, color)
        item["description"] = description
        items.append(item)
    return items
