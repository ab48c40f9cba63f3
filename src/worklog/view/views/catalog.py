# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from worklog.model.catalog import CatalogItem
from worklog.view.views.header import header


def catalog_view(title: str, items: list[CatalogItem]) -> None:
    header(title)

    catalog_table = Table(box=box.SIMPLE)
    catalog_table.add_column("id")
    catalog_table.add_column("name")
    catalog_table.add_column("description")
    catalog_table.add_column("color")
    catalog_table.add_column("active")

    for item in items:
        catalog_table.add_row(
            str(item["id"]),
            f"[{item['color']}]{item['name']}[/{item['color']}]",
            item["description"] or "",
            item["color"],
            "yes" if item["active"] else "no",
        )

    console = Console()
    console.print(catalog_table)
