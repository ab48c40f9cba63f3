# SPDX-License-Identifier: MIT

from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console

from worklog.errors import CatalogError
from worklog.repository.catalog import PROJECT_REPO, TAG_REPO, CatalogRepository
from worklog.terminal.custom_typer import AliasedTyperGroup
from worklog.view.views.catalog import catalog_view


def build_catalog_app(repository: CatalogRepository) -> typer.Typer:
    """Commands to manage one catalog (projects or tags)."""
    app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)
    kind = repository.kind[:-1]
    console = Console()

    def fail(error: CatalogError) -> NoReturn:
        console.print(f"[red]Error: {error}[/red]")
        raise typer.Exit(1)

    @app.command("add, a", no_args_is_help=True, help=f"Create a {kind}.")
    def add(
        name: str,
        description: Annotated[
            Optional[str], typer.Option("--description", "-d")
        ] = None,
        color: Annotated[
            Optional[str], typer.Option("--color", "-col", help="e.g. #28a745")
        ] = None,
    ) -> None:
        try:
            item = repository.create_item(name, description, color)
        except CatalogError as e:
            fail(e)
        catalog_view(kind, [item])

    @app.command("list, ls", help=f"List {repository.kind}.")
    def list_items(
        include_inactive: Annotated[
            bool, typer.Option("--all", "-a", help="Include inactive items")
        ] = False,
    ) -> None:
        catalog_view(repository.kind, repository.list_items(include_inactive))

    @app.command("modify, m", no_args_is_help=True, help=f"Change a {kind}.")
    def modify(
        id: int,
        name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
        description: Annotated[
            Optional[str], typer.Option("--description", "-d")
        ] = None,
        remove_description: Annotated[
            bool, typer.Option("--remove-description", "-rd")
        ] = False,
        color: Annotated[Optional[str], typer.Option("--color", "-col")] = None,
    ) -> None:
        try:
            item = repository.update_item(
                id, name, description, color, remove_description
            )
        except CatalogError as e:
            fail(e)
        catalog_view(kind, [item])

    @app.command("delete, d", no_args_is_help=True, help=f"Delete a {kind}.")
    def delete(id: int) -> None:
        try:
            repository.delete_item(id)
        except CatalogError as e:
            fail(e)
        console.print(f"[green]Deleted {kind} {id}[/green]")

    @app.command(
        "toggle, tg", no_args_is_help=True, help=f"Activate or deactivate a {kind}."
    )
    def toggle(id: int) -> None:
        try:
            item = repository.toggle_item_status(id)
        except CatalogError as e:
            fail(e)
        catalog_view(kind, [item])

    return app


project_app = build_catalog_app(PROJECT_REPO)
tag_app = build_catalog_app(TAG_REPO)
