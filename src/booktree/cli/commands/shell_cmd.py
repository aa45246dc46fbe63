# ABOUTME: The `booktree shell` command for the interactive catalog menu.
# ABOUTME: Starts with an empty catalog and runs the menu loop until the user exits.

import click
from rich.console import Console

from booktree.catalog import BookCatalog
from booktree.cli.shell import CatalogShell


@click.command("shell")
def shell() -> None:
    """Add, search, and list books from an interactive menu."""
    console = Console()
    catalog = BookCatalog()
    try:
        CatalogShell(catalog, console=console).run()
    finally:
        catalog.clear()
