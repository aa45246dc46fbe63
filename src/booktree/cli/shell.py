# ABOUTME: Interactive menu session that drives a BookCatalog from the console.
# ABOUTME: Prompts with Click, renders results with Rich, and reports catalog errors.

import logging
from collections.abc import Iterable

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from booktree.catalog import BookCatalog, BookRecord, DuplicateTitleError, ValidationError

logger = logging.getLogger(__name__)

MENU_CHOICES = (
    "Add a Book",
    "Search by Title",
    "Search by Author",
    "Recommend Books by Genre",
    "Display All Books",
    "Exit",
)
EXIT_CHOICE = len(MENU_CHOICES)


class CatalogShell:
    """Numbered menu over a catalog.

    The catalog never prints; this class turns its results into console
    messages. Each menu pass reads one choice and runs one operation.
    """

    def __init__(self, catalog: BookCatalog, *, console: Console | None = None) -> None:
        self._catalog = catalog
        self._console = console or Console()

    def run(self) -> None:
        """Show the menu until the user picks Exit."""
        self._console.print("Welcome to the Library Search and Recommendation System")

        while True:
            self._show_menu()
            choice = self._read_choice()
            if choice is None:
                self._console.print(
                    f"[red]Invalid input. Please enter a number between 1 and {EXIT_CHOICE}.[/red]"
                )
                continue

            logger.debug("Menu choice %d: %s", choice, MENU_CHOICES[choice - 1])
            if choice == EXIT_CHOICE:
                self._console.print("Exiting the program!")
                return

            self._dispatch(choice)

    def _show_menu(self) -> None:
        self._console.print("\nChoose an option:")
        for number, label in enumerate(MENU_CHOICES, start=1):
            self._console.print(f"{number}. {label}")

    def _read_choice(self) -> int | None:
        raw = click.prompt("Enter your choice", type=str, default="", show_default=False)
        try:
            choice = int(raw)
        except ValueError:
            return None
        if 1 <= choice <= EXIT_CHOICE:
            return choice
        return None

    def _dispatch(self, choice: int) -> None:
        if choice == 1:
            self.add_book()
        elif choice == 2:
            self.search_by_title()
        elif choice == 3:
            self.search_by_author()
        elif choice == 4:
            self.recommend_by_genre()
        elif choice == 5:
            self.display_all()

    def add_book(self) -> bool:
        """Prompt for a book's fields and insert it.

        Returns:
            True if the book was stored.
        """
        title = _prompt_text("Enter the title of the book")
        author = _prompt_text("Enter the author of the book")
        genre = _prompt_text("Enter the genre of the book")

        result = self._catalog.insert(title, author, genre)
        if result:
            self._console.print(
                Text.assemble('Book added successfully: "', title, '" by ', author)
            )
            return True

        if isinstance(result.error, DuplicateTitleError):
            logger.debug("Rejected duplicate title %r", title)
            self._console.print(
                Text.assemble(
                    'Error: A book with the title "',
                    title,
                    '" already exists in the library.',
                    style="red",
                )
            )
        elif isinstance(result.error, ValidationError):
            logger.debug("Rejected book with empty fields: %s", ", ".join(result.error.fields))
            self._console.print(
                "[red]Error: All fields (title, author, genre) must be filled out.[/red]"
            )
        return False

    def search_by_title(self) -> BookRecord | None:
        """Prompt for a title and report the matching book, if any."""
        title = _prompt_text("Enter the title to search for")
        record = self._catalog.find_by_title(title)
        if record is None:
            self._console.print(
                Text.assemble('No book found with the title "', title, '".', style="yellow")
            )
            return None

        self._console.print(Text.assemble('Found: "', record.title, '" by ', record.author))
        return record

    def search_by_author(self) -> list[BookRecord]:
        """Prompt for an author and list all of their books."""
        author = _prompt_text("Enter the author to search for")
        records = list(self._catalog.find_by_author(author))
        if not records:
            self._console.print(
                Text.assemble('No books found by the author "', author, '".', style="yellow")
            )
            return records

        self._print_table(records, show_genre=True)
        return records

    def recommend_by_genre(self) -> list[BookRecord]:
        """Prompt for a genre and list every book in it."""
        genre = _prompt_text("Enter the genre to recommend books for")
        self._console.print(Text.assemble('Recommending books in the genre "', genre, '":'))
        self._console.print("Recommendations:")

        records = list(self._catalog.find_by_genre(genre))
        if not records:
            self._console.print("[yellow]None Found[/yellow]")
            return records

        self._print_table(records, show_genre=False)
        return records

    def display_all(self) -> list[BookRecord]:
        """List every book in ascending title order."""
        self._console.print("Displaying all books:")
        records = self._catalog.list_all()
        if not records:
            self._console.print("[yellow]No books in the library.[/yellow]")
            return records

        self._print_table(records, show_genre=True)
        self._console.print(f"\n[dim]{len(records)} book(s)[/dim]")
        return records

    def _print_table(self, records: Iterable[BookRecord], *, show_genre: bool) -> None:
        table = Table()
        table.add_column("Title", style="bold")
        table.add_column("Author")
        if show_genre:
            table.add_column("Genre")

        for record in records:
            row = [Text(record.title), Text(record.author)]
            if show_genre:
                row.append(Text(record.genre))
            table.add_row(*row)

        self._console.print(table)


def _prompt_text(label: str) -> str:
    """Read one line verbatim; an empty answer is returned rather than re-prompted."""
    return click.prompt(label, type=str, default="", show_default=False)
