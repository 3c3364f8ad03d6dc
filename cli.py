#!/usr/bin/env python3
"""
FAQ Explorer - Command Line Entry Point

Browse, search and read a multi-source FAQ corpus from the terminal.
"""

import sys
import argparse
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.prompt import Prompt
from rich.markup import escape
from rich import box

from config import Settings, load_settings
from explorer import ExplorerSession, group_by_category
from logging_setup import setup_logging
from models import ViewResult
from repositories import JsonCorpusSource

console = Console()


def open_session(settings: Settings, data_path: Optional[str] = None) -> Optional[ExplorerSession]:
    """Load the corpus. Prints the error and returns None on failure."""
    path = Path(data_path) if data_path else settings.data_path
    session = ExplorerSession(settings, JsonCorpusSource(path))
    if not session.load():
        console.print(f"[red]Could not load FAQ corpus:[/red] {escape(session.last_error or '')}")
        return None
    return session


def print_categories(session: ExplorerSession):
    """Category table with aggregated counts"""
    table = Table(title=escape(session.summary()["title"]) or "Categories", box=box.ROUNDED)
    table.add_column("Category", style="cyan")
    table.add_column("Questions", justify="right", style="green")
    table.add_column("Sources", style="dim")

    for info in session.categories():
        table.add_row(escape(info.name), str(info.count), escape(", ".join(info.sources)))

    console.print(table)


def print_view(view: ViewResult, numbered: bool = False):
    """Render the visible items grouped by category."""
    if view.shows_headline:
        console.print(f"[bold]{view.headline}[/bold]")

    if view.is_empty:
        console.print(Panel.fit(
            "[bold]No results found[/bold]\n[dim]Try adjusting your search or filter[/dim]"
        ))
        return

    n = 0
    for name, items in group_by_category(list(view.items)):
        console.print(f"\n[bold cyan]{escape(name)}[/bold cyan]")
        for item in items:
            n += 1
            marker = "-" if view.is_expanded(item) else "+"
            prefix = f"[cyan]{n:>2}[/cyan] " if numbered else ""
            console.print(f"{prefix}{marker} {escape(item.question)}")
            if view.is_expanded(item):
                console.print(Panel(escape(item.answer) or "[dim](no answer)[/dim]", box=box.SIMPLE))


def browse(session: ExplorerSession):
    """Interactive browser over one session"""
    while True:
        console.clear()
        summary = session.summary()
        console.print(Panel.fit(
            f"[bold cyan]{escape(summary['title']) or 'FAQ Explorer'}[/bold cyan]\n"
            f"[dim]{escape(summary['description'])}[/dim]\n"
            f"[dim]{summary['total_count']} questions[/dim]",
            title="FAQ Explorer"
        ))

        view = session.view()
        console.print(f"[dim]mode: {view.mode.value}"
                      + (f" | category: {escape(view.selected_category)}" if view.selected_category else "")
                      + (f" | query: {escape(repr(view.query))}" if view.query else "") + "[/dim]")
        print_view(view, numbered=True)

        if view.category_picker_open:
            print_categories(session)

        console.print("\n  [cyan]number[/cyan] - expand/collapse   [cyan]c[/cyan] - categories"
                      "   [cyan]s[/cyan] - search   [cyan]a[/cyan] - view all"
                      "   [cyan]b[/cyan] - back to start   [cyan]q[/cyan] - quit")
        choice = Prompt.ask("\nChoice", default="q").strip()

        if choice == "q":
            break
        elif choice == "c":
            if view.category_picker_open:
                name = Prompt.ask("Category name (Enter to close)", default="")
                if name and name != "All":
                    session.select_category(name)
                elif name == "All":
                    session.back_to_start()
                    session.view_all()
                else:
                    session.toggle_category_picker()
            else:
                session.toggle_category_picker()
        elif choice == "s":
            session.type_query(Prompt.ask("Search (Enter to clear)", default=""))
        elif choice == "a":
            session.view_all()
        elif choice == "b":
            session.back_to_start()
        elif choice.isdigit():
            idx = int(choice) - 1
            # Numbering follows grouped order, same as print_view.
            ordered = [i for _, items in group_by_category(list(view.items)) for i in items]
            if 0 <= idx < len(ordered):
                session.toggle_expand(ordered[idx].key)


def cli():
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="Browse and search a multi-source FAQ corpus",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  faq-explorer                          # Interactive browser
  faq-explorer categories               # Category list with counts
  faq-explorer search halving -c Mining # Search within a category
  faq-explorer show -c Wallets --all    # Every question in a category
  faq-explorer serve --port 5001        # JSON API
"""
    )
    parser.add_argument("--data", help="Path to the FAQ JSON document")
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("categories", help="List categories")

    p_search = sub.add_parser("search", help="Fuzzy search questions and answers")
    p_search.add_argument("query", nargs="+")
    p_search.add_argument("--category", "-c", help="Restrict results to one category")

    p_show = sub.add_parser("show", help="Show featured, a category preview, or everything")
    p_show.add_argument("--category", "-c")
    p_show.add_argument("--all", "-a", action="store_true", help="Show the full list")

    p_serve = sub.add_parser("serve", help="Run the JSON API")
    p_serve.add_argument("--port", type=int)

    args = parser.parse_args()

    settings = load_settings()
    setup_logging(args.log_level or settings.log_level)

    if args.command == "serve":
        from app import app
        from routes.session_store import configure_session
        if args.data:
            configure_session(settings, JsonCorpusSource(Path(args.data)))
        app.run(port=args.port or settings.port)
        return 0

    session = open_session(settings, args.data)
    if session is None:
        return 1

    if args.command == "categories":
        print_categories(session)
    elif args.command == "search":
        if args.category:
            session.select_category(args.category)
        session.type_query(" ".join(args.query))
        print_view(session.view())
    elif args.command == "show":
        if args.category:
            session.select_category(args.category)
        if args.all:
            session.view_all()
        print_view(session.view())
    else:
        browse(session)
    return 0


if __name__ == "__main__":
    sys.exit(cli())
