"""Terminal front end for the AniLibria data-access layer.

Every subcommand goes through CommandBridge, the same surface a UI shell
uses, so failures are printed exactly as the UI would show them.
"""

import argparse
import asyncio
import sys
from typing import Any

from rich.console import Console
from rich.table import Table

from commands.bridge import CommandBridge, CommandResult
from models.config import ClientSettings
from models.models import AnimePoster
from services.anilibria_service import create_service
from utils.logging import configure_logging

console = Console()


def render_summaries(items: list[dict[str, Any]], site_url: str) -> None:
    """Print release cards as a table."""
    table = Table(show_lines=False)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Year", justify="right")
    table.add_column("Genres")
    table.add_column("Poster", style="dim")

    for item in items:
        poster = AnimePoster.model_validate(item["poster"])
        genres = ", ".join(genre["name"] for genre in item.get("genres") or [])
        name = item["name"]
        title = name["main"] if not name.get("english") else f"{name['main']} / {name['english']}"
        table.add_row(
            str(item["id"]),
            title,
            str(item.get("year") or ""),
            genres,
            AnimePoster.absolute_url(site_url, poster.best_path()),
        )

    console.print(table)
    console.print(f"[dim]{len(items)} release(s)[/dim]")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="anilibrix",
        description="Browse the AniLibria catalog from the terminal.",
    )
    parser.add_argument("--api-url", help="Override the API base URL for this run")
    parser.add_argument("--locale", choices=["en", "ru"], help="Language of error messages")
    parser.add_argument("--debug", "-d", action="store_true")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")
    subparsers.add_parser("latest", help="Latest releases")

    catalog_parser = subparsers.add_parser("catalog", help="Catalog page")
    catalog_parser.add_argument("--page", "-p", type=int, default=0, help="Zero-based page index")

    release_parser = subparsers.add_parser("release", help="Full release with related franchises")
    release_parser.add_argument("id")

    episodes_parser = subparsers.add_parser("episode", help="Episode payload (streams)")
    episodes_parser.add_argument("id")

    search_parser = subparsers.add_parser("search", help="Search releases by title")
    search_parser.add_argument("query")

    subparsers.add_parser("settings", help="Show current settings")
    return parser


async def run(args: argparse.Namespace, config: ClientSettings) -> CommandResult:
    """Execute the selected subcommand through the bridge."""
    service = create_service(config)
    bridge = CommandBridge(service, locale=args.locale or config.ui.locale)
    try:
        if args.api_url:
            result = await bridge.invoke("save_settings", {"new_settings": {"api_url": args.api_url}})
            if not result.ok:
                return result

        if args.command == "latest":
            return await bridge.invoke("get_catalog")
        if args.command == "catalog":
            return await bridge.invoke("get_catalog_paginated", {"page": args.page})
        if args.command == "release":
            return await bridge.invoke("get_full_release", {"id": args.id})
        if args.command == "episode":
            return await bridge.invoke("get_anime_details", {"id": args.id})
        if args.command == "search":
            return await bridge.invoke("search_releases", {"query": args.query})
        return await bridge.invoke("get_settings")
    finally:
        service.close()


def cli() -> None:
    """Entry point for CLI."""
    args = build_parser().parse_args()
    configure_logging(debug=args.debug)
    config = ClientSettings()

    result = asyncio.run(run(args, config))

    if not result.ok:
        console.print(f"[bold red]{result.error}[/bold red]")
        sys.exit(1)

    if args.command in ("latest", "catalog", "search"):
        render_summaries(result.data, config.api.site_url)
    else:
        console.print_json(data=result.data)


if __name__ == "__main__":
    cli()
