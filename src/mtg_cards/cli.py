"""Command-line interface for the MTG cards client."""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from mtg_cards import __version__
from mtg_cards.config import settings
from mtg_cards.core import CardFinder
from mtg_cards.display import render_rich
from mtg_cards.errors import MTGError

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Set up logging configuration."""
    if verbose or settings.debug:
        level = logging.DEBUG
    else:
        level = settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Look up Magic: The Gathering cards",
        epilog="Without a command, the demo card is fetched and printed.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Lookup by id
    id_parser = subparsers.add_parser("id", help="Find a card by its ID")
    id_parser.add_argument("card_id", type=int, help="Card ID")
    id_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the card as JSON instead of text",
    )

    # Lookup by exact name
    name_parser = subparsers.add_parser("name", help="Find cards by exact name")
    name_parser.add_argument("name", help="Exact card name")
    name_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the cards as JSON instead of text",
    )

    # Listing page
    page_parser = subparsers.add_parser("page", help="List the cards on a page")
    page_parser.add_argument("number", type=int, help="Page number")
    page_parser.add_argument(
        "--headers",
        action="store_true",
        help="Also show pagination and rate-limit headers",
    )

    return parser


async def _run(args: argparse.Namespace, finder: CardFinder) -> None:
    if args.command == "id":
        card = (await finder.id_find(args.card_id)).card
        if args.json:
            console.print_json(card.model_dump_json(by_alias=True))
        else:
            console.print(render_rich(card), end="")

    elif args.command == "name":
        result = await finder.name_find(args.name)
        if args.json:
            console.print_json(result.model_dump_json(by_alias=True))
        else:
            for card in result.cards:
                console.print(render_rich(card), end="")

    elif args.command == "page":
        if args.headers:
            result, header = await finder.page_find_with_header(args.number)
        else:
            result, header = await finder.page_find(args.number), None
        for card in result.cards:
            console.print(
                f"{escape(card.name)} [dim]({escape(card.set_name)})[/dim]",
                highlight=False,
            )
        if header is not None:
            console.print(
                f"\n[bold]{header.count}[/bold] of {header.total_count} cards, "
                f"{header.page_size} per page"
            )
            console.print(
                f"Rate limit: {header.ratelimit_remaining}/{header.ratelimit_limit} remaining"
            )
            console.print(f"Link: {header.link}", markup=False, highlight=False)


async def _demo(finder: CardFinder) -> None:
    try:
        result = await finder.id_find(settings.demo_card_id)
    except MTGError as e:
        console.print(f"All is not good?\n{e!r}", markup=False)
    else:
        console.print()
        console.print(render_rich(result.card), end="")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    finder = CardFinder()

    if not args.command:
        asyncio.run(_demo(finder))
        return 0

    try:
        asyncio.run(_run(args, finder))
    except MTGError as e:
        console.print(f"All is not good?\n{e!r}", markup=False)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
