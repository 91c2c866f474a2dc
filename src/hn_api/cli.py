"""Command line interface for the Hacker News client."""

import argparse
import asyncio
import logging
import sys

from hn_api.client import HNClient
from hn_api.errors import HNClientError
from hn_api.types import Item, User

STORY_LISTS = {
    "top": HNClient.get_top_stories,
    "new": HNClient.get_new_stories,
    "best": HNClient.get_best_stories,
    "ask": HNClient.get_ask_stories,
    "show": HNClient.get_show_stories,
    "job": HNClient.get_job_stories,
}


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if not verbose:
        # Reduce noise from httpx
        logging.getLogger("httpx").setLevel(logging.WARNING)


def format_item(item: Item) -> str:
    """Format an item as a single line."""
    title = item.title or (item.text or "")[:60]
    author = item.author or "[deleted]"
    return f"{item.id:>9} {item.score or 0:>5} {title} ({author})"


def format_user(user: User) -> str:
    """Format a user as a single line."""
    return (
        f"{user.id} karma={user.karma} created={user.created.date().isoformat()} "
        f"submitted={len(user.submitted)}"
    )


async def show_stories(
    client: HNClient, kind: str, limit: int, with_authors: bool = False
) -> None:
    """Print the first ``limit`` stories of a story list."""
    ids = await STORY_LISTS[kind](client)
    items = await client.try_get_items(ids[:limit])

    authors: list[User | None] = [None] * len(items)
    if with_authors:
        authors = await client.try_get_authors(items)

    for item_id, item, author in zip(ids, items, authors):
        if item is None:
            print(f"{item_id:>9} [missing]")
            continue
        line = format_item(item)
        if author is not None:
            line += f" karma={author.karma}"
        print(line)


async def run(args: argparse.Namespace) -> int:
    """
    Run a single command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, 1 for errors)
    """
    logger = logging.getLogger(__name__)

    try:
        async with HNClient() as client:
            if args.command in STORY_LISTS:
                await show_stories(client, args.command, args.limit, args.authors)
            elif args.command == "item":
                print(format_item(await client.get_item(args.id)))
            elif args.command == "user":
                print(format_user(await client.get_user(args.username)))
            elif args.command == "maxitem":
                print(await client.get_max_item_id())
            elif args.command == "updates":
                updates = await client.get_updates()
                print(f"items: {' '.join(str(i) for i in updates.items)}")
                print(f"profiles: {' '.join(updates.profiles)}")
    except HNClientError as e:
        logger.error("%s failed: %s", args.command, e)
        return 1

    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="Hacker News API client")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for kind in STORY_LISTS:
        story_parser = subparsers.add_parser(kind, help=f"Show {kind} stories")
        story_parser.add_argument(
            "--limit",
            type=int,
            default=10,
            help="Number of stories to show (default: 10)",
        )
        story_parser.add_argument(
            "--authors",
            action="store_true",
            help="Also fetch the author of each story",
        )

    item_parser = subparsers.add_parser("item", help="Show a single item")
    item_parser.add_argument("id", type=int)

    user_parser = subparsers.add_parser("user", help="Show a single user")
    user_parser.add_argument("username")

    subparsers.add_parser("maxitem", help="Show the newest item id")
    subparsers.add_parser("updates", help="Show recently changed items and profiles")

    return parser


def main() -> None:
    """Main entry point for the CLI."""
    args = build_parser().parse_args()

    setup_logging(verbose=args.verbose)

    exit_code = asyncio.run(run(args))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
