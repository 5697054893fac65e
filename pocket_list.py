#!/usr/bin/env python3
"""
Pocket List Tool
Lists saved articles from the Pocket API as text or raw JSON.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from requests import Session

from config import Config, ConfigError, load_config
from data_fetcher import PocketListFetcher, create_session
from models import PocketListError
from options import build_query
from output import OutputFormat, output

logger = logging.getLogger(__name__)

LIST_COMMAND = "list"


def list_articles(
    config: Config,
    state: Optional[str] = None,
    tag: Optional[str] = None,
    sort: Optional[str] = None,
    details: bool = False,
    search: Optional[str] = None,
    session: Optional[Session] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    List saved articles and write them in the configured output format.

    A reply with a non-success Pocket status is reported to the user and
    is not an error. Everything else that goes wrong is raised as a
    PocketListError.
    """
    query = build_query(
        consumer_key=config.consumer_key,
        access_token=config.access_token,
        state=state,
        tag=tag,
        sort=sort,
        details=details,
        search=search,
    )

    owns_session = session is None
    session = session or create_session()
    try:
        logger.info("Getting list of your articles ...")
        raw = PocketListFetcher(session).get(query)
    finally:
        if owns_session:
            session.close()

    output(raw, config.output_format, stream)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pocket command-line client")
    parser.add_argument(
        "--output",
        choices=[f.value for f in OutputFormat],
        help="Output format (default: POCKET_OUTPUT_FORMAT or human)",
    )
    parser.add_argument("--env-file", default=".env", help="Path to a .env file (default: .env)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    list_parser = subparsers.add_parser(LIST_COMMAND, help="List saved articles")
    list_parser.add_argument(
        "--details", "-d", action="store_true", help="Select details for articles"
    )
    list_parser.add_argument(
        "--tag", "-t", help="Select articles tagged with <tag> to list"
    )
    list_parser.add_argument(
        "--state",
        "-s",
        choices=["unread", "archive", "all"],
        default="unread",
        help="Select articles to list (default: unread)",
    )
    list_parser.add_argument(
        "--sort",
        choices=["newest", "oldest", "title", "site"],
        default="newest",
        help="Select sort order (default: newest)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = load_config(env_file=args.env_file)
    except ConfigError as e:
        logger.error(f"Failed to list Pocket articles: {e}")
        return 1
    if args.output:
        config.output_format = OutputFormat.parse(args.output)

    try:
        list_articles(
            config,
            state=args.state,
            tag=args.tag,
            sort=args.sort,
            details=args.details,
        )
    except PocketListError as e:
        logger.error(f"Failed to list Pocket articles: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
