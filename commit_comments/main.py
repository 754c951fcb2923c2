#!/usr/bin/env python3
"""
Main driver script for commit-comments.

This script provides the command-line interface and runs the pipeline that
validates the repository URL, fetches the commit list, interprets the
response and prints the commit messages.

Usage (example):
    commit-comments https://github.com/torvalds/linux --limit 5
    python -m commit_comments.main https://github.com/torvalds/linux
"""

import argparse
import logging
import re
import sys
from typing import List, Optional

from .constants import DEFAULT_LIMIT, LOGGER_NAME, MAX_LIMIT, MIN_LIMIT
from .fetcher import CommitFetcher
from .interpreter import ResponseInterpreter
from .models import RepoReference
from .parser import RepoUrlParser
from .presenter import CommitPresenter

logger = logging.getLogger(LOGGER_NAME)

# Plain decimal integers only: no sign other than "-", no spaces or underscores
INTEGER_RE = re.compile(r"-?\d+", re.ASCII)


def repo_reference(value: str) -> RepoReference:
    """argparse type for the repository URL argument."""
    try:
        return RepoUrlParser.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def fetch_limit(value: str) -> int:
    """argparse type for ``--limit``: an integer in [MIN_LIMIT, MAX_LIMIT]."""
    if not INTEGER_RE.fullmatch(value):
        raise argparse.ArgumentTypeError(f"{value} is not a valid integer")
    limit = int(value)
    if not MIN_LIMIT <= limit <= MAX_LIMIT:
        raise argparse.ArgumentTypeError(
            f"{value} is not in the valid range of {MIN_LIMIT} to {MAX_LIMIT}."
        )
    return limit


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commit-comments",
        description="Print the most recent commit messages of a public GitHub repository.",
    )
    parser.add_argument("repo", metavar="<Repo URL>", type=repo_reference, help="Github repo URL")
    parser.add_argument(
        "--limit", "-l",
        type=fetch_limit,
        default=DEFAULT_LIMIT,
        help=f"Number of commit messages to fetch ({MIN_LIMIT}-{MAX_LIMIT}, default: {DEFAULT_LIMIT})",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log progress to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point for commit-comments.

    Prints help and exits with status 1 when called without arguments.
    Argument errors exit with status 2 before any request is made. API
    errors are printed as a single line and the command finishes normally.
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    if not argv:
        parser.print_help()
        sys.exit(1)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        repo = args.repo
        logger.info("Listing last %d commits of %s", args.limit, repo.full_name)

        fetcher = CommitFetcher()
        outcome = fetcher.fetch(repo, args.limit)

        listing = ResponseInterpreter().interpret(outcome)

        presenter = CommitPresenter()
        if not listing.ok:
            presenter.show_error(listing.error)
            return
        presenter.show(args.limit, listing.messages)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        print("\nOperation cancelled by user", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.error("Fetching commits failed: %s", e)
        print(f"Error: fetching commits failed - {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
