"""Command-line interface for ses-makinesi."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from ses_makinesi.aggregators import PoemAggregator
from ses_makinesi.stores import DEFAULT_RESERVED_ISSUE, SQLPageStore

DEFAULT_OUTPUT_PATH = Path("./workspace/poems.json")
DATABASE_URL_ENV = "SES_MAKINESI_DATABASE_URL"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def harvest_poems(args: argparse.Namespace) -> int:
    """Execute the harvest-poems command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    if not args.database_url:
        logger.error(f"Must specify --database-url or set {DATABASE_URL_ENV}")
        return 1

    if args.max is not None and args.max < args.min:
        logger.error(f"--max ({args.max}) is lower than --min ({args.min})")
        return 1

    include_path = args.include.resolve() if args.include else None
    if include_path is not None and not include_path.exists():
        logger.error(f"Include file not found: {include_path}")
        return 1

    logger.info(f"Min index is {args.min}")
    logger.info(f"Max index is {args.max}")

    config = {
        "url": args.database_url,
        "reserved_issue": args.reserved_issue,
    }

    try:
        with SQLPageStore(config) as store:
            logger.info(f"Fetching pages from {store.source}")
            manifest = PoemAggregator(store).harvest(
                min_issue=args.min,
                max_issue=args.max,
                include_path=include_path,
            )

        output_path = args.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        if args.poems_only:
            output_path.write_text(
                json.dumps(manifest.all_poems(), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        else:
            output_path.write_text(
                manifest.model_dump_json(indent=2, by_alias=True), encoding="utf-8"
            )

        logger.info(f"Harvested poems: {manifest.id}")
        logger.info(f"  Poems: {len(manifest.poems)}")
        logger.info(f"  Included: {len(manifest.included_poems)}")
        logger.info(f"  Output: {output_path}")

        if manifest.validation_errors:
            logger.warning(f"  Errors: {len(manifest.validation_errors)}")
            for error in manifest.validation_errors:
                logger.warning(f"    - {error}")

        return 0

    except Exception as e:
        logger.error(f"Failed to harvest poems: {e}")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="ses-makinesi",
        description="Collect recited poems from the Ses Makinesi sections of the magazine archive",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    harvest_parser = subparsers.add_parser(
        "harvest-poems",
        help="Extract poem records from the archive database",
        description="Read the Ses Makinesi pages of an issue range and write the recited poems as JSON.",
    )
    harvest_parser.add_argument(
        "--min",
        type=int,
        default=-1,
        help="Fetch issues with index greater than or equal to this (default: all)",
    )
    harvest_parser.add_argument(
        "--max",
        type=int,
        default=None,
        help="Fetch issues with index lower than or equal to this (default: no limit)",
    )
    harvest_parser.add_argument(
        "-i", "--include",
        type=Path,
        default=None,
        help="JSON file of poem entries appended to the results",
    )
    harvest_parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_PATH,
        help=f"Output JSON file (default: {DEFAULT_OUTPUT_PATH})",
    )
    harvest_parser.add_argument(
        "--poems-only",
        action="store_true",
        help="Write a plain JSON array of poems instead of the manifest",
    )
    harvest_parser.add_argument(
        "--database-url",
        type=str,
        default=os.environ.get(DATABASE_URL_ENV),
        help=f"SQLAlchemy URL of the archive database (default: ${DATABASE_URL_ENV})",
    )
    harvest_parser.add_argument(
        "--reserved-issue",
        type=int,
        default=DEFAULT_RESERVED_ISSUE,
        help=f"Issue left out of the harvest and added by hand (default: {DEFAULT_RESERVED_ISSUE})",
    )
    harvest_parser.set_defaults(func=harvest_poems)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
