# main.py

"""Entry point for the ecofinds inspection CLI."""

import argparse
import logging
import sys
from pathlib import Path

from src.config.logging_config import setup_logging
from src.services.marketplace import Marketplace
from src.services.notifier import ConsoleNotifier

logger = logging.getLogger("ecofinds.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="ecofinds",
        description="Inspect the EcoFinds second-hand marketplace state.",
    )
    parser.add_argument(
        "-d",
        "--data-dir",
        default=None,
        dest="data_dir",
        help="Storage directory (default: data/ or $ECOFINDS_DATA_DIR).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="table",
        dest="output_format",
        help="Output format (default: table).",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    browse = commands.add_parser("browse", help="List catalog products.")
    browse.add_argument("-q", "--search", default=None, help="Title search text.")
    browse.add_argument("-c", "--category", default=None, help="Exact category name.")
    browse.add_argument(
        "--featured",
        action="store_true",
        default=False,
        help="Only featured products.",
    )

    commands.add_parser("categories", help="Show the category taxonomy.")
    commands.add_parser("cart", help="Show the persisted cart.")

    history = commands.add_parser("history", help="Show a user's purchases.")
    history.add_argument("user_id", help="Account identifier.")

    commands.add_parser("reset", help="Delete all stored data.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, open the marketplace and run one command."""
    log_file = setup_logging()
    logger.info("ecofinds starting, log file: %s", log_file)

    args = _build_parser().parse_args(argv)

    from src.cli import runner

    data_dir = Path(args.data_dir) if args.data_dir else None
    market = Marketplace.open(data_dir, notifier=ConsoleNotifier())

    if args.command == "browse":
        exit_code = runner.run_browse(
            market, args.search, args.category, args.featured, args.output_format,
        )
    elif args.command == "categories":
        exit_code = runner.run_categories(market, args.output_format)
    elif args.command == "cart":
        exit_code = runner.run_cart(market, args.output_format)
    elif args.command == "history":
        exit_code = runner.run_history(market, args.user_id, args.output_format)
    else:
        exit_code = runner.run_reset(market)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
