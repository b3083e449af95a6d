# main.py

"""Entry point for the DESCU catalog browser (headless CLI)."""

import argparse
import asyncio
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings
from src.models.listing import Category

logger = logging.getLogger("descu.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    categories = ", ".join(c.value for c in Category)

    parser = argparse.ArgumentParser(
        prog="descu",
        description="Browse a ranked local marketplace catalog.",
        epilog=f"Categories: all, {categories}",
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Free-text search. Omit to list everything.",
    )
    parser.add_argument(
        "-c",
        "--category",
        default=None,
        help="Category facet (default: all).",
    )
    parser.add_argument(
        "-l",
        "--locale",
        default=Settings.DEFAULT_LOCALE,
        choices=Settings.SUPPORTED_LOCALES,
        help=f"Display locale (default: {Settings.DEFAULT_LOCALE}).",
    )
    parser.add_argument(
        "--lat",
        type=float,
        default=None,
        dest="latitude",
        help="Viewer latitude. Without --lat/--lon the fallback is used.",
    )
    parser.add_argument(
        "--lon",
        type=float,
        default=None,
        dest="longitude",
        help="Viewer longitude.",
    )
    parser.add_argument(
        "-n",
        "--count",
        type=int,
        default=None,
        help=(
            "Synthetic listings to generate "
            f"(default: {Settings.SYNTHETIC_CATALOG_SIZE})."
        ),
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible catalog.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table", "tsv"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        dest="output_dir",
        help="Directory for --save (default: results/).",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        default=False,
        help="Also write the ranked list to a file.",
    )
    parser.add_argument(
        "--save-format",
        choices=["json", "csv"],
        default="json",
        dest="save_format",
        help="File format for --save (default: json).",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse and cross-check command-line arguments."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if (args.latitude is None) != (args.longitude is None):
        parser.error("--lat and --lon must be given together")
    return args


def main() -> None:
    """Parse arguments and run one ranked catalog view."""
    log_file = setup_logging()
    logger.info("descu starting, log file: %s", log_file)

    args = parse_args()

    from src.cli.runner import cli_browse

    try:
        exit_code = asyncio.run(
            cli_browse(
                query=args.query,
                category_raw=args.category,
                locale=args.locale,
                latitude=args.latitude,
                longitude=args.longitude,
                count=args.count,
                seed=args.seed,
                output_format=args.output_format,
                output_dir=args.output_dir,
                save=args.save,
                save_format=args.save_format,
            )
        )
    except Exception:
        logger.critical("Fatal error during CLI run", exc_info=True)
        raise
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
