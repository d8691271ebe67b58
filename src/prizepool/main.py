"""Main entry point for the prize pool normalization tool."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from common.validation import ValidationError
from .cli import PrizepoolDisplay
from .config import PrizepoolConfigManager
from .core import summarize, summarize_partitioned
from .formatters import AmountFormatter
from .loaders import EntryLoader
from .loaders.entry_loader import DEFAULT_ID_FIELD, DEFAULT_NAME_FIELD, DEFAULT_RAW_FIELD
from .models import AggregationEntry, Summary
from .normalizers import AmountParser, CurrencyRegistry

logger = logging.getLogger(__name__)


class PrizepoolEngine:
    """Wires configuration, registry, parser, formatter and aggregator together."""

    config_manager: PrizepoolConfigManager
    registry: CurrencyRegistry
    parser: AmountParser
    formatter: AmountFormatter
    display: PrizepoolDisplay

    def __init__(
        self,
        config_manager: Optional[PrizepoolConfigManager] = None,
        display: Optional[PrizepoolDisplay] = None,
    ):
        """Initialize engine.

        Args:
            config_manager: Optional config manager. Creates default if None.
            display: Optional display. Creates a console display if None.
        """
        self.config_manager = config_manager or PrizepoolConfigManager()
        self.registry = CurrencyRegistry(self.config_manager)
        self.parser = AmountParser(self.config_manager, self.registry)
        self.formatter = AmountFormatter(self.registry, self.config_manager.settings)
        self.display = display or PrizepoolDisplay(self.formatter)

        logger.info("Initialized prize pool engine")

    def parse_values(self, values: Sequence[str]) -> List[AggregationEntry]:
        """Parse raw values given on the command line and display them.

        Args:
            values: Raw prize pool strings

        Returns:
            One entry per value, identified by position
        """
        entries = [
            AggregationEntry.from_raw(index, "", value, parser=self.parser.parse)
            for index, value in enumerate(values)
        ]
        self.display.show_parsed_values(entries)
        return entries

    def run_summary(
        self,
        path: Path,
        id_field: str = DEFAULT_ID_FIELD,
        name_field: str = DEFAULT_NAME_FIELD,
        raw_field: str = DEFAULT_RAW_FIELD,
        partitions: Optional[int] = None,
        show_entries: bool = False,
    ) -> Summary:
        """Load entries from a file, summarize them and display the result.

        Args:
            path: CSV or JSON file with one record per entry
            id_field: Column holding the entry identity
            name_field: Column holding the display name
            raw_field: Column holding the raw prize pool
            partitions: Partition count (defaults to settings.partition_count)
            show_entries: Whether to list each group's entries

        Returns:
            Summary of the loaded entries
        """
        loader = EntryLoader(self.parser, id_field, name_field, raw_field)
        entries = loader.load(path)

        partition_count = partitions or self.config_manager.settings.partition_count
        if partition_count > 1:
            summary = summarize_partitioned(entries, partition_count)
        else:
            summary = summarize(entries)

        logger.info(
            f"Summarized {summary.total_entries} entries: {summary.currencies_found} currencies, "
            f"{summary.unrecognized_count} unrecognized"
        )
        for group in summary.groups:
            logger.debug(group.summary_line)

        self.display.show_summary(summary, show_entries=show_entries)
        return summary


def setup_logging(log_level: str = "NONE") -> None:
    """Set up logging configuration.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, NONE)
    """
    # Remove any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if log_level.upper() == "NONE":
        logging.getLogger().setLevel(logging.CRITICAL + 1)  # Higher than CRITICAL
        return

    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Prize Pool Normalizer")
    parser.add_argument(
        "values",
        nargs="*",
        help="Raw prize pool strings to parse (e.g. '$1,000,000' '€2.5M')",
    )
    parser.add_argument("--file", type=Path, help="CSV or JSON file of entries to summarize")
    parser.add_argument("--id-field", default=DEFAULT_ID_FIELD, help="Entry id column")
    parser.add_argument("--name-field", default=DEFAULT_NAME_FIELD, help="Entry name column")
    parser.add_argument(
        "--raw-field",
        default=DEFAULT_RAW_FIELD,
        help=f"Raw prize pool column (default: {DEFAULT_RAW_FIELD})",
    )
    parser.add_argument(
        "--partitions",
        type=int,
        default=None,
        help="Summarize in this many parallel partitions",
    )
    parser.add_argument(
        "--show-entries",
        action="store_true",
        help="List the ranked entries of every currency group",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "NONE"],
        default="NONE",
        help="Set logging level",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the prize pool normalization tool."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    if not args.values and args.file is None:
        parser.error("provide raw values to parse or --file to summarize")

    display: Optional[PrizepoolDisplay] = None
    try:
        engine = PrizepoolEngine()
        display = engine.display
        display.show_header()

        if args.values:
            engine.parse_values(args.values)

        if args.file is not None:
            if not args.file.exists():
                logger.error(
                    f"Entries file not found at '{args.file}'. Please check the file path and try again."
                )
                display.show_error(f"File not found: {args.file}")
                sys.exit(1)

            engine.run_summary(
                args.file,
                id_field=args.id_field,
                name_field=args.name_field,
                raw_field=args.raw_field,
                partitions=args.partitions,
                show_entries=args.show_entries,
            )

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(1)
    except (ValidationError, FileNotFoundError, ValueError) as e:
        logger.error(f"Fatal error: {e}. Please check the input data and try again.")
        if display is not None:
            display.show_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
