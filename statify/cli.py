"""Command-line interface for Statify."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from statify import __version__
from statify.analysis import frequency_distribution, generate_insights
from statify.config import get_settings
from statify.core.engine import EmptyInputError, compute_all
from statify.core.parsing import read_sample_file, validate_input
from statify.datasets import get_dataset, list_datasets
from statify.export import export_csv

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="statify",
        description="Descriptive statistics for a list of numbers",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "data",
        nargs="?",
        help="Numbers separated by commas, spaces or semicolons ('-' reads stdin)",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--file",
        help="Read numbers from a .csv or .txt file",
    )
    source.add_argument(
        "--sample",
        help="Use a built-in sample dataset",
    )
    parser.add_argument(
        "--list-samples",
        action="store_true",
        help="List built-in sample datasets",
    )
    parser.add_argument(
        "--classes",
        type=int,
        default=None,
        help="Number of classes for the class width (0 uses Sturges' rule)",
    )
    parser.add_argument(
        "--bins",
        type=int,
        default=None,
        help="Number of frequency distribution bins",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json", "csv"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--insights",
        action="store_true",
        help="Include rule-based insights",
    )
    return parser


def _load_data(args: argparse.Namespace) -> list[float] | None:
    """Resolve the data source; None means nothing was given."""
    if args.sample:
        return get_dataset(args.sample)

    if args.file:
        return read_sample_file(args.file)

    if args.data is None:
        return None

    text = sys.stdin.read() if args.data == "-" else args.data
    validation = validate_input(text)
    if validation.warning:
        print(f"Warning: {validation.warning}", file=sys.stderr)
    return validation.data


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.list_samples:
        for name in list_datasets():
            print(name)
        return 0

    if args.data is not None and (args.file or args.sample):
        parser.error("data cannot be combined with --file or --sample")

    try:
        data = _load_data(args)
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        logger.error(f"Could not load data: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if data is None:
        parser.print_help()
        return 0

    num_classes = settings.default_num_classes if args.classes is None else args.classes
    num_bins = settings.histogram_bins if args.bins is None else args.bins
    if num_bins < 1:
        print("Error: --bins must be at least 1", file=sys.stderr)
        return 1

    result = compute_all(data, num_classes)
    if isinstance(result, EmptyInputError):
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    precision = settings.display_precision
    bins = frequency_distribution(result.raw_data, num_bins=num_bins)
    report = None
    if args.insights:
        report = generate_insights(
            result,
            iqr_multiplier=settings.outlier_iqr_multiplier,
            min_sample_size=settings.min_recommended_sample_size,
        )

    if args.format == "csv":
        sys.stdout.write(export_csv(result, precision))
    elif args.format == "json":
        payload: dict[str, Any] = result.to_dict(precision=precision)
        payload["frequency_distribution"] = [b.to_dict() for b in bins]
        if report is not None:
            payload["insights"] = report.to_dict()
        print(json.dumps(payload, indent=2))
    else:
        parts = [result.format_for_display(precision)]
        parts.append(
            "**Frequency Distribution:**\n"
            + "\n".join(f"  {b.label}: {b.count}" for b in bins)
        )
        if report is not None:
            parts.append(report.format_for_display())
        print("\n\n".join(parts))

    return 0


if __name__ == "__main__":
    sys.exit(main())
