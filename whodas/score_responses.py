"""
Score a CSV file of WHODAS 2.0 responses.

Usage:
    python -m whodas.score_responses responses.csv --work-items
    python -m whodas.score_responses --example 20 -o runs/scores/example.csv
"""

import argparse
import logging
from datetime import datetime
from pathlib import Path

import polars as pl

from whodas.data.data_config import ScoringConfig
from whodas.data.example_data import generate_example_data
from whodas.log_config import configure_logging
from whodas.scoring.quality_checks import check_missing_items
from whodas.scoring.scorer import MissingColumnsError, score

logger = logging.getLogger(__name__.rsplit(".", maxsplit=1)[-1])


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compute WHODAS 2.0 simple scores from a CSV of responses."
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="CSV file with one row per respondent and item columns D1_1 ... D6_8.",
    )
    parser.add_argument(
        "-e",
        "--example",
        type=int,
        metavar="N",
        help="Score N generated example respondents instead of an input file.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output CSV file (default: runs/scores/<input>_scores.csv).",
    )
    parser.add_argument(
        "-w",
        "--work-items",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include (or, with --no-work-items, exclude) the remunerated work items "
        "(Do52, st_s36). Overrides the config file.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="TOML or YAML config file with a [scoring] section.",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug mode. No log file will be written.",
    )
    args = parser.parse_args(argv)
    if (args.input is None) == (args.example is None):
        parser.error("Provide either an input file or --example N.")
    return args


def _default_output(args: argparse.Namespace) -> Path:
    stem = (
        args.input.stem
        if args.input
        else datetime.now().strftime(r"example_%Y_%m_%d__%H_%M_%S")
    )
    return ScoringConfig.OUTPUT_DIR / f"{stem}_scores.csv"


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    log_file = ScoringConfig.LOG_DIR / datetime.now().strftime(r"%Y_%m_%d__%H_%M_%S.log")
    configure_logging(
        stream_level=logging.INFO if not args.debug else logging.DEBUG,
        file_path=log_file if not args.debug else None,
    )
    if args.debug:
        logging.debug("Debug mode is enabled. No log file will be written.")

    config = ScoringConfig.load_config(args.config) if args.config else {}
    include_work_items = (
        args.work_items
        if args.work_items is not None
        else ScoringConfig.include_work_items(config)
    )

    if args.input:
        # read everything as strings, answers are category labels
        responses = pl.read_csv(args.input, infer_schema=False)
        logger.info(f"Loaded {responses.height} respondents from {args.input}.")
    else:
        responses = generate_example_data(args.example, include_work_items)

    try:
        scores = score(responses, include_work_items)
    except MissingColumnsError as e:
        logger.error(f"Cannot score {args.input or 'example data'}: {e}.")
        return 1
    check_missing_items(responses, include_work_items)

    output = args.output or _default_output(args)
    output.parent.mkdir(parents=True, exist_ok=True)
    scores.write_csv(output)
    logger.info(f"Saved scores to {output}.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
