"""Command line entry point: generate the example dataset and write it to CSV."""

from __future__ import annotations

import argparse
import logging

from pydantic import ValidationError

from exampledata.config import DEFAULT_N_ROWS, DEFAULT_OUTPUT, GeneratorConfig
from exampledata.errors import InvalidInputError
from exampledata.generator import ExampleDataGenerator
from exampledata.loader import load_dataset
from exampledata.validator import DatasetValidator

logger = logging.getLogger("exampledata")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="example-data",
        description="Generate the synthetic X, Z, U, Shape, Y example dataset",
    )
    parser.add_argument(
        "--n-rows", type=int, default=None,
        help=f"Number of records (default: {DEFAULT_N_ROWS})",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed (default: unseeded)",
    )
    parser.add_argument(
        "--output", type=str, default=None,
        help=f"Output CSV file (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="JSON config file; explicit flags override its values",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> GeneratorConfig:
    """Merge the optional config file with command line overrides."""
    base = GeneratorConfig.from_json(args.config) if args.config else GeneratorConfig()
    overrides = {
        key: value
        for key, value in (
            ("n_rows", args.n_rows),
            ("seed", args.seed),
            ("output", args.output),
        )
        if value is not None
    }
    return GeneratorConfig(**{**base.model_dump(), **overrides})


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = resolve_config(args)
        generator = ExampleDataGenerator(config)
        generator.generate_and_save()
        written = load_dataset(config.output)
    except (InvalidInputError, ValidationError, OSError) as e:
        logger.error("Generation failed: %s", e)
        return 1

    result = DatasetValidator().validate(written)
    for warning in result.warnings:
        logger.warning(warning)
    if not result.is_valid:
        for error in result.errors:
            logger.error(error)
        return 1

    logger.info(
        "Wrote %d records to %s (seed=%s)",
        result.row_count, config.output, config.seed,
    )
    return 0
