"""Synthetic generator for the example dataset.

Each record is drawn independently from a fixed generative model::

    X     ~ Normal(10, 1)
    Z     ~ Uniform(10, 20)
    U     ~ Normal(0, 1)
    Shape ~ uniform over (Circle, Square, Triangle), with replacement
    Y     = 2*X - 0.5*X^2 + Z + 0.25*(X*Z) + U

The random source is injectable: pass a seed or a ``numpy.random.Generator``
to get reproducible values, or nothing for a fresh unseeded stream.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import numpy as np
import pandas as pd

from exampledata.config import GeneratorConfig
from exampledata.errors import InvalidInputError
from exampledata.schema import (
    COLUMNS,
    SHAPE_CATEGORIES,
    SHAPE_DTYPE,
    empty_frame,
    response,
)

logger = logging.getLogger(__name__)

RandomSource = np.random.Generator | int | None


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


def generate_dataset(n: int, rng: RandomSource = None) -> pd.DataFrame:
    """Generate ``n`` records as a DataFrame with columns ``X, Z, U, Shape, Y``.

    Args:
        n: Number of records. Must be a non-negative integer; ``0`` returns
            an empty table that still carries the five columns.
        rng: A ``numpy.random.Generator``, an integer seed, or ``None`` for
            an unseeded generator.

    Raises:
        InvalidInputError: If ``n`` is negative or not an integer.
    """
    _check_size(n)
    n = int(n)
    if n == 0:
        return empty_frame()
    rng = np.random.default_rng(rng)

    x = rng.normal(loc=10, scale=1, size=n)
    z = rng.uniform(low=10, high=20, size=n)
    u = rng.normal(loc=0, scale=1, size=n)
    shape = rng.choice(list(SHAPE_CATEGORIES), size=n, replace=True)

    return pd.DataFrame({
        "X": x,
        "Z": z,
        "U": u,
        "Shape": pd.Categorical(shape, dtype=SHAPE_DTYPE),
        "Y": response(x, z, u),
    })


def _check_size(n: object) -> None:
    # bool is an int subclass but never a row count
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, (int, np.integer)):
        raise InvalidInputError(
            f"Number of records must be an integer, got {type(n).__name__} {n!r}"
        )
    if n < 0:
        raise InvalidInputError(f"Number of records must be >= 0, got {n}")


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------


def write_dataset(dataset: pd.DataFrame, path: str | Path) -> None:
    """Write ``dataset`` to ``path`` as UTF-8 comma-separated text.

    The header is ``X,Z,U,Shape,Y`` and rows follow in generation order.
    Floats use the shortest decimal form that parses back to the same value.

    Raises:
        InvalidInputError: If the columns are not ``X, Z, U, Shape, Y``.
        FileNotFoundError: If the parent directory does not exist.
        OSError: If the file cannot be written.
    """
    if list(dataset.columns) != list(COLUMNS):
        raise InvalidInputError(
            f"Expected columns {list(COLUMNS)}, got {list(dataset.columns)}"
        )

    path = Path(path)
    if not path.parent.exists():
        raise FileNotFoundError(f"Directory not found: {path.parent}")

    # A failed write leaves any previous file at path untouched.
    tmp_path = path.with_name(f".{path.name}.{os.getpid()}.tmp")
    try:
        dataset.to_csv(tmp_path, index=False, encoding="utf-8", lineterminator="\n")
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    logger.debug("Wrote %d rows to %s", len(dataset), path)


class ExampleDataGenerator:
    """Generate and save the example dataset according to a :class:`GeneratorConfig`."""

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = config or GeneratorConfig()
        self.rng = np.random.default_rng(self.config.seed)

    def generate(self) -> pd.DataFrame:
        """Generate ``config.n_rows`` records."""
        df = generate_dataset(self.config.n_rows, rng=self.rng)
        logger.info("Generated %d records", len(df))
        return df

    def generate_and_save(self, path: str | Path | None = None) -> pd.DataFrame:
        """Generate, write to ``path`` (default ``config.output``), and return the table."""
        path = Path(path) if path is not None else self.config.output
        df = self.generate()
        write_dataset(df, path)
        logger.info("Saved %d records -> %s", len(df), path)
        return df
