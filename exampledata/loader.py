"""Read a written example dataset back into a typed DataFrame."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from exampledata.errors import InvalidInputError
from exampledata.schema import (
    COLUMNS,
    EXAMPLE_DATA_SCHEMA,
    SHAPE_CATEGORIES,
    SHAPE_DTYPE,
)

logger = logging.getLogger(__name__)


def load_dataset(path: str | Path) -> pd.DataFrame:
    """Load an ``X,Z,U,Shape,Y`` CSV file.

    Numeric columns come back as ``float64`` and ``Shape`` as the ordered
    categorical (Circle < Square < Triangle).

    Raises:
        FileNotFoundError: If the file does not exist.
        InvalidInputError: If the header does not match the schema or a
            ``Shape`` label is outside the category set, or a numeric
            cell does not parse as a number.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    numeric = EXAMPLE_DATA_SCHEMA.numeric_columns()
    try:
        df = pd.read_csv(
            path,
            dtype={"Shape": str, **{col: float for col in numeric}},
            float_precision="round_trip",
            encoding="utf-8",
        )
    except ValueError as e:
        raise InvalidInputError(f"{path}: cannot parse as example data: {e}") from e
    if list(df.columns) != list(COLUMNS):
        raise InvalidInputError(
            f"{path}: expected header {','.join(COLUMNS)}, "
            f"got {','.join(map(str, df.columns))}"
        )

    unknown = sorted(set(df.loc[~df["Shape"].isin(SHAPE_CATEGORIES), "Shape"].astype(str)))
    if unknown:
        raise InvalidInputError(
            f"{path}: Shape labels {unknown} are not in {list(SHAPE_CATEGORIES)}"
        )

    df["Shape"] = df["Shape"].astype(SHAPE_DTYPE)
    logger.debug("Loaded %d rows from %s", len(df), path)
    return df
