"""Column schema and generative model for the example dataset."""

from __future__ import annotations

import numpy as np
import pandas as pd
from pydantic import BaseModel

SHAPE_CATEGORIES: tuple[str, ...] = ("Circle", "Square", "Triangle")
SHAPE_DTYPE = pd.CategoricalDtype(categories=list(SHAPE_CATEGORIES), ordered=True)

COLUMNS: tuple[str, ...] = ("X", "Z", "U", "Shape", "Y")


class ColumnSpec(BaseModel):
    """One column of a table.

    ``dtype`` is ``"float"`` for numeric columns or ``"category"`` for label
    columns, whose labels are listed in ``allowed_values``. ``min_value`` and
    ``max_value`` bound a numeric column inclusively when set.
    """

    name: str
    dtype: str
    description: str = ""
    allowed_values: list[str] | None = None
    ordered: bool = False
    min_value: float | None = None
    max_value: float | None = None


class TableSpec(BaseModel):
    """Ordered list of column specs making up one table."""

    name: str
    columns: list[ColumnSpec]
    description: str = ""

    def column_names(self) -> list[str]:
        return [col.name for col in self.columns]

    def numeric_columns(self) -> list[str]:
        return [col.name for col in self.columns if col.dtype == "float"]

    def categorical_columns(self) -> list[ColumnSpec]:
        """Return the specs of columns restricted to a fixed set of labels."""
        return [col for col in self.columns if col.allowed_values is not None]

    def bounded_columns(self) -> list[ColumnSpec]:
        return [
            col for col in self.columns
            if col.min_value is not None or col.max_value is not None
        ]


EXAMPLE_DATA_SCHEMA = TableSpec(
    name="example_data",
    description="Simulated observations for the statistics walkthrough.",
    columns=[
        ColumnSpec(name="X", dtype="float", description="Normal(mean=10, sd=1)"),
        ColumnSpec(
            name="Z",
            dtype="float",
            description="Uniform(10, 20)",
            min_value=10,
            max_value=20,
        ),
        ColumnSpec(name="U", dtype="float", description="Normal(mean=0, sd=1) noise"),
        ColumnSpec(
            name="Shape",
            dtype="category",
            description="Drawn uniformly with replacement",
            allowed_values=list(SHAPE_CATEGORIES),
            ordered=True,
        ),
        ColumnSpec(
            name="Y",
            dtype="float",
            description="2*X - 0.5*X^2 + Z + 0.25*(X*Z) + U",
        ),
    ],
)


def response(x, z, u):
    """Return ``Y`` for the given ``X``, ``Z`` and ``U`` (scalars or arrays)."""
    return 2 * x - 0.5 * x**2 + z + 0.25 * (x * z) + u


def empty_frame() -> pd.DataFrame:
    """Return a zero-row frame carrying the five-column schema."""
    return pd.DataFrame({
        "X": np.array([], dtype=float),
        "Z": np.array([], dtype=float),
        "U": np.array([], dtype=float),
        "Shape": pd.Categorical([], dtype=SHAPE_DTYPE),
        "Y": np.array([], dtype=float),
    })
