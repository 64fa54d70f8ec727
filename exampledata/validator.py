"""Validation of a table against a column schema and the generative model."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from exampledata.schema import EXAMPLE_DATA_SCHEMA, ColumnSpec, TableSpec, response

# Columns the Y = f(X, Z, U) check needs, in argument order
_RESPONSE_COLUMNS = ("X", "Z", "U", "Y")


@dataclass
class ValidationResult:
    """Outcome of validating one table."""

    is_valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    row_count: int = 0
    max_response_error: float | None = None

    def add_error(self, message: str) -> None:
        self.errors.append(message)
        self.is_valid = False


class DatasetValidator:
    """Validates a table against a :class:`TableSpec`.

    Structural checks (column presence and order, numeric dtypes, nulls)
    come first. Label and range checks follow from each column's
    ``allowed_values``, ``min_value`` and ``max_value``. The ``Y`` formula is
    checked only when the schema declares ``X``, ``Z``, ``U`` and ``Y`` as
    numeric columns and all of them passed the dtype check.
    """

    def __init__(self, schema: TableSpec = EXAMPLE_DATA_SCHEMA) -> None:
        self.schema = schema

    def validate(self, df: pd.DataFrame, tolerance: float = 1e-9) -> ValidationResult:
        """Validate ``df``.

        Args:
            df: Table to check.
            tolerance: Largest relative error allowed between ``Y`` and the
                value recomputed from ``X``, ``Z`` and ``U``.
        """
        result = ValidationResult(row_count=len(df))

        expected = self.schema.column_names()
        actual = [str(c) for c in df.columns]
        missing = [c for c in expected if c not in actual]
        extra = [c for c in actual if c not in expected]
        if missing:
            result.add_error(f"Missing columns: {missing}")
        if extra:
            result.add_error(f"Unexpected columns: {extra}")
        if not missing and not extra and actual != expected:
            result.add_error(f"Columns out of order: expected {expected}, got {actual}")
        if missing:
            return result

        if len(df) == 0:
            result.warnings.append("Table has no rows.")
            return result

        numeric = []
        for col in self.schema.numeric_columns():
            if pd.api.types.is_numeric_dtype(df[col]):
                numeric.append(col)
            else:
                result.add_error(f"Column '{col}' is not numeric (dtype {df[col].dtype}).")

        for col in expected:
            n_null = int(df[col].isna().sum())
            if n_null:
                result.add_error(f"Column '{col}' has {n_null} null values.")

        for spec in self.schema.categorical_columns():
            self._check_labels(df, spec, result)
        for spec in self.schema.bounded_columns():
            if spec.name in numeric:
                self._check_range(df, spec, result)
        if all(col in numeric for col in _RESPONSE_COLUMNS):
            self._check_response(df, result, tolerance)

        return result

    # ------------------------------------------------------------------
    # Value checks
    # ------------------------------------------------------------------

    def _check_labels(
        self,
        df: pd.DataFrame,
        spec: ColumnSpec,
        result: ValidationResult,
    ) -> None:
        allowed = list(spec.allowed_values)
        values = df[spec.name].dropna().astype(str)
        unknown = sorted(set(values[~values.isin(allowed)]))
        if unknown:
            result.add_error(f"{spec.name} labels {unknown} are not in {allowed}.")

        dtype = df[spec.name].dtype
        if not isinstance(dtype, pd.CategoricalDtype):
            result.warnings.append(f"{spec.name} is not stored as a categorical column.")
        elif list(dtype.categories) != allowed or (spec.ordered and not dtype.ordered):
            result.warnings.append(
                f"{spec.name} categories are not ordered as {allowed}."
            )

    def _check_range(
        self,
        df: pd.DataFrame,
        spec: ColumnSpec,
        result: ValidationResult,
    ) -> None:
        lo = -np.inf if spec.min_value is None else spec.min_value
        hi = np.inf if spec.max_value is None else spec.max_value
        values = df[spec.name].dropna()
        out_of_range = int(((values < lo) | (values > hi)).sum())
        if out_of_range:
            result.add_error(
                f"{out_of_range} values of {spec.name} fall outside [{lo:g}, {hi:g}]."
            )

    def _check_response(
        self,
        df: pd.DataFrame,
        result: ValidationResult,
        tolerance: float,
    ) -> None:
        x, z, u, y = (df[col].to_numpy(dtype=float) for col in _RESPONSE_COLUMNS)

        expected = response(x, z, u)
        scale = np.maximum(np.abs(expected), 1.0)
        rel_err = np.abs(y - expected) / scale
        finite = np.isfinite(rel_err)
        if not finite.any():
            return

        result.max_response_error = float(rel_err[finite].max())
        n_bad = int((rel_err[finite] > tolerance).sum())
        if n_bad:
            result.add_error(
                f"{n_bad} rows have Y differing from 2*X - 0.5*X^2 + Z + "
                f"0.25*(X*Z) + U (max relative error "
                f"{result.max_response_error:.3g})."
            )
