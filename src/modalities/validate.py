"""Validation helpers for modality bitmask columns.

These helpers ensure DataFrames carrying modality bitmasks are well formed.
All helpers raise ValueError with actionable messages including:
- Dataset name (if provided)
- Offending columns
- Count of failing rows
- Sample of failing row indices (first 5)
"""

from __future__ import annotations

from typing import Any, Iterable

import numpy as np
import pandas as pd

from modalities.flags import MODALITY_ALL


def _format_error(
    dataset: str | None,
    rule: str,
    detail: str,
    failing_indices: list[Any] | None = None,
    count: int | None = None,
) -> str:
    """Format a validation error message consistently."""
    parts = []
    if dataset:
        parts.append(f"[{dataset}] ")
    parts.append(rule)
    parts.append(f": {detail}")
    if count is not None:
        parts.append(f" ({count} rows)")
    if failing_indices:
        sample = failing_indices[:5]
        parts.append(f" | sample indices: {sample}")
    return "".join(parts)


def require_columns(
    df_columns: Iterable[str],
    required: Iterable[str],
    dataset: str | None = None,
) -> None:
    """Raise ValueError if required columns are missing.

    Args:
        df_columns: Column names from a DataFrame (e.g., df.columns)
        required: Required column names
        dataset: Optional dataset name for error messages

    Raises:
        ValueError: If any required columns are missing
    """
    missing = set(required) - set(df_columns)
    if missing:
        raise ValueError(
            _format_error(dataset, "Missing columns", f"{sorted(missing)}")
        )


def require_modality_bits(
    df: pd.DataFrame,
    col: str,
    dataset: str | None = None,
) -> None:
    """Raise ValueError unless a column holds valid modality bitmasks.

    A valid column has no nulls, an integer dtype, and values that are
    non-negative with no bits outside MODALITY_ALL.

    Args:
        df: DataFrame to check
        col: Column name holding bitmasks
        dataset: Optional dataset name for error messages

    Raises:
        ValueError: On nulls, a non-integer dtype, or a value that is
            negative or sets an undefined bit
    """
    if col not in df.columns:
        return  # Let require_columns handle missing columns

    if df.empty:
        return

    null_mask = df[col].isna()
    null_count = int(null_mask.sum())
    if null_count > 0:
        raise ValueError(
            _format_error(
                dataset,
                "Null values",
                f"column '{col}' has nulls",
                df.index[null_mask].tolist(),
                null_count,
            )
        )

    actual = df[col].dtype
    if pd.api.types.is_bool_dtype(actual) or not pd.api.types.is_integer_dtype(actual):
        raise ValueError(
            _format_error(
                dataset,
                "Dtype mismatch",
                f"column '{col}' must be an integer bitmask, got {actual}",
            )
        )

    values = df[col].to_numpy(dtype=np.int64)
    bad = (values < 0) | (np.bitwise_and(values, ~np.int64(MODALITY_ALL)) != 0)
    bad_count = int(bad.sum())
    if bad_count > 0:
        failing_indices = df.index[bad].tolist()
        raise ValueError(
            _format_error(
                dataset,
                "Undefined modality bits",
                f"column '{col}' must be a subset of {MODALITY_ALL}",
                failing_indices,
                bad_count,
            )
        )
