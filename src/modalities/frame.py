"""Tabular helpers for modality bitmask columns.

Datasets describing multimodal inputs store their modalities as a single
integer column (default name "modalities"), the same way a QC flag column
stores several issues at once. These helpers validate such a column and
convert it to and from names without leaving pandas.

Key rules:
- The bitmask column is the source of truth; names are derived on demand
- Validation never edits data, it only raises
"""

from __future__ import annotations

import logging
from typing import TypedDict

import numpy as np
import pandas as pd

from modalities.config import DisplayConfig
from modalities.flags import FLAG_NAMES
from modalities.modality_set import ModalitySet, display, from_names, to_names
from modalities.validate import require_columns, require_modality_bits

logger = logging.getLogger(__name__)


class MediaRecord(TypedDict):
    """A single input in a multimodal dataset."""

    item_id: str  # Identifier of the input (e.g., a file stem)
    modalities: int  # Modality bitmask (0 = none detected)


MEDIA_RECORD_FIELDS = ["item_id", "modalities"]

DEFAULT_COLUMN = "modalities"


def validate_modality_column(
    df: pd.DataFrame,
    col: str = DEFAULT_COLUMN,
    dataset: str | None = None,
) -> None:
    """Validate that a DataFrame holds a well-formed modality bitmask column.

    Checks performed:
    - Column present
    - No nulls, integer dtype, no bits outside the defined modalities

    Raises:
        ValueError: If any validation check fails
    """
    require_columns(df.columns, [col], dataset=dataset)

    if df.empty:
        return

    require_modality_bits(df, col, dataset=dataset)
    logger.debug("Validated %d rows of column %r", len(df), col)


def _require_bitmask_series(series: pd.Series) -> np.ndarray:
    """Validate a bitmask Series and return its values as int64."""
    col = series.name if series.name is not None else DEFAULT_COLUMN
    require_modality_bits(series.to_frame(name=col), col)
    return series.to_numpy(dtype=np.int64)


def to_sets(series: pd.Series) -> pd.Series:
    """Wrap each bitmask in a ModalitySet.

    Raises:
        ValueError: On nulls, non-integer values or undefined bits
    """
    _require_bitmask_series(series)
    return series.map(lambda bits: ModalitySet(int(bits)))


def names_column(series: pd.Series) -> pd.Series:
    """Map a bitmask column to lists of names in declaration order."""
    return to_sets(series).map(to_names)


def display_column(series: pd.Series, config: DisplayConfig | None = None) -> pd.Series:
    """Map a bitmask column to display strings."""
    return to_sets(series).map(lambda m: display(m, config))


def bits_from_names_column(series: pd.Series) -> pd.Series:
    """Map a column of name lists back to integer bitmasks.

    Raises:
        InvalidNameError: On the first unknown name, scanning rows in order
    """
    bits = [from_names(names).bits for names in series]
    logger.debug("Encoded %d rows of modality names", len(bits))
    return pd.Series(bits, index=series.index, name=series.name, dtype="int64")


def contains_mask(series: pd.Series, query: ModalitySet) -> pd.Series:
    """Vectorised subset test: True where every flag of ``query`` is set.

    As with contains(), a NONE query is True on every row.
    """
    values = _require_bitmask_series(series)
    mask = np.bitwise_and(values, query.bits) == query.bits
    return pd.Series(mask, index=series.index, name=series.name)


def flag_counts(series: pd.Series) -> pd.Series:
    """Count rows carrying each flag, indexed by name in declaration order."""
    values = _require_bitmask_series(series)
    counts = {
        name: int(np.count_nonzero(np.bitwise_and(values, bit)))
        for name, bit in FLAG_NAMES
    }
    return pd.Series(counts, dtype="int64", name="count")
