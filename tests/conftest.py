"""Pytest configuration and fixtures."""

from __future__ import annotations

import itertools

import pandas as pd
import pytest

from modalities import MODALITY_ALL, ModalitySet


@pytest.fixture
def all_sets() -> list[ModalitySet]:
    """Every valid ModalitySet, NONE through ALL."""
    return [ModalitySet(bits) for bits in range(MODALITY_ALL + 1)]


@pytest.fixture
def set_pairs(all_sets: list[ModalitySet]) -> list[tuple[ModalitySet, ModalitySet]]:
    """Every ordered pair of valid sets."""
    return list(itertools.product(all_sets, repeat=2))


@pytest.fixture
def make_media_records():
    """Factory fixture for creating media record DataFrames."""

    def _make(
        modalities: list[int] | None = None,
        prefix: str = "item",
    ) -> pd.DataFrame:
        if modalities is None:
            modalities = [1, 5, 12, 0, 31]

        return pd.DataFrame(
            {
                "item_id": [f"{prefix}_{i:03d}" for i in range(len(modalities))],
                "modalities": pd.Series(modalities, dtype="int64"),
            }
        )

    return _make
