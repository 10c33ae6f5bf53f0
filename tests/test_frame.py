"""Tests for modality bitmask column helpers."""

from __future__ import annotations

import pandas as pd
import pytest

from modalities import InvalidNameError, ModalitySet, contains
from modalities.frame import (
    MEDIA_RECORD_FIELDS,
    bits_from_names_column,
    contains_mask,
    display_column,
    flag_counts,
    names_column,
    to_sets,
    validate_modality_column,
)
from modalities.validate import require_columns, require_modality_bits


class TestValidationHelpers:
    """Tests for the column validation helpers."""

    def test_missing_column_raises(self) -> None:
        with pytest.raises(ValueError, match="Missing columns"):
            require_columns(["item_id"], MEDIA_RECORD_FIELDS)

    def test_dataset_name_in_error(self) -> None:
        with pytest.raises(ValueError, match="media_index"):
            require_columns(["item_id"], MEDIA_RECORD_FIELDS, dataset="media_index")

    def test_nulls_raise_with_count(self) -> None:
        df = pd.DataFrame({"modalities": [1, None, None]})
        with pytest.raises(ValueError, match="2 rows"):
            require_modality_bits(df, "modalities")

    def test_float_dtype_raises(self) -> None:
        df = pd.DataFrame({"modalities": [1.0, 2.0]})
        with pytest.raises(ValueError, match="Dtype mismatch"):
            require_modality_bits(df, "modalities")

    def test_bool_dtype_raises(self) -> None:
        df = pd.DataFrame({"modalities": [True, False]})
        with pytest.raises(ValueError, match="Dtype mismatch"):
            require_modality_bits(df, "modalities")

    def test_undefined_bits_raise(self) -> None:
        """Values with bits above ALL or below zero should fail with indices."""
        df = pd.DataFrame({"modalities": [1, 32, 31, -1]})
        with pytest.raises(ValueError, match=r"Undefined modality bits.*\(2 rows\).*\[1, 3\]"):
            require_modality_bits(df, "modalities")

    def test_defined_bits_pass(self) -> None:
        df = pd.DataFrame({"modalities": list(range(32))})
        require_modality_bits(df, "modalities")


class TestValidateModalityColumn:
    """Tests for validate_modality_column."""

    def test_valid_frame_passes(self, make_media_records) -> None:
        validate_modality_column(make_media_records())

    def test_empty_frame_passes(self) -> None:
        df = pd.DataFrame({"item_id": [], "modalities": pd.Series([], dtype="int64")})
        validate_modality_column(df)

    def test_bad_bits_fail(self, make_media_records) -> None:
        df = make_media_records([1, 64])
        with pytest.raises(ValueError, match=r"\[media\] Undefined modality bits"):
            validate_modality_column(df, dataset="media")

    def test_custom_column_name(self) -> None:
        df = pd.DataFrame({"inputs": [3, 4]})
        validate_modality_column(df, col="inputs")
        with pytest.raises(ValueError, match="Missing columns"):
            validate_modality_column(df)


class TestConversions:
    """Tests for name and display columns."""

    def test_to_sets(self, make_media_records) -> None:
        sets = to_sets(make_media_records([5])["modalities"])
        assert sets.iloc[0] == ModalitySet.AUDIO | ModalitySet.TEXT

    def test_names_column(self, make_media_records) -> None:
        df = make_media_records([1, 12, 0])
        names = names_column(df["modalities"])
        assert names.tolist() == [["audio"], ["text", "video"], []]

    def test_display_column(self, make_media_records) -> None:
        df = make_media_records([5, 0])
        assert display_column(df["modalities"]).tolist() == ["audio | text", "none"]

    def test_bits_from_names_column(self) -> None:
        series = pd.Series([["video", "audio"], [], ["other"]], name="modalities")
        bits = bits_from_names_column(series)
        assert bits.tolist() == [9, 0, 16]
        assert bits.name == "modalities"
        assert str(bits.dtype) == "int64"

    def test_bits_from_names_column_invalid(self) -> None:
        series = pd.Series([["audio"], ["image", "bogus"], ["nope"]])
        with pytest.raises(InvalidNameError) as exc_info:
            bits_from_names_column(series)
        assert exc_info.value.name == "bogus"

    def test_round_trip(self, make_media_records) -> None:
        df = make_media_records()
        restored = bits_from_names_column(names_column(df["modalities"]))
        pd.testing.assert_series_equal(restored, df["modalities"])


class TestContainsMask:
    """Tests for the vectorised subset test."""

    def test_matches_scalar_contains(self, make_media_records) -> None:
        df = make_media_records(list(range(32)))
        query = ModalitySet.AUDIO | ModalitySet.TEXT
        mask = contains_mask(df["modalities"], query)
        expected = [contains(ModalitySet(b), query) for b in range(32)]
        assert mask.tolist() == expected

    def test_none_query_all_true(self, make_media_records) -> None:
        df = make_media_records()
        assert contains_mask(df["modalities"], ModalitySet.NONE).all()

    def test_filtering(self, make_media_records) -> None:
        df = make_media_records([1, 5, 12, 0, 31])
        with_text = df[contains_mask(df["modalities"], ModalitySet.TEXT)]
        assert with_text["item_id"].tolist() == ["item_001", "item_002", "item_004"]


class TestFlagCounts:
    """Tests for per-flag row counts."""

    def test_counts_in_declaration_order(self, make_media_records) -> None:
        df = make_media_records([1, 5, 12, 0, 31])
        counts = flag_counts(df["modalities"])
        assert counts.index.tolist() == ["audio", "image", "text", "video", "other"]
        assert counts.tolist() == [3, 1, 3, 2, 1]

    def test_empty_series(self) -> None:
        counts = flag_counts(pd.Series([], dtype="int64"))
        assert counts.sum() == 0
        assert len(counts) == 5


class TestInvalidInput:
    """Column helpers should reject the same input validate_modality_column does."""

    def test_contains_mask_undefined_bits(self) -> None:
        series = pd.Series([64, 5], name="modalities")
        with pytest.raises(ValueError, match=r"Undefined modality bits.*\[0\]"):
            contains_mask(series, ModalitySet.NONE)

    def test_contains_mask_nulls(self) -> None:
        series = pd.Series([5.0, float("nan")])
        with pytest.raises(ValueError, match="Null values"):
            contains_mask(series, ModalitySet.TEXT)

    def test_flag_counts_nulls(self) -> None:
        series = pd.Series([5.0, float("nan")])
        with pytest.raises(ValueError, match=r"Null values.*\(1 rows\)"):
            flag_counts(series)

    def test_flag_counts_float_dtype(self) -> None:
        series = pd.Series([5.0, 1.0], name="inputs")
        with pytest.raises(ValueError, match="column 'inputs' must be an integer bitmask"):
            flag_counts(series)

    def test_flag_counts_negative(self) -> None:
        with pytest.raises(ValueError, match="Undefined modality bits"):
            flag_counts(pd.Series([-1, 3]))

    def test_to_sets_float_dtype(self) -> None:
        with pytest.raises(ValueError, match="Dtype mismatch"):
            to_sets(pd.Series([5.0]))
