"""Tests for DataFrame ingestion."""

import pandas as pd
import pytest

from transfer_list import Transfer
from transfer_list.core.records import records_from_dataframe


class TestRecordsFromDataFrame:
    def test_index_as_key(self, item_frame):
        records = records_from_dataframe(item_frame)
        assert [r["key"] for r in records] == ["a", "b", "c"]
        assert records[0]["title"] == "alpha"

    def test_disabled_flag_with_missing_values(self, item_frame):
        records = records_from_dataframe(item_frame)
        assert [r["disabled"] for r in records] == [False, True, False]

    def test_key_column(self):
        df = pd.DataFrame({"code": ["x", "y"], "title": ["X", "Y"]})
        records = records_from_dataframe(df, key_column="code")
        assert [r["key"] for r in records] == ["x", "y"]
        assert records[1]["disabled"] is False

    def test_missing_key_column_raises(self, item_frame):
        with pytest.raises(KeyError, match="not found"):
            records_from_dataframe(item_frame, key_column="code")

    def test_non_dataframe_raises(self):
        with pytest.raises(TypeError, match="DataFrame"):
            records_from_dataframe([{"key": "a"}])


class TestTransferFromDataFrame:
    def test_disabled_row_not_moved(self, item_frame):
        changes = []
        tr = Transfer.from_dataframe(
            item_frame, on_change=lambda *args: changes.append(args)
        )
        tr.select_all("left", ["a", "b", "c"], True)
        tr.move_to_right()
        assert changes == [(["a", "c"], "right", ["a", "c"])]
