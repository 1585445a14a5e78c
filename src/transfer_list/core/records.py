"""Build transfer item records from a pandas DataFrame."""

from __future__ import annotations

from typing import Any

import pandas as pd


def records_from_dataframe(
    df: Any,
    key_column: str | None = None,
    disabled_column: str | None = "disabled",
) -> list[dict[str, Any]]:
    """Convert DataFrame rows into item records, one per row.

    Parameters
    ----------
    df : pd.DataFrame
        One row per item. Row order becomes dataset order.
    key_column : str, optional
        Column holding the item key. Uses the index when None.
    disabled_column : str, optional
        Boolean column flagging disabled items. Ignored when absent;
        missing values count as enabled.
    """
    if not isinstance(df, pd.DataFrame):
        raise TypeError(
            f"Expected a pandas DataFrame, got {type(df).__name__}."
        )
    if key_column is not None and key_column not in df.columns:
        raise KeyError(
            f"Key column '{key_column}' not found. "
            f"Available: {list(df.columns)}"
        )

    if key_column is None:
        keys = df.index.tolist()
    else:
        keys = df[key_column].tolist()

    if disabled_column is not None and disabled_column in df.columns:
        disabled = [
            bool(value) if pd.notna(value) else False
            for value in df[disabled_column].tolist()
        ]
    else:
        disabled = [False] * len(df)

    records: list[dict[str, Any]] = []
    for key, is_disabled, row in zip(keys, disabled, df.to_dict(orient="records")):
        record = {**row, "key": key}
        record["disabled"] = is_disabled
        records.append(record)
    return records
