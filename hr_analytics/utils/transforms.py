"""Common data transformation utilities."""

import re

import numpy as np
import pandas as pd

type ColumnMapping = dict[str, str]

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_snake_case(name: str) -> str:
    """``MonthlyIncome`` -> ``monthly_income``, ``Date_of_Hire`` -> ``date_of_hire``."""
    name = _CAMEL_BOUNDARY.sub("_", name.strip())
    name = name.lower().replace(" ", "_").replace("-", "_")
    return re.sub(r"_+", "_", name).strip("_")


def normalize_columns(df: pd.DataFrame, mapping: ColumnMapping | None = None) -> pd.DataFrame:
    """Normalize column names to snake_case and apply optional mapping."""
    df = df.copy()
    df.columns = [to_snake_case(str(col)) for col in df.columns]

    if mapping:
        df = df.rename(columns=mapping)

    return df


def merge_datasets(
    left: pd.DataFrame,
    right: pd.DataFrame,
    on: str | list[str],
    how: str = "inner",
) -> pd.DataFrame:
    """Merge two datasets on a key, following SQL null-key semantics.

    pandas matches NaN keys with each other; SQL joins never do, so rows
    with a null key are dropped from both sides first.
    """
    keys = [on] if isinstance(on, str) else list(on)
    left = left.dropna(subset=keys)
    right = right.dropna(subset=keys)

    match how:
        case "left" | "right" | "inner" | "outer":
            result = pd.merge(left, right, on=on, how=how)
        case other:
            raise ValueError(f"Unsupported merge type: {other}")

    return result


def round_half_up(values: pd.Series | float, decimals: int = 0) -> pd.Series | float:
    """Round half away from zero, like SQL ``ROUND``.

    Python and pandas round half to even, which turns an average of 2.5
    into 2 where the database reports 3.
    """
    factor = 10.0 ** decimals
    scaled = np.round(np.asarray(values, dtype=float) * factor, 9)
    rounded = np.sign(scaled) * np.floor(np.abs(scaled) + 0.5) / factor
    if isinstance(values, pd.Series):
        return pd.Series(rounded, index=values.index, name=values.name)
    return float(rounded)


def truncate(values: pd.Series | float, decimals: int = 0) -> pd.Series | float:
    """Drop digits past ``decimals`` without rounding, like SQL ``TRUNCATE``."""
    factor = 10.0 ** decimals
    truncated = np.trunc(np.round(np.asarray(values, dtype=float) * factor, 9)) / factor
    if isinstance(values, pd.Series):
        return pd.Series(truncated, index=values.index, name=values.name)
    return float(truncated)


def count_by(
    df: pd.DataFrame,
    by: str,
    name: str = "count",
    value: str | None = None,
) -> pd.DataFrame:
    """Row count per group, or the non-null count of ``value`` when given.

    Null group keys form their own group, as SQL ``GROUP BY`` does. Groups
    that have no rows never appear.
    """
    grouped = df.groupby(by, dropna=False, sort=True)
    counts = grouped.size() if value is None else grouped[value].count()
    return counts.rename(name).reset_index()


def mean_by(df: pd.DataFrame, by: str, value: str, name: str) -> pd.DataFrame:
    """Average of ``value`` per group, skipping nulls like SQL ``AVG``."""
    values = pd.to_numeric(df[value], errors="coerce")
    means = values.groupby(df[by], dropna=False, sort=True).mean()
    return means.rename(name).rename_axis(by).reset_index()
