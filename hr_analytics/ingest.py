"""Ingest the four HR source tables from delimited exports."""

import logging
from pathlib import Path

import pandas as pd

from hr_analytics.config import InputConfig
from hr_analytics.exceptions import IngestError
from hr_analytics.models import (
    COLUMN_ALIASES,
    FLAG_COLUMNS,
    KEY,
    NO,
    NUMERIC_COLUMNS,
    REQUIRED_COLUMNS,
    YES,
)
from hr_analytics.utils.io import read_table
from hr_analytics.utils.transforms import normalize_columns
from hr_analytics.utils.types import SourceTables

logger = logging.getLogger(__name__)

TABLE_NAMES = ("profile", "compensation", "leave", "tenure")


def normalize_flag(value: object) -> object:
    """Map the many spellings of a yes/no flag onto ``Yes`` / ``No``."""
    if pd.isna(value):
        return value
    match str(value).strip().lower():
        case "yes" | "y" | "true" | "1" | "1.0":
            return YES
        case "no" | "n" | "false" | "0" | "0.0":
            return NO
        case other:
            logger.warning("Unrecognized yes/no flag: %r", other)
            return value


def _normalize_key(series: pd.Series) -> pd.Series:
    """Employee ids join as trimmed strings; ``7`` and ``7.0`` are the same id."""
    def clean(value: object) -> object:
        if pd.isna(value):
            return pd.NA
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        text = str(value).strip()
        return text or pd.NA

    return series.map(clean).astype("string")


def prepare_table(raw: pd.DataFrame, table_name: str) -> pd.DataFrame:
    """Normalize headers and values of one raw export.

    Raises ``IngestError`` when a required column is missing; everything
    else (bad values, null keys, duplicates) is left for the quality checks.
    """
    df = normalize_columns(raw, COLUMN_ALIASES)

    missing = [col for col in REQUIRED_COLUMNS[table_name] if col not in df.columns]
    if missing:
        raise IngestError(
            f"Table '{table_name}' is missing required columns",
            table_name=table_name,
            details={"missing_columns": missing},
        )

    df[KEY] = _normalize_key(df[KEY])

    for col in df.columns:
        if col != KEY and pd.api.types.is_string_dtype(df[col]):
            df[col] = df[col].str.strip()

    for col in FLAG_COLUMNS.get(table_name, []):
        df[col] = df[col].map(normalize_flag)

    for col in NUMERIC_COLUMNS[table_name]:
        df[col] = pd.to_numeric(df[col], errors="coerce")

    if "date_of_hire" in df.columns:
        df["date_of_hire"] = pd.to_datetime(df["date_of_hire"], errors="coerce")

    return df


def ingest_table(path: Path, table_name: str, sep: str = ",") -> pd.DataFrame:
    logger.info("Reading %s table from %s", table_name, path)
    df = prepare_table(read_table(path, sep=sep), table_name)
    logger.info("Loaded %d %s records", len(df), table_name)
    return df


def ingest_hr_tables(inputs: InputConfig, dry_run: bool = False) -> SourceTables:
    """Load all four source tables.

    With ``dry_run`` only the presence of the export files is checked.
    """
    paths = inputs.table_paths()

    if dry_run:
        missing = [str(path) for path in paths.values() if not path.exists()]
        if missing:
            raise FileNotFoundError(f"HR source tables missing: {missing}")
        return {}

    return {
        name: ingest_table(path, name, sep=inputs.separator)
        for name, path in paths.items()
    }
