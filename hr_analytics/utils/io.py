"""File I/O utilities for reading and writing pipeline tables."""

import logging
import tomllib
from pathlib import Path

import pandas as pd
from rich.console import Console

type FilePath = str | Path

logger = logging.getLogger(__name__)
console = Console()

SUPPORTED_FORMATS = ("csv", "json", "parquet")


def read_table(path: FilePath, sep: str = ",") -> pd.DataFrame:
    """Read one delimited export, handling encoding quirks."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input table missing: {path}")

    for encoding in ("utf-8", "latin-1", "cp1252"):
        try:
            return pd.read_csv(path, sep=sep, encoding=encoding, skipinitialspace=True)
        except UnicodeDecodeError:
            continue
    raise ValueError(f"Could not decode {path}")


def output_path(base: FilePath, name: str, fmt: str) -> Path:
    match fmt:
        case "csv" | "json" | "parquet":
            return Path(base) / f"{name}.{fmt}"
        case other:
            raise ValueError(f"Unsupported output format: {other}")


def write_output(df: pd.DataFrame, path: FilePath, fmt: str = "csv") -> Path:
    """Write a DataFrame to the specified format."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    match fmt:
        case "csv":
            df.to_csv(path, index=False)
        case "parquet":
            df.to_parquet(path, index=False)
        case "json":
            df.to_json(path, orient="records", indent=2, date_format="iso")
        case other:
            raise ValueError(f"Unsupported output format: {other}")

    logger.debug("Wrote %d rows to %s", len(df), path)
    console.print(f"  Wrote {len(df)} rows to {path}")
    return path


def load_toml_config(path: FilePath) -> dict:
    """Load a TOML configuration file using Python 3.11+ stdlib."""
    with open(path, "rb") as f:
        return tomllib.load(f)
