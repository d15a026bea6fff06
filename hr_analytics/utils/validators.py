"""Schema validation of the source tables using pandera."""

import logging

import pandera as pa
import pandas as pd
from pandera import DataFrameSchema

type ValidationResult = dict[str, str | bool | list[str]]

logger = logging.getLogger(__name__)


def validate_dataframe(df: pd.DataFrame, schema: DataFrameSchema) -> ValidationResult:
    """Validate a DataFrame against a pandera schema without raising."""
    try:
        schema.validate(df, lazy=True)
        return {"valid": True, "status": "ok", "errors": []}
    except pa.errors.SchemaErrors as e:
        errors = []
        for _, row in e.failure_cases.iterrows():
            match row.to_dict():
                case {"column": col, "check": check, "failure_case": val} if col is not None:
                    errors.append(f"Column '{col}' failed check '{check}': {val}")
                case {"check": check, "failure_case": val}:
                    errors.append(f"Table failed check '{check}': {val}")
                case failure:
                    errors.append(f"Validation failure: {failure}")
        return {"valid": False, "status": "error", "errors": errors}


def validate_tables(
    tables: dict[str, pd.DataFrame],
    schemas: dict[str, DataFrameSchema],
) -> dict[str, ValidationResult]:
    """Validate every table that has a schema; tables without one are skipped."""
    results = {}
    for name, df in tables.items():
        if name not in schemas:
            continue
        results[name] = validate_dataframe(df, schemas[name])
        if not results[name]["valid"]:
            logger.warning("%s failed %d schema checks", name, len(results[name]["errors"]))
    return results


def collect_errors(results: dict[str, ValidationResult]) -> list[str]:
    """Flatten per-table results into ``"<table>: <error>"`` lines."""
    return [f"{name}: {error}" for name, result in results.items() for error in result["errors"]]
