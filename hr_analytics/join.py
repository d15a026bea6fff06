"""Combine the four enriched source tables into the Final Record table."""

import logging
from dataclasses import dataclass, field

import pandas as pd

from hr_analytics.models import FINAL_RECORD_COLUMNS, KEY
from hr_analytics.utils.transforms import merge_datasets

logger = logging.getLogger(__name__)

JOIN_ORDER = ("profile", "compensation", "leave", "tenure")


@dataclass
class JoinResult:
    final: pd.DataFrame
    excluded_ids: list[str] = field(default_factory=list)
    missing_by_table: dict[str, list[str]] = field(default_factory=dict)

    @property
    def excluded_count(self) -> int:
        return len(self.excluded_ids)


def _key_set(df: pd.DataFrame) -> set[str]:
    return {str(key) for key in df[KEY].dropna().unique()}


def _select_fields(df: pd.DataFrame, table_name: str, taken: set[str]) -> pd.DataFrame:
    """Keep the key plus the Final Record fields owned by ``table_name``."""
    columns = [KEY] + [
        col for col, owner in FINAL_RECORD_COLUMNS.items()
        if owner == table_name and col != KEY and col in df.columns and col not in taken
    ]
    return df[columns]


def build_final_records(
    profile: pd.DataFrame,
    compensation: pd.DataFrame,
    leave: pd.DataFrame,
    tenure: pd.DataFrame,
) -> JoinResult:
    """Inner-join the four tables on ``emp_id``.

    An employee missing from any table is left out of the result. The
    excluded ids are returned and logged so the narrowing of the reporting
    population stays visible. Duplicate keys multiply rows, as they would in
    SQL; they are listed by the quality checks, not removed here.
    """
    tables = {"profile": profile, "compensation": compensation, "leave": leave, "tenure": tenure}
    key_sets = {name: _key_set(df) for name, df in tables.items()}

    final = None
    taken: set[str] = set()
    for name in JOIN_ORDER:
        selected = _select_fields(tables[name], name, taken)
        taken.update(selected.columns)
        final = selected if final is None else merge_datasets(final, selected, on=KEY, how="inner")

    final = final.reset_index(drop=True)
    ordered = [col for col in FINAL_RECORD_COLUMNS if col in final.columns]
    final = final[ordered]

    all_ids = set().union(*key_sets.values())
    joined_ids = _key_set(final)
    excluded = sorted(all_ids - joined_ids)
    missing_by_table = {
        name: sorted(all_ids - ids) for name, ids in key_sets.items() if all_ids - ids
    }

    if excluded:
        logger.warning(
            "Inner join excluded %d of %d employees (missing by table: %s)",
            len(excluded),
            len(all_ids),
            {name: len(ids) for name, ids in missing_by_table.items()},
        )
    logger.info("Built %d final records", len(final))
    return JoinResult(final=final, excluded_ids=excluded, missing_by_table=missing_by_table)
