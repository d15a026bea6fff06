"""Employee turnover and attrition reports."""

import logging

import pandas as pd

from hr_analytics.models import NO, YES
from hr_analytics.utils.transforms import count_by, round_half_up

logger = logging.getLogger(__name__)

type AttritionRate = float


def _leavers(df: pd.DataFrame) -> pd.DataFrame:
    return df[df["attrition"] == YES]


def compute_attrition_rate(tenure: pd.DataFrame) -> pd.DataFrame:
    """Headcount and share of total for each attrition flag.

    Share = group count * 100 / all records, rounded to one decimal.
    """
    result = count_by(tenure, "attrition", "attrition_count")
    total = len(tenure)
    if total:
        result["attrition_rate"] = round_half_up(result["attrition_count"] * 100.0 / total, 1)
    else:
        result["attrition_rate"] = pd.Series(dtype=float)
    logger.info("Attrition rate computed over %d records", total)
    return result


def active_employees_by_department(final: pd.DataFrame) -> pd.DataFrame:
    active = final[final["attrition"] == NO]
    result = count_by(active, "department", "active_employees", value="attrition")
    return result.sort_values(
        ["active_employees", "department"], ascending=[False, True]
    ).reset_index(drop=True)


def attrition_by_age_group(final: pd.DataFrame) -> pd.DataFrame:
    """Leavers per age group, fewest first."""
    result = count_by(_leavers(final), "age_group", "attrition_count", value="attrition")
    return result.sort_values(["attrition_count", "age_group"]).reset_index(drop=True)


def attrition_rate_by_department(final: pd.DataFrame) -> pd.DataFrame:
    """Percentage of each department's employees who left, highest first."""
    left = (final["attrition"] == YES).groupby(final["department"], dropna=False, sort=True)
    leavers = left.sum()
    totals = left.size()

    rates: pd.Series = round_half_up(leavers * 100.0 / totals, 1)
    result = rates.rename("attrition_rate").rename_axis("department").reset_index()
    return result.sort_values(
        ["attrition_rate", "department"], ascending=[False, True]
    ).reset_index(drop=True)


def attrition_by_overtime(final: pd.DataFrame) -> pd.DataFrame:
    return count_by(_leavers(final), "over_time", "attrition_count", value="attrition")


def leaving_reasons(tenure: pd.DataFrame) -> pd.DataFrame:
    """How leavers left (resigned, terminated, retired, ...)."""
    return count_by(_leavers(tenure), "status_of_leaving", "attrition_count", value="attrition")
