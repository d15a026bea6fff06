"""Salary, salary-hike and stock-option reports against job satisfaction."""

import logging

import pandas as pd

from hr_analytics.utils.transforms import mean_by, round_half_up, truncate

logger = logging.getLogger(__name__)

type IncomeStats = dict[str, float | int | None]


def salary_stats(compensation: pd.DataFrame) -> pd.DataFrame:
    """Single-row min / max / average monthly income (average rounded to an integer)."""
    income = pd.to_numeric(compensation["monthly_income"], errors="coerce").dropna()
    stats: IncomeStats = {
        "min_income": income.min() if not income.empty else None,
        "max_income": income.max() if not income.empty else None,
        "avg_income": int(round_half_up(income.mean())) if not income.empty else None,
    }
    logger.info("Salary stats over %d incomes: %s", len(income), stats)
    return pd.DataFrame([stats])


def satisfaction_vs_salary_hike(compensation: pd.DataFrame) -> pd.DataFrame:
    result = mean_by(compensation, "job_satisfaction", "percent_salary_hike", "avg_salary_hike")
    result["avg_salary_hike"] = round_half_up(result["avg_salary_hike"], 1)
    return result


def satisfaction_vs_income(compensation: pd.DataFrame) -> pd.DataFrame:
    result = mean_by(compensation, "job_satisfaction", "monthly_income", "avg_income")
    result["avg_income"] = round_half_up(result["avg_income"]).astype("Int64")
    return result


def stock_option_vs_satisfaction(compensation: pd.DataFrame) -> pd.DataFrame:
    """Average satisfaction (cut to one decimal) and income per stock-option level."""
    satisfaction = mean_by(compensation, "stock_option_level", "job_satisfaction", "avg_satisfaction")
    income = mean_by(compensation, "stock_option_level", "monthly_income", "avg_income")

    result = satisfaction.merge(income, on="stock_option_level", how="inner")
    result["avg_satisfaction"] = truncate(result["avg_satisfaction"], 1)
    result["avg_income"] = round_half_up(result["avg_income"]).astype("Int64")
    return result
