"""Workforce distribution reports over tenure and working arrangements."""

import pandas as pd

from hr_analytics.utils.transforms import count_by, mean_by, round_half_up


def average_tenure_by_band(tenure: pd.DataFrame) -> pd.DataFrame:
    """Mean years at company per tenure band, rounded to whole years.

    A band nobody falls into produces no row.
    """
    result = mean_by(tenure, "tenure_band", "years_at_company", "avg_years_at_company")
    result["avg_years_at_company"] = round_half_up(result["avg_years_at_company"]).astype("Int64")
    return result


def employees_by_tenure_years(tenure: pd.DataFrame) -> pd.DataFrame:
    return count_by(tenure, "years_at_company", "employee_count", value="years_at_company")


def employees_by_mode_of_work(profile: pd.DataFrame) -> pd.DataFrame:
    return count_by(profile, "mode_of_work", "employee_count", value="mode_of_work")
