"""Hiring volume reports: by year, decade and source of hire."""

import logging

import pandas as pd

from hr_analytics.utils.transforms import count_by

logger = logging.getLogger(__name__)


def distinct_hire_years(tenure: pd.DataFrame) -> pd.DataFrame:
    years = tenure["hire_year"].drop_duplicates().sort_values(na_position="last")
    return years.to_frame("hire_year").reset_index(drop=True)


def hires_by_year(tenure: pd.DataFrame) -> pd.DataFrame:
    return count_by(tenure, "hire_year", "total_hires", value="hire_year")


def hires_by_decade(tenure: pd.DataFrame) -> pd.DataFrame:
    """Hires per decade band; hires with no known year are not counted."""
    return count_by(tenure, "hire_decade", "total_hires", value="hire_year")


def top_hiring_year(tenure: pd.DataFrame) -> pd.DataFrame:
    """The single year with the most hires; ties go to the earliest year."""
    by_year = hires_by_year(tenure).dropna(subset=["hire_year"])
    if by_year.empty:
        return by_year
    ranked = by_year.sort_values(["total_hires", "hire_year"], ascending=[False, True])
    top = ranked.head(1).reset_index(drop=True)
    logger.info("Top hiring year: %s (%d hires)", top.at[0, "hire_year"], top.at[0, "total_hires"])
    return top


def hires_by_source(leave: pd.DataFrame) -> pd.DataFrame:
    return count_by(leave, "source_of_hire", "employee_count", value="emp_id")
