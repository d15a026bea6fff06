"""Workplace-safety and absence reports over the leave/recruitment table."""

import pandas as pd

from hr_analytics.utils.transforms import count_by, mean_by


def work_accidents(leave: pd.DataFrame) -> pd.DataFrame:
    """Employees with and without a reported work accident."""
    return count_by(leave, "work_accident", "employee_count", value="emp_id")


def absenteeism_by_job_mode(leave: pd.DataFrame) -> pd.DataFrame:
    """Unrounded average absenteeism per job mode."""
    return mean_by(leave, "job_mode", "absenteeism", "avg_absenteeism")
