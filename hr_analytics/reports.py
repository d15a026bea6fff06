"""Registry of the named aggregate reports and their rendering."""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

import pandas as pd
from rich.console import Console
from rich.table import Table

from hr_analytics import attrition, compensation, compliance, headcount, recruiting
from hr_analytics.utils.types import ReportTables, SourceTables

logger = logging.getLogger(__name__)
console = Console()


@dataclass(frozen=True)
class ReportSpec:
    name: str
    source: str  # "profile" | "compensation" | "leave" | "tenure" | "final_records"
    build: Callable[[pd.DataFrame], pd.DataFrame]
    title: str


REPORTS: dict[str, ReportSpec] = {
    spec.name: spec
    for spec in [
        ReportSpec("attrition_rate", "tenure", attrition.compute_attrition_rate,
                   "Attrition count and rate"),
        ReportSpec("active_by_department", "final_records", attrition.active_employees_by_department,
                   "Active employees by department"),
        ReportSpec("attrition_by_age_group", "final_records", attrition.attrition_by_age_group,
                   "Attrition by age group"),
        ReportSpec("attrition_rate_by_department", "final_records", attrition.attrition_rate_by_department,
                   "Attrition rate by department"),
        ReportSpec("attrition_by_overtime", "final_records", attrition.attrition_by_overtime,
                   "Attrition by overtime"),
        ReportSpec("leaving_reasons", "tenure", attrition.leaving_reasons,
                   "Reasons for leaving"),
        ReportSpec("hires_by_year", "tenure", recruiting.hires_by_year,
                   "Hires per year"),
        ReportSpec("hires_by_decade", "tenure", recruiting.hires_by_decade,
                   "Hires per decade"),
        ReportSpec("avg_tenure_by_band", "tenure", headcount.average_tenure_by_band,
                   "Average tenure by tenure band"),
        ReportSpec("salary_stats", "compensation", compensation.salary_stats,
                   "Monthly income min / max / average"),
        ReportSpec("satisfaction_vs_salary_hike", "compensation", compensation.satisfaction_vs_salary_hike,
                   "Job satisfaction vs salary hike"),
        ReportSpec("satisfaction_vs_income", "compensation", compensation.satisfaction_vs_income,
                   "Job satisfaction vs monthly income"),
        ReportSpec("absenteeism_by_job_mode", "leave", compliance.absenteeism_by_job_mode,
                   "Average absenteeism by job mode"),
        ReportSpec("stock_option_vs_satisfaction", "compensation", compensation.stock_option_vs_satisfaction,
                   "Stock option level vs satisfaction and income"),
        ReportSpec("distinct_hire_years", "tenure", recruiting.distinct_hire_years,
                   "Distinct hire years"),
        ReportSpec("top_hiring_year", "tenure", recruiting.top_hiring_year,
                   "Year with the most hires"),
        ReportSpec("work_accidents", "leave", compliance.work_accidents,
                   "Work accidents"),
        ReportSpec("employees_by_tenure_years", "tenure", headcount.employees_by_tenure_years,
                   "Employees by years at company"),
        ReportSpec("hires_by_source", "leave", recruiting.hires_by_source,
                   "Hires by source"),
        ReportSpec("employees_by_mode_of_work", "profile", headcount.employees_by_mode_of_work,
                   "Employees by mode of work"),
    ]
}


def build_reports(tables: SourceTables, names: Iterable[str] | None = None) -> ReportTables:
    """Run the named reports (all of them by default) against ``tables``.

    ``tables`` maps source names, including ``final_records``, to frames.
    Unknown report names raise ``KeyError``.
    """
    selected = list(REPORTS) if names is None else list(names)
    unknown = [name for name in selected if name not in REPORTS]
    if unknown:
        raise KeyError(f"Unknown reports: {unknown}")

    results: ReportTables = {}
    for name in selected:
        spec = REPORTS[name]
        results[name] = spec.build(tables[spec.source])
        logger.debug("Report %s: %d rows", name, len(results[name]))

    logger.info("Built %d reports", len(results))
    return results


def render_report(name: str, df: pd.DataFrame, max_rows: int = 20) -> Table:
    spec = REPORTS.get(name)
    table = Table(title=spec.title if spec else name)
    for col in df.columns:
        table.add_column(str(col), justify="right" if pd.api.types.is_numeric_dtype(df[col]) else "left")

    for row in df.head(max_rows).itertuples(index=False):
        table.add_row(*("" if pd.isna(value) else str(value) for value in row))

    if len(df) > max_rows:
        table.caption = f"{len(df) - max_rows} more rows not shown"
    return table


def print_reports(reports: ReportTables) -> None:
    for name, df in reports.items():
        if df.empty:
            console.print(f"[yellow]{name}: no rows[/yellow]")
            continue
        console.print(render_report(name, df))
