"""Shared utilities for the HR analytics pipeline."""

from hr_analytics.utils.io import read_table, write_output
from hr_analytics.utils.transforms import count_by, mean_by, merge_datasets, normalize_columns, round_half_up
from hr_analytics.utils.validators import validate_dataframe, validate_tables
from hr_analytics.utils.types import PipelineStatus, ReportTables, SourceTables
