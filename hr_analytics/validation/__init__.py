"""Output quality gate using Great Expectations."""

from hr_analytics.validation.expectations import gate_passed, run_quality_gate, run_table_expectations
from hr_analytics.validation.reporters import build_gate_report, save_gate_report
from hr_analytics.validation.suites import build_suite_for_table
