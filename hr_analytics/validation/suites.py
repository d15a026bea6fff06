"""Expectation suite definitions per output table.

Each table has a set of expectations that define its quality contract.
Expectation types use the snake_case names of the Great Expectations
expectation classes.
"""

from hr_analytics.bands import AGE_GROUP, HIRE_DECADE, PROMOTION_STATUS, TENURE_BAND
from hr_analytics.config import QualityConfig
from hr_analytics.models import FLAG_VALUES, KEY

type ExpectationConfig = dict[str, str | dict]
type SuiteConfig = list[ExpectationConfig]
type TableName = str


def _key_expectations() -> SuiteConfig:
    return [
        {"expectation_type": "expect_column_to_exist", "kwargs": {"column": KEY}},
        {"expectation_type": "expect_column_values_to_not_be_null", "kwargs": {"column": KEY}},
        {"expectation_type": "expect_column_values_to_be_unique", "kwargs": {"column": KEY}},
    ]


_TABLE_SUITES: dict[TableName, SuiteConfig] = {
    "final_records": [
        *_key_expectations(),
        {
            "expectation_type": "expect_table_row_count_to_be_between",
            "kwargs": {"min_value": 1},
        },
        {
            "expectation_type": "expect_column_values_to_be_in_set",
            "kwargs": {"column": "attrition", "value_set": FLAG_VALUES},
        },
        {
            "expectation_type": "expect_column_values_to_be_in_set",
            "kwargs": {"column": "age_group", "value_set": AGE_GROUP.labels},
        },
        {
            "expectation_type": "expect_column_values_to_be_in_set",
            "kwargs": {"column": "tenure_band", "value_set": TENURE_BAND.labels},
        },
        {
            "expectation_type": "expect_column_values_to_be_in_set",
            "kwargs": {"column": "promotion_status", "value_set": PROMOTION_STATUS.labels},
        },
        {
            "expectation_type": "expect_column_values_to_be_in_set",
            "kwargs": {"column": "hire_decade", "value_set": HIRE_DECADE.labels},
        },
    ],
    "profile": [
        *_key_expectations(),
        {
            "expectation_type": "expect_column_values_to_be_between",
            "kwargs": {"column": "age"},
        },
        {
            "expectation_type": "expect_column_values_to_not_be_null",
            "kwargs": {"column": "department"},
        },
    ],
    "compensation": [
        {"expectation_type": "expect_column_values_to_not_be_null", "kwargs": {"column": KEY}},
        {
            "expectation_type": "expect_column_values_to_be_between",
            "kwargs": {"column": "monthly_income", "min_value": 0},
        },
    ],
    "leave": [
        *_key_expectations(),
        {
            "expectation_type": "expect_column_values_to_be_between",
            "kwargs": {"column": "absenteeism", "min_value": 0},
        },
    ],
    "tenure": [
        *_key_expectations(),
        {
            "expectation_type": "expect_column_values_to_be_in_set",
            "kwargs": {"column": "attrition", "value_set": FLAG_VALUES},
        },
        {
            "expectation_type": "expect_column_values_to_be_between",
            "kwargs": {"column": "years_at_company", "min_value": 0},
        },
    ],
}


def build_suite_for_table(table: TableName, quality: QualityConfig = QualityConfig()) -> SuiteConfig:
    """Return the expectation configs for ``table`` (empty if none defined).

    The profile age range comes from ``quality`` so the gate agrees with the
    age-outlier listing.
    """
    suite = []
    for expectation in _TABLE_SUITES.get(table, []):
        kwargs = dict(expectation.get("kwargs", {}))
        age_range = expectation["expectation_type"] == "expect_column_values_to_be_between"
        if age_range and kwargs.get("column") == "age":
            kwargs.update(min_value=quality.min_age, max_value=quality.max_age)
        suite.append({**expectation, "kwargs": kwargs})
    return suite


def tables_with_suites() -> list[TableName]:
    return list(_TABLE_SUITES)
